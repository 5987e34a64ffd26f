"""Rules for parsing dimension values and non-zero dimension values.

https://html.spec.whatwg.org/multipage/#rules-for-parsing-dimension-values
https://html.spec.whatwg.org/multipage/#rules-for-parsing-non-zero-dimension-values
"""
import math
import warnings

from .constants import EOF, digits, spaceCharacters, DataLossWarning
from .constants import AU_PER_PX, MAX_AU, MIN_AU
from .inputstream import AttributeInputStream


class Au(int):
    """A length in app units, the fixed-point unit of 1/60 of a CSS pixel"""

    @classmethod
    def fromPx(cls, px):
        """Convert a number of pixels to app units, rounding half away from
        zero. Values beyond the representable range are clamped."""
        au = px * AU_PER_PX
        if not MIN_AU <= au <= MAX_AU:
            warnings.warn("Length of %rpx cannot be represented and was clamped" % px,
                          DataLossWarning)
            return cls(MAX_AU if au > 0 else MIN_AU)
        return cls(math.copysign(math.floor(abs(au) + 0.5), au))

    def toPx(self):
        return int(self) / AU_PER_PX

    def __repr__(self):
        return "Au(%d)" % self


class LengthOrPercentageOrAuto(object):
    """Base class of the three results of dimension parsing: Auto,
    Percentage and Length."""
    __slots__ = ()

    def _key(self):
        return ()

    def __eq__(self, other):
        return type(self) is type(other) and self._key() == other._key()

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((type(self).__name__,) + self._key())

    def __setattr__(self, name, value):
        raise AttributeError("%s is immutable" % type(self).__name__)


class _Auto(LengthOrPercentageOrAuto):
    __slots__ = ()

    def __repr__(self):
        return "Auto"


Auto = _Auto()


class Percentage(LengthOrPercentageOrAuto):
    """A percentage; fraction is the parsed number divided by 100"""
    __slots__ = ("fraction",)

    def __init__(self, fraction):
        object.__setattr__(self, "fraction", float(fraction))

    def _key(self):
        return (self.fraction,)

    def __repr__(self):
        return "Percentage(%r)" % self.fraction


class Length(LengthOrPercentageOrAuto):
    """An absolute length in pixels, stored as app units.

    Construct it from an Au, or from a number of pixels with Length.fromPx.
    """
    __slots__ = ("value",)

    def __init__(self, value):
        if not isinstance(value, Au):
            raise TypeError("Length takes an Au, not %r; use Length.fromPx "
                            "for a number of pixels" % (value,))
        object.__setattr__(self, "value", value)

    @classmethod
    def fromPx(cls, px):
        return cls(Au.fromPx(px))

    def toPx(self):
        return self.value.toPx()

    def _key(self):
        return (int(self.value),)

    def __repr__(self):
        return "Length(%rpx)" % self.toPx()


def _parseLength(stream):
    # Steps 1-3
    stream.charsUntil(spaceCharacters, True)

    # Step 4
    c = stream.char()
    if c is EOF:
        stream.parseError("expected-dimension-but-got-eof")
        return Auto

    # Step 5
    if c == "+":
        c = stream.char()

    # Steps 6 & 7
    if c is EOF:
        stream.parseError("expected-digit-but-got-eof")
        return Auto
    elif c not in digits:
        stream.parseError("expected-digit", {"data": c})
        return Auto

    # Steps 8 to 13: the number ends at the first '%', the second '.' or
    # any other character that is not a digit, whichever comes first
    number = []
    seenFullStop = False
    seenPercent = False
    while c is not EOF:
        if c in digits:
            number.append(c)
        elif c == "%":
            seenPercent = True
            break
        elif c == "." and not seenFullStop:
            seenFullStop = True
            number.append(c)
        else:
            stream.unget(c)
            stream.parseError("trailing-characters-ignored", {"data": c})
            break
        c = stream.char()
    number = "".join(number)

    try:
        value = float(number)
    except ValueError:
        stream.parseError("invalid-dimension-number", {"data": number})
        return Auto

    if seenPercent:
        return Percentage(value / 100)
    return Length.fromPx(value)


def parseLength(value, encoding=None):
    """Parse value as a dimension.

    Returns a Percentage for values whose number is followed by '%', a
    Length otherwise, and Auto when value does not start with a number.

    >>> parseLength("50%")
    Percentage(0.5)
    >>> parseLength("10.5.5px")
    Length(10.5px)
    """
    return _parseLength(AttributeInputStream(value, encoding=encoding))


def parseNonzeroLength(value, encoding=None):
    """Parse value as a dimension, treating a zero length or percentage as
    Auto."""
    stream = AttributeInputStream(value, encoding=encoding)
    result = _parseLength(stream)
    if isinstance(result, Length) and result.value == 0:
        stream.parseError("zero-dimension")
        return Auto
    elif isinstance(result, Percentage) and result.fraction == 0:
        stream.parseError("zero-dimension")
        return Auto
    return result
