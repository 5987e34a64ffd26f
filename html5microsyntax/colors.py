"""Rules for parsing a legacy color value, as used by attributes such as
bgcolor and the color attribute of the font element.

https://html.spec.whatwg.org/multipage/#rules-for-parsing-a-legacy-colour-value

The steps have to be applied in exactly this order; changing it changes the
result for malformed values found on real pages, e.g. "chucknorris" is
#c00000.
"""
from collections import namedtuple

import webcolors

from .constants import E, spaceCharacters, hexDigits, asciiUpper2Lower
from .constants import maxLegacyColorLength, ColorParseError
from .inputstream import AttributeInputStream

RGBA = namedtuple("RGBA", ["red", "green", "blue", "alpha"])

_spaceCharacters = "".join(spaceCharacters)


def _lookupColorKeyword(value):
    # CSS keywords are ASCII; str.lower would also fold e.g. U+212A KELVIN SIGN
    if not value.isascii():
        return None
    try:
        rgb = webcolors.name_to_rgb(value.translate(asciiUpper2Lower),
                                    spec=webcolors.CSS3)
    except ValueError:
        return None
    return RGBA(rgb.red / 255.0, rgb.green / 255.0, rgb.blue / 255.0, 1.0)


def _failure(stream, errorcode):
    stream.parseError(errorcode)
    return ColorParseError(E[errorcode])


def parseLegacyColor(value, encoding=None):
    """Parse value as a legacy color.

    Returns an RGBA with channels in the range [0, 1] and an alpha of 1.0.
    Almost any value is a color; only the empty string and "transparent"
    raise ColorParseError.

    >>> serializeSimpleColor(parseLegacyColor("chucknorris"))
    '#c00000'
    """
    stream = AttributeInputStream(value, encoding=encoding)
    value = stream.remainder()

    # Steps 1 & 2
    if not value:
        raise _failure(stream, "empty-color")

    # Step 3
    value = value.strip(_spaceCharacters)

    # Step 4
    if value.translate(asciiUpper2Lower) == "transparent":
        raise _failure(stream, "transparent-color")

    # Step 5
    keyword = _lookupColorKeyword(value)
    if keyword is not None:
        return keyword

    # Step 6
    if len(value) == 4 and value[0] == "#" and all(c in hexDigits for c in value[1:]):
        red, green, blue = [int(c, 16) * 17 / 255.0 for c in value[1:]]
        return RGBA(red, green, blue, 1.0)

    # Step 7
    value = "".join("00" if ord(c) > 0xFFFF else c for c in value)

    # Step 8
    if len(value) > maxLegacyColorLength:
        stream.parseError("color-truncated", {"length": maxLegacyColorLength})
        value = value[:maxLegacyColorLength]

    # Step 9
    if value.startswith("#"):
        value = value[1:]

    # Step 10
    digits = [c if c in hexDigits else "0" for c in value]
    replaced = sum(1 for c in value if c not in hexDigits)
    if replaced:
        stream.parseError("non-hex-color-characters", {"count": replaced})

    # Step 11
    while not digits or len(digits) % 3 != 0:
        digits.append("0")

    # Step 12
    length = len(digits) // 3
    red = digits[:length]
    green = digits[length:length * 2]
    blue = digits[length * 2:]

    # Step 13
    if length > 8:
        red, green, blue = red[length - 8:], green[length - 8:], blue[length - 8:]
        length = 8

    # Step 14; the leading zero is only dropped when all three components
    # have one
    while length > 2 and red[0] == "0" and green[0] == "0" and blue[0] == "0":
        red, green, blue = red[1:], green[1:], blue[1:]
        length -= 1

    # Steps 15-20
    red, green, blue = [int("".join(component[:2]), 16) / 255.0
                        for component in (red, green, blue)]
    return RGBA(red, green, blue, 1.0)


def serializeSimpleColor(color):
    """Serialize an RGBA as a lowercase simple color, e.g. '#ff0000'. The
    alpha channel is not serialized."""
    return "#%02x%02x%02x" % tuple(int(round(channel * 255))
                                   for channel in color[:3])
