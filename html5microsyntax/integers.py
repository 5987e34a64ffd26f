"""Rules for parsing integers and non-negative integers.

https://html.spec.whatwg.org/multipage/#rules-for-parsing-integers
https://html.spec.whatwg.org/multipage/#rules-for-parsing-non-negative-integers
"""
from .constants import EOF, digits, spaceCharacters
from .constants import INT32_MIN, INT32_MAX, UINT32_MAX
from .inputstream import AttributeInputStream
from .utils import checkedMul, checkedAdd


def readNumbers(stream):
    """Consume a run of ASCII digits from stream and return its value, or
    None if the stream does not start with a digit or the value overflows a
    64-bit signed integer.

    The first character that is not a digit is left in the stream.
    """
    c = stream.char()
    if c is EOF:
        stream.parseError("expected-digit-but-got-eof")
        return None
    elif c not in digits:
        stream.unget(c)
        stream.parseError("expected-digit", {"data": c})
        return None

    value = 0
    while c is not EOF and c in digits:
        # Once value is None the rest of the run is consumed and discarded
        if value is not None:
            value = checkedMul(value, 10)
            if value is not None:
                value = checkedAdd(value, ord(c) - ord("0"))
            if value is None:
                stream.parseError("numeric-overflow")
        c = stream.char()
    stream.unget(c)
    return value


def _parseInteger(stream):
    # Steps 1-3
    stream.charsUntil(spaceCharacters, True)

    # Step 4
    c = stream.char()
    if c is EOF:
        stream.parseError("expected-number-but-got-eof")
        return None

    # Step 5
    if c == "-":
        sign = -1
    elif c == "+":
        sign = 1
    else:
        sign = 1
        stream.unget(c)

    # Steps 6-9
    value = readNumbers(stream)
    if value is None:
        return None

    c = stream.peek()
    if c is not EOF:
        stream.parseError("trailing-characters-ignored", {"data": c})

    # Step 10
    value = checkedMul(value, sign)
    if value is None:
        stream.parseError("numeric-overflow")
    return value


def parseInteger(value, encoding=None):
    """Parse value as a signed integer.

    Returns an int in the signed 32-bit range, or None if value does not
    start with an integer or the integer does not fit. Characters following
    the integer are ignored.

    >>> parseInteger("  -42px")
    -42
    """
    stream = AttributeInputStream(value, encoding=encoding)
    result = _parseInteger(stream)
    if result is None:
        return None
    if not INT32_MIN <= result <= INT32_MAX:
        stream.parseError("integer-out-of-range",
                          {"value": result, "type": "a signed 32-bit integer"})
        return None
    return result


def parseNonNegativeInteger(value, encoding=None):
    """Parse value as a non-negative integer.

    Returns an int in the range [0, 2**32), or None.
    """
    stream = AttributeInputStream(value, encoding=encoding)
    result = _parseInteger(stream)
    if result is None:
        return None
    if not 0 <= result <= UINT32_MAX:
        stream.parseError("integer-out-of-range",
                          {"value": result, "type": "an unsigned 32-bit integer"})
        return None
    return result
