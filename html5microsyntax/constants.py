import string

EOF = None

E = {
    "expected-digit":
        "Expected a digit but got '%(data)s'.",
    "expected-digit-but-got-eof":
        "Expected a digit but got end of value.",
    "expected-number-but-got-eof":
        "Expected a number but the value is empty.",
    "numeric-overflow":
        "Number is too large to be represented.",
    "integer-out-of-range":
        "Integer %(value)d is outside the range of %(type)s.",
    "trailing-characters-ignored":
        "Ignored characters after the number, starting at '%(data)s'.",
    "expected-dimension-but-got-eof":
        "Expected a dimension but the value is empty.",
    "invalid-dimension-number":
        "Could not interpret '%(data)s' as a number.",
    "zero-dimension":
        "Zero is not allowed as a non-zero dimension.",
    "expected-font-size-but-got-eof":
        "Expected a font size but the value is empty.",
    "empty-color":
        "Expected a color but the value is empty.",
    "transparent-color":
        "The keyword 'transparent' is not a legacy color.",
    "color-truncated":
        "Color value is longer than %(length)d characters and was truncated.",
    "non-hex-color-characters":
        "Replaced %(count)d non-hexadecimal characters in color value with '0'.",
}

spaceCharacters = frozenset((
    "\t",
    "\n",
    "\u000C",
    " ",
    "\r"
))

asciiUppercase = frozenset(string.ascii_uppercase)
digits = frozenset(string.digits)
hexDigits = frozenset(string.hexdigits)

asciiUpper2Lower = dict([(ord(c), ord(c.lower()))
                         for c in string.ascii_uppercase])

# RFC 2616, section 2.2
tokenSeparators = frozenset(b'()<>@,;:\\"/[]?={} ')

# Ordered from smallest to largest
fontSizeKeywords = (
    "x-small",
    "small",
    "medium",
    "large",
    "x-large",
    "xx-large",
    "xxx-large"
)

legacyFontSizeBase = 3

maxLegacyColorLength = 128

AU_PER_PX = 60
MAX_AU = (1 << 30) - 1
MIN_AU = -MAX_AU

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1
INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1
UINT32_MAX = (1 << 32) - 1


class DataLossWarning(UserWarning):
    """Raised when a parsed value is outside the range that can be represented"""
    pass


class ColorParseError(ValueError):
    """Raised when a value cannot be interpreted as a legacy color"""
    pass
