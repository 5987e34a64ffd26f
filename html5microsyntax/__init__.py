"""
HTML legacy microsyntax parsing in Python.

Interprets the values of presentational HTML attributes (width, size,
color, bgcolor, ...) the way browsers do, following the rules for parsing
integers, dimension values, legacy font sizes and legacy colors of the
WHATWG HTML specification. Malformed values fall back to the defaults the
specification mandates; only a legacy color value can fail outright, which
raises ColorParseError.

Example usage:

import html5microsyntax
html5microsyntax.parseLength("30%")        # Percentage(0.3)
html5microsyntax.parseLegacyFontSize("+2")  # 'x-large'
html5microsyntax.parseLegacyColor("red")    # RGBA(red=1.0, ...)
"""

from .attributeparser import AttributeParser, ParseError
from .colors import RGBA, parseLegacyColor, serializeSimpleColor
from .constants import ColorParseError, DataLossWarning
from .dimensions import (Au, Auto, Length, LengthOrPercentageOrAuto, Percentage,
                         parseLength, parseNonzeroLength)
from .fontsize import parseLegacyFontSize
from .integers import parseInteger, parseNonNegativeInteger

__all__ = ["AttributeParser", "ParseError", "ColorParseError", "DataLossWarning",
           "parseInteger", "parseNonNegativeInteger",
           "parseLength", "parseNonzeroLength", "LengthOrPercentageOrAuto",
           "Auto", "Percentage", "Length", "Au",
           "parseLegacyFontSize",
           "parseLegacyColor", "serializeSimpleColor", "RGBA"]

__version__ = "1.0.0"
