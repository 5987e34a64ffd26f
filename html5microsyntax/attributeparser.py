from . import colors, dimensions, fontsize, integers
from .constants import E
from .inputstream import AttributeInputStream


class AttributeParser(object):
    """Attribute value parser. Interprets (possibly malformed) attribute
    values using the legacy HTML microsyntaxes and keeps track of what was
    wrong with them.

    Example:

    >>> parser = AttributeParser()
    >>> parser.parseLength("30%px")
    Percentage(0.3)
    >>> parser.parseInteger("12abc")
    12
    >>> parser.errors
    [(2, 'trailing-characters-ignored', {'data': 'a'})]
    """

    def __init__(self, strict=False, encoding=None):
        """
        strict - raise a ParseError when an attribute value is malformed
        instead of recovering from it

        encoding - the encoding to decode attribute values given as bytes
        with when they have no byte order mark; defaults to utf-8
        """

        # Raise an exception on the first error encountered
        self.strict = strict
        self.encoding = encoding
        self.errors = []

    def _parse(self, parseFunc, value):
        self.errors = []
        if isinstance(value, (bytes, bytearray)):
            stream = AttributeInputStream(value, encoding=self.encoding)
        else:
            stream = AttributeInputStream(value)
        try:
            return parseFunc(stream)
        finally:
            for position, errorcode, datavars in stream.errors:
                self.parseError(position, errorcode, datavars)

    def parseInteger(self, value):
        """Parse value as a signed 32-bit integer; None if it isn't one"""
        return self._parse(integers.parseInteger, value)

    def parseNonNegativeInteger(self, value):
        """Parse value as an unsigned 32-bit integer; None if it isn't one"""
        return self._parse(integers.parseNonNegativeInteger, value)

    def parseLength(self, value):
        """Parse value as a dimension; Auto if it isn't one"""
        return self._parse(dimensions.parseLength, value)

    def parseNonzeroLength(self, value):
        """Parse value as a non-zero dimension; Auto if it isn't one"""
        return self._parse(dimensions.parseNonzeroLength, value)

    def parseLegacyFontSize(self, value):
        """Parse value as a legacy font size keyword; None if it isn't one"""
        return self._parse(fontsize.parseLegacyFontSize, value)

    def parseLegacyColor(self, value):
        """Parse value as a legacy color. Raises ColorParseError for the
        empty string and "transparent"."""
        return self._parse(colors.parseLegacyColor, value)

    def parseError(self, position, errorcode, datavars=None):
        if datavars is None:
            datavars = {}
        self.errors.append((position, errorcode, datavars))
        if self.strict:
            raise ParseError(E[errorcode] % datavars)


class ParseError(Exception):
    """Error in parsed attribute value"""
    pass
