"""Rules for parsing a legacy font size, as used by the size attribute of
the font element.

https://html.spec.whatwg.org/multipage/#rules-for-parsing-a-legacy-font-size
"""
from .constants import EOF, spaceCharacters, fontSizeKeywords, legacyFontSizeBase
from .inputstream import AttributeInputStream
from .integers import readNumbers
from .utils import MethodDispatcher

parseModes = MethodDispatcher([
    ("+", lambda value: legacyFontSizeBase + value),
    ("-", lambda value: legacyFontSizeBase - value),
])


def parseLegacyFontSize(value, encoding=None):
    """Parse value as a legacy font size and return the name of the CSS
    font-size keyword it maps to, or None.

    >>> parseLegacyFontSize("+2")
    'x-large'
    """
    stream = AttributeInputStream(value, encoding=encoding)

    # Step 3; trailing space is never reached by the digit scan
    stream.charsUntil(spaceCharacters, True)

    # Step 4
    c = stream.char()
    if c is EOF:
        stream.parseError("expected-font-size-but-got-eof")
        return None

    # Step 5
    mode = parseModes[c]
    if mode is None:
        stream.unget(c)

    # Steps 6-8
    size = readNumbers(stream)
    if size is None:
        return None

    c = stream.peek()
    if c is not EOF:
        stream.parseError("trailing-characters-ignored", {"data": c})

    # Step 9
    if mode is not None:
        size = mode(size)

    # Steps 10-12
    size = min(max(size, 1), len(fontSizeKeywords))
    return fontSizeKeywords[size - 1]
