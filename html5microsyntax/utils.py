from .constants import spaceCharacters, tokenSeparators, INT64_MIN, INT64_MAX


__all__ = ["MethodDispatcher", "checkedMul", "checkedAdd", "charIsWhitespace",
           "isWhitespace", "splitHtmlSpaceChars", "strJoin", "searchIndex",
           "isToken"]


class MethodDispatcher(dict):
    """Dict with 2 special properties:

    On initiation, keys that are lists, sets or tuples are converted to
    multiple keys so accessing any one of the items in the original
    list-like object returns the matching value

    md = MethodDispatcher({("+", "plus"): "relative"})
    md["+"] == "relative"

    A default value which can be set through the default attribute.
    """

    def __init__(self, items=()):
        _dictEntries = []
        for name, value in items:
            if isinstance(name, (list, tuple, frozenset, set)):
                for item in name:
                    _dictEntries.append((item, value))
            else:
                _dictEntries.append((name, value))
        dict.__init__(self, _dictEntries)
        assert len(self) == len(_dictEntries)
        self.default = None

    def __getitem__(self, key):
        return dict.get(self, key, self.default)


# 64-bit signed arithmetic that reports overflow instead of wrapping

def checkedMul(a, b):
    result = a * b
    if not INT64_MIN <= result <= INT64_MAX:
        return None
    return result


def checkedAdd(a, b):
    result = a + b
    if not INT64_MIN <= result <= INT64_MAX:
        return None
    return result


def charIsWhitespace(c):
    return c in spaceCharacters


def isWhitespace(s):
    """True if every character of s is an HTML space character"""
    return all(charIsWhitespace(c) for c in s)


def splitHtmlSpaceChars(s):
    """Split s on HTML space characters, dropping empty pieces"""
    start = 0
    for i, c in enumerate(s):
        if c in spaceCharacters:
            if i > start:
                yield s[start:i]
            start = i + 1
    if start < len(s):
        yield s[start:]


def strJoin(strs, separator):
    return separator.join(strs)


def searchIndex(index, s):
    """Return the index of the character of s which begins at UTF-8 byte
    offset index, or the number of characters in s if no character begins
    there"""
    byteOffset = 0
    characterCount = 0
    for c in s:
        if byteOffset == index:
            return characterCount
        byteOffset += len(c.encode("utf-8", "surrogatepass"))
        characterCount += 1
    return characterCount


def isToken(data):
    """Return whether data is a token as defined by RFC 2616

    http://tools.ietf.org/html/rfc2616#section-2.2
    """
    if not data:
        # A token must be at least a single character
        return False
    for byte in bytearray(data):
        if byte < 32 or byte == 127:
            # CTLs
            return False
        elif byte > 127:
            # non-CHARs
            return False
        elif byte in tokenSeparators:
            return False
    return True
