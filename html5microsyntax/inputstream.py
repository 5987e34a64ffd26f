import webencodings

from .constants import EOF


def AttributeInputStream(source, **kwargs):
    """Return a character stream over an attribute value.

    source may be a unicode string, an iterable of characters, a bytes object
    or an existing attribute input stream, which is returned unchanged. An
    encoding may only be given along with byte input."""
    if isinstance(source, AttributeUnicodeInputStream):
        return source

    if isinstance(source, (bytes, bytearray)):
        return AttributeBinaryInputStream(source, **kwargs)

    if kwargs.get("encoding") is not None:
        raise TypeError("Cannot set an encoding with a unicode input, set %r" %
                        kwargs["encoding"])
    return AttributeUnicodeInputStream(source)


class AttributeUnicodeInputStream(object):
    """Provides a unicode stream of characters to the microsyntax parsers.

    Characters are pulled lazily from the source, so parsing stops consuming
    an iterator as soon as the grammar stops."""

    def __init__(self, source):
        """Initialises the AttributeUnicodeInputStream.

        AttributeUnicodeInputStream(source) -> stream of the characters
        in source

        source can be either a unicode string or an iterable of single
        characters.
        """
        self.dataStream = iter(source)
        self.reset()

    def reset(self):
        # Characters pushed back with unget, the next one last
        self.pushedBack = []
        self.charCount = 0
        self.errors = []

    def position(self):
        """Returns the number of characters consumed so far."""
        return self.charCount

    def char(self):
        """ Read one character from the stream or queue if available. Return
            EOF when EOF is reached.
        """
        if self.pushedBack:
            char = self.pushedBack.pop()
        else:
            try:
                char = next(self.dataStream)
            except StopIteration:
                return EOF
        self.charCount += 1
        return char

    def unget(self, char):
        if char is not EOF:
            self.pushedBack.append(char)
            self.charCount -= 1

    def peek(self):
        char = self.char()
        self.unget(char)
        return char

    def charsUntil(self, characters, opposite=False):
        """ Returns a string of characters from the stream up to but not
        including any character in 'characters' or EOF. With opposite set,
        returns characters up to the first one not in 'characters'.
        """
        rv = []
        while True:
            char = self.char()
            if char is EOF:
                break
            if (char in characters) != opposite:
                self.unget(char)
                break
            rv.append(char)
        return "".join(rv)

    def remainder(self):
        """Consume and return everything left in the stream."""
        return self.charsUntil(frozenset())

    def parseError(self, errorcode, datavars=None):
        self.errors.append((self.position(), errorcode, datavars or {}))


class AttributeBinaryInputStream(AttributeUnicodeInputStream):
    """Provides a unicode stream of characters decoded from an attribute
    value given as bytes.

    A byte order mark overrides the encoding; malformed byte sequences are
    replaced with U+FFFD.
    """

    def __init__(self, source, encoding=None):
        """Initialises the AttributeBinaryInputStream.

        The optional encoding parameter must be a string that indicates
        the encoding to use when the value has no byte order mark. Unknown
        encodings fall back to utf-8.
        """
        self.rawStream = bytes(source)

        fallback = lookupEncoding(encoding)
        if fallback is None:
            self.charEncoding = (lookupEncoding("utf-8"), "tentative")
        else:
            self.charEncoding = (fallback, "certain")

        data, detected = webencodings.decode(self.rawStream, self.charEncoding[0],
                                             errors="replace")
        if detected is not self.charEncoding[0]:
            self.charEncoding = (detected, "certain")

        AttributeUnicodeInputStream.__init__(self, data)


def lookupEncoding(encoding):
    """Return the webencodings encoding corresponding to an encoding label or
    None if the string doesn't correspond to a valid encoding."""
    if isinstance(encoding, bytes):
        try:
            encoding = encoding.decode("ascii")
        except UnicodeDecodeError:
            return None

    if encoding is not None:
        try:
            return webencodings.lookup(encoding)
        except AttributeError:
            return None
    else:
        return None
