import codecs

import pytest

from html5microsyntax.constants import EOF, spaceCharacters
from html5microsyntax.inputstream import (AttributeInputStream, AttributeBinaryInputStream,
                                          AttributeUnicodeInputStream, lookupEncoding)


def test_char():
    stream = AttributeInputStream("ab")
    assert stream.position() == 0
    assert stream.char() == "a"
    assert stream.char() == "b"
    assert stream.position() == 2
    assert stream.char() is EOF
    assert stream.position() == 2


def test_unget():
    stream = AttributeInputStream("abc")
    c = stream.char()
    stream.unget(c)
    assert stream.position() == 0
    assert stream.char() == "a"
    stream.unget(EOF)
    assert stream.char() == "b"


def test_peek():
    stream = AttributeInputStream("x")
    assert stream.peek() == "x"
    assert stream.position() == 0
    assert stream.char() == "x"
    assert stream.peek() is EOF


def test_charsUntil():
    stream = AttributeInputStream(" \t abc def")
    assert stream.charsUntil(spaceCharacters, True) == " \t "
    assert stream.charsUntil(spaceCharacters) == "abc"
    assert stream.char() == " "
    assert stream.remainder() == "def"
    assert stream.remainder() == ""


def test_lazy_iterator():
    source = iter("abc")
    stream = AttributeInputStream(source)
    assert stream.char() == "a"
    assert next(source) == "b"


def test_existing_stream_is_reused():
    stream = AttributeInputStream("abc")
    assert AttributeInputStream(stream) is stream


def test_parseError():
    stream = AttributeInputStream("abc")
    stream.char()
    stream.parseError("expected-digit", {"data": "a"})
    stream.parseError("empty-color")
    assert stream.errors == [(1, "expected-digit", {"data": "a"}),
                             (1, "empty-color", {})]


def test_encoding_with_unicode_input():
    with pytest.raises(TypeError) as exc_info:
        AttributeInputStream("abc", encoding="utf-8")
    assert exc_info.value.args[0].startswith("Cannot set an encoding with a unicode input")


def test_unicode_stream_types():
    assert isinstance(AttributeInputStream("abc"), AttributeUnicodeInputStream)
    assert isinstance(AttributeInputStream(b"abc"), AttributeBinaryInputStream)
    assert isinstance(AttributeInputStream(bytearray(b"abc")), AttributeBinaryInputStream)


def test_char_utf8():
    stream = AttributeInputStream("\u2018".encode("utf-8"))
    assert stream.charEncoding[0].name == "utf-8"
    assert stream.charEncoding[1] == "tentative"
    assert stream.char() == "\u2018"


def test_char_win1252():
    stream = AttributeInputStream("\xa9\xf1\u2019".encode("windows-1252"), encoding="windows-1252")
    assert stream.charEncoding == (lookupEncoding("windows-1252"), "certain")
    assert stream.remainder() == "\xa9\xf1\u2019"


def test_bom():
    stream = AttributeInputStream(codecs.BOM_UTF8 + b"'", encoding="windows-1252")
    assert stream.charEncoding[0].name == "utf-8"
    assert stream.charEncoding[1] == "certain"
    assert stream.remainder() == "'"


def test_unknown_encoding():
    stream = AttributeInputStream(b"abc", encoding="totally-bogus-string")
    assert stream.charEncoding == (lookupEncoding("utf-8"), "tentative")
    assert stream.remainder() == "abc"


def test_malformed_utf8():
    stream = AttributeInputStream(b"a\xffb")
    assert stream.remainder() == "a\ufffdb"


@pytest.mark.parametrize("label,expected", [
    ("utf-8", "utf-8"),
    (b"UTF-8", "utf-8"),
    ("latin1", "windows-1252"),
    (" utf8 ", "utf-8"),
])
def test_lookupEncoding(label, expected):
    assert lookupEncoding(label).name == expected


@pytest.mark.parametrize("label", [None, "bogus", b"\xff"])
def test_lookupEncoding_unknown(label):
    assert lookupEncoding(label) is None
