import os.path

import pytest

from html5microsyntax import (AttributeParser, Auto, ColorParseError, Length,
                              Percentage, serializeSimpleColor)

from .support import TestData as _TestData, errorMessage

_dir = os.path.abspath(os.path.dirname(__file__))
_testdata = os.path.join(_dir, "testdata")


def runLegacyColorTest(parser, input, expected):
    try:
        actual = serializeSimpleColor(parser.parseLegacyColor(input))
    except ColorParseError:
        actual = "error"
    return expected, actual


def runLegacyFontSizeTest(parser, input, expected):
    actual = parser.parseLegacyFontSize(input)
    return (None if expected == "none" else expected), actual


def runDimensionTest(parser, input, expected):
    if expected == "auto":
        expected = Auto
    elif expected.endswith("%"):
        expected = Percentage(float(expected[:-1]) / 100)
    else:
        assert expected.endswith("px")
        expected = Length.fromPx(float(expected[:-2]))
    return expected, parser.parseLength(input)


runners = {
    "legacy-color": runLegacyColorTest,
    "legacy-font-size": runLegacyFontSizeTest,
    "dimension": runDimensionTest,
}


def pytest_collect_file(file_path, parent):
    if file_path.suffix != ".dat":
        return None
    if (os.path.abspath(str(file_path.parent.parent)) == _testdata and
            file_path.parent.name in runners):
        return MicrosyntaxFile.from_parent(parent, path=file_path)


class MicrosyntaxFile(pytest.File):
    def collect(self):
        kind = self.path.parent.name
        tests = _TestData(str(self.path), "data")
        for i, test in enumerate(tests):
            yield MicrosyntaxTest.from_parent(self, name=str(i), test=test, kind=kind)


class MicrosyntaxTest(pytest.Item):
    def __init__(self, *, test, kind, **kwargs):
        super().__init__(**kwargs)
        self.test = test
        self.kind = kind

    def runtest(self):
        parser = AttributeParser()
        input = self.test["data"]
        expected, actual = runners[self.kind](parser, input, self.test["result"])
        assert expected == actual, errorMessage(input, expected, actual)

        if "errors" in self.test:
            expectedErrors = self.test["errors"].split("\n") if self.test["errors"] else []
            actualErrors = [errorcode for _, errorcode, _ in parser.errors]
            assert expectedErrors == actualErrors, \
                errorMessage(input, expectedErrors, actualErrors)

    def reportinfo(self):
        return self.path, None, "%s: %r" % (self.kind, self.test["data"])
