import glob
import os

base_path = os.path.split(__file__)[0]

test_dir = os.path.join(base_path, "testdata")


def get_data_files(subdirectory, files="*.dat"):
    return sorted(glob.glob(os.path.join(test_dir, subdirectory, files)))


class TestData(object):
    """Reads tests from a file made of sections, each introduced by a
    "#heading" line. A new test starts at every newTestHeading section.

    Only the given headings introduce sections, so data lines may start
    with "#" themselves."""

    def __init__(self, filename, newTestHeading="data",
                 headings=("data", "result", "errors")):
        self.filename = filename
        self.newTestHeading = newTestHeading
        self.headings = frozenset(headings)

    def __iter__(self):
        data = {}
        key = None
        with open(self.filename, encoding="utf-8", newline="\n") as f:
            for line in f:
                heading = self.isSectionHeading(line)
                if heading:
                    if data and heading == self.newTestHeading:
                        # Remove the newline separating two tests
                        data[key] = data[key][:-1]
                        yield self.normaliseOutput(data)
                        data = {}
                    key = heading
                    data[key] = ""
                elif key is not None:
                    data[key] += line
        if data:
            yield self.normaliseOutput(data)

    def isSectionHeading(self, line):
        """If the current heading is a test section heading return the heading,
        otherwise return False"""
        heading = line.rstrip("\n")
        if heading.startswith("#") and heading[1:] in self.headings:
            return heading[1:]
        else:
            return False

    def normaliseOutput(self, data):
        # Remove trailing newlines
        for key, value in data.items():
            if value.endswith("\n"):
                data[key] = value[:-1]
        return data


def errorMessage(input, expected, actual):
    msg = ("Input:\n%s\nExpected:\n%s\nReceived\n%s\n" %
           (repr(input), repr(expected), repr(actual)))
    return msg
