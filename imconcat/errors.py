# -*- coding: utf-8 -*-

"""Errors raised while planning, decoding or compositing a concatenation.

Nothing is ever half-done: when one of these errors is raised, no canvas is
returned and no output file is written.
"""


class ConcatError(Exception):
    """Base class for every concatenation error"""


class PathOpenError(ConcatError):
    """An image file is missing, unreadable or of an unknown format"""

    def __init__(self, filename, cause):
        self.filename = filename
        self.cause = cause
        super(PathOpenError, self).__init__(
            "Error opening image '{}': {}".format(filename, cause))


class DecodeError(ConcatError):
    """Pixel data of the image at the given index could not be decoded"""

    def __init__(self, index, filename, cause):
        self.index = index
        self.filename = filename
        self.cause = cause
        super(DecodeError, self).__init__(
            "Error decoding image #{} '{}': {}".format(index, filename, cause))


class InvalidArgument(ConcatError, ValueError):
    """The caller broke the contract of a function (eg. zero columns)"""


class OutOfBounds(ConcatError, IndexError):
    """A blit does not fit inside the canvas it is drawn onto"""


class WriteError(ConcatError):
    """The output image file could not be written"""

    def __init__(self, filename, cause):
        self.filename = filename
        self.cause = cause
        super(WriteError, self).__init__(
            "Error writing image '{}': {}".format(filename, cause))
