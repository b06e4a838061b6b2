# -*- coding: utf-8 -*-

"""Planning of where each image goes on the output canvas.

Nothing here reads a file or touches a pixel: the functions work on image
sizes, given as (width, height) tuples, and return the size of the canvas
along with the (x, y) offset of the top-left corner of each image, in input
order.

>>> plan_stack([(100, 50), (100, 50)], VERTICAL)
(100, 100, [(0, 0), (0, 50)])
>>> plan_columns(7, 3)
[3, 2, 2]
>>> column_slices(7, 3)
[(0, 3), (3, 5), (5, 7)]
>>> plan_column_stack([(10, 10), (10, 10), (20, 5)], 2)
(30, 20, [(0, 0), (0, 10), (10, 0)])
"""

from collections import namedtuple
import numbers

from .blit import Blit, image_size
from .errors import InvalidArgument


VERTICAL = 'vertical'
HORIZONTAL = 'horizontal'

DIRECTIONS = (VERTICAL, HORIZONTAL)


class Columns(namedtuple('Columns', ['columns'])):
    """Layout where images are stacked vertically into a number of columns,
    filled top to bottom then left to right"""

    __slots__ = ()

    def __new__(cls, columns):
        _check_columns(columns)
        return super(Columns, cls).__new__(cls, columns)

    def __str__(self):
        return 'columns:{}'.format(self.columns)


def parse_layout(s):
    """Returns the layout described by the given string.

    >>> parse_layout('vertical')
    'vertical'
    >>> parse_layout('columns:3')
    Columns(columns=3)
    """
    name = s if ':' not in s else s.split(':')[0]
    name = name.strip().lower()
    if name in DIRECTIONS and ':' not in s:
        return name
    if name in ('columns', 'column'):
        try:
            columns = int(s.split(':')[1])
        except (IndexError, ValueError):
            raise InvalidArgument(
                "Missing or wrong number of columns in: '{}'".format(s))
        return Columns(columns)
    raise InvalidArgument("Not a recognized layout: '{}'".format(s))


def _check_direction(direction):
    if direction not in DIRECTIONS:
        raise InvalidArgument(
            "Not a recognized direction: {!r} (expected one of {})".format(
                direction, ', '.join(DIRECTIONS)))


def _check_columns(columns):
    if isinstance(columns, bool) or not isinstance(columns, numbers.Integral):
        raise InvalidArgument(
            "Number of columns must be an integer, not {!r}".format(columns))
    if columns < 1:
        raise InvalidArgument(
            "Number of columns must be at least 1, not {}".format(columns))


def _normalized(size):
    width, height = size
    if width < 0 or height < 0:
        raise InvalidArgument("Negative image size: {}".format(size))
    # An image with no pixel takes no room at all
    return (0, 0) if width == 0 or height == 0 else (width, height)


def plan_stack(sizes, direction):
    """Plans the concatenation of images one after another in the given
    direction.

    Parameters
    ----------
    sizes : iterable of tuple of int (width, height)
        sizes of the images to concatenate, in order
    direction : str
        `VERTICAL` (top to bottom) or `HORIZONTAL` (left to right)

    Returns
    -------
    tuple (int, int, list of tuple of int)
        width and height of the canvas, then the (x, y) offset of each image.
        No input gives a 0x0 canvas and no offset.
    """
    _check_direction(direction)
    width = height = 0
    offsets = []
    for size in sizes:
        image_width, image_height = _normalized(size)
        if direction == VERTICAL:
            offsets.append((0, height))
            width = max(width, image_width)
            height += image_height
        else:
            offsets.append((width, 0))
            width += image_width
            height = max(height, image_height)
    return width, height, offsets


def plan_columns(count, columns):
    """Returns how many images go in each column.

    Images are spread as evenly as possible: every column gets
    ``count // columns`` images and the ``count % columns`` first columns get
    one more. Trailing columns are empty when there are fewer images than
    columns.

    >>> plan_columns(1, 2)
    [1, 0]

    :param count: number of images
    :type count: int
    :param columns: number of columns (at least 1)
    :type columns: int
    :rtype: list of int
    """
    _check_columns(columns)
    if count < 0:
        raise InvalidArgument("Negative number of images: {}".format(count))
    base, remainder = divmod(count, columns)
    return [base + 1 if idx < remainder else base for idx in range(columns)]


def column_slices(count, columns):
    """Returns the (start, end) index range of the images in each non-empty
    column, in column order.

    Ranges are contiguous and cover exactly ``range(count)``.

    :param count: number of images
    :type count: int
    :param columns: number of columns (at least 1)
    :type columns: int
    :rtype: list of tuple of int
    """
    slices = []
    start = 0
    for column_size in plan_columns(count, columns):
        if column_size:
            slices.append((start, start + column_size))
        start += column_size
    return slices


def plan_column_stack(sizes, columns):
    """Plans the concatenation of images into vertical columns, placed side by
    side from left to right.

    The result is the one of a horizontal stack of vertically stacked
    columns, without having to build any column first. Each column is as wide
    as its widest image and empty columns leave no gap.

    Parameters
    ----------
    sizes : sequence of tuple of int (width, height)
        sizes of the images to concatenate, in order
    columns : int
        number of columns (at least 1)

    Returns
    -------
    tuple (int, int, list of tuple of int)
        width and height of the canvas, then the (x, y) offset of each image
    """
    sizes = list(sizes)
    width = height = 0
    offsets = []
    for start, end in column_slices(len(sizes), columns):
        column_width, column_height, column_offsets = plan_stack(
            sizes[start:end], VERTICAL)
        offsets.extend((x + width, y) for (x, y) in column_offsets)
        width += column_width
        height = max(height, column_height)
    return width, height, offsets


def stack_blits(images, direction, x=0, y=0):
    """Returns the blits concatenating the given images in the given
    direction.

    Parameters
    ----------
    images : sequence of numpy.ndarray
        images to concatenate, in order
    direction : str
        `VERTICAL` or `HORIZONTAL`
    x, y : int, optional
        where to put the top-left corner of the first image (default: 0, 0)

    Returns
    -------
    tuple (int, int, list of `Blit`)
        width and height taken by the stack, then the blits to draw
    """
    images = list(images)
    width, height, offsets = plan_stack(
        [image_size(image) for image in images], direction)
    blits = [Blit(image, x + xoffset, y + yoffset)
             for image, (xoffset, yoffset) in zip(images, offsets)]
    return width, height, blits


def column_blits(images, columns):
    """Returns the blits concatenating the given images into columns.

    :param images: images to concatenate, in order
    :type images: sequence of numpy.ndarray
    :param columns: number of columns (at least 1)
    :type columns: int
    :returns: canvas width, canvas height and the blits to draw
    :rtype: tuple (int, int, list of `Blit`)
    """
    images = list(images)
    width, height, offsets = plan_column_stack(
        [image_size(image) for image in images], columns)
    blits = [Blit(image, x, y) for image, (x, y) in zip(images, offsets)]
    return width, height, blits
