# -*- coding: utf-8 -*-

"""The `concatenation` module gathers the functions to concatenate images,
either already decoded (NumPy arrays) or read from files.

Every function returns a single canvas, a NumPy array of shape
(height, width, depth), or raises one of the errors of `imconcat.errors`.
"""

from .compositor import composite
from .errors import InvalidArgument
from .layout import (HORIZONTAL, VERTICAL, Columns, column_blits,
                     parse_layout, stack_blits)
from .loader import (check_pixel_format, decode_rasters,
                     load_and_stack_columns, load_and_stack_vertical,
                     open_rasters)
from .raster import write_file


def stack_images(images, direction=VERTICAL):
    """Concatenates the given images one after another.

    >>> import numpy as np
    >>> a = np.zeros((50, 100, 3), dtype=np.uint8)
    >>> stack_images([a, a], VERTICAL).shape
    (100, 100, 3)

    :param images: images to concatenate, in order
    :type images: sequence of numpy.ndarray
    :param direction: `VERTICAL` (default) or `HORIZONTAL`
    :type direction: str
    :rtype: numpy.ndarray
    """
    width, height, blits = stack_blits(images, direction)
    return composite(width, height, blits)


def column_images(images, columns):
    """Concatenates the given images into vertical columns, placed side by
    side.

    All images are copied once, straight to their place in the output: no
    column is built on its own first.

    :param images: images to concatenate, in order
    :type images: sequence of numpy.ndarray
    :param columns: number of columns (at least 1)
    :type columns: int
    :rtype: numpy.ndarray
    """
    width, height, blits = column_blits(images, columns)
    return composite(width, height, blits)


def stack_files(filenames, direction=VERTICAL):
    """Concatenates the given image files one after another.

    Vertical concatenation decodes images straight into the canvas whenever
    possible (see `load_and_stack_vertical`). Horizontal concatenation decodes
    each image on its own and then copies it.

    :param filenames: paths to the image files, in order
    :type filenames: sequence of str
    :param direction: `VERTICAL` (default) or `HORIZONTAL`
    :type direction: str
    :rtype: numpy.ndarray
    """
    if direction == VERTICAL:
        return load_and_stack_vertical(filenames)
    if direction != HORIZONTAL:
        raise InvalidArgument(
            "Not a recognized direction: {!r}".format(direction))
    rasters = open_rasters(filenames)
    check_pixel_format(rasters)
    arrays = decode_rasters(rasters)
    return stack_images(arrays, HORIZONTAL)


def column_files(filenames, columns):
    """Concatenates the given image files into vertical columns, placed side
    by side.

    :param filenames: paths to the image files, in order
    :type filenames: sequence of str
    :param columns: number of columns (at least 1)
    :type columns: int
    :rtype: numpy.ndarray
    """
    return load_and_stack_columns(filenames, columns)


def _layout(layout):
    if isinstance(layout, str):
        return parse_layout(layout)
    if isinstance(layout, Columns):
        return layout
    raise InvalidArgument("Not a recognized layout: {!r}".format(layout))


def concatenate(images, layout=VERTICAL):
    """Concatenates the given images with the given layout.

    :param images: images to concatenate, in order
    :type images: sequence of numpy.ndarray
    :param layout: `VERTICAL` (default), `HORIZONTAL`, a `Columns` instance
                   or a string understood by `parse_layout`
    :rtype: numpy.ndarray
    """
    layout = _layout(layout)
    if isinstance(layout, Columns):
        return column_images(images, layout.columns)
    return stack_images(images, layout)


def concatenate_files(filenames, out_filename=None, layout=VERTICAL):
    """Concatenates the given image files with the given layout and writes the
    result.

    The output file is written only once the whole canvas has been built: if
    anything goes wrong, no file is written at all.

    Parameters
    ----------
    filenames : sequence of str
        paths to the image files, in order
    out_filename : str, optional
        path to the output file. Its extension gives the format (eg. '.png').
        If omitted, nothing is written.
    layout : str or `Columns`, optional
        `VERTICAL` (default), `HORIZONTAL`, a `Columns` instance or a string
        understood by `parse_layout` (eg. 'columns:3')

    Returns
    -------
    `Raster` or numpy.ndarray
        the output raster if an output file is given, else the canvas
    """
    layout = _layout(layout)
    if isinstance(layout, Columns):
        canvas = column_files(filenames, layout.columns)
    else:
        canvas = stack_files(filenames, layout)
    if out_filename is None:
        return canvas
    return write_file(out_filename, canvas)
