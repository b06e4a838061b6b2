# -*- coding: utf-8 -*-

"""Loading of image files straight into a concatenated canvas.

Vertical concatenation is the cheap one: rows of an image are contiguous in
memory, so as long as every image is exactly as wide as the canvas, image
``i`` fills a contiguous range of canvas rows and can be decoded right there,
without any intermediate buffer.

Horizontal concatenation has no such property. Columns are therefore built
with the fast vertical path, then copied side by side.
"""

from .blit import Blit
from .compositor import composite, new_canvas
from .errors import DecodeError, InvalidArgument
from .layout import (HORIZONTAL, VERTICAL, column_slices, plan_stack,
                     stack_blits)
from .raster import Raster


def open_rasters(filenames):
    """Returns a `Raster` for each filename, in order.

    Only headers are read, pixel data is left in the files.

    :param filenames: paths to the image files
    :type filenames: iterable of str
    :rtype: list of `Raster`
    :raises PathOpenError: naming the first file that cannot be opened
    """
    return [Raster(filename) for filename in filenames]


def check_pixel_format(rasters):
    """Returns the (count, dtype) shared by the given rasters.

    :raises InvalidArgument: if two rasters have not the same number of bands
                             or not the same data type
    """
    non_empty = [raster for raster in rasters if not raster.is_empty]
    if not non_empty:
        return None
    raster0 = non_empty[0]
    for raster in non_empty[1:]:
        if raster.count != raster0.count or raster.dtype != raster0.dtype:
            raise InvalidArgument(
                "Images have not the same pixel format: "
                "'{:f}' ({} x {}) and '{:f}' ({} x {})".format(
                    raster0, raster0.count, raster0.dtype.lstr_dtype,
                    raster, raster.count, raster.dtype.lstr_dtype))
    return raster0.count, raster0.dtype


def decode_rasters(rasters, first_idx=0):
    """Decodes each raster into its own array, in order.

    :param rasters: rasters to decode
    :type rasters: list of `Raster`
    :param first_idx: index of the first raster in the caller's list, used in
                      error messages (default: 0)
    :type first_idx: int
    :rtype: list of numpy.ndarray
    :raises DecodeError: for the first raster that cannot be decoded
    """
    arrays = []
    for idx, raster in enumerate(rasters, first_idx):
        try:
            arrays.append(raster.array())
        except RuntimeError as e:
            raise DecodeError(idx, raster.filename, e) from e
    return arrays


def _canvas_format(pixel_format):
    if pixel_format is None:
        return None, None
    count, dtype = pixel_format
    return count, dtype.numpy_dtype


def _stack_vertical(rasters, pixel_format, first_idx=0):
    depth, dtype = _canvas_format(pixel_format)
    width, height, offsets = plan_stack([raster.size for raster in rasters],
                                        VERTICAL)

    # Decoding straight into the canvas rows only works if each image row is
    # a full canvas row
    if any(raster.width != width for raster in rasters if not raster.is_empty):
        arrays = decode_rasters(rasters, first_idx)
        return composite(width, height,
                         [Blit(array, x, y)
                          for array, (x, y) in zip(arrays, offsets)],
                         depth, dtype)

    canvas = new_canvas(width, height) \
        if pixel_format is None \
        else new_canvas(width, height, depth, dtype)
    for idx, (raster, (_, y)) in enumerate(zip(rasters, offsets), first_idx):
        if raster.is_empty:
            continue
        rows = canvas[y:y + raster.height]
        assert rows.nbytes == raster.total_bytes, \
            "Canvas rows do not match the size of '{:f}'".format(raster)
        try:
            raster.read_into(rows)
        except RuntimeError as e:
            raise DecodeError(idx, raster.filename, e) from e
    return canvas


def load_and_stack_vertical(filenames):
    """Loads the given image files and concatenates them vertically, in order.

    All files are opened first, which gives the size of the canvas. The canvas
    is then allocated once and each image is decoded straight into its rows.
    If the images are not all as wide as the canvas, each one is decoded into
    its own array and copied instead.

    Parameters
    ----------
    filenames : sequence of str
        paths to the image files, from top to bottom

    Returns
    -------
    numpy.ndarray
        the canvas, of shape (sum of heights, max of widths, depth)

    Raises
    ------
    PathOpenError
        if a file cannot be opened
    DecodeError
        if the pixels of a file cannot be decoded
    InvalidArgument
        if the images have not all the same number of bands and data type
    """
    rasters = open_rasters(filenames)
    return _stack_vertical(rasters, check_pixel_format(rasters))


def load_and_stack_columns(filenames, columns):
    """Loads the given image files and concatenates them into columns.

    Images fill the first column from top to bottom, then the next one, and
    so on. Given ``N`` images, each column gets ``N // columns`` of them and
    the ``N % columns`` first ones get one more. Columns with no image are
    left out.

    Every file is opened and their pixel formats are compared before any
    pixel is decoded. Each column is then built the way
    `load_and_stack_vertical` does it, and the columns are copied side by
    side.

    :param filenames: paths to the image files
    :type filenames: sequence of str
    :param columns: number of columns (at least 1)
    :type columns: int
    :rtype: numpy.ndarray
    :raises InvalidArgument: if columns is lower than 1, before opening any
                             file, or if the images have not all the same
                             pixel format, before decoding any of them
    """
    filenames = list(filenames)
    slices = column_slices(len(filenames), columns)
    rasters = open_rasters(filenames)
    pixel_format = check_pixel_format(rasters)
    column_canvases = [_stack_vertical(rasters[start:end], pixel_format,
                                       first_idx=start)
                       for start, end in slices]
    depth, dtype = _canvas_format(pixel_format)
    width, height, blits = stack_blits(column_canvases, HORIZONTAL)
    return composite(width, height, blits, depth, dtype)
