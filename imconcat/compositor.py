# -*- coding: utf-8 -*-

"""Drawing of already decoded images onto a single canvas.

The canvas is allocated once, when its size is known, then each blit copies
its image into it, row by row, with no conversion of any kind.

Blits are drawn in the given order and are not checked for overlaps: where
two blits cover the same pixels, the later one overwrites the earlier one.
This allows any placement a caller wants.
"""

try:
    import numpy as np
except ImportError as e:
    raise ImportError(
        str(e) + "\n\nPlease install NumPy.")

from .errors import InvalidArgument, OutOfBounds


DEFAULT_DEPTH = 3
DEFAULT_DTYPE = np.uint8


def new_canvas(width, height, depth=DEFAULT_DEPTH, dtype=DEFAULT_DTYPE):
    """Returns a black canvas of the given size.

    :param width: horizontal size of the canvas
    :type width: int
    :param height: vertical size of the canvas
    :type height: int
    :param depth: number of bands (default: 3)
    :type depth: int
    :param dtype: data type of the pixels (default: uint8)
    :rtype: numpy.ndarray of shape (height, width, depth)
    """
    if width < 0 or height < 0:
        raise InvalidArgument(
            "Negative canvas size: ({}, {})".format(width, height))
    return np.zeros((height, width, depth), dtype=dtype)


def pixel_format(blits):
    """Returns the (depth, dtype) shared by all the given blits.

    Blits with no pixel are not considered. Defaults to 3 bands of uint8 if
    there is no blit to draw.
    """
    formats = set((blit.depth, blit.image.dtype)
                  for blit in blits if not blit.is_empty)
    if len(formats) > 1:
        raise InvalidArgument(
            "Images have not the same pixel format: {}".format(
                ', '.join('{} x {}'.format(depth, dtype)
                          for depth, dtype in sorted(formats, key=str))))
    if not formats:
        return DEFAULT_DEPTH, np.dtype(DEFAULT_DTYPE)
    return formats.pop()


def canvas_size(blits):
    """Returns the smallest (width, height) of a canvas on which every given
    blit fits"""
    width = height = 0
    for blit in blits:
        if blit.is_empty:
            continue
        width = max(width, blit.right)
        height = max(height, blit.bottom)
    return width, height


def check_bounds(width, height, blits):
    """Raises `OutOfBounds` if a blit does not fit inside a canvas of the
    given size"""
    for idx, blit in enumerate(blits):
        if blit.is_empty:
            continue
        if blit.x < 0 or blit.y < 0 \
                or blit.right > width or blit.bottom > height:
            raise OutOfBounds(
                "Blit #{} ({}x{} at ({}, {})) does not fit in a {}x{} "
                "canvas".format(idx, blit.width, blit.height, blit.x, blit.y,
                                width, height))


def composite(width, height, blits, depth=None, dtype=None):
    """Draws the given blits, in order, onto a new canvas of the given size.

    Parameters
    ----------
    width, height : int
        size of the canvas
    blits : sequence of `Blit`
        images to draw and where to draw them
    depth : int, optional
        number of bands of the canvas. By default, the one of the images.
    dtype : numpy.dtype, optional
        data type of the canvas. By default, the one of the images.

    Returns
    -------
    numpy.ndarray
        the canvas, of shape (height, width, depth)

    Raises
    ------
    OutOfBounds
        if a blit does not fit in the canvas. Nothing is allocated then.
    InvalidArgument
        if the images do not all have the same pixel format, or not the one
        asked for
    """
    blits = list(blits)
    check_bounds(width, height, blits)
    blits_depth, blits_dtype = pixel_format(blits)
    depth = blits_depth if depth is None else depth
    dtype = blits_dtype if dtype is None else np.dtype(dtype)
    if any(not blit.is_empty
           and (blit.depth != depth or blit.image.dtype != dtype)
           for blit in blits):
        raise InvalidArgument(
            "Images do not match the canvas pixel format: {} x {}".format(
                depth, dtype))

    canvas = new_canvas(width, height, depth, dtype)
    for blit in blits:
        if blit.is_empty:
            continue
        canvas[blit.y:blit.bottom, blit.x:blit.right] = blit.image
    return canvas


def place_images(blits):
    """Draws the given blits onto a canvas just big enough to contain all of
    them.

    >>> from imconcat.blit import Blit
    >>> red = np.full((2, 2, 3), (255, 0, 0), dtype=np.uint8)
    >>> place_images([Blit(red, 0, 0), Blit(red, 2, 1)]).shape
    (3, 4, 3)
    """
    blits = list(blits)
    width, height = canvas_size(blits)
    return composite(width, height, blits)
