# -*- coding: utf-8 -*-

try:
    import numpy as np
except ImportError as e:
    raise ImportError(
        str(e) + "\n\nPlease install NumPy.")

from collections import namedtuple
import numbers

from .errors import InvalidArgument


def as_pixel_array(image):
    """Returns the given image as a 3-dimensional NumPy array
    (height, width, depth).

    2-dimensional arrays are single-band images and get a depth of 1. The
    array is not copied when it already has the right shape.

    Parameters
    ----------
    image : array_like
        pixels of an image, either (height, width) or (height, width, depth)

    Returns
    -------
    numpy.ndarray
        3-dimensional view of the image
    """
    array = np.asarray(image)
    if array.ndim == 2:
        return array[:, :, np.newaxis]
    if array.ndim != 3:
        raise InvalidArgument(
            "An image must have 2 or 3 dimensions, not {}".format(array.ndim))
    return array


def image_size(image):
    """Returns the (width, height) used to place an image.

    Images with no pixel at all (zero width or zero height) take no room.
    """
    height, width = np.shape(image)[:2]
    if width == 0 or height == 0:
        return (0, 0)
    return (width, height)


GenericBlit = namedtuple('GenericBlit', ['image', 'x', 'y'])


class Blit(GenericBlit):
    """Instruction to draw an image with its top-left corner at (x, y) on a
    canvas.

    The image is borrowed: the blit only keeps a read-only view of the
    caller's array, which must stay alive until the blit has been drawn.
    """

    __slots__ = ()

    def __new__(cls, image, x, y):
        for name, value in (('x', x), ('y', y)):
            if isinstance(value, bool) \
                    or not isinstance(value, numbers.Integral):
                raise InvalidArgument(
                    "Blit {} offset must be an integer, not {!r}".format(
                        name, value))
        view = as_pixel_array(image).view()
        view.flags.writeable = False
        return super(Blit, cls).__new__(cls, view, int(x), int(y))

    @property
    def width(self):
        return self.image.shape[1]

    @property
    def height(self):
        return self.image.shape[0]

    @property
    def depth(self):
        return self.image.shape[2]

    @property
    def right(self):
        """x coordinate just after the last column covered by the blit"""
        return self.x + self.width

    @property
    def bottom(self):
        """y coordinate just after the last row covered by the blit"""
        return self.y + self.height

    @property
    def is_empty(self):
        """True if the blit draws no pixel at all"""
        return self.width == 0 or self.height == 0
