# -*- coding: utf-8 -*-

"""
A ``Raster`` instance represents an image file, read with GDAL.

Only the header of the file is read when the instance is created: pixel data
is decoded later, either into a new array (``Raster.array``) or straight into
an array given by the caller (``Raster.read_into``), for example a slice of a
bigger canvas.

Functions and methods
=====================
"""

try:
    from osgeo import gdal
    gdal.UseExceptions()
except ImportError as e:
    raise ImportError(
        str(e) + "\n\nPlease install GDAL.")
try:
    import numpy as np
except ImportError as e:
    raise ImportError(
        str(e) + "\n\nPlease install NumPy.")

import os

from .blit import as_pixel_array
from .driver_ext import DriverExt
from .dtype import RasterDataType
from .errors import InvalidArgument, PathOpenError, WriteError


def write_file(out_filename, array, drivername=None):
    """Writes a NumPy array to an image file.

    The whole array is first put in an in-memory dataset, which is then copied
    into the output file: this works with every GDAL driver able to write a
    file, including those which cannot create one from scratch (eg. PNG,
    JPEG).

    :param out_filename: path to the output file
    :type out_filename: str
    :param array: the image to save, (height, width) or (height, width, depth)
    :type array: np.ndarray
    :param drivername: short name of the GDAL driver to use. By default, it is
                       found from the extension of the output filename.
    :type drivername: str
    :returns: the ``Raster`` instance corresponding to the output file
    :raises WriteError: if GDAL fails to write the file, eg. when its folder
                        does not exist or the driver does not support the
                        number of bands or the data type of the array
    """
    array = as_pixel_array(array)
    ysize, xsize, number_bands = array.shape
    if xsize == 0 or ysize == 0 or number_bands == 0:
        raise InvalidArgument(
            "Cannot write an empty image ({}x{}x{}) to '{}'".format(
                xsize, ysize, number_bands, out_filename))
    dtype = RasterDataType(numpy_dtype=array.dtype)
    driver = gdal.GetDriverByName(drivername) \
        if drivername \
        else DriverExt.from_filename(out_filename).gdal_driver
    if driver is None:
        raise NotImplementedError(
            "No GDAL driver named: '{}'".format(drivername))

    # Fill an in-memory dataset, band by band
    mem_ds = gdal.GetDriverByName('MEM').Create('',
                                                xsize,
                                                ysize,
                                                number_bands,
                                                dtype.gdal_dtype)
    for i in range(number_bands):
        band = mem_ds.GetRasterBand(i + 1)
        band.WriteArray(array[:, :, i])
        band.FlushCache()
    band = None

    # Encode it into the output file
    existed = os.path.exists(out_filename)
    try:
        out_ds = driver.CreateCopy(out_filename, mem_ds)
        if out_ds is None:
            raise RuntimeError(gdal.GetLastErrorMsg() or 'CreateCopy failed')
        out_ds.FlushCache()
    except RuntimeError as e:
        out_ds = None
        # Do not leave a half-written file behind
        if not existed and os.path.exists(out_filename):
            os.remove(out_filename)
        raise WriteError(out_filename, e) from e
    finally:
        mem_ds = None
    out_ds = None

    return Raster(out_filename)


class Raster(object):
    """Represents a raster image that was read from a file.

    The whole raster *is not* loaded into memory. Instead this class records
    its size and pixel format, which is enough to know where it will go on a
    canvas before decoding anything.
    """

    def __init__(self, filename):
        """Create a new `Raster` instance from an image file.

        Parameters
        ----------
        filename : str
            path to the image file to read

        Raises
        ------
        PathOpenError
            if the file does not exist, cannot be read or is not an image
        """
        self._filename = filename
        self.refresh()

    def __repr__(self):
        return "{}('{}')".format(self.__class__.__name__,
                                 os.path.abspath(self._filename))

    def __str__(self):
        return self.__format__()

    def __format__(self, format_spec=''):
        if format_spec and format_spec.startswith('f'):
            s = os.path.basename(self._filename)
            return s.__format__(format_spec[1:])
        else:
            s = os.path.abspath(self._filename)
            return s.__format__(format_spec)

    @property
    def filename(self):
        """The raster's filename (str)"""
        return self._filename

    @property
    def driver(self):
        """The short name of the raster's GDAL driver (str)"""
        return self._driver

    @property
    def width(self):
        """The raster's width (int)"""
        return self._width

    @property
    def height(self):
        """The raster's height (int)"""
        return self._height

    @property
    def count(self):
        """The raster's count or number of bands (int)"""
        return self._count

    @property
    def dtype(self):
        """The raster's data type (RasterDataType object)"""
        return self._dtype

    @property
    def size(self):
        """The raster's (width, height) (tuple of int)"""
        return (self._width, self._height)

    @property
    def shape(self):
        """Shape of the array holding the raster's pixels (tuple of int)"""
        return (self._height, self._width, self._count)

    @property
    def total_bytes(self):
        """Number of bytes taken by the decoded pixels (int)"""
        return self._width * self._height * self._count * self._dtype.itemsize

    @property
    def is_empty(self):
        """True if the raster has no pixel (bool)"""
        return self._width == 0 or self._height == 0

    def _open(self):
        try:
            return gdal.Open(self._filename, gdal.GA_ReadOnly)
        except RuntimeError as e:
            raise PathOpenError(self._filename, e) from e

    def refresh(self):
        """Reread the raster's properties from file."""
        ds = self._open()
        if ds is None or ds.RasterCount == 0:
            raise PathOpenError(self._filename, "no raster band in file")
        self._driver = ds.GetDriver().ShortName
        self._width = ds.RasterXSize
        self._height = ds.RasterYSize
        self._count = ds.RasterCount
        try:
            self._dtype = RasterDataType(
                gdal_dtype=ds.GetRasterBand(1).DataType)
        except ValueError as e:
            raise PathOpenError(self._filename, e) from e

        # Close file
        ds = None

    def read_into(self, array):
        """Decodes the raster's pixels straight into the given array.

        The array may be a view on a bigger one (eg. some rows of a canvas):
        GDAL writes each band through the view's strides, so no intermediate
        buffer is used.

        Parameters
        ----------
        array : numpy.ndarray
            writable destination of shape (height, width, count) and of the
            raster's data type

        Returns
        -------
        numpy.ndarray
            the given array

        Raises
        ------
        RuntimeError
            if GDAL fails to decode the pixels
        """
        if array.shape != self.shape:
            raise InvalidArgument(
                "Cannot decode {:f} ({}x{}x{}) into an array of "
                "shape {}".format(self, self._width, self._height,
                                  self._count, array.shape))
        if array.dtype != np.dtype(self._dtype.numpy_dtype):
            raise InvalidArgument(
                "Cannot decode {:f} ({}) into an array of {}".format(
                    self, self._dtype.lstr_dtype, array.dtype))
        if self.is_empty:
            return array

        ds = self._open()
        for i in range(self._count):
            ds.GetRasterBand(i + 1).ReadAsArray(buf_obj=array[:, :, i])
        ds = None

        return array

    def array(self):
        """Returns a new NumPy array with the raster's pixels.

        :rtype: numpy.ndarray of shape (height, width, count)
        """
        array = np.empty(self.shape, dtype=self._dtype.numpy_dtype)
        return self.read_into(array)
