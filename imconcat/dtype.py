# -*- coding: utf-8 -*-

try:
    from osgeo import gdal
except ImportError as e:
    raise ImportError(
        str(e) + "\n\nPlease install GDAL.")
try:
    import numpy as np
except ImportError as e:
    raise ImportError(
        str(e) + "\n\nPlease install NumPy.")


_LSTR_DTYPES = ('uint8', 'uint16', 'uint32', 'int16', 'int32', 'float32',
                'float64')


class DataType(object):
    """Abstract class for a pixel data type (uint8, int16, float32, etc.)"""

    data_type_match = {}

    def __set__(self, instance, value):
        try:
            instance._lstr_dtype = self.data_type_match[value]
        except (KeyError, TypeError):
            raise ValueError("Unsupported data type: {!r}".format(value))

    def __get__(self, instance, owner):
        if instance is None:
            return self
        revert_match = {v: k for k, v in self.data_type_match.items()}
        return revert_match[instance._lstr_dtype]


class LStrDataType(DataType):
    """Represent a data type given in lower string format (eg. 'uint8',
    'int16', 'float32', etc.). This is the reference format, every other
    format is matched against it."""

    data_type_match = {name: name for name in _LSTR_DTYPES}

    def __get__(self, instance, owner):
        if instance is None:
            return self
        return instance._lstr_dtype


class NumpyDataType(DataType):
    """Represent a data type for Numpy (eg. np.uint8, np.int16, np.float32,
    etc.)"""

    data_type_match = {np.uint8: 'uint8',
                       np.uint16: 'uint16',
                       np.uint32: 'uint32',
                       np.int16: 'int16',
                       np.int32: 'int32',
                       np.float32: 'float32',
                       np.float64: 'float64'}

    def __set__(self, instance, value):
        # Accept np.dtype instances and names as well as scalar types
        try:
            value = np.dtype(value).type
        except TypeError:
            raise ValueError("Unsupported data type: {!r}".format(value))
        super(NumpyDataType, self).__set__(instance, value)


class GdalDataType(DataType):
    """Represent a data type for gdal (eg. gdal.GDT_Byte, gdal.GDT_Int16,
    gdal.GDT_Float32, etc.)"""

    data_type_match = {gdal.GDT_Byte: 'uint8',
                       gdal.GDT_UInt16: 'uint16',
                       gdal.GDT_UInt32: 'uint32',
                       gdal.GDT_Int16: 'int16',
                       gdal.GDT_Int32: 'int32',
                       gdal.GDT_Float32: 'float32',
                       gdal.GDT_Float64: 'float64'}


class RasterDataType(object):
    """The usable class to manage pixel data types.

    >>> RasterDataType(gdal_dtype=gdal.GDT_Byte).numpy_dtype
    <class 'numpy.uint8'>
    >>> RasterDataType(numpy_dtype='uint16').lstr_dtype
    'uint16'
    """

    lstr_dtype = LStrDataType()
    numpy_dtype = NumpyDataType()
    gdal_dtype = GdalDataType()

    def __init__(self,
                 lstr_dtype=None,
                 numpy_dtype=None,
                 gdal_dtype=None):
        if lstr_dtype is not None:
            self.lstr_dtype = lstr_dtype
        elif numpy_dtype is not None:
            self.numpy_dtype = numpy_dtype
        elif gdal_dtype is not None:
            self.gdal_dtype = gdal_dtype
        else:
            raise ValueError("A data type must be given")

    def __repr__(self):
        return "{}(lstr_dtype='{}')".format(self.__class__.__name__,
                                            self._lstr_dtype)

    def __eq__(self, other):
        return isinstance(other, RasterDataType) \
            and self._lstr_dtype == other._lstr_dtype

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash(self._lstr_dtype)

    @property
    def itemsize(self):
        """Size in bytes of one pixel value of one band (int)"""
        return np.dtype(self.numpy_dtype).itemsize
