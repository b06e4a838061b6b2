# -*- coding: utf-8 -*-

try:
    from osgeo import gdal
except ImportError as e:
    raise ImportError(
        str(e) + "\n\nPlease install GDAL.")

from collections import namedtuple
import os


GenericDriverExt = namedtuple('GenericDriverExt',
                              ['extension', 'gdal_name', 'gdal_driver'])


class DriverExt(GenericDriverExt):
    """Class to map gdal.Driver instance with filename extensions

    >>> DriverExt(".png").gdal_name
    'PNG'
    """

    drivername_map = {'.png': 'PNG',
                      '.tif': 'GTiff',
                      '.tiff': 'GTiff',
                      '.jpg': 'JPEG',
                      '.jpeg': 'JPEG',
                      '.bmp': 'BMP'}

    __slots__ = ()

    def __new__(cls, extension):
        extension = extension.lower()
        try:
            driver = gdal.GetDriverByName(cls.drivername_map[extension])
        except KeyError:
            raise NotImplementedError(
                "No driver has been mapped to extension: '{}'".format(
                    extension))
        if driver is None:
            raise NotImplementedError(
                "GDAL was built without the '{}' driver".format(
                    cls.drivername_map[extension]))
        return super(DriverExt, cls).__new__(cls,
                                             extension,
                                             driver.ShortName,
                                             driver)

    @classmethod
    def from_filename(cls, filename):
        """Returns the `DriverExt` matching the extension of a filename"""
        _, ext = os.path.splitext(filename)
        if not ext:
            raise NotImplementedError(
                "No extension in filename: '{}'".format(filename))
        return cls(ext)
