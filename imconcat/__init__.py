# -*- coding: utf-8 -*-

"""The `imconcat` package concatenates raster images, vertically,
horizontally or into columns, into a single image.
"""

from .blit import Blit
from .compositor import composite, new_canvas, place_images
from .concatenation import (column_files, column_images, concatenate,
                            concatenate_files, stack_files, stack_images)
from .driver_ext import DriverExt
from .dtype import RasterDataType
from .errors import (ConcatError, DecodeError, InvalidArgument, OutOfBounds,
                     PathOpenError, WriteError)
from .layout import (HORIZONTAL, VERTICAL, Columns, column_blits,
                     column_slices, parse_layout, plan_column_stack,
                     plan_columns, plan_stack, stack_blits)
from .loader import load_and_stack_columns, load_and_stack_vertical
from .raster import Raster, write_file

__version__ = '0.1.0'
