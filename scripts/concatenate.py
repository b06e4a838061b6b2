#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from imconcat import Columns, ConcatError, concatenate_files, parse_layout

import argparse
import sys


def command_line_arguments(argv=None):
    parser = argparse.ArgumentParser(
        description="Write an image which is the concatenation of the given "
        "images in order, stacked vertically, horizontally or into columns. "
        "All images must have the same number of bands and data type.")
    parser.add_argument("raster", nargs='+',
                        help="Space separated list of images to concatenate")
    parser.add_argument("-o", "--out_file", required=True,
                        help="Path to the output file. Its extension gives "
                        "the output format (eg. '.png')")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("-l", "--layout", default='vertical',
                       help="'vertical' (default), 'horizontal' or "
                       "'columns:N'")
    group.add_argument("-c", "--columns", type=int,
                       help="Number of columns, images fill each column from "
                       "top to bottom then the next one")
    return parser.parse_args(argv)


def concatenate(args):
    layout = Columns(args.columns) \
        if args.columns is not None \
        else parse_layout(args.layout)
    raster = concatenate_files(args.raster, args.out_file, layout=layout)
    print("Concatenation of {} images ({}) written to '{}' ({}x{})".format(
        len(args.raster), layout, raster.filename, raster.width,
        raster.height))
    return raster


def main(argv=None):
    args = command_line_arguments(argv)
    try:
        concatenate(args)
    except ConcatError as e:
        print("Concatenation failed: {}".format(e), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
