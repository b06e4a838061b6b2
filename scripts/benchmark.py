#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Compare the time taken to concatenate images vertically by decoding them
straight into the output canvas, and by decoding each one then copying it."""

from imconcat import Raster, load_and_stack_vertical, stack_images

import argparse
import sys
import time


def command_line_arguments(argv=None):
    parser = argparse.ArgumentParser(
        description="Time the vertical concatenation of the given images, "
        "with and without intermediate copies.")
    parser.add_argument("raster", nargs='+',
                        help="Space separated list of images to concatenate")
    parser.add_argument("-n", "--loops", type=int, default=100,
                        help="Number of concatenations to time (default: "
                        "100)")
    args = parser.parse_args(argv)
    if args.loops < 1:
        parser.error("the number of loops must be at least 1")
    return args


def concatenate_buffer(filenames):
    return load_and_stack_vertical(filenames)


def concatenate_copies(filenames):
    arrays = [Raster(filename).array() for filename in filenames]
    return stack_images(arrays)


def benchmark(args):
    results = []
    for name, func in [('Buffer', concatenate_buffer),
                       ('Copies', concatenate_copies)]:
        start = time.perf_counter()
        for _ in range(args.loops):
            func(args.raster)
        elapsed = time.perf_counter() - start
        print("{} - Time to concat {} images {} times: {:.2f}s "
              "avg: {:.2f}ms".format(name, len(args.raster), args.loops,
                                     elapsed,
                                     1000 * elapsed / args.loops))
        results.append((name, elapsed))
    return results


def main(argv=None):
    args = command_line_arguments(argv)
    benchmark(args)
    return 0


if __name__ == "__main__":
    sys.exit(main())
