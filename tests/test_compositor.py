# -*- coding: utf-8 -*-

import unittest

from imconcat.blit import Blit, as_pixel_array
from imconcat.compositor import (canvas_size, composite, new_canvas,
                                 place_images)
from imconcat.errors import InvalidArgument, OutOfBounds
import numpy as np


def pattern(width, height, depth=3, seed=0, dtype=np.uint8):
    """Returns an image where (almost) every pixel value is different"""
    values = (np.arange(width * height * depth) + seed) % 251 + 1
    return values.astype(dtype).reshape((height, width, depth))


class TestBlit(unittest.TestCase):

    def test_blit_should_get_attr_values(self):
        blit = Blit(pattern(4, 3), 2, 5)
        self.assertEqual((blit.x, blit.y), (2, 5))
        self.assertEqual((blit.width, blit.height, blit.depth), (4, 3, 3))
        self.assertEqual((blit.right, blit.bottom), (6, 8))
        self.assertFalse(blit.is_empty)

    def test_blit_image_should_be_read_only_view(self):
        image = pattern(4, 3)
        blit = Blit(image, 0, 0)
        self.assertTrue(np.shares_memory(blit.image, image))
        self.assertFalse(blit.image.flags.writeable)
        self.assertTrue(image.flags.writeable)
        with self.assertRaises(ValueError):
            blit.image[0, 0, 0] = 0

    def test_two_dimensional_image_has_one_band(self):
        blit = Blit(np.zeros((3, 4), dtype=np.uint8), 0, 0)
        self.assertEqual(blit.image.shape, (3, 4, 1))

    def test_should_raise_invalid_argument_on_non_integer_offset(self):
        self.assertRaises(InvalidArgument, Blit, pattern(4, 3), 1.7, 0)
        self.assertRaises(InvalidArgument, Blit, pattern(4, 3), 0, '2')
        self.assertRaises(InvalidArgument, Blit, pattern(4, 3), True, 0)

    def test_numpy_integer_offsets_are_accepted(self):
        blit = Blit(pattern(4, 3), np.int64(2), np.uint16(5))
        self.assertEqual((blit.x, blit.y), (2, 5))
        self.assertIs(type(blit.x), int)

    def test_should_raise_invalid_argument_on_wrong_dimensions(self):
        self.assertRaises(InvalidArgument, as_pixel_array, np.zeros(3))
        self.assertRaises(InvalidArgument, as_pixel_array,
                          np.zeros((1, 2, 3, 4)))


class TestComposite(unittest.TestCase):

    def test_new_canvas_is_black(self):
        canvas = new_canvas(4, 3)
        self.assertEqual(canvas.shape, (3, 4, 3))
        self.assertEqual(canvas.dtype, np.uint8)
        self.assertFalse(canvas.any())

    def test_images_should_be_read_back_unchanged(self):
        images = [pattern(5, 4, seed=1), pattern(3, 6, seed=2),
                  pattern(7, 2, seed=3)]
        blits = [Blit(images[0], 0, 0), Blit(images[1], 5, 0),
                 Blit(images[2], 1, 6)]
        canvas = composite(10, 8, blits)
        self.assertEqual(canvas.shape, (8, 10, 3))
        for blit, image in zip(blits, images):
            np.testing.assert_array_equal(
                canvas[blit.y:blit.bottom, blit.x:blit.right], image)

    def test_uncovered_pixels_should_stay_black(self):
        canvas = composite(4, 4, [Blit(pattern(2, 2), 1, 1)])
        mask = np.ones((4, 4), dtype=bool)
        mask[1:3, 1:3] = False
        self.assertFalse(canvas[mask].any())

    def test_later_blit_should_overwrite_earlier_one(self):
        white = np.full((4, 4, 3), 255, dtype=np.uint8)
        grey = np.full((2, 2, 3), 128, dtype=np.uint8)
        canvas = composite(4, 4, [Blit(white, 0, 0), Blit(grey, 1, 1)])
        self.assertTrue((canvas[1:3, 1:3] == 128).all())
        self.assertEqual(int((canvas == 255).sum()), (16 - 4) * 3)
        canvas = composite(4, 4, [Blit(grey, 1, 1), Blit(white, 0, 0)])
        self.assertTrue((canvas == 255).all())

    def test_should_keep_data_type_of_images(self):
        image = pattern(3, 3, depth=1, dtype=np.uint16) * 200
        canvas = composite(3, 3, [Blit(image, 0, 0)])
        self.assertEqual(canvas.dtype, np.uint16)
        self.assertEqual(canvas.shape, (3, 3, 1))
        np.testing.assert_array_equal(canvas, image)

    def test_no_blit_gives_default_canvas(self):
        canvas = composite(0, 0, [])
        self.assertEqual(canvas.shape, (0, 0, 3))
        self.assertEqual(canvas.dtype, np.uint8)

    def test_empty_image_should_not_be_checked_nor_drawn(self):
        canvas = composite(2, 2, [Blit(pattern(2, 2), 0, 0),
                                  Blit(np.zeros((9, 0, 3), np.uint8), 0, 2)])
        self.assertEqual(canvas.shape, (2, 2, 3))

    def test_should_raise_out_of_bounds_if_too_wide(self):
        self.assertRaises(OutOfBounds, composite, 4, 4,
                          [Blit(pattern(3, 2), 2, 0)])

    def test_should_raise_out_of_bounds_if_too_high(self):
        self.assertRaises(OutOfBounds, composite, 4, 4,
                          [Blit(pattern(2, 3), 0, 2)])

    def test_should_raise_out_of_bounds_if_negative_offset(self):
        self.assertRaises(OutOfBounds, composite, 4, 4,
                          [Blit(pattern(1, 1), -1, 0)])

    def test_out_of_bounds_is_an_index_error(self):
        self.assertRaises(IndexError, composite, 1, 1,
                          [Blit(pattern(2, 2), 0, 0)])

    def test_should_raise_invalid_argument_if_not_same_depth(self):
        blits = [Blit(pattern(2, 2, depth=3), 0, 0),
                 Blit(pattern(2, 2, depth=4), 2, 0)]
        self.assertRaises(InvalidArgument, composite, 4, 2, blits)

    def test_should_raise_invalid_argument_if_not_same_dtype(self):
        blits = [Blit(pattern(2, 2), 0, 0),
                 Blit(pattern(2, 2, dtype=np.uint16), 2, 0)]
        self.assertRaises(InvalidArgument, composite, 4, 2, blits)

    def test_should_raise_invalid_argument_if_not_canvas_format(self):
        self.assertRaises(InvalidArgument, composite, 2, 2,
                          [Blit(pattern(2, 2), 0, 0)], depth=4)


class TestPlaceImages(unittest.TestCase):

    def test_canvas_size_is_max_extent_of_blits(self):
        blits = [Blit(pattern(5, 4), 0, 0), Blit(pattern(3, 6), 10, 2)]
        self.assertEqual(canvas_size(blits), (13, 8))
        self.assertEqual(canvas_size([]), (0, 0))

    def test_place_images_should_fit_all_blits(self):
        image = pattern(3, 2)
        canvas = place_images([Blit(image, 0, 0), Blit(image, 3, 2)])
        self.assertEqual(canvas.shape, (4, 6, 3))
        np.testing.assert_array_equal(canvas[2:4, 3:6], image)
        self.assertFalse(canvas[0:2, 3:6].any())


if __name__ == '__main__':
    unittest.main(verbosity=2)
