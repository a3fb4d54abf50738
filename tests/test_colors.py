import unittest

import numpy as np

import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from pixeldraw.colors import COLOR_TABLE, RGB, RGB_LUT, Color, is_color, rgb_of
from pixeldraw.errors import UnknownColorError


class TestColorTable(unittest.TestCase):

    def test_every_color_has_an_entry(self):
        self.assertEqual(set(COLOR_TABLE), set(Color))
        self.assertEqual(len(Color), 9)

    def test_known_values(self):
        self.assertEqual(rgb_of(Color.RED), RGB(255, 0, 0))
        self.assertEqual(rgb_of(Color.ORANGE), RGB(255, 164, 0))
        self.assertEqual(rgb_of(Color.PURPLE), RGB(128, 0, 128))
        self.assertEqual(rgb_of(Color.BROWN), RGB(165, 42, 42))
        self.assertEqual(rgb_of(Color.WHITE), RGB(255, 255, 255))

    def test_table_is_read_only(self):
        with self.assertRaises(TypeError):
            COLOR_TABLE[Color.RED] = RGB(1, 2, 3)
        with self.assertRaises(ValueError):
            RGB_LUT[0, 0] = 1

    def test_unknown_values_are_rejected(self):
        for value in ('red', 0, None, (255, 0, 0)):
            self.assertFalse(is_color(value))
            with self.assertRaises(UnknownColorError):
                rgb_of(value)

    def test_lookup_array_matches_table(self):
        for color in Color:
            np.testing.assert_array_equal(RGB_LUT[color.value], COLOR_TABLE[color])


if __name__ == '__main__':
    unittest.main()
