"""
Named colors and their 8-bit RGB values.
"""
from collections import namedtuple
from enum import Enum
from types import MappingProxyType

import numpy as np

from .errors import UnknownColorError

RGB = namedtuple('RGB', ['r', 'g', 'b'])


class Color(Enum):
    RED = 0
    GREEN = 1
    BLUE = 2
    YELLOW = 3
    ORANGE = 4
    PURPLE = 5
    BROWN = 6
    BLACK = 7
    WHITE = 8


COLOR_TABLE = MappingProxyType({
    Color.RED: RGB(255, 0, 0),
    Color.GREEN: RGB(0, 255, 0),
    Color.BLUE: RGB(0, 0, 255),
    Color.YELLOW: RGB(255, 255, 0),
    Color.ORANGE: RGB(255, 164, 0),
    Color.PURPLE: RGB(128, 0, 128),
    Color.BROWN: RGB(165, 42, 42),
    Color.BLACK: RGB(0, 0, 0),
    Color.WHITE: RGB(255, 255, 255),
})

# Row i holds the RGB of the color whose value is i.
RGB_LUT = np.array([COLOR_TABLE[c] for c in sorted(Color, key=lambda c: c.value)],
                   dtype='uint8')
RGB_LUT.setflags(write=False)


def is_color(value):
    return isinstance(value, Color) and value in COLOR_TABLE


def rgb_of(color):
    if not is_color(color):
        raise UnknownColorError(f'color unknown: {color!r}')
    return COLOR_TABLE[color]
