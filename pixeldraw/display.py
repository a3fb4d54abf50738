import os
import tempfile

import numpy as np

from .colors import Color, RGB_LUT, is_color
from .errors import InvalidColorError, OutOfBoundsError, UnknownColorError
from .screen import Screen

PPM_EXTENSION = 'ppm'
MAX_CHANNEL = 255


def _current_umask():
    # os.umask only reads the mask by replacing it
    mask = os.umask(0)
    os.umask(mask)
    return mask


class Display(Screen):
    """
    Framebuffer backed by a (max_y, max_x) numpy grid of color codes.

    With TRANSPOSE_WRITES set (the default), draw_pixel(x, y) writes row x,
    column y while get_pixel(x, y) reads row y, column x. Pass
    transpose_writes=False to write row y, column x.
    """

    def __init__(self, width=0, height=0, transpose_writes=True):
        self.transpose_writes = transpose_writes
        self.initialize(width, height)

    def initialize(self, width, height):
        if width < 0 or height < 0:
            raise ValueError(f'display size must be non-negative, got {width}x{height}')
        self.max_x = width
        self.max_y = height
        self.grid = np.full((height, width), Color.WHITE.value, dtype='uint8')

    def _write_cell(self, x, y):
        if self.transpose_writes:
            return x, y
        return y, x

    def contains(self, x, y):
        row, col = self._write_cell(x, y)
        return 0 <= row < self.max_y and 0 <= col < self.max_x

    def draw_pixel(self, x, y, color):
        if not self.contains(x, y):
            raise OutOfBoundsError(f'pixel ({x}, {y}) out of bounds')
        row, col = self._write_cell(x, y)
        if not is_color(color):
            raise UnknownColorError(f'color unknown: {color!r}')
        self.grid[row, col] = color.value

    def get_pixel(self, x, y):
        if x < 0 or y < 0 or x >= self.max_x or y >= self.max_y:
            raise OutOfBoundsError(f'pixel ({x}, {y}) out of bounds')
        return Color(int(self.grid[y, x]))

    def clear_screen(self):
        self.grid.fill(Color.WHITE.value)

    def get_max_xy(self):
        return self.max_x, self.max_y

    def snapshot(self):
        return self.grid.copy()

    def to_rgb(self):
        """
        Returns a (max_y, max_x, 3) uint8 array of the grid's RGB values.
        Raises InvalidColorError naming the first cell whose code has no
        color table entry.
        """
        bad = np.argwhere(self.grid >= len(RGB_LUT))
        if len(bad) > 0:
            y, x = bad[0]
            raise InvalidColorError(f'invalid color at pixel [{x}, {y}]')
        return RGB_LUT[self.grid]

    def screen_shot(self, name):
        rgb = self.to_rgb()
        path = f'{name}.{PPM_EXTENSION}'
        directory = os.path.dirname(os.path.abspath(path))
        fd, tmp_path = tempfile.mkstemp(dir=directory, suffix='.tmp')
        try:
            with os.fdopen(fd, 'w') as ppm_file:
                ppm_file.write(f'P3\n{self.max_x} {self.max_y}\n{MAX_CHANNEL}\n')
                for row in rgb:
                    ppm_file.write(''.join(f'{r} {g} {b} ' for r, g, b in row))
                    ppm_file.write('\n')
            os.chmod(tmp_path, 0o666 & ~_current_umask())
            os.replace(tmp_path, path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise
        return path
