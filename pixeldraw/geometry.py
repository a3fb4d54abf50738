from abc import ABC, abstractmethod
from collections import namedtuple

from .errors import OutOfBoundsError

Point = namedtuple('Point', ['x', 'y'])


class Geometry(ABC):

    @abstractmethod
    def draw(self, screen):
        """
        Paint this shape onto SCREEN. Raises OutOfBoundsError, before any
        pixel is written, when the shape does not fit the screen.
        """

    @abstractmethod
    def shape(self):
        """Return the shape's kind, e.g. 'Rectangle'."""

    def _check_extent(self, screen, lo, hi):
        """
        Raises OutOfBoundsError unless the box from LO to HI lies inside
        [0, max_x) x [0, max_y) and both corners are writable on SCREEN.
        """
        max_x, max_y = screen.get_max_xy()
        if lo.x < 0 or lo.y < 0 or hi.x >= max_x or hi.y >= max_y:
            raise self._out_of_bounds()
        # Empty box: nothing will be written
        if lo.x > hi.x or lo.y > hi.y:
            return
        # The writable area is a box too, so checking two corners covers it
        if not (screen.contains(lo.x, lo.y) and screen.contains(hi.x, hi.y)):
            raise self._out_of_bounds()

    def _out_of_bounds(self):
        return OutOfBoundsError(f'{self.shape()}: geometry out of bounds')
