from abc import ABC, abstractmethod


class Screen(ABC):
    """
    A pixel store that shapes draw through.
    """

    @abstractmethod
    def initialize(self, width, height):
        """Replace the pixel store with a WIDTH x HEIGHT grid of white."""

    @abstractmethod
    def draw_pixel(self, x, y, color):
        pass

    @abstractmethod
    def get_pixel(self, x, y):
        pass

    @abstractmethod
    def clear_screen(self):
        pass

    @abstractmethod
    def screen_shot(self, name):
        """Serialize the grid to NAME plus the store's file extension."""

    @abstractmethod
    def get_max_xy(self):
        """Return (max_x, max_y), the grid's width and height."""

    @abstractmethod
    def contains(self, x, y):
        """Return whether draw_pixel(x, y, ...) addresses a cell of the grid."""
