"""
pixeldraw - a small software rasterizer.

Shapes (Rectangle, Circle, Triangle) paint themselves onto a Screen; the
Display framebuffer implements Screen and serializes to a plain PPM (P3) file.
"""
from .colors import COLOR_TABLE, RGB, Color, rgb_of
from .display import Display
from .errors import InvalidColorError, OutOfBoundsError, PixelDrawError, UnknownColorError
from .geometry import Geometry, Point
from .screen import Screen
from .shapes import Circle, Rectangle, Triangle, draw_all, interpolate

__all__ = [
    "COLOR_TABLE",
    "RGB",
    "Color",
    "rgb_of",
    "Display",
    "Screen",
    "Geometry",
    "Point",
    "Rectangle",
    "Circle",
    "Triangle",
    "draw_all",
    "interpolate",
    "PixelDrawError",
    "OutOfBoundsError",
    "UnknownColorError",
    "InvalidColorError",
]
