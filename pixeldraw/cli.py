"""Draws a demo scene and writes it as a PPM screenshot.

Usage examples:
  python3 -m pixeldraw
  python3 -m pixeldraw --width 400 --height 400 --out builds/scene --no-transpose
"""
import argparse
import sys

from .colors import Color
from .config import config
from .display import Display
from .geometry import Point
from .shapes import Circle, Rectangle, Triangle, draw_all


def demo_scene(width, height):
    """
    Shapes laid out relative to a WIDTH x HEIGHT display. The last one never
    fits and is always skipped.
    """
    w, h = width, height
    return [
        Rectangle(Point(w // 10, h // 10), Point(w * 3 // 10, h * 2 // 5), Color.ORANGE),
        Rectangle(Point(w // 2, h // 20), Point(w * 9 // 10, h // 5), Color.BROWN),
        Circle(Point(w // 2, h // 2), min(w, h) // 6, Color.BLUE),
        Circle(Point(w * 4 // 5, h * 4 // 5), min(w, h) // 10, Color.PURPLE),
        Triangle(Point(w // 20, h * 9 // 10), Point(w // 4, h // 2), Point(w * 2 // 5, h * 19 // 20),
                 Color.GREEN),
        Triangle(Point(w * 3 // 5, h * 3 // 5), Point(w * 19 // 20, h * 11 // 20), Point(w * 7 // 10, h // 4),
                 Color.YELLOW),
        Circle(Point(w // 2, h // 2), max(w, h), Color.RED),
    ]


def main(argv=None):
    parser = argparse.ArgumentParser(description='Draw a demo scene to a PPM file')
    parser.add_argument('--width', type=int, default=None, help='Display width (PIXELDRAW_WIDTH)')
    parser.add_argument('--height', type=int, default=None, help='Display height (PIXELDRAW_HEIGHT)')
    parser.add_argument('--out', default=None, help='Output name without extension (PIXELDRAW_OUTPUT)')
    parser.add_argument('--no-transpose', action='store_true',
                        help='Write pixels at row y, column x instead of row x, column y')
    args = parser.parse_args(argv)

    overridden = set()
    if args.width is not None:
        overridden.add('WIDTH')
    if args.height is not None:
        overridden.add('HEIGHT')
    if args.out:
        overridden.add('OUTPUT')
    if args.no_transpose:
        overridden.add('TRANSPOSE')
    issues = config.validate(skip=overridden)
    if issues:
        for issue in issues:
            print(f'Config error: {issue}', file=sys.stderr)
        return 2

    width = config.WIDTH if args.width is None else args.width
    height = config.HEIGHT if args.height is None else args.height
    name = args.out or config.OUTPUT
    transpose = False if args.no_transpose else config.TRANSPOSE
    if width <= 0 or height <= 0:
        parser.error(f'display size must be positive, got {width}x{height}')

    display = Display(width, height, transpose_writes=transpose)
    shapes = demo_scene(width, height)
    failures = draw_all(shapes, display)
    for shape, error in failures:
        print(f'Skipped {shape.shape()}: {error}')
    print(f'Drew {len(shapes) - len(failures)} of {len(shapes)} shapes')

    try:
        path = display.screen_shot(name)
    except OSError as e:
        print(f'Error writing screenshot: {e}', file=sys.stderr)
        return 1
    print(f'Saved {path}')
    return 0
