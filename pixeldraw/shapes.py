from dataclasses import dataclass

from .colors import Color
from .errors import OutOfBoundsError, UnknownColorError
from .geometry import Geometry, Point


def interpolate(y0, x0, y1, x1):
    """
    Returns the x of the edge (x0, y0)-(x1, y1) at every row from y0 to y1,
    truncated toward zero. A single-row edge yields just [x0].
    """
    if y0 == y1:
        return [x0]
    slope = (x1 - x0) / (y1 - y0)
    return [int(x0 + k * slope) for k in range(y1 - y0 + 1)]


@dataclass(frozen=True)
class Rectangle(Geometry):
    ll: Point  # lower left
    ur: Point  # upper right
    color: Color

    def draw(self, screen):
        self._check_extent(screen, self.ll, self.ur)

        for y in range(self.ll.y, self.ur.y + 1):
            for x in range(self.ll.x, self.ur.x + 1):
                screen.draw_pixel(x, y, self.color)

    def shape(self):
        return 'Rectangle'


@dataclass(frozen=True)
class Circle(Geometry):
    center: Point
    radius: int
    color: Color

    def __post_init__(self):
        if self.radius < 0:
            raise ValueError(f'radius must be non-negative, got {self.radius}')

    def draw(self, screen):
        cx, cy, r = self.center.x, self.center.y, self.radius
        self._check_extent(screen, Point(cx - r, cy - r), Point(cx + r, cy + r))

        for dy in range(-r, r + 1):
            for dx in range(-r, r + 1):
                if dx * dx + dy * dy <= r * r:
                    screen.draw_pixel(cx + dx, cy + dy, self.color)

    def shape(self):
        return 'Circle'


@dataclass(frozen=True)
class Triangle(Geometry):
    pt0: Point
    pt1: Point
    pt2: Point
    color: Color

    def draw(self, screen):
        x0, y0 = self.pt0
        x1, y1 = self.pt1
        x2, y2 = self.pt2

        # Sort vertices so that y0 <= y1 <= y2
        if y1 < y0:
            x0, x1 = x1, x0
            y0, y1 = y1, y0
        if y2 < y0:
            x0, x2 = x2, x0
            y0, y2 = y2, y0
        if y2 < y1:
            x1, x2 = x2, x1
            y1, y2 = y2, y1

        # Every filled x lies between the smallest and largest vertex x
        self._check_extent(screen, Point(min(x0, x1, x2), y0), Point(max(x0, x1, x2), y2))

        x01 = interpolate(y0, x0, y1, x1)
        x12 = interpolate(y1, x1, y2, x2)
        x02 = interpolate(y0, x0, y2, x2)
        # Row y1 takes its x from the 1-2 edge so a flat top spans x0..x1
        x012 = x01[:-1] + x12

        for row, y in enumerate(range(y0, y2 + 1)):
            left = min(x02[row], x012[row])
            right = max(x02[row], x012[row])
            for x in range(left, right + 1):
                screen.draw_pixel(x, y, self.color)

    def shape(self):
        return 'Triangle'


def draw_all(shapes, screen):
    """
    Draws each of SHAPES onto SCREEN in order. A shape that is out of bounds
    or has an unknown color is skipped; returns the (shape, error) pairs of
    the skipped shapes.
    """
    failures = []
    for shape in shapes:
        try:
            shape.draw(screen)
        except (OutOfBoundsError, UnknownColorError) as e:
            failures.append((shape, e))
    return failures
