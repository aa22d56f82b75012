from abc import ABC, abstractmethod

import cv2

DEFAULT_COLOR = (0, 0, 0)

class Shape(ABC):
    """A positioned figure. (x, y) is the top left corner of the shape."""

    def __init__(self, x, y, color=None):
        self.x = x
        self.y = y
        self.color = color

    @abstractmethod
    def area(self):
        pass

    @abstractmethod
    def draw(self, canvas, alpha=1.0, default_color=DEFAULT_COLOR):
        """
        Paint this shape onto canvas, a (height, width, 3) uint8 image, in place.
        default_color is used when the shape has no color of its own.
        """
        pass

    def fill_color(self, default=DEFAULT_COLOR):
        color = default if self.color is None else self.color
        return tuple(int(c) for c in color)

    def move_to(self, x, y):
        self.x = x
        self.y = y

    def get_x(self):
        return self.x

    def set_x(self, x):
        self.x = x

    def get_y(self):
        return self.y

    def set_y(self, y):
        self.y = y

    def describe(self):
        return f"{type(self).__name__}(x={self.x},y={self.y})"

    def __str__(self):
        return self.describe()


def visible_box(canvas, left, top, right, bottom):
    """
    Clip the inclusive box (left, top)-(right, bottom) to the canvas.
    :return: (left, top, right, bottom) inside the canvas, or None if nothing is visible
    """
    height, width = canvas.shape[:2]
    if right < 0 or bottom < 0 or left >= width or top >= height or left > right or top > bottom:
        return None
    return max(left, 0), max(top, 0), min(right, width - 1), min(bottom, height - 1)


def blend_region(canvas, box, overlay, alpha):
    """Mix overlay into the canvas region covered by box"""
    left, top, right, bottom = box
    region = canvas[top:bottom + 1, left:right + 1]
    region[:] = cv2.addWeighted(overlay, alpha, region, 1 - alpha, 0)
