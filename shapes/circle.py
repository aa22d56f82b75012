from math import pi

from .shape import Shape, DEFAULT_COLOR, visible_box, blend_region
import cv2
import numpy as np

# cv2 drawing calls take 32-bit ints
CV_INT_MAX = 2 ** 31 - 1

class Circle(Shape):
    def __init__(self, x, y, radius, color=None):
        super().__init__(x, y, color)
        self.radius = radius

    def center(self):
        # anchor is the top left corner of the bounding square
        return self.x + self.radius, self.y + self.radius

    def area(self):
        return pi * self.radius ** 2

    def draw(self, canvas, alpha=1.0, default_color=DEFAULT_COLOR):
        if self.radius <= 0:
            return
        radius = int(round(self.radius))
        if radius <= 0:
            return
        cx, cy = (int(round(c)) for c in self.center())
        box = visible_box(canvas, cx - radius, cy - radius, cx + radius, cy + radius)
        if box is None:
            return

        left, top, right, bottom = box
        overlay = canvas[top:bottom + 1, left:right + 1].copy()
        color = self.fill_color(default_color)
        # center in the coordinates of the clipped region
        local_x, local_y = cx - left, cy - top
        if max(abs(local_x), abs(local_y), radius) <= CV_INT_MAX:
            cv2.circle(overlay, (local_x, local_y), radius, color, -1)
        else:
            ys, xs = np.mgrid[0:bottom - top + 1, 0:right - left + 1].astype(np.float64)
            inside = (xs - float(local_x)) ** 2 + (ys - float(local_y)) ** 2 <= float(radius) ** 2
            overlay[inside] = color
        blend_region(canvas, box, overlay, alpha)

    def __repr__(self):
        return f"Circle at {self.x}, {self.y} - radius {self.radius}, color: {self.color}"
