from .shape import Shape, DEFAULT_COLOR, visible_box, blend_region
import cv2

class Rectangle(Shape):
    def __init__(self, x, y, width, height, color=None):
        super().__init__(x, y, color)
        self.width = width
        self.height = height

    def area(self):
        return float(self.width * self.height)

    def draw(self, canvas, alpha=1.0, default_color=DEFAULT_COLOR):
        width, height = int(round(self.width)), int(round(self.height))
        if width <= 0 or height <= 0:
            return
        # corners are inclusive
        box = visible_box(canvas, int(self.x), int(self.y),
                          int(self.x) + width - 1, int(self.y) + height - 1)
        if box is None:
            return
        left, top, right, bottom = box
        overlay = canvas[top:bottom + 1, left:right + 1].copy()
        cv2.rectangle(overlay, (0, 0), (right - left, bottom - top),
                      self.fill_color(default_color), -1)
        blend_region(canvas, box, overlay, alpha)

    def __repr__(self):
        return f"Rectangle at {self.x}, {self.y} - {self.width}x{self.height}, color: {self.color}"
