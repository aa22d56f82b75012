import logging

import numpy as np

from config import CanvasConfig
from shapes.shape_types import ShapeTypes
from shapes.rectangle import Rectangle
from shapes.circle import Circle

logger = logging.getLogger("Shapes.Canvas")


class Canvas:
    """Pixel buffer plus the shapes painted on it, in insertion order."""

    def __init__(self, config=None):
        self.config = config or CanvasConfig()
        self.width = self.config.width
        self.height = self.config.height
        self.shapes = []
        self.image = np.zeros((self.height, self.width, 3), dtype=np.uint8)
        self.clear()

    def clear(self):
        self.image[:] = self.config.background

    def create_shape(self, shape_type, coords, *dims, color=None):
        """
        Build a shape of the given type anchored at coords and add it to the canvas.
        dims is (width, height) for a rectangle and (radius,) for a circle.
        """
        x, y = coords
        if shape_type == ShapeTypes.RECTANGLE:
            shape = Rectangle(x, y, *dims, color=color)
        elif shape_type == ShapeTypes.CIRCLE:
            shape = Circle(x, y, *dims, color=color)
        else:
            raise ValueError(f"Unknown shape type: {shape_type}")
        return self.add(shape)

    def add(self, shape):
        self.shapes.append(shape)
        logger.debug(f"Added {shape.describe()}")
        return shape

    def total_area(self):
        return sum(shape.area() for shape in self.shapes)

    def describe(self):
        return [shape.describe() for shape in self.shapes]

    def render(self):
        self.clear()
        for shape in self.shapes:
            shape.draw(self.image, self.config.alpha, self.config.default_color)
        logger.debug(f"Rendered {len(self.shapes)} shapes")
        return self.image
