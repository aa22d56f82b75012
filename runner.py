import logging

import cv2
from matplotlib import pyplot as plt

from canvas import Canvas
from shapes.shape_types import ShapeTypes

logger = logging.getLogger("Shapes.Runner")


class Runner:
    def __init__(self, config=None):
        self.canvas = Canvas(config)
        self.fig, self.axes = plt.subplots(1, 1, figsize=(6, 5))
        self.axes.set_axis_off()
        plt.tight_layout()

    def populate(self):
        """Lay out one of each shape type"""
        width, height = self.canvas.width, self.canvas.height
        self.canvas.create_shape(ShapeTypes.RECTANGLE, (width // 10, height // 10),
                                 width // 3, height // 3, color=(255, 100, 0))
        self.canvas.create_shape(ShapeTypes.CIRCLE, (width // 2, height // 2),
                                 min(width, height) // 5, color=(0, 100, 255))

    def report(self):
        for shape in self.canvas.shapes:
            logger.info(f"{shape.describe()} - area {shape.area():.2f}")
        total = self.canvas.total_area()
        logger.info(f"Total area: {total:.2f}")
        return total

    def render(self, show=True):
        image_rgb = cv2.cvtColor(self.canvas.render(), cv2.COLOR_BGR2RGB)
        self.axes.imshow(image_rgb)
        if show:
            self.fig.show()
        return image_rgb
