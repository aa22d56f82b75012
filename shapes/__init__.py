from .shape import Shape
from .shape_types import ShapeTypes
from .rectangle import Rectangle
from .circle import Circle

__all__ = ["Shape", "ShapeTypes", "Rectangle", "Circle"]
