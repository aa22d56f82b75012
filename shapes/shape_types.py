from enum import Enum

class ShapeTypes(Enum):
    RECTANGLE = "Rectangle"
    CIRCLE = "Circle"
