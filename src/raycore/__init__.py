import logging

from raycore.errors import IndexOutOfRange
from raycore.ray import Ray
from raycore.vector import Color, Point3, Vector3

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Color",
    "IndexOutOfRange",
    "Point3",
    "Ray",
    "Vector3",
]
