# raycore/ray.py
from typing import Optional

from raycore.vector import Point3, Vector3


class Ray:
    """
    Represents a ray P(t) = origin + t * direction in 3D space.

    Origin and direction are copied in and handed out as copies, so a ray
    never changes after construction. The direction is neither normalized
    nor validated.
    """
    __slots__ = ("_origin", "_direction")

    def __init__(self, origin: Optional[Point3] = None, direction: Optional[Vector3] = None):
        self._origin = origin.copy() if origin is not None else Point3()
        self._direction = direction.copy() if direction is not None else Vector3()

    @property
    def origin(self) -> Point3:
        return self._origin.copy()

    @property
    def direction(self) -> Vector3:
        return self._direction.copy()

    def at(self, t: float) -> Point3:
        """
        Evaluates origin + t * direction as a new point. Negative t lands behind
        the origin; inf/nan in t or direction carry through to the result.
        """
        return self._origin + t * self._direction

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ray):
            return NotImplemented
        return self._origin == other._origin and self._direction == other._direction

    __hash__ = None

    def __repr__(self) -> str:
        return f"Ray(origin={self._origin!r}, direction={self._direction!r})"
