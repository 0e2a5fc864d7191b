# raycore/vector.py
import logging
import math
import numbers
import operator
from typing import Iterable, Iterator

import numpy as np

from raycore.errors import IndexOutOfRange

logger = logging.getLogger(__name__)

NEAR_ZERO_EPS = 1e-8


# IEEE-754 semantics: x/0 -> inf, 0/0 -> nan, without warnings.
def _ieee():
    return np.errstate(divide="ignore", invalid="ignore", over="ignore")


class Vector3:
    """
    Three float64 components (x, y, z), also used as a point or an RGB color.

    Binary operators return new vectors; ``+=``, ``*=`` and ``/=`` update the
    receiver in place and return it. Components live in a contiguous float64 array, so division by zero and
    normalization of the zero vector yield inf/nan instead of raising.
    """
    __slots__ = ("e",)

    # Keep numpy from treating a vector as an array operand; ``np.float64(2) * v``
    # falls through to ``Vector3.__rmul__``.
    __array_ufunc__ = None

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self.e = np.array((x, y, z), dtype=np.float64)

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> "Vector3":
        values = tuple(values)
        if len(values) != 3:
            raise ValueError(f"Vector3 needs exactly 3 components, got {len(values)}")
        return cls(*values)

    @classmethod
    def _wrap(cls, e: np.ndarray) -> "Vector3":
        v = cls.__new__(cls)
        v.e = e
        return v

    # Components

    @property
    def x(self) -> float:
        return float(self.e[0])

    @x.setter
    def x(self, value: float):
        self.e[0] = value

    @property
    def y(self) -> float:
        return float(self.e[1])

    @y.setter
    def y(self, value: float):
        self.e[1] = value

    @property
    def z(self) -> float:
        return float(self.e[2])

    @z.setter
    def z(self, value: float):
        self.e[2] = value

    @staticmethod
    def _check_index(i) -> int:
        i = operator.index(i)
        if i < 0 or i > 2:
            raise IndexOutOfRange(i)
        return i

    def __getitem__(self, i) -> float:
        return float(self.e[self._check_index(i)])

    def __setitem__(self, i, value: float):
        self.e[self._check_index(i)] = value

    def __len__(self) -> int:
        return 3

    def __iter__(self) -> Iterator[float]:
        return iter(self.e.tolist())

    # Arithmetic

    def __neg__(self) -> "Vector3":
        return self._wrap(-self.e)

    def __add__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        with _ieee():
            return self._wrap(self.e + other.e)

    def __sub__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        with _ieee():
            return self._wrap(self.e - other.e)

    def __mul__(self, other):
        # Scalar multiplication.
        if isinstance(other, numbers.Real):
            with _ieee():
                return self._wrap(self.e * np.float64(other))
        # Element-wise (Hadamard) multiplication.
        if isinstance(other, Vector3):
            with _ieee():
                return self._wrap(self.e * other.e)
        return NotImplemented

    def __rmul__(self, other: float) -> "Vector3":
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return self.__mul__(other)

    def __truediv__(self, t: float) -> "Vector3":
        if not isinstance(t, numbers.Real):
            return NotImplemented
        with _ieee():
            return self._wrap(self.e / np.float64(t))

    def __iadd__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        with _ieee():
            self.e += other.e
        return self

    def __imul__(self, t: float) -> "Vector3":
        if not isinstance(t, numbers.Real):
            return NotImplemented
        with _ieee():
            self.e *= np.float64(t)
        return self

    def __itruediv__(self, t: float) -> "Vector3":
        if not isinstance(t, numbers.Real):
            return NotImplemented
        with _ieee():
            reciprocal = np.float64(1.0) / np.float64(t)
        return self.__imul__(reciprocal)

    # Geometry

    def dot(self, other: "Vector3") -> float:
        x, y, z = self.e
        ox, oy, oz = other.e
        with _ieee():
            return float(x * ox + y * oy + z * oz)

    def cross(self, other: "Vector3") -> "Vector3":
        x, y, z = self.e
        ox, oy, oz = other.e
        with _ieee():
            return Vector3(
                y * oz - z * oy,
                z * ox - x * oz,
                x * oy - y * ox
            )

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def unit_vector(self) -> "Vector3":
        """
        Returns this vector scaled to length 1. The zero vector is not guarded:
        its unit vector has nan components.
        """
        length = self.length()
        if length == 0:
            logger.debug("unit_vector() of a zero-length vector, result is non-finite")
        return self / length

    def near_zero(self, eps: float = NEAR_ZERO_EPS) -> bool:
        """
        True if every component is within eps of zero.
        """
        return bool(np.all(np.abs(self.e) < eps))

    # Comparison and conversion

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return bool(np.array_equal(self.e, other.e))

    # Mutable value type.
    __hash__ = None

    def isclose(self, other: "Vector3", rel_tol: float = 1e-9, abs_tol: float = 0.0) -> bool:
        return all(math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
                   for a, b in zip(self, other))

    def copy(self) -> "Vector3":
        return self._wrap(self.e.copy())

    def to_array(self) -> np.ndarray:
        return self.e.copy()

    def __str__(self) -> str:
        return f"[{self.x:g}, {self.y:g}, {self.z:g}]"

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"


# Aliases
Point3 = Vector3  # a position in space
Color = Vector3   # RGB intensity
