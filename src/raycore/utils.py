# raycore/utils.py
import math
from typing import Optional

import numpy as np

from raycore.vector import Vector3

_default_rng = np.random.default_rng()


def _rng(rng: Optional[np.random.Generator]) -> np.random.Generator:
    return rng if rng is not None else _default_rng


def random_vector(rng: Optional[np.random.Generator] = None,
                  low: float = 0.0, high: float = 1.0) -> Vector3:
    """
    Returns a vector with components drawn uniformly from [low, high).
    """
    return Vector3(*_rng(rng).uniform(low, high, size=3))


def random_in_unit_sphere(rng: Optional[np.random.Generator] = None) -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    rng = _rng(rng)
    while True:
        p = random_vector(rng, -1.0, 1.0)
        if p.length_squared() < 1.0:
            return p


def random_unit_vector(rng: Optional[np.random.Generator] = None) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    rng = _rng(rng)
    while True:
        p = random_in_unit_sphere(rng)
        # Rejecting tiny samples keeps the normalization finite.
        if not p.near_zero():
            return p.unit_vector()


def random_in_hemisphere(normal: Vector3, rng: Optional[np.random.Generator] = None) -> Vector3:
    """
    Returns a random point in the unit sphere on the same side as normal.
    """
    in_unit_sphere = random_in_unit_sphere(rng)
    if in_unit_sphere.dot(normal) > 0.0:
        return in_unit_sphere
    return -in_unit_sphere


def random_in_unit_disk(rng: Optional[np.random.Generator] = None) -> Vector3:
    """Random point in the unit disk of the z = 0 plane, for lens sampling."""
    rng = _rng(rng)
    while True:
        u, v = rng.uniform(-1.0, 1.0, size=2)
        p = Vector3(u, v, 0.0)
        if p.length_squared() < 1.0:
            return p


def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - 2 * v.dot(n) * n


def refract(uv: Vector3, n: Vector3, etai_over_etat: float) -> Vector3:
    """
    Refracts the unit vector uv through a surface with unit normal n (Snell's law).
    """
    cos_theta = min((-uv).dot(n), 1.0)
    r_out_perp = etai_over_etat * (uv + cos_theta * n)
    r_out_parallel = -math.sqrt(abs(1.0 - r_out_perp.length_squared())) * n
    return r_out_perp + r_out_parallel
