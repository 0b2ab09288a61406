"""3D vector algebra and Monte Carlo sampling utilities.

This module provides the Vec3 value type used for points, directions and
colors throughout the renderer, together with the geometric helpers
(reflection, refraction, Schlick reflectance) and the random sampling
routines needed by the materials and the camera.

Randomness is never global: every sampling function takes an explicit
``numpy.random.Generator``. The render driver creates one generator per
scanline, which makes renders reproducible for a given seed.

Example:
    >>> import numpy as np
    >>> from raytracer.core.vector import Vec3, random_unit_vector, unit_vector
    >>> rng = np.random.default_rng(7)
    >>> d = unit_vector(Vec3(1.0, 2.0, 2.0))
    >>> d
    Vec3(x=0.3333333333333333, y=0.6666666666666666, z=0.6666666666666666)
    >>> abs(random_unit_vector(rng).length() - 1.0) < 1e-12
    True
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass

import numpy as np

# Components below this magnitude count as zero for near_zero()
NEAR_ZERO_EPSILON = 1e-8

# Upper bound on rejection-sampling draws before giving up
MAX_REJECTION_ATTEMPTS = 1000


class SamplingError(RuntimeError):
    """Raised when a rejection sampler exceeds MAX_REJECTION_ATTEMPTS."""


@dataclass(frozen=True, slots=True)
class Vec3:
    """An immutable 3D vector.

    Used for points (Point3), directions and linear RGB colors (Color).

    Attributes:
        x: First component (red for colors).
        y: Second component (green for colors).
        z: Third component (blue for colors).
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def zero(cls) -> Vec3:
        return cls(0.0, 0.0, 0.0)

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, other: Vec3 | float) -> Vec3:
        # Component-wise product for vectors, scaling for numbers
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        return Vec3(self.x * other, self.y * other, self.z * other)

    def __rmul__(self, other: float) -> Vec3:
        return Vec3(self.x * other, self.y * other, self.z * other)

    def __truediv__(self, t: float) -> Vec3:
        return Vec3(self.x / t, self.y / t, self.z / t)

    def __getitem__(self, index: int) -> float:
        if index == 0:
            return self.x
        if index == 1:
            return self.y
        if index == 2:
            return self.z
        raise IndexError(f"Vec3 index {index} out of range (expected 0, 1 or 2)")

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def unit_vector(self) -> Vec3:
        """Return this vector scaled to unit length.

        The vector must be nonzero; a zero vector raises ZeroDivisionError.
        """
        return self / self.length()

    def near_zero(self) -> bool:
        """Return True if every component is within NEAR_ZERO_EPSILON of zero."""
        s = NEAR_ZERO_EPSILON
        return abs(self.x) < s and abs(self.y) < s and abs(self.z) < s

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


# Semantic aliases sharing the Vec3 representation
Point3 = Vec3
Color = Vec3


def as_vec3(value: Vec3 | tuple[float, float, float]) -> Vec3:
    """Coerce a Vec3 or an (x, y, z) sequence into a Vec3."""
    if isinstance(value, Vec3):
        return value
    x, y, z = value
    return Vec3(float(x), float(y), float(z))


# =============================================================================
# Vector Utility Functions
# =============================================================================


def dot(a: Vec3, b: Vec3) -> float:
    return a.dot(b)


def cross(a: Vec3, b: Vec3) -> Vec3:
    return a.cross(b)


def length(v: Vec3) -> float:
    return v.length()


def length_squared(v: Vec3) -> float:
    return v.length_squared()


def unit_vector(v: Vec3) -> Vec3:
    return v.unit_vector()


def near_zero(v: Vec3) -> bool:
    return v.near_zero()


def reflect(v: Vec3, n: Vec3) -> Vec3:
    """Reflect v about the unit normal n.

    Args:
        v: The incoming direction (pointing toward the surface).
        n: The surface normal (should be normalized).

    Returns:
        The mirrored direction ``v - 2 * dot(v, n) * n``.
    """
    return v - 2.0 * v.dot(n) * n


def refract(uv: Vec3, n: Vec3, etai_over_etat: float) -> Vec3:
    """Refract a unit direction through a surface using Snell's law.

    The result is split into the components perpendicular and parallel to
    the normal. The parallel part takes the square root of an absolute
    value so the output stays finite even past the critical angle; callers
    check for total internal reflection before refracting.

    Args:
        uv: The incoming direction (should be normalized).
        n: The surface normal facing the incoming ray (normalized).
        etai_over_etat: Ratio of refractive indices (incident / transmitted).

    Returns:
        The refracted direction.
    """
    cos_theta = min((-uv).dot(n), 1.0)
    r_out_perp = etai_over_etat * (uv + cos_theta * n)
    r_out_parallel = -math.sqrt(abs(1.0 - r_out_perp.length_squared())) * n
    return r_out_perp + r_out_parallel


def schlick_reflectance(cosine: float, ref_idx: float) -> float:
    """Approximate Fresnel reflectance with Schlick's polynomial.

    Args:
        cosine: Cosine of the angle between the incoming ray and the normal.
        ref_idx: Ratio of refractive indices.

    Returns:
        The reflectance probability in [0, 1].
    """
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * (1.0 - cosine) ** 5


# =============================================================================
# Random Sampling Utilities for Monte Carlo
# =============================================================================


def random_double(rng: np.random.Generator, lo: float = 0.0, hi: float = 1.0) -> float:
    """Draw a uniform float in [lo, hi)."""
    return lo + (hi - lo) * float(rng.random())


def random_vec3(rng: np.random.Generator, lo: float = 0.0, hi: float = 1.0) -> Vec3:
    """Draw a vector with each component uniform in [lo, hi)."""
    x, y, z = rng.uniform(lo, hi, 3)
    return Vec3(float(x), float(y), float(z))


def random_in_unit_sphere(rng: np.random.Generator) -> Vec3:
    """Generate a random point strictly inside the unit sphere.

    Uses rejection sampling from the enclosing cube.

    Raises:
        SamplingError: If no point is accepted within MAX_REJECTION_ATTEMPTS.
    """
    for _ in range(MAX_REJECTION_ATTEMPTS):
        p = random_vec3(rng, -1.0, 1.0)
        if p.length_squared() < 1.0:
            return p
    raise SamplingError(
        f"random_in_unit_sphere rejected {MAX_REJECTION_ATTEMPTS} samples in a row"
    )


def random_unit_vector(rng: np.random.Generator) -> Vec3:
    """Generate a random unit vector by normalizing a point in the unit sphere."""
    return random_in_unit_sphere(rng).unit_vector()


def random_in_unit_disk(rng: np.random.Generator) -> Vec3:
    """Generate a random point (x, y, 0) strictly inside the unit disk.

    Used by the thin-lens camera for defocus blur.

    Raises:
        SamplingError: If no point is accepted within MAX_REJECTION_ATTEMPTS.
    """
    for _ in range(MAX_REJECTION_ATTEMPTS):
        x, y = rng.uniform(-1.0, 1.0, 2)
        p = Vec3(float(x), float(y), 0.0)
        if p.length_squared() < 1.0:
            return p
    raise SamplingError(
        f"random_in_unit_disk rejected {MAX_REJECTION_ATTEMPTS} samples in a row"
    )
