"""Square planar patch primitive.

A patch is the part of a plane within a square centered on ``center``.
The square is described in the patch's local frame by two in-plane axes:
``axis`` and ``cross(axis, normal)``. A point of the plane belongs to the
patch when its offset from the center, projected on each in-plane axis,
is at most ``half_extent`` in magnitude.

Ray-patch intersection uses the parametric plane test:
1. Find where the ray crosses the plane containing the patch
2. Check the two in-plane bounds independently

Example:
    >>> from raytracer.core.vector import Vec3
    >>> from raytracer.geometry.patch import Patch
    >>> from raytracer.materials.lambertian import Lambertian
    >>> # Floor tile at y=0 spanning x and z in [-1, 1]
    >>> floor = Patch(
    ...     center=Vec3(0, 0, 0),
    ...     half_extent=1.0,
    ...     normal=Vec3(0, 1, 0),
    ...     axis=Vec3(1, 0, 0),
    ...     material=Lambertian(Vec3(0.5, 0.5, 0.5)),
    ... )
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from raytracer.core.ray import Ray
from raytracer.core.vector import Point3, Vec3, as_vec3
from raytracer.geometry.hittable import HitRecord

if TYPE_CHECKING:
    from raytracer.materials import Material

# Rays with |dot(direction, normal)| below this are treated as parallel
PARALLEL_EPSILON = 1e-16


class DegenerateGeometryError(ValueError):
    """Raised when a primitive's defining vectors do not span a frame."""


def orthonormalize(primary: Vec3, secondary: Vec3) -> tuple[Vec3, Vec3]:
    """Gram-Schmidt a pair of vectors into two orthonormal axes.

    Args:
        primary: The first axis; only normalized.
        secondary: The second axis; its component along ``primary`` is
            removed before normalizing.

    Returns:
        The tuple (a, b) of orthonormal axes with a parallel to primary.

    Raises:
        DegenerateGeometryError: If either vector is zero or the two are
            parallel.
    """
    if primary.cross(secondary).length_squared() <= 0.0:
        raise DegenerateGeometryError(
            f"Axes {primary} and {secondary} are parallel or zero; cannot build a frame"
        )
    a = primary.unit_vector()
    b = (secondary - a * secondary.dot(a)).unit_vector()
    return a, b


@dataclass(frozen=True, slots=True)
class Patch:
    """A square region of a plane.

    Attributes:
        center: The center of the square.
        half_extent: Half the side length of the square.
        normal: The plane normal (normalized at construction).
        axis: The first in-plane axis (orthogonalized against the normal
            and normalized at construction).
        material: The material applied to both faces.
        bitangent: The second in-plane axis, ``cross(axis, normal)``.
    """

    center: Point3
    half_extent: float
    normal: Vec3
    axis: Vec3
    material: Material
    bitangent: Vec3 = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.half_extent <= 0.0:
            raise ValueError(f"Patch half_extent must be positive, got {self.half_extent}")
        object.__setattr__(self, "center", as_vec3(self.center))
        normal, axis = orthonormalize(as_vec3(self.normal), as_vec3(self.axis))
        object.__setattr__(self, "normal", normal)
        object.__setattr__(self, "axis", axis)
        object.__setattr__(self, "bitangent", axis.cross(normal))

    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        """Test for ray-patch intersection.

        The outward normal of a patch is its plane normal; rays arriving
        from the other side see a back face.

        Args:
            ray: The ray to test.
            t_min: Minimum t value to consider a valid hit.
            t_max: Maximum t value to consider a valid hit.

        Returns:
            A HitRecord for the intersection, or None on a miss.
        """
        denom = ray.direction.dot(self.normal)
        if abs(denom) < PARALLEL_EPSILON:
            return None

        oc = ray.origin - self.center
        t = -oc.dot(self.normal) / denom
        if t < t_min or t > t_max:
            return None

        point = ray.at(t)
        offset = point - self.center
        if abs(offset.dot(self.axis)) > self.half_extent:
            return None
        if abs(offset.dot(self.bitangent)) > self.half_extent:
            return None

        return HitRecord.from_outward_normal(ray, t, self.normal, self.material)
