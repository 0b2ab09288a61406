"""Oriented box primitive built from six square patches.

The box frame is derived from two caller-supplied axis vectors with
Gram-Schmidt: the first axis is normalized, the second is made orthogonal
to it, and the third is their cross product. Each face is a Patch offset
by ``half_extent`` along one axis.

Before testing the faces, a bounding test rejects rays whose origin is
farther from the center than ``|direction| * t_max + 2 * half_extent``.
Every point of the box lies within ``sqrt(3) * half_extent`` of the
center, so a ray that can reach the box within t_max always passes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from raytracer.core.ray import Ray
from raytracer.core.vector import Point3, Vec3, as_vec3
from raytracer.geometry.hittable import HitRecord
from raytracer.geometry.patch import Patch, orthonormalize

if TYPE_CHECKING:
    from raytracer.materials import Material


@dataclass(frozen=True, slots=True)
class Box:
    """A cube with arbitrary orientation.

    Attributes:
        center: The center of the cube.
        half_extent: Half the edge length.
        axis0: First frame axis (normalized at construction).
        axis1: Second frame axis (orthogonalized against axis0 and
            normalized at construction).
        material: The material applied to every face.
        axis2: Third frame axis, ``cross(axis0, axis1)``.
        faces: The six face patches.
    """

    center: Point3
    half_extent: float
    axis0: Vec3
    axis1: Vec3
    material: Material
    axis2: Vec3 = field(init=False, repr=False, compare=False)
    faces: tuple[Patch, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.half_extent <= 0.0:
            raise ValueError(f"Box half_extent must be positive, got {self.half_extent}")
        object.__setattr__(self, "center", as_vec3(self.center))
        a, b = orthonormalize(as_vec3(self.axis0), as_vec3(self.axis1))
        c = a.cross(b)
        object.__setattr__(self, "axis0", a)
        object.__setattr__(self, "axis1", b)
        object.__setattr__(self, "axis2", c)

        h = self.half_extent
        faces = []
        # Each face: (normal, in-plane axis)
        for normal, axis in ((a, b), (b, c), (c, a)):
            for sign in (1.0, -1.0):
                faces.append(
                    Patch(
                        center=self.center + (sign * h) * normal,
                        half_extent=h,
                        normal=sign * normal,
                        axis=axis,
                        material=self.material,
                    )
                )
        object.__setattr__(self, "faces", tuple(faces))

    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        """Test for ray-box intersection.

        Args:
            ray: The ray to test.
            t_min: Minimum t value to consider a valid hit.
            t_max: Maximum t value to consider a valid hit.

        Returns:
            A HitRecord for the nearest face hit, or None on a miss.
        """
        reach = ray.direction.length() * t_max + 2.0 * self.half_extent
        if (ray.origin - self.center).length() > reach:
            return None

        closest_t = t_max
        result = None
        for face in self.faces:
            rec = face.hit(ray, t_min, closest_t)
            if rec is not None:
                closest_t = rec.t
                result = rec
        return result
