"""Hit records shared by all primitives.

Every primitive answers a single query, ``hit(ray, t_min, t_max)``, which
returns a HitRecord for the nearest intersection in the parametric range
or None on a miss.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from raytracer.core.ray import Ray
from raytracer.core.vector import Point3, Vec3

if TYPE_CHECKING:
    from raytracer.materials import Material


@dataclass(frozen=True, slots=True)
class HitRecord:
    """Record of a ray-primitive intersection.

    Attributes:
        point: The 3D point where the ray hit the surface.
        normal: The surface normal at the hit point (unit length, always
            facing against the incoming ray).
        material: The material of the primitive that was hit.
        t: The ray parameter of the intersection.
        front_face: True if the ray hit the outward-facing side.
    """

    point: Point3
    normal: Vec3
    material: Material
    t: float
    front_face: bool

    @classmethod
    def from_outward_normal(
        cls,
        ray: Ray,
        t: float,
        outward_normal: Vec3,
        material: Material,
    ) -> HitRecord:
        """Build a record, orienting the normal against the incoming ray.

        Args:
            ray: The incoming ray.
            t: The ray parameter of the intersection.
            outward_normal: The geometric normal pointing out of the
                primitive (unit length).
            material: The material of the primitive.

        Returns:
            A HitRecord whose normal faces the ray origin's side.
        """
        front_face = ray.direction.dot(outward_normal) < 0.0
        normal = outward_normal if front_face else -outward_normal
        return cls(
            point=ray.at(t),
            normal=normal,
            material=material,
            t=t,
            front_face=front_face,
        )
