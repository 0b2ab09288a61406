"""Sphere primitive with ray-sphere intersection.

The ray-sphere intersection is found by solving:
    |origin + t * direction - center|^2 = radius^2

Expanding and rearranging gives the quadratic equation:
    a*t^2 + 2*half_b*t + c = 0

where:
    a = dot(direction, direction)
    half_b = dot(oc, direction)
    c = dot(oc, oc) - radius^2
    oc = origin - center

Example:
    >>> from raytracer.core.ray import Ray
    >>> from raytracer.core.vector import Vec3
    >>> from raytracer.geometry.sphere import Sphere
    >>> from raytracer.materials.lambertian import Lambertian
    >>> sphere = Sphere(Vec3(0, 0, -1), 0.5, Lambertian(Vec3(0.5, 0.5, 0.5)))
    >>> sphere.hit(Ray(Vec3(0, 0, 0), Vec3(0, 0, -1)), 0.001, float("inf")).t
    0.5
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from raytracer.core.ray import Ray
from raytracer.core.vector import Point3, as_vec3
from raytracer.geometry.hittable import HitRecord

if TYPE_CHECKING:
    from raytracer.materials import Material


@dataclass(frozen=True, slots=True)
class Sphere:
    """A sphere defined by center point and radius.

    A negative radius keeps the same surface but flips the outward normal
    inward, which is how hollow glass shells are modelled.

    Attributes:
        center: The center point of the sphere.
        radius: The radius of the sphere (nonzero).
        material: The material applied to the surface.
    """

    center: Point3
    radius: float
    material: Material

    def __post_init__(self) -> None:
        object.__setattr__(self, "center", as_vec3(self.center))
        if self.radius == 0.0:
            raise ValueError("Sphere radius must be nonzero")

    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        """Test for ray-sphere intersection.

        Takes the nearer root if it lies within [t_min, t_max], otherwise
        the farther one.

        Args:
            ray: The ray to test.
            t_min: Minimum t value to consider a valid hit.
            t_max: Maximum t value to consider a valid hit.

        Returns:
            A HitRecord for the intersection, or None on a miss.
        """
        oc = ray.origin - self.center
        a = ray.direction.length_squared()
        half_b = oc.dot(ray.direction)
        c = oc.length_squared() - self.radius * self.radius

        discriminant = half_b * half_b - a * c
        if discriminant < 0.0:
            return None
        sqrt_d = math.sqrt(discriminant)

        # Find the nearest root that lies in the acceptable range
        root = (-half_b - sqrt_d) / a
        if root < t_min or root > t_max:
            root = (-half_b + sqrt_d) / a
            if root < t_min or root > t_max:
                return None

        outward_normal = (ray.at(root) - self.center) / self.radius
        return HitRecord.from_outward_normal(ray, root, outward_normal, self.material)
