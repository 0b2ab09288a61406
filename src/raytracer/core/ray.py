"""Ray data structure.

A ray is the half-line ``P(t) = origin + t * direction``. Rays are created
fresh for every camera sample and every scatter event and are never
mutated. The direction is kept exactly as supplied (not normalized), so
``t`` is measured in units of the direction's length.

Example:
    >>> from raytracer.core.ray import Ray
    >>> from raytracer.core.vector import Vec3
    >>> ray = Ray(Vec3(0.0, 0.0, 0.0), Vec3(0.0, 0.0, -1.0))
    >>> ray.at(2.0)
    Vec3(x=0.0, y=0.0, z=-2.0)
"""

from dataclasses import dataclass

from raytracer.core.vector import Point3, Vec3


@dataclass(frozen=True, slots=True)
class Ray:
    """A ray with an origin and a direction.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction vector (need not be unit length).
    """

    origin: Point3
    direction: Vec3

    def at(self, t: float) -> Point3:
        """Evaluate the point at parameter t along the ray."""
        return self.origin + t * self.direction
