"""Metal (specular reflective) material implementation.

Perfect metals (fuzz=0) produce mirror reflections. Rough metals perturb
the mirrored direction by a random point in a sphere of radius ``fuzz``.

The reflection formula is:
    R = I - 2(I . N)N

where I is the unit incident direction and N is the surface normal.

A fuzzed direction that points back into the surface is absorbed: scatter
returns None and the path contributes black.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from raytracer.core.ray import Ray
from raytracer.core.vector import Color, as_vec3, random_in_unit_sphere, reflect
from raytracer.materials.material import ScatterResult, validate_albedo

if TYPE_CHECKING:
    from raytracer.geometry.hittable import HitRecord


@dataclass(frozen=True, slots=True)
class Metal:
    """Metal (specular reflective) material properties.

    Attributes:
        albedo: The reflective color (RGB, each component in [0, 1]).
        fuzz: The surface roughness in [0, 1]. 0 = perfect mirror.
    """

    albedo: Color
    fuzz: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "albedo", as_vec3(self.albedo))
        validate_albedo(self.albedo)
        if self.fuzz < 0.0 or self.fuzz > 1.0:
            raise ValueError(
                f"Fuzz = {self.fuzz} is outside [0, 1]. "
                "Fuzz must be between 0 (perfect mirror) and 1 (maximum fuzz)."
            )

    def scatter(
        self, ray_in: Ray, rec: HitRecord, rng: np.random.Generator
    ) -> ScatterResult | None:
        """Reflect the incoming ray about the normal, perturbed by fuzz.

        Args:
            ray_in: The incoming ray.
            rec: The hit record at the surface.
            rng: The random source of the current scanline.

        Returns:
            The albedo and the reflected ray, or None if the perturbed
            direction points into the surface.
        """
        reflected = reflect(ray_in.direction.unit_vector(), rec.normal)
        direction = reflected
        if self.fuzz > 0.0:
            direction = reflected + self.fuzz * random_in_unit_sphere(rng)

        if direction.dot(rec.normal) <= 0.0:
            return None
        return ScatterResult(self.albedo, Ray(rec.point, direction))
