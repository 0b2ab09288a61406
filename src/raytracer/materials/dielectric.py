"""Dielectric (glass/water) material implementation.

Key physics:
    - Snell's law for refraction: n1 * sin(theta1) = n2 * sin(theta2)
    - Schlick's approximation for Fresnel reflectance
    - Total internal reflection when ratio * sin(theta) > 1

The material randomly chooses between reflection and refraction based on
the Schlick reflectance, which grows toward grazing angles. Clear
dielectrics absorb nothing, so the attenuation is always white.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from raytracer.core.ray import Ray
from raytracer.core.vector import (
    Color,
    random_double,
    reflect,
    refract,
    schlick_reflectance,
)
from raytracer.materials.material import ScatterResult

if TYPE_CHECKING:
    from raytracer.geometry.hittable import HitRecord

WHITE = Color(1.0, 1.0, 1.0)


@dataclass(frozen=True, slots=True)
class Dielectric:
    """Dielectric (glass/water) material properties.

    Attributes:
        refractive_index: Index of refraction relative to the surrounding
            medium. Common values:
            - Water: 1.33
            - Glass: 1.5
            - Diamond: 2.4
            Values below 1 model an air bubble inside a denser medium.
    """

    refractive_index: float = 1.5

    def __post_init__(self) -> None:
        if not self.refractive_index > 0.0:
            raise ValueError(
                f"Index of refraction = {self.refractive_index} must be positive."
            )

    def refraction_ratio(self, front_face: bool) -> float:
        """Ratio of indices for a ray entering (front face) or leaving."""
        return 1.0 / self.refractive_index if front_face else self.refractive_index

    def scatter(
        self, ray_in: Ray, rec: HitRecord, rng: np.random.Generator
    ) -> ScatterResult:
        """Reflect or refract the incoming ray.

        Reflects on total internal reflection, or with probability equal
        to the Schlick reflectance; refracts otherwise.

        Args:
            ray_in: The incoming ray.
            rec: The hit record at the surface.
            rng: The random source of the current scanline.

        Returns:
            White attenuation and the reflected or refracted ray.
        """
        ratio = self.refraction_ratio(rec.front_face)
        unit_direction = ray_in.direction.unit_vector()
        cos_theta = min((-unit_direction).dot(rec.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

        cannot_refract = ratio * sin_theta > 1.0
        if cannot_refract or schlick_reflectance(cos_theta, ratio) > random_double(rng):
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, ratio)

        return ScatterResult(WHITE, Ray(rec.point, direction))
