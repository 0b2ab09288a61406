"""Lambertian (ideal diffuse) material implementation.

The scattered direction is the hit normal plus a random unit vector, which
distributes outgoing rays with a cosine weighting around the normal. The
cosine factor of the rendering equation and the sampling density cancel,
so the attenuation is simply the albedo.

Example:
    >>> import numpy as np
    >>> from raytracer.core.vector import Vec3
    >>> from raytracer.materials.lambertian import Lambertian
    >>> red = Lambertian(albedo=Vec3(0.8, 0.3, 0.3))
    >>> # result = red.scatter(ray_in, hit_record, np.random.default_rng(0))
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from raytracer.core.ray import Ray
from raytracer.core.vector import Color, as_vec3, random_unit_vector
from raytracer.materials.material import ScatterResult, validate_albedo

if TYPE_CHECKING:
    from raytracer.geometry.hittable import HitRecord


@dataclass(frozen=True, slots=True)
class Lambertian:
    """Lambertian (ideal diffuse) material properties.

    Attributes:
        albedo: The diffuse reflectance color (RGB, each component in [0, 1]).
    """

    albedo: Color

    def __post_init__(self) -> None:
        object.__setattr__(self, "albedo", as_vec3(self.albedo))
        validate_albedo(self.albedo)

    def scatter(
        self, ray_in: Ray, rec: HitRecord, rng: np.random.Generator
    ) -> ScatterResult:
        """Scatter diffusely around the hit normal.

        Diffuse surfaces always scatter.

        Args:
            ray_in: The incoming ray (unused; diffuse scattering ignores it).
            rec: The hit record at the surface.
            rng: The random source of the current scanline.

        Returns:
            The albedo and a ray leaving the hit point.
        """
        scatter_direction = rec.normal + random_unit_vector(rng)

        # The random vector nearly cancelled the normal
        if scatter_direction.near_zero():
            scatter_direction = rec.normal

        return ScatterResult(self.albedo, Ray(rec.point, scatter_direction))
