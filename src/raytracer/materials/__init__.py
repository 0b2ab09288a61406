"""Materials module for light scattering models.

Components:
    lambertian: Ideal diffuse reflection
    metal: Specular reflection with optional fuzz
    dielectric: Glass-like refraction with Schlick reflectance
    material: ScatterResult and shared validation

Each material provides ``scatter(ray_in, rec, rng)`` returning a
ScatterResult (attenuation, scattered ray) or None when absorbed.
"""

from .dielectric import Dielectric
from .lambertian import Lambertian
from .material import ScatterResult, validate_albedo
from .metal import Metal

# The closed set of materials a primitive can carry
Material = Lambertian | Metal | Dielectric

__all__ = [
    "Material",
    "ScatterResult",
    "Lambertian",
    "Metal",
    "Dielectric",
    "validate_albedo",
]
