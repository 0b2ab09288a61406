"""Core rendering module.

Components:
    vector: Vec3 value type, vector algebra and random sampling
    ray: Ray data structure
    integrator: Light transport (ray_color) and the sky background

The scanline render driver lives in raytracer.core.renderer and is imported
from there directly.
"""

from .integrator import T_MIN, background_color, ray_color
from .ray import Ray
from .vector import (
    MAX_REJECTION_ATTEMPTS,
    Color,
    Point3,
    SamplingError,
    Vec3,
    cross,
    dot,
    length,
    length_squared,
    near_zero,
    random_double,
    random_in_unit_disk,
    random_in_unit_sphere,
    random_unit_vector,
    random_vec3,
    reflect,
    refract,
    schlick_reflectance,
    unit_vector,
)

__all__ = [
    # Vectors
    "Vec3",
    "Point3",
    "Color",
    "dot",
    "cross",
    "length",
    "length_squared",
    "unit_vector",
    "near_zero",
    "reflect",
    "refract",
    "schlick_reflectance",
    "random_double",
    "random_vec3",
    "random_in_unit_sphere",
    "random_unit_vector",
    "random_in_unit_disk",
    "SamplingError",
    "MAX_REJECTION_ATTEMPTS",
    # Rays
    "Ray",
    # Integrator
    "ray_color",
    "background_color",
    "T_MIN",
]
