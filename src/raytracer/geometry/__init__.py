"""Geometry module for shape primitives.

Components:
    hittable: HitRecord
    sphere: Sphere primitive with ray-sphere intersection
    patch: Square planar patch
    box: Oriented cube made of six patches

Every primitive answers ``hit(ray, t_min, t_max) -> HitRecord | None``.
"""

from .box import Box
from .hittable import HitRecord
from .patch import DegenerateGeometryError, Patch, orthonormalize
from .sphere import Sphere

# The closed set of primitives a Scene can hold
Primitive = Sphere | Patch | Box

__all__ = [
    "HitRecord",
    "Primitive",
    "Sphere",
    "Patch",
    "Box",
    "DegenerateGeometryError",
    "orthonormalize",
]
