"""Incremental scene construction.

The SceneBuilder collects primitives one call at a time and produces an
immutable Scene. Vectors may be given as Vec3 or plain (x, y, z) tuples.

Example:
    >>> from raytracer.materials.lambertian import Lambertian
    >>> from raytracer.materials.metal import Metal
    >>> from raytracer.scene.builder import SceneBuilder
    >>> builder = SceneBuilder()
    >>> builder.add_sphere((0, -100.5, -1), 100.0, Lambertian((0.8, 0.8, 0.0)))
    0
    >>> builder.add_sphere((0, 0, -1), 0.5, Metal((0.8, 0.6, 0.2), fuzz=0.3))
    1
    >>> scene = builder.build()
    >>> len(scene)
    2
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from raytracer.core.vector import Vec3
from raytracer.geometry.box import Box
from raytracer.geometry.patch import Patch
from raytracer.geometry.sphere import Sphere
from raytracer.scene.intersection import Scene

if TYPE_CHECKING:
    from raytracer.geometry import Primitive
    from raytracer.materials import Material

VecLike = Vec3 | tuple[float, float, float]


class SceneBuilder:
    """Collects primitives and builds an immutable Scene.

    Attributes:
        primitives: The primitives added so far, in insertion order.
    """

    def __init__(self) -> None:
        """Initialize an empty builder."""
        self.primitives: list[Primitive] = []

    def __len__(self) -> int:
        return len(self.primitives)

    def clear(self) -> None:
        """Remove every primitive added so far."""
        self.primitives.clear()

    def add_primitive(self, primitive: Primitive) -> int:
        """Add an already constructed primitive.

        Returns:
            The index of the added primitive.
        """
        self.primitives.append(primitive)
        return len(self.primitives) - 1

    def add_sphere(self, center: VecLike, radius: float, material: Material) -> int:
        """Add a sphere.

        Args:
            center: The center of the sphere.
            radius: The radius (nonzero; negative flips normals inward).
            material: The surface material.

        Returns:
            The index of the added sphere.

        Raises:
            ValueError: If the radius is zero.
        """
        return self.add_primitive(Sphere(center, radius, material))

    def add_patch(
        self,
        center: VecLike,
        half_extent: float,
        normal: VecLike,
        axis: VecLike,
        material: Material,
    ) -> int:
        """Add a square patch.

        Args:
            center: The center of the square.
            half_extent: Half the side length.
            normal: The plane normal.
            axis: An in-plane direction fixing the square's rotation.
            material: The surface material.

        Returns:
            The index of the added patch.

        Raises:
            DegenerateGeometryError: If normal and axis are parallel.
            ValueError: If half_extent is not positive.
        """
        return self.add_primitive(Patch(center, half_extent, normal, axis, material))

    def add_box(
        self,
        center: VecLike,
        half_extent: float,
        axis0: VecLike,
        axis1: VecLike,
        material: Material,
    ) -> int:
        """Add an oriented cube.

        Args:
            center: The center of the cube.
            half_extent: Half the edge length.
            axis0: First frame axis.
            axis1: Second frame axis (must not be parallel to axis0).
            material: The surface material.

        Returns:
            The index of the added box.

        Raises:
            DegenerateGeometryError: If axis0 and axis1 are parallel.
            ValueError: If half_extent is not positive.
        """
        return self.add_primitive(Box(center, half_extent, axis0, axis1, material))

    def build(self) -> Scene:
        """Freeze the collected primitives into a Scene."""
        return Scene(tuple(self.primitives))
