"""Scene-level ray intersection testing.

A Scene is an immutable collection of primitives. The nearest-hit query
tests every primitive in turn and shrinks the search range to the closest
hit found so far, so a primitive beyond the current best is rejected by
its own range check.

Example:
    >>> from raytracer.core.ray import Ray
    >>> from raytracer.core.vector import Vec3
    >>> from raytracer.geometry.sphere import Sphere
    >>> from raytracer.materials.lambertian import Lambertian
    >>> from raytracer.scene.intersection import Scene
    >>> grey = Lambertian(Vec3(0.5, 0.5, 0.5))
    >>> scene = Scene((Sphere(Vec3(0, 0, -1), 0.5, grey), Sphere(Vec3(0, 0, -3), 0.5, grey)))
    >>> scene.hit(Ray(Vec3(0, 0, 0), Vec3(0, 0, -1)), 0.001, float("inf")).t
    0.5
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from raytracer.core.ray import Ray
from raytracer.geometry.hittable import HitRecord

if TYPE_CHECKING:
    from raytracer.geometry import Primitive


def intersect_scene(
    primitives: Iterable[Primitive],
    ray: Ray,
    t_min: float,
    t_max: float,
) -> HitRecord | None:
    """Test a ray against every primitive and keep the closest hit.

    Args:
        primitives: The primitives to test.
        ray: The ray to test.
        t_min: Minimum t value to consider a valid hit.
        t_max: Maximum t value to consider a valid hit.

    Returns:
        The HitRecord with the smallest t, or None if nothing was hit.
    """
    closest_t = t_max
    result = None
    for primitive in primitives:
        rec = primitive.hit(ray, t_min, closest_t)
        if rec is not None:
            closest_t = rec.t
            result = rec
    return result


@dataclass(frozen=True, slots=True)
class Scene:
    """An immutable, unordered collection of primitives.

    Attributes:
        primitives: The primitives making up the scene.
    """

    primitives: tuple[Primitive, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "primitives", tuple(self.primitives))

    def __len__(self) -> int:
        return len(self.primitives)

    def __iter__(self) -> Iterator[Primitive]:
        return iter(self.primitives)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        """Return the nearest hit in [t_min, t_max], or None."""
        return intersect_scene(self.primitives, ray, t_min, t_max)
