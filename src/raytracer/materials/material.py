"""Shared material types.

Every material is a frozen dataclass with a ``scatter`` method:

    scatter(ray_in, rec, rng) -> ScatterResult | None

A ScatterResult carries the attenuation color and the outgoing ray; None
means the incoming light was absorbed. Materials hold no state beyond
their parameters and draw randomness only from the ``rng`` they are given.
"""

from __future__ import annotations

from typing import NamedTuple

from raytracer.core.ray import Ray
from raytracer.core.vector import Color


class ScatterResult(NamedTuple):
    """Outcome of a scatter event.

    Attributes:
        attenuation: Fraction of light retained per color channel.
        scattered: The outgoing ray, starting at the hit point.
    """

    attenuation: Color
    scattered: Ray


def validate_albedo(albedo: Color) -> None:
    """Check every albedo component lies in [0, 1].

    Raises:
        ValueError: If any component is outside [0, 1].
    """
    for i, component in enumerate(albedo):
        if component < 0.0 or component > 1.0:
            raise ValueError(
                f"Albedo component {i} = {component} is outside [0, 1]. "
                "This would violate energy conservation."
            )
