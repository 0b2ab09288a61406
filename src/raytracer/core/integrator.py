"""Path tracing integrator.

``ray_color`` estimates the light arriving along a ray. At each bounce the
nearest surface is found; its material either absorbs the ray (black) or
scatters it, multiplying the path throughput by the attenuation. A ray
that escapes the scene picks up the sky gradient. Paths stop after
``depth`` bounces with no further contribution.

The recursion ``attenuation * ray_color(scattered, depth - 1)`` is written
as a loop carrying the product of attenuations, which gives the same
result without growing the call stack.

Example:
    >>> import numpy as np
    >>> from raytracer.core.integrator import ray_color
    >>> from raytracer.core.ray import Ray
    >>> from raytracer.core.vector import Vec3
    >>> from raytracer.scene.presets import create_default_scene
    >>> scene, _ = create_default_scene()
    >>> ray = Ray(Vec3(0, 0, 0), Vec3(0, 0, -1))
    >>> color = ray_color(ray, scene, 50, np.random.default_rng(0))
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import numpy as np

from raytracer.core.ray import Ray
from raytracer.core.vector import Color

if TYPE_CHECKING:
    from raytracer.scene.intersection import Scene

# =============================================================================
# Rendering Constants
# =============================================================================

# Default maximum ray bounces (path length)
MAX_DEPTH = 50

# Lower bound on hit distance; skips re-hitting the surface a ray leaves
T_MIN = 0.001
T_MAX = math.inf

BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
SKY_BLUE = Color(0.5, 0.7, 1.0)


def background_color(ray: Ray) -> Color:
    """Evaluate the sky for a ray that escaped the scene.

    A vertical gradient from white (looking straight down) to sky blue
    (looking straight up).

    Args:
        ray: The escaping ray (direction must be nonzero).

    Returns:
        The background radiance.
    """
    unit_direction = ray.direction.unit_vector()
    a = 0.5 * (unit_direction.y + 1.0)
    return (1.0 - a) * WHITE + a * SKY_BLUE


def ray_color(ray: Ray, scene: Scene, depth: int, rng: np.random.Generator) -> Color:
    """Trace a ray through the scene and return its color.

    Args:
        ray: The ray to trace.
        scene: The scene to intersect.
        depth: Remaining bounce budget. Zero or less returns black.
        rng: The random source of the current scanline.

    Returns:
        The estimated radiance (RGB) carried back along the ray.
    """
    throughput = WHITE
    for _ in range(depth):
        rec = scene.hit(ray, T_MIN, T_MAX)
        if rec is None:
            return throughput * background_color(ray)

        result = rec.material.scatter(ray, rec, rng)
        if result is None:
            # Absorbed
            return BLACK

        throughput = throughput * result.attenuation
        ray = result.scattered

    # Bounce budget exhausted
    return BLACK
