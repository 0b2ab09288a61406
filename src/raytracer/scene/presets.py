"""Ready-made scenes with matching cameras.

Each factory returns a ``(Scene, ThinLensCamera)`` pair; pass the camera
configuration to ``setup_camera`` (the renderer does this for you).

Scenes:
- default: one diffuse sphere resting on a huge ground sphere
- random: the classic cover image, a grid of small random spheres around
  three large feature spheres
- showcase: diffuse, metal and glass spheres next to a rotated box

Example:
    >>> from raytracer.scene.presets import create_default_scene
    >>> scene, camera = create_default_scene()
    >>> len(scene)
    2
"""

from __future__ import annotations

import numpy as np

from raytracer.camera.thin_lens import ThinLensCamera
from raytracer.core.vector import Point3, Vec3, random_double, random_vec3
from raytracer.materials.dielectric import Dielectric
from raytracer.materials.lambertian import Lambertian
from raytracer.materials.metal import Metal
from raytracer.scene.builder import SceneBuilder
from raytracer.scene.intersection import Scene

# =============================================================================
# Scene Constants
# =============================================================================

DEFAULT_ASPECT_RATIO = 16.0 / 9.0

GROUND_ALBEDO = (0.5, 0.5, 0.5)
GLASS_IOR = 1.5

# Random scene grid: small spheres at (a + 0.9*u, 0.2, b + 0.9*v)
GRID_RANGE = range(-11, 11)
SMALL_RADIUS = 0.2
DIFFUSE_PROBABILITY = 0.8
METAL_PROBABILITY = 0.15  # cumulative 0.95; remainder is glass

# Small spheres near the big metal sphere would overlap it
FEATURE_CLEARANCE_CENTER = Point3(4.0, 0.2, 0.0)
FEATURE_CLEARANCE = 0.9

SCENE_NAMES = ("default", "random", "showcase")


# =============================================================================
# Scene Factories
# =============================================================================


def create_default_scene(
    aspect_ratio: float = DEFAULT_ASPECT_RATIO,
) -> tuple[Scene, ThinLensCamera]:
    """Create the minimal test scene.

    A matte sphere of radius 0.5 at (0, 0, -1) sits on a ground sphere of
    radius 100 whose top touches y = -0.5. The camera is a pinhole at the
    origin looking down -z.

    Args:
        aspect_ratio: Width / height of the output image.

    Returns:
        The scene and its camera configuration.
    """
    builder = SceneBuilder()
    builder.add_sphere((0.0, 0.0, -1.0), 0.5, Lambertian((0.5, 0.5, 0.5)))
    builder.add_sphere((0.0, -100.5, -1.0), 100.0, Lambertian(GROUND_ALBEDO))

    camera = ThinLensCamera(
        lookfrom=(0.0, 0.0, 0.0),
        lookat=(0.0, 0.0, -1.0),
        vup=(0.0, 1.0, 0.0),
        vfov=90.0,
        aspect_ratio=aspect_ratio,
    )
    return builder.build(), camera


def create_random_scene(
    seed: int = 0,
    aspect_ratio: float = DEFAULT_ASPECT_RATIO,
) -> tuple[Scene, ThinLensCamera]:
    """Create the random-spheres cover scene.

    A grey ground sphere carries a 22x22 grid of jittered small spheres,
    each diffuse (80%), metal (15%) or glass (5%), plus one large glass,
    one large diffuse and one large metal sphere in the middle row.

    Args:
        seed: Seed for scene generation. The same seed always yields the
            same scene.
        aspect_ratio: Width / height of the output image.

    Returns:
        The scene and its camera configuration (with defocus blur).
    """
    rng = np.random.default_rng(seed)
    builder = SceneBuilder()

    builder.add_sphere((0.0, -1000.0, 0.0), 1000.0, Lambertian(GROUND_ALBEDO))

    for a in GRID_RANGE:
        for b in GRID_RANGE:
            choose_mat = random_double(rng)
            center = Point3(
                a + 0.9 * random_double(rng), SMALL_RADIUS, b + 0.9 * random_double(rng)
            )
            if (center - FEATURE_CLEARANCE_CENTER).length() <= FEATURE_CLEARANCE:
                continue

            if choose_mat < DIFFUSE_PROBABILITY:
                albedo = random_vec3(rng) * random_vec3(rng)
                material = Lambertian(albedo)
            elif choose_mat < DIFFUSE_PROBABILITY + METAL_PROBABILITY:
                albedo = random_vec3(rng, 0.5, 1.0)
                material = Metal(albedo, fuzz=random_double(rng, 0.0, 0.5))
            else:
                material = Dielectric(GLASS_IOR)
            builder.add_sphere(center, SMALL_RADIUS, material)

    builder.add_sphere((0.0, 1.0, 0.0), 1.0, Dielectric(GLASS_IOR))
    builder.add_sphere((-4.0, 1.0, 0.0), 1.0, Lambertian((0.4, 0.2, 0.1)))
    builder.add_sphere((4.0, 1.0, 0.0), 1.0, Metal((0.7, 0.6, 0.5), fuzz=0.0))

    camera = ThinLensCamera(
        lookfrom=(13.0, 2.0, 3.0),
        lookat=(0.0, 0.0, 0.0),
        vup=(0.0, 1.0, 0.0),
        vfov=20.0,
        aspect_ratio=aspect_ratio,
        aperture=0.1,
        focus_dist=10.0,
    )
    return builder.build(), camera


def create_showcase_scene(
    aspect_ratio: float = DEFAULT_ASPECT_RATIO,
) -> tuple[Scene, ThinLensCamera]:
    """Create a small scene exercising every primitive and material.

    Contains a diffuse, a fuzzy metal and a hollow glass sphere (a glass
    sphere with a negative-radius sphere inside it), a rotated diffuse box
    and a metal patch standing behind them.

    Args:
        aspect_ratio: Width / height of the output image.

    Returns:
        The scene and its camera configuration.
    """
    builder = SceneBuilder()
    builder.add_sphere((0.0, -100.5, -1.0), 100.0, Lambertian((0.8, 0.8, 0.0)))

    builder.add_sphere((0.0, 0.0, -1.0), 0.5, Lambertian((0.1, 0.2, 0.5)))
    builder.add_sphere((-1.0, 0.0, -1.0), 0.5, Dielectric(GLASS_IOR))
    builder.add_sphere((-1.0, 0.0, -1.0), -0.45, Dielectric(GLASS_IOR))
    builder.add_sphere((1.0, 0.0, -1.0), 0.5, Metal((0.8, 0.6, 0.2), fuzz=0.3))

    # Box resting on the ground, turned 45 degrees about y
    builder.add_box(
        (0.4, -0.25, -0.1),
        0.25,
        (1.0, 0.0, 1.0),
        (0.0, 1.0, 0.0),
        Lambertian((0.73, 0.2, 0.2)),
    )

    # Mirror behind the spheres
    builder.add_patch(
        (0.0, 0.5, -2.5),
        1.0,
        (0.0, 0.0, 1.0),
        (1.0, 0.0, 0.0),
        Metal((0.9, 0.9, 0.9), fuzz=0.05),
    )

    camera = ThinLensCamera(
        lookfrom=(-2.0, 1.0, 1.0),
        lookat=(0.0, 0.0, -1.0),
        vup=(0.0, 1.0, 0.0),
        vfov=35.0,
        aspect_ratio=aspect_ratio,
        aperture=0.05,
        focus_dist=(Vec3(-2.0, 1.0, 1.0) - Vec3(0.0, 0.0, -1.0)).length(),
    )
    return builder.build(), camera


def create_scene(
    name: str,
    seed: int = 0,
    aspect_ratio: float = DEFAULT_ASPECT_RATIO,
) -> tuple[Scene, ThinLensCamera]:
    """Create a preset scene by name.

    Args:
        name: One of SCENE_NAMES.
        seed: Seed for the random scene (ignored by the others).
        aspect_ratio: Width / height of the output image.

    Raises:
        ValueError: If the name is unknown.
    """
    if name == "default":
        return create_default_scene(aspect_ratio)
    if name == "random":
        return create_random_scene(seed, aspect_ratio)
    if name == "showcase":
        return create_showcase_scene(aspect_ratio)
    raise ValueError(f"Unknown scene '{name}', expected one of {SCENE_NAMES}")
