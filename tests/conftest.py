"""Pytest configuration for raytracer tests.

This module provides shared fixtures for all test modules: a seeded
random generator, common materials, small scenes and cameras.
"""

import numpy as np
import pytest

from raytracer.camera.thin_lens import ThinLensCamera, setup_camera
from raytracer.core.vector import Vec3
from raytracer.materials.dielectric import Dielectric
from raytracer.materials.lambertian import Lambertian
from raytracer.materials.metal import Metal
from raytracer.scene.builder import SceneBuilder


@pytest.fixture
def rng():
    """A freshly seeded generator so every test sees the same draws."""
    return np.random.default_rng(42)


@pytest.fixture
def grey():
    return Lambertian(Vec3(0.5, 0.5, 0.5))


@pytest.fixture
def mirror():
    return Metal(Vec3(0.9, 0.9, 0.9), fuzz=0.0)


@pytest.fixture
def glass():
    return Dielectric(1.5)


@pytest.fixture
def empty_scene():
    return SceneBuilder().build()


@pytest.fixture
def red_sphere_scene():
    """A single reddish diffuse sphere in front of the camera."""
    builder = SceneBuilder()
    builder.add_sphere((0.0, 0.0, -1.0), 0.5, Lambertian((0.8, 0.3, 0.3)))
    return builder.build()


@pytest.fixture
def pinhole_settings():
    """Pinhole camera at the origin looking down -z."""
    return ThinLensCamera(
        lookfrom=(0.0, 0.0, 0.0),
        lookat=(0.0, 0.0, -1.0),
        vup=(0.0, 1.0, 0.0),
        vfov=90.0,
        aspect_ratio=2.0,
    )


@pytest.fixture
def pinhole_camera(pinhole_settings):
    return setup_camera(pinhole_settings)
