"""Tests for the path tracing integrator.

Tests cover:
- Background gradient
- Depth budget (zero depth, bounce counting, trapped paths)
- Attenuation along a path
- The single diffuse sphere scenario
"""

import math

import numpy as np
import pytest

from raytracer.core.integrator import BLACK, SKY_BLUE, WHITE, background_color, ray_color
from raytracer.core.ray import Ray
from raytracer.core.vector import Vec3
from raytracer.materials.metal import Metal
from raytracer.scene.builder import SceneBuilder


class TestBackground:
    """Tests for the sky gradient."""

    def test_straight_up_is_sky_blue(self):
        color = background_color(Ray(Vec3.zero(), Vec3(0.0, 3.0, 0.0)))
        assert color.to_tuple() == pytest.approx(SKY_BLUE.to_tuple())

    def test_straight_down_is_white(self):
        color = background_color(Ray(Vec3.zero(), Vec3(0.0, -1.0, 0.0)))
        assert color.to_tuple() == pytest.approx(WHITE.to_tuple())

    def test_horizon_is_halfway(self):
        color = background_color(Ray(Vec3.zero(), Vec3(1.0, 0.0, 0.0)))
        assert color.to_tuple() == pytest.approx((0.75, 0.85, 1.0))

    def test_monotonic_in_y(self):
        """Red and green fall, blue stays at 1, as the ray tilts upward."""
        colors = []
        for y in np.linspace(-1.0, 1.0, 41):
            direction = Vec3(math.sqrt(max(0.0, 1.0 - y * y)), float(y), 0.0)
            colors.append(background_color(Ray(Vec3.zero(), direction)))
        for lower, upper in zip(colors, colors[1:]):
            assert upper.x <= lower.x + 1e-12
            assert upper.y <= lower.y + 1e-12
            assert upper.z == pytest.approx(lower.z)


class TestRayColor:
    """Tests for ray_color."""

    def test_zero_depth_is_black(self, red_sphere_scene, rng):
        ray = Ray(Vec3.zero(), Vec3(0.0, 0.0, -1.0))
        assert ray_color(ray, red_sphere_scene, 0, rng) == BLACK
        assert ray_color(ray, red_sphere_scene, -3, rng) == BLACK

    def test_miss_returns_background(self, empty_scene, rng):
        ray = Ray(Vec3.zero(), Vec3(0.3, 0.4, -1.0))
        assert ray_color(ray, empty_scene, 50, rng) == background_color(ray)

    def test_mirror_bounce_attenuates_background(self, rng):
        """One reflection off a half-grey mirror halves the sky behind the camera."""
        builder = SceneBuilder()
        builder.add_patch((0, 0, -1), 1.0, (0, 0, 1), (1, 0, 0), Metal((0.5, 0.5, 0.5)))
        scene = builder.build()
        ray = Ray(Vec3.zero(), Vec3(0.0, 0.0, -1.0))

        color = ray_color(ray, scene, 2, rng)
        assert color.to_tuple() == pytest.approx((0.375, 0.425, 0.5))
        # A single bounce is spent on the mirror, leaving nothing to reach the sky
        assert ray_color(ray, scene, 1, rng) == BLACK

    def test_trapped_path_is_black(self, rng):
        builder = SceneBuilder()
        builder.add_patch((0, 0, -1), 1.0, (0, 0, 1), (1, 0, 0), Metal((0.9, 0.9, 0.9)))
        builder.add_patch((0, 0, 1), 1.0, (0, 0, -1), (1, 0, 0), Metal((0.9, 0.9, 0.9)))
        scene = builder.build()
        assert ray_color(Ray(Vec3.zero(), Vec3(0.0, 0.0, -1.0)), scene, 50, rng) == BLACK

    def test_diffuse_sphere_scenario(self, red_sphere_scene, rng):
        """Samples are tinted by the albedo and never brighter than albedo times sky."""
        ray = Ray(Vec3.zero(), Vec3(0.0, 0.0, -1.0))
        total = Vec3.zero()
        for _ in range(100):
            color = ray_color(ray, red_sphere_scene, 50, rng)
            assert 0.0 < color.x <= 0.8
            assert 0.0 < color.y <= 0.3
            assert 0.0 < color.z <= 0.3
            assert color.x >= color.y
            assert color.x >= color.z
            total = total + color

        average = total / 100
        assert average != BLACK
        assert average.x < 1.0 and average.y < 1.0 and average.z < 1.0

    def test_deterministic_for_seeded_generator(self, red_sphere_scene):
        ray = Ray(Vec3.zero(), Vec3(0.1, 0.1, -1.0))
        a = np.random.default_rng(1)
        b = np.random.default_rng(1)
        assert [ray_color(ray, red_sphere_scene, 10, a) for _ in range(5)] == [
            ray_color(ray, red_sphere_scene, 10, b) for _ in range(5)
        ]
