"""Unit tests for SceneBuilder."""

import pytest

from raytracer.core.vector import Vec3
from raytracer.geometry.box import Box
from raytracer.geometry.patch import DegenerateGeometryError, Patch
from raytracer.geometry.sphere import Sphere
from raytracer.scene.builder import SceneBuilder
from raytracer.scene.intersection import Scene


class TestSceneBuilder:
    """Tests for incremental scene construction."""

    def test_add_returns_sequential_indices(self, grey, mirror):
        builder = SceneBuilder()
        assert builder.add_sphere((0, -100.5, -1), 100.0, grey) == 0
        assert builder.add_sphere((0, 0, -1), 0.5, mirror) == 1
        assert builder.add_patch((0, 0, -3), 1.0, (0, 0, 1), (1, 0, 0), grey) == 2
        assert builder.add_box((1, 0, -2), 0.3, (1, 0, 0), (0, 1, 0), grey) == 3
        assert len(builder) == 4

    def test_build_preserves_order_and_types(self, grey):
        builder = SceneBuilder()
        builder.add_sphere((0, 0, -1), 0.5, grey)
        builder.add_patch((0, 0, -3), 1.0, (0, 0, 1), (1, 0, 0), grey)
        builder.add_box((1, 0, -2), 0.3, (1, 0, 0), (0, 1, 0), grey)

        scene = builder.build()
        assert isinstance(scene, Scene)
        assert [type(p) for p in scene] == [Sphere, Patch, Box]
        assert scene.primitives[0].center == Vec3(0.0, 0.0, -1.0)

    def test_build_snapshot_is_independent(self, grey):
        builder = SceneBuilder()
        builder.add_sphere((0, 0, -1), 0.5, grey)
        scene = builder.build()
        builder.add_sphere((0, 0, -3), 0.5, grey)
        assert len(scene) == 1
        assert len(builder.build()) == 2

    def test_add_primitive(self, grey):
        builder = SceneBuilder()
        sphere = Sphere((0, 0, -1), 0.5, grey)
        assert builder.add_primitive(sphere) == 0
        assert builder.build().primitives == (sphere,)

    def test_clear(self, grey):
        builder = SceneBuilder()
        builder.add_sphere((0, 0, -1), 0.5, grey)
        builder.clear()
        assert len(builder) == 0
        assert len(builder.build()) == 0

    def test_invalid_primitives_propagate(self, grey):
        builder = SceneBuilder()
        with pytest.raises(ValueError):
            builder.add_sphere((0, 0, 0), 0.0, grey)
        with pytest.raises(DegenerateGeometryError):
            builder.add_box((0, 0, 0), 1.0, (1, 0, 0), (1, 0, 0), grey)
        assert len(builder) == 0
