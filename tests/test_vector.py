"""Unit tests for Vec3 and the vector helpers.

Tests cover:
- Arithmetic operators and indexing
- Dot/cross products, lengths and normalization
- Reflection, refraction and Schlick reflectance
- Random sampling helpers and their rejection caps
"""

import math

import numpy as np
import pytest

from raytracer.core.vector import (
    MAX_REJECTION_ATTEMPTS,
    SamplingError,
    Vec3,
    as_vec3,
    cross,
    dot,
    length,
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


class TestVec3Arithmetic:
    """Tests for the operators of Vec3."""

    def test_add_sub_neg(self):
        a = Vec3(1.0, 2.0, 3.0)
        b = Vec3(4.0, 5.0, 6.0)
        assert a + b == Vec3(5.0, 7.0, 9.0)
        assert b - a == Vec3(3.0, 3.0, 3.0)
        assert -a == Vec3(-1.0, -2.0, -3.0)

    def test_scalar_multiplication_both_sides(self):
        v = Vec3(1.0, -2.0, 0.5)
        assert v * 2.0 == Vec3(2.0, -4.0, 1.0)
        assert 2.0 * v == Vec3(2.0, -4.0, 1.0)

    def test_componentwise_multiplication(self):
        """Colors multiply channel by channel."""
        product = Vec3(0.5, 0.2, 1.0) * Vec3(0.4, 0.5, 0.3)
        assert product.to_tuple() == pytest.approx((0.2, 0.1, 0.3))

    def test_division(self):
        assert Vec3(2.0, 4.0, 6.0) / 2.0 == Vec3(1.0, 2.0, 3.0)

    def test_values_are_immutable(self):
        v = Vec3(1.0, 2.0, 3.0)
        with pytest.raises(AttributeError):
            v.x = 5.0  # type: ignore[misc]


class TestVec3Indexing:
    """Tests for indexing and iteration."""

    def test_index_components(self):
        v = Vec3(1.0, 2.0, 3.0)
        assert (v[0], v[1], v[2]) == (1.0, 2.0, 3.0)

    @pytest.mark.parametrize("index", [3, -1, 10])
    def test_out_of_range_index_raises(self, index):
        with pytest.raises(IndexError):
            Vec3(1.0, 2.0, 3.0)[index]

    def test_iteration_and_tuple(self):
        v = Vec3(1.0, 2.0, 3.0)
        assert list(v) == [1.0, 2.0, 3.0]
        assert v.to_tuple() == (1.0, 2.0, 3.0)

    def test_as_vec3_accepts_tuples(self):
        assert as_vec3((1, 2, 3)) == Vec3(1.0, 2.0, 3.0)
        v = Vec3(1.0, 2.0, 3.0)
        assert as_vec3(v) is v


class TestVectorProducts:
    """Tests for dot, cross, length and normalization."""

    def test_dot(self):
        assert dot(Vec3(1.0, 2.0, 3.0), Vec3(4.0, -5.0, 6.0)) == 12.0

    def test_cross_right_handed(self):
        assert cross(Vec3(1.0, 0.0, 0.0), Vec3(0.0, 1.0, 0.0)) == Vec3(0.0, 0.0, 1.0)

    def test_cross_is_orthogonal(self):
        a = Vec3(1.0, 2.0, 3.0)
        b = Vec3(-2.0, 0.5, 4.0)
        c = cross(a, b)
        assert abs(dot(c, a)) < 1e-12
        assert abs(dot(c, b)) < 1e-12

    def test_length(self):
        assert length(Vec3(3.0, 4.0, 12.0)) == 13.0
        assert Vec3(3.0, 4.0, 12.0).length_squared() == 169.0

    def test_unit_vector_has_unit_length(self):
        v = unit_vector(Vec3(3.0, -4.0, 12.0))
        assert v.length() == pytest.approx(1.0)

    def test_unit_vector_is_idempotent(self):
        u = unit_vector(Vec3(0.3, -7.0, 2.5))
        uu = unit_vector(u)
        for a, b in zip(u, uu):
            assert a == pytest.approx(b, abs=1e-15)

    def test_unit_vector_of_zero_raises(self):
        with pytest.raises(ZeroDivisionError):
            unit_vector(Vec3.zero())

    def test_near_zero(self):
        assert near_zero(Vec3(1e-9, -1e-9, 0.0))
        assert not near_zero(Vec3(1e-9, 1e-7, 0.0))


class TestReflectRefract:
    """Tests for reflection, refraction and Schlick reflectance."""

    def test_reflect_flips_normal_component(self):
        n = unit_vector(Vec3(0.2, 1.0, -0.3))
        v = Vec3(1.0, -2.0, 0.5)
        r = reflect(v, n)
        assert dot(r, n) == pytest.approx(-dot(v, n))
        assert r.length() == pytest.approx(v.length())

    def test_reflect_straight_down(self):
        assert reflect(Vec3(1.0, -1.0, 0.0), Vec3(0.0, 1.0, 0.0)) == Vec3(1.0, 1.0, 0.0)

    def test_refract_with_unit_ratio_passes_straight_through(self):
        uv = unit_vector(Vec3(1.0, -1.0, 0.0))
        out = refract(uv, Vec3(0.0, 1.0, 0.0), 1.0)
        for a, b in zip(out, uv):
            assert a == pytest.approx(b)

    def test_refract_obeys_snell(self):
        """sin(theta_t) = ratio * sin(theta_i)."""
        n = Vec3(0.0, 1.0, 0.0)
        uv = unit_vector(Vec3(1.0, -2.0, 0.0))
        ratio = 1.0 / 1.5
        out = refract(uv, n, ratio)
        sin_i = math.sqrt(1.0 - dot(-uv, n) ** 2)
        sin_t = math.sqrt(1.0 - dot(-out, n) ** 2 / out.length_squared())
        assert sin_t == pytest.approx(ratio * sin_i)
        assert out.length() == pytest.approx(1.0)

    def test_refract_past_critical_angle_is_finite(self):
        uv = unit_vector(Vec3(1.0, -0.1, 0.0))
        out = refract(uv, Vec3(0.0, 1.0, 0.0), 1.5)
        assert all(math.isfinite(c) for c in out)

    def test_schlick_at_normal_incidence(self):
        assert schlick_reflectance(1.0, 1.5) == pytest.approx(0.04)

    def test_schlick_at_grazing_incidence(self):
        assert schlick_reflectance(0.0, 1.5) == pytest.approx(1.0)


class TestRandomSampling:
    """Tests for the random sampling helpers."""

    def test_random_double_range(self, rng):
        values = [random_double(rng, -2.0, 3.0) for _ in range(500)]
        assert all(-2.0 <= v < 3.0 for v in values)

    def test_random_vec3_range(self, rng):
        for _ in range(200):
            v = random_vec3(rng, 0.5, 1.0)
            assert all(0.5 <= c < 1.0 for c in v)

    def test_random_in_unit_sphere(self, rng):
        for _ in range(500):
            assert random_in_unit_sphere(rng).length_squared() < 1.0

    def test_random_unit_vector(self, rng):
        for _ in range(200):
            assert random_unit_vector(rng).length() == pytest.approx(1.0)

    def test_random_in_unit_disk(self, rng):
        for _ in range(500):
            p = random_in_unit_disk(rng)
            assert p.z == 0.0
            assert p.length_squared() < 1.0

    def test_same_seed_same_sequence(self):
        a = np.random.default_rng(3)
        b = np.random.default_rng(3)
        assert [random_unit_vector(a) for _ in range(10)] == [
            random_unit_vector(b) for _ in range(10)
        ]

    def test_rejection_cap_raises(self):
        """A generator that never lands inside the sphere hits the cap."""

        class CornerGenerator:
            def __init__(self):
                self.calls = 0

            def uniform(self, lo, hi, size):
                self.calls += 1
                return np.full(size, 0.99)

        gen = CornerGenerator()
        with pytest.raises(SamplingError):
            random_in_unit_sphere(gen)
        assert gen.calls == MAX_REJECTION_ATTEMPTS

        with pytest.raises(SamplingError):
            random_in_unit_disk(CornerGenerator())
