"""Tests for fixed lactate concentration interpolation (2, 4, 6 mmol/L)."""

from __future__ import annotations

from lactate_engine.math.curve_fit import fit_curve
from lactate_engine.math.fixed_lactate import interpolate_fixed_lactate
from lactate_engine.models.enums import Axis


def _curves(points):
    return fit_curve(points, Axis.LACTATE), fit_curve(points, Axis.HEART_RATE)


class TestFixedLactate:
    def test_default_targets(self, parabola_points) -> None:
        result = interpolate_fixed_lactate(parabola_points, *_curves(parabola_points))
        assert [p.target_mmol for p in result] == [2.0, 4.0, 6.0]

    def test_two_mmol(self, parabola_points) -> None:
        # 0.5 + 0.2·v² = 2 → v ≈ 2.739, HR ≈ 127.4
        point = interpolate_fixed_lactate(parabola_points, *_curves(parabola_points))[0]
        assert point.target_mmol == 2.0
        assert point.speed == 2.7
        assert point.heart_rate == 127

    def test_four_mmol(self, parabola_points) -> None:
        # 0.5 + 0.2·v² = 4 → v ≈ 4.183, HR ≈ 141.8
        point = interpolate_fixed_lactate(parabola_points, *_curves(parabola_points))[1]
        assert point.speed == 4.2
        assert point.heart_rate == 142

    def test_unreached_target_returns_fastest_step(self, parabola_points) -> None:
        # Curve tops out at 5.5 mmol/L; 6 mmol/L clamps to the last step
        point = interpolate_fixed_lactate(parabola_points, *_curves(parabola_points))[2]
        assert point.speed == 5.0
        assert point.heart_rate == 150

    def test_custom_targets(self, parabola_points) -> None:
        result = interpolate_fixed_lactate(parabola_points, *_curves(parabola_points), targets=(1.0,))
        assert [p.target_mmol for p in result] == [1.0]

    def test_heart_rate_is_integer(self, parabola_points) -> None:
        result = interpolate_fixed_lactate(parabola_points, *_curves(parabola_points))
        assert all(isinstance(p.heart_rate, int) for p in result)

    def test_searches_whole_range(self, parabola_points) -> None:
        """Targets below the lowest-lactate step still resolve to the slowest step."""
        point = interpolate_fixed_lactate(
            parabola_points, *_curves(parabola_points), targets=(0.1,)
        )[0]
        assert point.speed == 1.0

    def test_returns_immutable_tuple(self, parabola_points) -> None:
        result = interpolate_fixed_lactate(parabola_points, *_curves(parabola_points))
        assert isinstance(result, tuple)
        assert hash(result) == hash(tuple(result))
