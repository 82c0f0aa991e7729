"""Speed and heart rate at fixed blood lactate concentrations (2, 4, 6 mmol/L)."""

from __future__ import annotations

from typing import Sequence

from lactate_engine.math.curve_fit import FittedCurve
from lactate_engine.math.thresholds import closest_match
from lactate_engine.models.enums import (
    FIXED_LACTATE_TARGETS_MMOL,
    SEARCH_STEPS,
    SPEED_DECIMALS,
)
from lactate_engine.models.result import FixedLactatePoint
from lactate_engine.models.rounding import round_half_up
from lactate_engine.models.step import ValidatedPoint


def interpolate_fixed_lactate(
    points: Sequence[ValidatedPoint],
    lactate_curve: FittedCurve,
    hr_curve: FittedCurve,
    targets: Sequence[float] = FIXED_LACTATE_TARGETS_MMOL,
    steps: int = SEARCH_STEPS,
) -> tuple[FixedLactatePoint, ...]:
    """Find where the lactate curve comes closest to each target.

    Searches the whole observed speed range. A target the curve never
    reaches still yields the nearest sample (usually an end of the range).

    Returns:
        One rounded FixedLactatePoint per target, in target order.
    """
    first, last = points[0].speed, points[-1].speed
    results: list[FixedLactatePoint] = []
    for target in targets:
        speed = closest_match(lactate_curve, target, first, last, steps)
        results.append(
            FixedLactatePoint(
                target_mmol=float(target),
                speed=round_half_up(speed, SPEED_DECIMALS),
                heart_rate=round_half_up(hr_curve.predict(speed)),
            )
        )
    return tuple(results)
