"""Shared test fixtures: synthetic step tests with known answers and a K1 session."""

from __future__ import annotations

import pytest

from lactate_engine.models.enums import MAX_EFFORT_MARKER
from lactate_engine.models.step import RawStep, ValidatedPoint

# ---------------------------------------------------------------------------
# Parabola session: lactate = 0.5 + 0.2·v², HR = 100 + 10·v, SR = 40 + 20·v
#
# Cubic fits are exact, so thresholds have closed-form answers:
#   LT1: 0.2·v² = 0.6          → v = √3 ≈ 1.732, HR ≈ 117.3
#   LT2: slope of curve (0.4·v) = chord slope (4.8 / 4 = 1.2) → v = 3.0
# ---------------------------------------------------------------------------

PARABOLA_SPEEDS = (1.0, 2.0, 3.0, 4.0, 5.0)


def parabola_lactate(speed: float) -> float:
    return 0.5 + 0.2 * speed * speed


def parabola_hr(speed: float) -> float:
    return 100.0 + 10.0 * speed


def parabola_sr(speed: float) -> float:
    return 40.0 + 20.0 * speed


@pytest.fixture
def parabola_points() -> tuple[ValidatedPoint, ...]:
    return tuple(
        ValidatedPoint(
            heart_rate=parabola_hr(v),
            speed=v,
            lactate=parabola_lactate(v),
            stroke_rate=parabola_sr(v),
        )
        for v in PARABOLA_SPEEDS
    )


@pytest.fixture
def parabola_rows() -> tuple[RawStep, ...]:
    """Parabola session entered in heart-rate mode, final step marked Max."""
    rows = []
    for i, v in enumerate(PARABOLA_SPEEDS, start=1):
        planned = MAX_EFFORT_MARKER if i == len(PARABOLA_SPEEDS) else parabola_hr(v)
        rows.append(
            RawStep(
                step=i,
                planned=planned,
                achieved=parabola_hr(v),
                secondary=v,
                lactate=parabola_lactate(v),
                stroke_rate=parabola_sr(v),
            )
        )
    return tuple(rows)


# ---------------------------------------------------------------------------
# Realistic K1 session (heart-rate mode)
# ---------------------------------------------------------------------------


@pytest.fixture
def k1_rows() -> tuple[RawStep, ...]:
    """Seven-step K1 test: lowest lactate at step 2, first big rise at step 4."""
    data = (
        # planned, achieved HR, speed, lactate, stroke rate
        (130, 131, 3.0, 1.2, 60),
        (140, 140, 3.3, 1.1, 64),
        (150, 149, 3.6, 1.4, 68),
        (160, 158, 3.9, 1.9, 72),
        (170, 167, 4.2, 2.8, 78),
        (175, 175, 4.5, 4.3, 86),
        (MAX_EFFORT_MARKER, 183, 4.8, 7.0, 96),
    )
    return tuple(
        RawStep(step=i, planned=p, achieved=hr, secondary=v, lactate=la, stroke_rate=sr)
        for i, (p, hr, v, la, sr) in enumerate(data, start=1)
    )


@pytest.fixture
def scenario_a_points() -> tuple[ValidatedPoint, ...]:
    """Five steps, lactate rising, one jump > 0.4 between steps 3 and 4."""
    speeds = (2.0, 2.5, 3.0, 3.5, 4.0)
    lactates = (1.0, 1.2, 1.5, 2.2, 4.0)
    return tuple(
        ValidatedPoint(heart_rate=120.0 + 10.0 * i, speed=v, lactate=la)
        for i, (v, la) in enumerate(zip(speeds, lactates))
    )
