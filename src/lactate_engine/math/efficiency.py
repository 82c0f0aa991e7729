"""Per-step propulsive efficiency from speed and stroke rate.

Drag power grows with the cube of boat speed, so speed³ per stroke-per-second
approximates the work delivered by each stroke.
"""

from __future__ import annotations

from typing import Sequence

from lactate_engine.models.enums import EFFICIENCY_DECIMALS, PERCENT_CHANGE_DECIMALS
from lactate_engine.models.result import EfficiencyPoint
from lactate_engine.models.rounding import round_half_up
from lactate_engine.models.step import ValidatedPoint


def efficiency_score(speed: float, stroke_rate_spm: float) -> float:
    """speed³ / strokes-per-second.

    Raises:
        ValueError: If stroke_rate_spm is non-positive.
    """
    if stroke_rate_spm <= 0:
        raise ValueError(f"Stroke rate must be positive, got {stroke_rate_spm}")
    return speed**3 / (stroke_rate_spm / 60.0)


def score_efficiency(
    points: Sequence[ValidatedPoint],
) -> tuple[EfficiencyPoint, ...] | None:
    """Score every step and its change relative to step 1.

    Steps are numbered from 1 in the order given (ascending speed).

    Returns:
        Rounded EfficiencyPoints, or None unless every step has a stroke
        rate.
    """
    if not points or not all(p.has_stroke_rate for p in points):
        return None

    scores = [efficiency_score(p.speed, p.stroke_rate) for p in points]
    baseline = scores[0]

    result: list[EfficiencyPoint] = []
    for step, score in enumerate(scores, start=1):
        if step == 1:
            change = 0.0
        else:
            change = round_half_up(
                (score - baseline) / baseline * 100.0, PERCENT_CHANGE_DECIMALS
            )
        result.append(
            EfficiencyPoint(
                step=step,
                efficiency=round_half_up(score, EFFICIENCY_DECIMALS),
                percent_change=change,
            )
        )
    return tuple(result)
