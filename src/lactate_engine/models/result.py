"""Result bundle — everything a single engine call hands back to the caller."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from lactate_engine.models.enums import LACTATE_DECIMALS, SPEED_DECIMALS
from lactate_engine.models.rounding import round_half_up
from lactate_engine.models.step import ValidatedPoint

if TYPE_CHECKING:
    from lactate_engine.math.curve_fit import FittedCurve
    from lactate_engine.math.zones import Zone, ZoneAnchors
    from lactate_engine.models.session import SessionDetails


@dataclass(frozen=True)
class ThresholdPoint:
    """One instant on the fitted lactate curve."""

    speed: float
    lactate: float
    heart_rate: float

    def rounded(self) -> ThresholdPoint:
        """Round to display precision: speed/lactate 1 dp, heart rate integer."""
        return ThresholdPoint(
            speed=round_half_up(self.speed, SPEED_DECIMALS),
            lactate=round_half_up(self.lactate, LACTATE_DECIMALS),
            heart_rate=round_half_up(self.heart_rate),
        )


@dataclass(frozen=True)
class DmaxLine:
    """Modified Dmax reference line in the speed–lactate plane."""

    start_speed: float
    start_lactate: float
    end_speed: float
    end_lactate: float


@dataclass(frozen=True)
class FixedLactatePoint:
    """Speed and heart rate at which the lactate curve is nearest a target."""

    target_mmol: float
    speed: float
    heart_rate: int


@dataclass(frozen=True)
class EfficiencyPoint:
    """Per-step efficiency score and its change relative to step 1."""

    step: int
    efficiency: float
    percent_change: float


@dataclass(frozen=True)
class Regressions:
    """Fitted curves of one session. ``stroke_rate`` is None without SR data."""

    lactate: FittedCurve
    heart_rate: FittedCurve
    heart_rate_linear: FittedCurve
    stroke_rate: FittedCurve | None = None


@dataclass(frozen=True)
class ResultBundle:
    """Root aggregate of one threshold calculation.

    Reportable numbers (thresholds, fixed points, efficiency, zones) are
    already rounded to display precision. ``points`` and ``regressions``
    stay unrounded so charts can be drawn from the bundle.
    """

    points: tuple[ValidatedPoint, ...]
    regressions: Regressions
    lt1: ThresholdPoint
    lt2: ThresholdPoint
    dmax_line: DmaxLine
    fixed_lactate_points: tuple[FixedLactatePoint, ...]
    efficiency: tuple[EfficiencyPoint, ...] | None
    zone_anchors: ZoneAnchors
    zones: tuple[Zone, ...]
    session: SessionDetails | None = None
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def has_stroke_rate(self) -> bool:
        return self.efficiency is not None
