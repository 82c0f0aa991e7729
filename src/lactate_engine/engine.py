"""ThresholdEngine — runs the full step-test analysis for one session."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Sequence

from lactate_engine.exceptions import InsufficientDataError
from lactate_engine.math.curve_fit import fit_curve, validate_fit
from lactate_engine.math.efficiency import score_efficiency
from lactate_engine.math.fixed_lactate import interpolate_fixed_lactate
from lactate_engine.math.normalize import normalize
from lactate_engine.math.thresholds import detect_lt1, detect_lt2
from lactate_engine.math.zones import ZoneAnchors, derive_zones
from lactate_engine.models.enums import (
    DMAX_LACTATE_RISE_MMOL,
    FIXED_LACTATE_TARGETS_MMOL,
    LT1_LACTATE_OFFSET_MMOL,
    MIN_FIT_R_SQUARED,
    MIN_VALIDATED_POINTS,
    POLYNOMIAL_DEGREE,
    SEARCH_STEPS,
    Axis,
    ProtocolMode,
)
from lactate_engine.models.result import Regressions, ResultBundle
from lactate_engine.models.session import SessionDetails
from lactate_engine.models.step import RawStep, ValidatedPoint

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EngineSettings:
    """Tunable parameters of the analysis. Defaults are the published values."""

    lt1_offset_mmol: float = LT1_LACTATE_OFFSET_MMOL
    dmax_rise_mmol: float = DMAX_LACTATE_RISE_MMOL
    search_steps: int = SEARCH_STEPS
    min_points: int = MIN_VALIDATED_POINTS
    degree: int = POLYNOMIAL_DEGREE
    fixed_targets_mmol: tuple[float, ...] = FIXED_LACTATE_TARGETS_MMOL
    min_r_squared: float = MIN_FIT_R_SQUARED

    def __post_init__(self) -> None:
        if self.lt1_offset_mmol < 0:
            raise ValueError(f"lt1_offset_mmol must be non-negative, got {self.lt1_offset_mmol}")
        if self.dmax_rise_mmol < 0:
            raise ValueError(f"dmax_rise_mmol must be non-negative, got {self.dmax_rise_mmol}")
        if self.search_steps < 1:
            raise ValueError(f"search_steps must be at least 1, got {self.search_steps}")
        if self.degree < 1:
            raise ValueError(f"degree must be at least 1, got {self.degree}")
        if self.min_points <= self.degree:
            raise ValueError(
                f"min_points must exceed the polynomial degree ({self.degree}), "
                f"got {self.min_points}"
            )


class ThresholdEngine:
    """Pure step-test analysis: raw rows in, ResultBundle out.

    The engine keeps no state between calls, so one instance can serve any
    number of sessions.

    Usage:
        engine = ThresholdEngine()
        bundle = engine.calculate(rows, ProtocolMode.HEART_RATE)
    """

    def __init__(self, settings: EngineSettings | None = None) -> None:
        self.settings = settings or EngineSettings()

    def calculate(
        self,
        rows: Iterable[RawStep | Mapping[str, Any]],
        mode: ProtocolMode | str,
        session: SessionDetails | None = None,
    ) -> ResultBundle:
        """Normalize raw rows for *mode* and analyse them.

        Args:
            rows: Step rows in entry order, as RawStep or plain dicts.
            mode: Protocol mode (enum or its value, e.g. "speed").
            session: Optional metadata copied onto the bundle.

        Returns:
            The complete ResultBundle.

        Raises:
            InsufficientDataError: Fewer than ``settings.min_points`` rows
                are valid.
            DegenerateGeometryError: The Modified Dmax line collapses.
        """
        raw = tuple(
            row if isinstance(row, RawStep) else RawStep.from_mapping(row, default_step=i)
            for i, row in enumerate(rows, start=1)
        )
        points = normalize(raw, ProtocolMode(mode))
        return self.analyse(points, session=session)

    def analyse(
        self,
        points: Sequence[ValidatedPoint],
        session: SessionDetails | None = None,
    ) -> ResultBundle:
        """Run curve fitting, threshold detection and zone derivation.

        Args:
            points: Validated points; re-sorted by speed if needed.
            session: Optional metadata copied onto the bundle.
        """
        cfg = self.settings
        points = tuple(sorted(points, key=lambda p: p.speed))
        if len(points) < cfg.min_points:
            raise InsufficientDataError(len(points), cfg.min_points)

        has_sr = all(p.has_stroke_rate for p in points)
        regressions = Regressions(
            lactate=fit_curve(points, Axis.LACTATE, cfg.degree),
            heart_rate=fit_curve(points, Axis.HEART_RATE, cfg.degree),
            heart_rate_linear=fit_curve(points, Axis.HEART_RATE, 1),
            stroke_rate=fit_curve(points, Axis.STROKE_RATE, cfg.degree) if has_sr else None,
        )

        warnings: list[str] = []
        for curve in (regressions.lactate, regressions.heart_rate, regressions.stroke_rate):
            if curve is not None:
                warnings.extend(validate_fit(curve, cfg.min_r_squared))
        for message in warnings:
            logger.warning(message)

        lt1 = detect_lt1(
            points, regressions.lactate, regressions.heart_rate,
            cfg.lt1_offset_mmol, cfg.search_steps,
        )
        lt2, dmax_line = detect_lt2(
            points, regressions.lactate, regressions.heart_rate,
            cfg.dmax_rise_mmol, cfg.search_steps,
        )
        fixed = interpolate_fixed_lactate(
            points, regressions.lactate, regressions.heart_rate,
            cfg.fixed_targets_mmol, cfg.search_steps,
        )
        efficiency = score_efficiency(points)

        anchors = ZoneAnchors(
            max_hr=points[-1].heart_rate,
            max_speed=points[-1].speed,
            lt1_hr=lt1.heart_rate,
            lt1_speed=lt1.speed,
            lt2_hr=lt2.heart_rate,
            lt2_speed=lt2.speed,
        )

        logger.info(
            "Analysed %d steps: LT1 %.2f m/s @ %.0f bpm, LT2 %.2f m/s @ %.0f bpm",
            len(points),
            lt1.speed,
            lt1.heart_rate,
            lt2.speed,
            lt2.heart_rate,
        )

        return ResultBundle(
            points=points,
            regressions=regressions,
            lt1=lt1.rounded(),
            lt2=lt2.rounded(),
            dmax_line=dmax_line,
            fixed_lactate_points=fixed,
            efficiency=efficiency,
            zone_anchors=anchors,
            zones=derive_zones(anchors),
            session=session,
            warnings=tuple(warnings),
        )


def calculate_thresholds(
    rows: Iterable[RawStep | Mapping[str, Any]],
    mode: ProtocolMode | str,
    session: SessionDetails | None = None,
) -> ResultBundle:
    """Analyse one session with default settings."""
    return ThresholdEngine().calculate(rows, mode, session=session)
