"""JSON serialization of a ResultBundle for report and chart collaborators.

Keys are camelCase to match what the front-end consumes. Regressions are
exported as coefficients plus a sampled curve series across the observed
speed range, so no polynomial evaluation is needed downstream.

All functions are pure (no I/O).
"""

from __future__ import annotations

import json

from lactate_engine.math.curve_fit import FittedCurve, sample_curve
from lactate_engine.math.zones import Zone, ZoneRange
from lactate_engine.models.enums import CURVE_SAMPLE_COUNT
from lactate_engine.models.result import ResultBundle, ThresholdPoint


def to_result_dict(bundle: ResultBundle, curve_samples: int = CURVE_SAMPLE_COUNT) -> dict:
    """Convert a ResultBundle to a JSON-compatible dict.

    ``regressions.sr`` is omitted and ``efficiencyData`` is None when the
    session has no stroke-rate data.
    """
    first, last = bundle.points[0].speed, bundle.points[-1].speed

    regressions = {
        "lactate": _curve_dict(bundle.regressions.lactate, first, last, curve_samples),
        "hr": _curve_dict(bundle.regressions.heart_rate, first, last, curve_samples),
        "hrLinear": _curve_dict(bundle.regressions.heart_rate_linear, first, last, curve_samples),
    }
    if bundle.regressions.stroke_rate is not None:
        regressions["sr"] = _curve_dict(bundle.regressions.stroke_rate, first, last, curve_samples)

    efficiency = None
    if bundle.efficiency is not None:
        efficiency = [
            {"step": e.step, "efficiency": e.efficiency, "percentChange": e.percent_change}
            for e in bundle.efficiency
        ]

    line = bundle.dmax_line
    anchors = bundle.zone_anchors

    return {
        "parsedData": [
            {"hr": p.heart_rate, "speed": p.speed, "lactate": p.lactate, "sr": p.stroke_rate}
            for p in bundle.points
        ],
        "efficiencyData": efficiency,
        "regressions": regressions,
        "thresholds": {
            "lt1": _threshold_dict(bundle.lt1),
            "lt2": _threshold_dict(bundle.lt2),
            "modDmaxLine": {
                "start": {"x": line.start_speed, "y": line.start_lactate},
                "end": {"x": line.end_speed, "y": line.end_lactate},
            },
        },
        "fixedLactatePoints": {
            f"{point.target_mmol:g}": {"hr": point.heart_rate, "speed": point.speed}
            for point in bundle.fixed_lactate_points
        },
        "trainingZones": {
            "maxHr": anchors.max_hr,
            "lt1Hr": anchors.lt1_hr,
            "lt2Hr": anchors.lt2_hr,
            "maxSpeed": anchors.max_speed,
            "lt1Speed": anchors.lt1_speed,
            "lt2Speed": anchors.lt2_speed,
        },
        "zones": [_zone_dict(zone) for zone in bundle.zones],
        "session": _session_dict(bundle),
        "warnings": list(bundle.warnings),
    }


def to_json_string(
    bundle: ResultBundle,
    indent: int | None = 2,
    curve_samples: int = CURVE_SAMPLE_COUNT,
) -> str:
    """Convert a ResultBundle to a JSON string."""
    return json.dumps(to_result_dict(bundle, curve_samples), indent=indent, ensure_ascii=False)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _curve_dict(curve: FittedCurve, start: float, stop: float, samples: int) -> dict:
    return {
        "equation": list(curve.coefficients),
        "r2": curve.r_squared,
        "string": curve.equation(),
        "points": [[x, y] for x, y in sample_curve(curve, start, stop, samples)],
    }


def _threshold_dict(point: ThresholdPoint) -> dict:
    return {"hr": point.heart_rate, "speed": point.speed, "lactate": point.lactate}


def _range_dict(value: ZoneRange | None) -> dict | None:
    if value is None:
        return None
    return {"lower": value.lower, "upper": value.upper}


def _zone_dict(zone: Zone) -> dict:
    return {
        "zone": zone.label,
        "descriptor": zone.descriptor,
        "domain": zone.domain.name,
        "hr": _range_dict(zone.hr_range),
        "speed": _range_dict(zone.speed_range),
        "vo2": list(zone.vo2max_pct) if zone.vo2max_pct is not None else None,
        "rpe": zone.rpe,
        "duration": zone.duration,
    }


def _session_dict(bundle: ResultBundle) -> dict | None:
    if bundle.session is None:
        return None
    return {
        "athleteName": bundle.session.athlete_name,
        "testDate": bundle.session.test_date,
        "boatClass": bundle.session.boat_class,
        "protocol": bundle.session.protocol,
        "comments": bundle.session.comments,
        "temperature": bundle.session.temperature,
        "windSpeed": bundle.session.wind_speed,
    }
