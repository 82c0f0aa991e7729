"""Eight-zone training model anchored on LT1, LT2 and session maxima.

T1–T5 cover the aerobic continuum and get heart-rate and speed bounds; T6–T8
describe anaerobic efforts outside the lactate model and carry no bounds.
The intensity domains only group zones for display.
"""

from __future__ import annotations

from dataclasses import dataclass

from lactate_engine.models.enums import (
    ZONE_HR_FRACTION_OF_MAX,
    ZONE_SPEED_DECIMALS,
    ZONE_SPEED_FRACTION_OF_MAX,
    ZoneDomain,
)
from lactate_engine.models.rounding import round_half_up


@dataclass(frozen=True)
class ZoneAnchors:
    """Unrounded values the zone bounds are derived from."""

    max_hr: float
    max_speed: float
    lt1_hr: float
    lt1_speed: float
    lt2_hr: float
    lt2_speed: float


@dataclass(frozen=True)
class ZoneRange:
    """Closed interval; None marks an open end ("< upper" or "> lower")."""

    lower: float | None
    upper: float | None


@dataclass(frozen=True)
class Zone:
    """A training zone. hr_range/speed_range/vo2max_pct are None when n/a."""

    label: str
    descriptor: str
    domain: ZoneDomain
    hr_range: ZoneRange | None
    speed_range: ZoneRange | None
    vo2max_pct: tuple[int, int] | None
    rpe: str
    duration: str


# label → (descriptor, domain, %VO2max, session RPE (1-10) [6-20], work duration)
_ZONE_TEMPLATES: dict[str, tuple[str, ZoneDomain, tuple[int, int] | None, str, str]] = {
    "T1": ("Light Aerobic", ZoneDomain.MODERATE, (50, 60),
           "Very Light - Light (1-2) [7-11]", "1 - 6 h"),
    "T2": ("Moderate Aerobic", ZoneDomain.MODERATE, (60, 75),
           "Light - Somewhat Hard (2-4) [11-13]", "1 - 3 h"),
    "T3": ("Heavy Aerobic", ZoneDomain.HEAVY, (70, 85),
           "Somewhat Hard - Hard (4-5) [13-15]", "45 - 90 min"),
    "T4": ("Threshold", ZoneDomain.HEAVY, (80, 90),
           "Somewhat Hard - Very Hard (5-7) [15-17]", "30 - 60 min"),
    "T5": ("Maximal Aerobic", ZoneDomain.SEVERE, (90, 100),
           "Very Hard - Maximal (7-10) [17-20]", "12 - 30 min"),
    "T6": ("Speed/Power Tolerance", ZoneDomain.EXTREME, None,
           "Maximal (10) [20]", "4 - 12 min"),
    "T7": ("Speed/Power Production", ZoneDomain.EXTREME, None,
           "Maximal (10) [20]", "2 - 6 min"),
    "T8": ("Neuro-muscular Power", ZoneDomain.EXTREME, None,
           "Maximal (10) [20]", "10 s - 2 min"),
}


def zone_boundaries(anchors: ZoneAnchors) -> dict[str, tuple[ZoneRange, ZoneRange]]:
    """Heart-rate and speed ranges for the bounded zones T1–T5.

    Heart rates are whole beats; speeds are rounded to 2 dp.
    """
    hr_70 = round_half_up(anchors.max_hr * ZONE_HR_FRACTION_OF_MAX)
    hr_lt1 = round_half_up(anchors.lt1_hr)
    hr_lt2 = round_half_up(anchors.lt2_hr)
    hr_mid = round_half_up(anchors.lt1_hr + (anchors.lt2_hr - anchors.lt1_hr) / 2)

    def _speed(value: float) -> float:
        return round_half_up(value, ZONE_SPEED_DECIMALS)

    s_75 = _speed(anchors.max_speed * ZONE_SPEED_FRACTION_OF_MAX)
    s_lt1 = _speed(anchors.lt1_speed)
    s_lt2 = _speed(anchors.lt2_speed)
    s_mid = _speed(anchors.lt1_speed + (anchors.lt2_speed - anchors.lt1_speed) / 2)

    return {
        "T1": (ZoneRange(None, hr_70), ZoneRange(None, s_75)),
        "T2": (ZoneRange(hr_70, hr_lt1), ZoneRange(s_75, s_lt1)),
        "T3": (ZoneRange(hr_lt1, hr_mid), ZoneRange(s_lt1, s_mid)),
        "T4": (ZoneRange(hr_mid, hr_lt2), ZoneRange(s_mid, s_lt2)),
        "T5": (ZoneRange(hr_lt2, None), ZoneRange(s_lt2, None)),
    }


def derive_zones(anchors: ZoneAnchors) -> tuple[Zone, ...]:
    """Build the eight training zones T1–T8 for one session."""
    bounds = zone_boundaries(anchors)
    zones: list[Zone] = []
    for label, (descriptor, domain, vo2max, rpe, duration) in _ZONE_TEMPLATES.items():
        hr_range, speed_range = bounds.get(label, (None, None))
        zones.append(
            Zone(
                label=label,
                descriptor=descriptor,
                domain=domain,
                hr_range=hr_range,
                speed_range=speed_range,
                vo2max_pct=vo2max,
                rpe=rpe,
                duration=duration,
            )
        )
    return tuple(zones)
