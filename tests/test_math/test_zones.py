"""Tests for the eight-zone training model."""

from __future__ import annotations

import pytest

from lactate_engine.math.zones import ZoneAnchors, ZoneRange, derive_zones, zone_boundaries
from lactate_engine.models.enums import ZoneDomain

_ANCHORS = ZoneAnchors(
    max_hr=190.0,
    max_speed=4.8,
    lt1_hr=150.4,
    lt1_speed=3.62,
    lt2_hr=171.6,
    lt2_speed=4.30,
)


def _zone(label: str):
    return next(z for z in derive_zones(_ANCHORS) if z.label == label)


class TestZoneTemplates:
    def test_eight_zones_in_order(self) -> None:
        zones = derive_zones(_ANCHORS)
        assert [z.label for z in zones] == [f"T{i}" for i in range(1, 9)]

    def test_domains(self) -> None:
        domains = [z.domain for z in derive_zones(_ANCHORS)]
        assert domains == [
            ZoneDomain.MODERATE,
            ZoneDomain.MODERATE,
            ZoneDomain.HEAVY,
            ZoneDomain.HEAVY,
            ZoneDomain.SEVERE,
            ZoneDomain.EXTREME,
            ZoneDomain.EXTREME,
            ZoneDomain.EXTREME,
        ]

    @pytest.mark.parametrize("label", ["T6", "T7", "T8"])
    def test_anaerobic_zones_have_no_bounds(self, label: str) -> None:
        zone = _zone(label)
        assert zone.hr_range is None
        assert zone.speed_range is None
        assert zone.vo2max_pct is None
        assert zone.rpe == "Maximal (10) [20]"

    def test_descriptors(self) -> None:
        assert _zone("T1").descriptor == "Light Aerobic"
        assert _zone("T4").descriptor == "Threshold"
        assert _zone("T8").descriptor == "Neuro-muscular Power"

    def test_vo2max_and_duration(self) -> None:
        t3 = _zone("T3")
        assert t3.vo2max_pct == (70, 85)
        assert t3.duration == "45 - 90 min"


class TestZoneBoundaries:
    def test_heart_rate_bounds(self) -> None:
        bounds = zone_boundaries(_ANCHORS)
        assert bounds["T1"][0] == ZoneRange(None, 133)
        assert bounds["T2"][0] == ZoneRange(133, 150)
        assert bounds["T3"][0] == ZoneRange(150, 161)
        assert bounds["T4"][0] == ZoneRange(161, 172)
        assert bounds["T5"][0] == ZoneRange(172, None)

    def test_speed_bounds(self) -> None:
        bounds = zone_boundaries(_ANCHORS)
        assert bounds["T1"][1] == ZoneRange(None, 3.6)
        assert bounds["T2"][1] == ZoneRange(3.6, 3.62)
        assert bounds["T3"][1] == ZoneRange(3.62, 3.96)
        assert bounds["T4"][1] == ZoneRange(3.96, 4.3)
        assert bounds["T5"][1] == ZoneRange(4.3, None)

    def test_bounded_zones_are_contiguous(self) -> None:
        zones = derive_zones(_ANCHORS)[:5]
        for lower, upper in zip(zones, zones[1:]):
            assert lower.hr_range.upper == upper.hr_range.lower
            assert lower.speed_range.upper == upper.speed_range.lower

    def test_heart_rates_are_integers(self) -> None:
        for zone in derive_zones(_ANCHORS)[:5]:
            for value in (zone.hr_range.lower, zone.hr_range.upper):
                assert value is None or isinstance(value, int)

    def test_different_thresholds_move_bounds(self) -> None:
        faster = ZoneAnchors(190.0, 4.8, 155.0, 3.9, 175.0, 4.5)
        assert zone_boundaries(faster)["T3"] != zone_boundaries(_ANCHORS)["T3"]


    def test_half_beat_rounds_up(self) -> None:
        # 195 × 0.70 = 136.5 bpm
        anchors = ZoneAnchors(195.0, 4.8, 150.0, 3.6, 171.0, 4.3)
        assert zone_boundaries(anchors)["T1"][0].upper == 137
        assert zone_boundaries(anchors)["T2"][0].lower == 137

    def test_half_beat_midpoint_rounds_up(self) -> None:
        # midpoint of 150 and 171 is 160.5 bpm
        anchors = ZoneAnchors(190.0, 4.8, 150.0, 3.6, 171.0, 4.3)
        assert zone_boundaries(anchors)["T3"][0].upper == 161
        assert zone_boundaries(anchors)["T4"][0].lower == 161
