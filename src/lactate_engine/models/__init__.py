"""Data models for the lactate engine."""

from lactate_engine.models.enums import Axis, ProtocolMode, ZoneDomain
from lactate_engine.models.result import (
    DmaxLine,
    EfficiencyPoint,
    FixedLactatePoint,
    Regressions,
    ResultBundle,
    ThresholdPoint,
)
from lactate_engine.models.session import SessionDetails
from lactate_engine.models.step import RawStep, ValidatedPoint

__all__ = [
    "Axis",
    "DmaxLine",
    "EfficiencyPoint",
    "FixedLactatePoint",
    "ProtocolMode",
    "RawStep",
    "Regressions",
    "ResultBundle",
    "SessionDetails",
    "ThresholdPoint",
    "ValidatedPoint",
    "ZoneDomain",
]
