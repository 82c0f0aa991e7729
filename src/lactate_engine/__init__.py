"""Lactate threshold and training zone engine for step tests."""

from lactate_engine.engine import EngineSettings, ThresholdEngine, calculate_thresholds
from lactate_engine.exceptions import (
    DegenerateGeometryError,
    InsufficientDataError,
    LactateEngineError,
    TableParseError,
)
from lactate_engine.models import ProtocolMode, RawStep, ResultBundle, SessionDetails
from lactate_engine.parsing import parse_step_table

__all__ = [
    "DegenerateGeometryError",
    "EngineSettings",
    "InsufficientDataError",
    "LactateEngineError",
    "ProtocolMode",
    "RawStep",
    "ResultBundle",
    "SessionDetails",
    "TableParseError",
    "ThresholdEngine",
    "calculate_thresholds",
    "parse_step_table",
]
