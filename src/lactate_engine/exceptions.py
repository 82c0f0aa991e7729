"""Exception hierarchy for the lactate engine."""

from __future__ import annotations


class LactateEngineError(Exception):
    """Base exception for all lactate_engine errors."""


class InsufficientDataError(LactateEngineError):
    """Too few valid steps survived normalization to fit the curves."""

    def __init__(self, point_count: int, required: int) -> None:
        super().__init__(
            f"Not enough valid data points. A minimum of {required} points "
            f"are required for this analysis, got {point_count}."
        )
        self.point_count = point_count
        self.required = required


class DegenerateGeometryError(LactateEngineError):
    """The Modified Dmax reference line collapses to a single point."""


class TableParseError(LactateEngineError):
    """A pasted step table could not be split into rows of cells."""

    def __init__(self, message: str, line_number: int | None = None) -> None:
        super().__init__(message)
        self.line_number = line_number
