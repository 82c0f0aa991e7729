"""Step-test rows: raw operator input and the validated points computed on."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

Cell = float | int | str | None


@dataclass(frozen=True)
class RawStep:
    """One test step exactly as entered by the operator.

    Column meaning depends on the session's ProtocolMode: ``achieved`` holds
    whatever quantity was controlled, ``secondary`` and ``stroke_rate`` hold
    the others. ``planned`` is never read by the engine; on the final step
    it usually carries the "Max" marker.
    """

    step: int
    planned: Cell = None
    achieved: Cell = None
    secondary: Cell = None
    lactate: Cell = None
    stroke_rate: Cell = None

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any], default_step: int = 0) -> RawStep:
        """Build a RawStep from a dict, e.g. a parsed JSON row.

        Unknown keys are ignored; missing cells become None.
        """
        step = row.get("step")
        if not isinstance(step, int) or isinstance(step, bool):
            step = default_step
        return cls(
            step=step,
            planned=row.get("planned"),
            achieved=row.get("achieved"),
            secondary=row.get("secondary"),
            lactate=row.get("lactate"),
            stroke_rate=row.get("stroke_rate"),
        )


@dataclass(frozen=True)
class ValidatedPoint:
    """Canonical step the engine computes on.

    heart_rate, speed and lactate are always > 0. stroke_rate is 0.0 when the
    step has no stroke data.
    """

    heart_rate: float
    speed: float
    lactate: float
    stroke_rate: float = 0.0

    @property
    def has_stroke_rate(self) -> bool:
        return self.stroke_rate > 0
