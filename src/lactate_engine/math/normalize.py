"""Normalization of raw step rows into validated, speed-ordered points.

The meaning of each raw column depends on the protocol mode. The mapping is
the fixed table ``COLUMN_MAPPINGS``; nothing is inferred from the data.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable

from lactate_engine.models.enums import COLUMN_MAPPINGS, ProtocolMode
from lactate_engine.models.step import Cell, RawStep, ValidatedPoint

logger = logging.getLogger(__name__)


def to_number(cell: Cell) -> float:
    """Coerce a table cell to float, returning NaN for anything non-numeric.

    None, booleans, strings (including the "Max" marker) and non-finite
    values all map to NaN. Strings are never parsed here; text input goes
    through ``lactate_engine.parsing`` first.
    """
    if cell is None or isinstance(cell, (bool, str)):
        return math.nan
    try:
        value = float(cell)
    except (TypeError, ValueError):
        return math.nan
    return value if math.isfinite(value) else math.nan


def map_row(row: RawStep, mode: ProtocolMode) -> ValidatedPoint | None:
    """Relabel one raw row for *mode*, or return None if the row is unusable.

    A row is usable when heart rate, speed and lactate are all positive
    numbers. A missing or negative stroke rate becomes 0.0.
    """
    hr_column, speed_column, sr_column = COLUMN_MAPPINGS[ProtocolMode(mode)]
    heart_rate = to_number(getattr(row, hr_column))
    speed = to_number(getattr(row, speed_column))
    lactate = to_number(row.lactate)
    stroke_rate = to_number(getattr(row, sr_column))

    # NaN fails every comparison, so non-numeric cells drop out here too
    if not (heart_rate > 0 and speed > 0 and lactate > 0):
        return None

    return ValidatedPoint(
        heart_rate=heart_rate,
        speed=speed,
        lactate=lactate,
        stroke_rate=stroke_rate if stroke_rate > 0 else 0.0,
    )


def normalize(
    rows: Iterable[RawStep],
    mode: ProtocolMode,
) -> tuple[ValidatedPoint, ...]:
    """Map raw rows to validated points sorted by speed.

    Invalid rows are dropped silently. The sort is stable, so steps with
    equal speed keep their entry order.

    Args:
        rows: Raw step rows in entry order.
        mode: Protocol mode selecting the column relabelling.

    Returns:
        Validated points in ascending speed order. May be empty; the point
        count is checked by the engine, not here.
    """
    rows = tuple(rows)
    points = [p for p in (map_row(row, mode) for row in rows) if p is not None]

    dropped = len(rows) - len(points)
    if dropped:
        logger.debug("Dropped %d of %d rows without valid HR/speed/lactate", dropped, len(rows))

    return tuple(sorted(points, key=lambda p: p.speed))
