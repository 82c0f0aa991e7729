"""Parse step tables pasted from a spreadsheet into RawStep rows.

Accepted layout, one step per line, columns in RawStep order:

    step, planned, achieved, secondary, lactate[, stroke_rate, ...]

Cells are separated by tabs (spreadsheet paste), semicolons or commas. With
tab or semicolon separators a decimal comma ("3,5") is accepted. An optional
header line is skipped. Extra trailing columns are ignored.
"""

from __future__ import annotations

import math

from lactate_engine.exceptions import TableParseError
from lactate_engine.models.enums import MAX_EFFORT_MARKER
from lactate_engine.models.step import Cell, RawStep

_MIN_COLUMNS = 5


def _detect_delimiter(lines: list[str]) -> str:
    if any("\t" in line for line in lines):
        return "\t"
    if any(";" in line for line in lines):
        return ";"
    return ","


def parse_cell(text: str, decimal_comma: bool = False) -> Cell:
    """Convert one cell to a float, the max-effort marker, or None.

    Empty and non-numeric cells become None; "max" in any case becomes
    ``MAX_EFFORT_MARKER`` and is never read as a number.
    """
    text = text.strip()
    if not text:
        return None
    if text.lower() == MAX_EFFORT_MARKER.lower():
        return MAX_EFFORT_MARKER
    if decimal_comma:
        text = text.replace(",", ".")
    try:
        value = float(text)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def _is_header(cells: list[str]) -> bool:
    first = cells[0].strip()
    return bool(first) and parse_cell(first) is None


def parse_step_table(text: str) -> tuple[RawStep, ...]:
    """Parse a delimited step table.

    Args:
        text: Table text; blank lines are ignored.

    Returns:
        RawStep rows in input order. Step numbers that are missing or not
        whole numbers fall back to the row position (1-based).

    Raises:
        TableParseError: If a data line has fewer than five cells.
    """
    numbered = [(n, line) for n, line in enumerate(text.splitlines(), start=1) if line.strip()]
    if not numbered:
        return ()

    delimiter = _detect_delimiter([line for _, line in numbered])
    decimal_comma = delimiter != ","

    rows: list[RawStep] = []
    for index, (line_number, line) in enumerate(numbered):
        cells = line.split(delimiter)
        if index == 0 and _is_header(cells):
            continue
        if len(cells) < _MIN_COLUMNS:
            raise TableParseError(
                f"Line {line_number}: expected at least {_MIN_COLUMNS} columns, "
                f"got {len(cells)}",
                line_number=line_number,
            )

        parsed = [parse_cell(cell, decimal_comma) for cell in cells]
        step = parsed[0]
        position = len(rows) + 1
        if not isinstance(step, float) or not step.is_integer():
            step = position

        rows.append(
            RawStep(
                step=int(step),
                planned=parsed[1],
                achieved=parsed[2],
                secondary=parsed[3],
                lactate=parsed[4],
                stroke_rate=parsed[5] if len(parsed) > 5 else None,
            )
        )
    return tuple(rows)
