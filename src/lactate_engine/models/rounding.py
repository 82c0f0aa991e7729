"""Display rounding shared by the result types.

Reported figures round halves away from zero (0.85 + 0.4 -> 1.3,
136.5 bpm -> 137). The builtin ``round()`` rounds halves to even and
would report 1.2 and 136 for the same inputs.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float, decimals: int = 0) -> float | int:
    """Round ``value`` to ``decimals`` places, halves up.

    Works on the shortest decimal representation of the float (``repr``),
    so a value printed as 1.15 rounds to 1.2.

    Returns:
        An int when ``decimals`` is 0, otherwise a float.
    """
    quantum = Decimal(1).scaleb(-decimals)
    rounded = Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP)
    if decimals == 0:
        return int(rounded)
    return float(rounded)
