"""Session metadata carried alongside a calculation for reporting."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SessionDetails:
    """Who was tested, when, and under which conditions.

    The engine never reads these fields; they are copied onto the
    ResultBundle so a report can be rebuilt from the bundle alone.
    """

    athlete_name: str = ""
    test_date: str = ""  # ISO date as typed by the operator
    boat_class: str = "K1 Men"
    protocol: str = ""
    comments: str = ""
    temperature: str = ""
    wind_speed: str = ""
