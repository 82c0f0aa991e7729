"""Enumerations and physiological constants for the lactate engine.

Constants cite their published source where one exists.
"""

from enum import Enum, IntEnum


class ProtocolMode(str, Enum):
    """Which quantity the operator controlled during the step test.

    The controlled quantity is entered in the "achieved" column; the other
    columns are relabelled accordingly (see ``COLUMN_MAPPINGS``).
    """

    HEART_RATE = "hr"
    SPEED = "speed"
    STROKE_RATE = "sr"


class Axis(str, Enum):
    """Dependent variable of a fitted curve (speed is always the x axis)."""

    LACTATE = "lactate"
    HEART_RATE = "heart_rate"
    STROKE_RATE = "stroke_rate"


class ZoneDomain(IntEnum):
    """Exercise intensity domains used to group the training zones."""

    MODERATE = 1
    HEAVY = 2
    SEVERE = 3
    EXTREME = 4


# ---------------------------------------------------------------------------
# Column relabelling per protocol mode
# ---------------------------------------------------------------------------

# ProtocolMode → (heart_rate column, speed column, stroke_rate column),
# naming RawStep attributes.
COLUMN_MAPPINGS: dict[ProtocolMode, tuple[str, str, str]] = {
    ProtocolMode.HEART_RATE: ("achieved", "secondary", "stroke_rate"),
    ProtocolMode.SPEED: ("secondary", "achieved", "stroke_rate"),
    ProtocolMode.STROKE_RATE: ("stroke_rate", "secondary", "achieved"),
}

# Operator-facing column headers for each protocol mode, in RawStep order
# (step, planned, achieved, secondary, lactate, stroke_rate).
TABLE_HEADERS: dict[ProtocolMode, tuple[str, ...]] = {
    ProtocolMode.HEART_RATE: (
        "Step", "HR Planned (BPM)", "HR Achieved (BPM)",
        "Speed (m/s)", "Lactate (mmol)", "Stroke Rate (spm)",
    ),
    ProtocolMode.SPEED: (
        "Step", "Speed Planned (m/s)", "Speed Achieved (m/s)",
        "Heart Rate (BPM)", "Lactate (mmol)", "Stroke Rate (spm)",
    ),
    ProtocolMode.STROKE_RATE: (
        "Step", "SR Planned (spm)", "SR Achieved (spm)",
        "Speed (m/s)", "Lactate (mmol)", "Heart Rate (BPM)",
    ),
}

# Marker typed into the planned column of the final, all-out step.
MAX_EFFORT_MARKER = "Max"

BOAT_CLASSES: tuple[str, ...] = (
    "K1 Men",
    "K1 Women",
    "C1 Men",
    "C1 Women",
    "Kayak Cross Men",
    "Kayak Cross Women",
    "Other",
)

# ---------------------------------------------------------------------------
# Threshold model constants
# ---------------------------------------------------------------------------

# Minimum validated steps before any curve is fitted. A cubic has 4
# coefficients; one extra point leaves a residual degree of freedom.
MIN_VALIDATED_POINTS = 5

# Cubic speed→value model; captures the lactate inflection with 5-10 steps
POLYNOMIAL_DEGREE = 3

# LT1: lowest measured lactate + 0.4 mmol/L
# Faude, Kindermann & Meyer (2009), Sports Med 39(6):469-490
LT1_LACTATE_OFFSET_MMOL = 0.4

# Modified Dmax: line starts before the first rise > 0.4 mmol/L
# Bishop, Jenkins & Mackinnon (1998), Med Sci Sports Exerc 30(8):1270-1275
DMAX_LACTATE_RISE_MMOL = 0.4

# Discretisation of every curve search (samples = steps + 1)
SEARCH_STEPS = 1000

# Fixed blood lactate reference concentrations (mmol/L).
# 4 mmol/L = OBLA — Heck et al. (1985), Int J Sports Med 6(3):117-130
FIXED_LACTATE_TARGETS_MMOL: tuple[float, ...] = (2.0, 4.0, 6.0)

# Points per curve handed to chart collaborators
CURVE_SAMPLE_COUNT = 101

# Minimum coefficient of determination before a fit is flagged
MIN_FIT_R_SQUARED = 0.9

# ---------------------------------------------------------------------------
# Training zone constants
# ---------------------------------------------------------------------------

ZONE_HR_FRACTION_OF_MAX = 0.70  # T1/T2 boundary as a fraction of max HR
ZONE_SPEED_FRACTION_OF_MAX = 0.75  # T1/T2 boundary as a fraction of max speed

# ---------------------------------------------------------------------------
# Display precision (decimal places) for reported numbers
# ---------------------------------------------------------------------------

SPEED_DECIMALS = 1
LACTATE_DECIMALS = 1
EFFICIENCY_DECIMALS = 3
PERCENT_CHANGE_DECIMALS = 1
ZONE_SPEED_DECIMALS = 2
