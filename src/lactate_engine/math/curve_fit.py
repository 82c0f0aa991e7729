"""Polynomial speed→value regression for step-test curves.

Lactate, heart rate and stroke rate are each modelled as a cubic in speed.
Step-test lactate curves are sigmoid-like over the tested range and a cubic
follows the inflection without overfitting five to ten points.

A fitted curve is an immutable value object: coefficients plus a pure
``predict``. It can be evaluated at any real speed, including slightly
outside the observed range.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from lactate_engine.models.enums import (
    CURVE_SAMPLE_COUNT,
    MIN_FIT_R_SQUARED,
    POLYNOMIAL_DEGREE,
    Axis,
)
from lactate_engine.models.step import ValidatedPoint


@dataclass(frozen=True)
class FittedCurve:
    """Least-squares polynomial fit of one axis against speed.

    Attributes:
        axis: Dependent variable that was fitted.
        degree: Polynomial degree.
        coefficients: Highest power first, as returned by numpy.polyfit.
        r_squared: Coefficient of determination of the fit.
    """

    axis: Axis
    degree: int
    coefficients: tuple[float, ...]
    r_squared: float

    def predict(self, speed: float) -> float:
        """Evaluate the curve at a single speed."""
        return float(np.polyval(self.coefficients, speed))

    def predict_many(self, speeds: np.ndarray | Sequence[float]) -> np.ndarray:
        """Evaluate the curve at many speeds at once."""
        return np.polyval(self.coefficients, np.asarray(speeds, dtype=np.float64))

    def equation(self, precision: int = 3) -> str:
        """Human-readable form, e.g. ``y = 0.5x^3 - 1.2x^2 + 2x + 1``."""
        terms: list[str] = []
        for power, coeff in zip(range(self.degree, -1, -1), self.coefficients):
            value = round(coeff, precision)
            if value == 0:
                continue
            sign = "-" if value < 0 else "+"
            magnitude = f"{abs(value):g}"
            if power == 0:
                body = magnitude
            elif power == 1:
                body = f"{magnitude}x"
            else:
                body = f"{magnitude}x^{power}"
            terms.append(f"{sign} {body}")

        if not terms:
            return "y = 0"
        expression = " ".join(terms)
        if expression.startswith("+ "):
            expression = expression[2:]
        elif expression.startswith("- "):
            expression = "-" + expression[2:]
        return f"y = {expression}"


def fit_curve(
    points: Sequence[ValidatedPoint],
    axis: Axis,
    degree: int = POLYNOMIAL_DEGREE,
) -> FittedCurve:
    """Fit ``axis`` as a polynomial in speed with numpy.polyfit.

    The point count is not checked here; the engine refuses sessions that
    are too small before any curve is fitted.

    Args:
        points: Validated points (any order).
        axis: Which ValidatedPoint attribute to model.
        degree: Polynomial degree (3 for the threshold curves).

    Returns:
        FittedCurve with coefficients and R².
    """
    speeds = np.array([p.speed for p in points], dtype=np.float64)
    values = np.array([getattr(p, Axis(axis).value) for p in points], dtype=np.float64)

    coeffs = np.polyfit(speeds, values, degree)

    predicted = np.polyval(coeffs, speeds)
    ss_res = float(np.sum((values - predicted) ** 2))
    ss_tot = float(np.sum((values - np.mean(values)) ** 2))
    r_squared = 1.0 - (ss_res / ss_tot) if ss_tot > 0 else 0.0

    return FittedCurve(
        axis=Axis(axis),
        degree=degree,
        coefficients=tuple(float(c) for c in coeffs),
        r_squared=r_squared,
    )


def sample_curve(
    curve: FittedCurve,
    start: float,
    stop: float,
    count: int = CURVE_SAMPLE_COUNT,
) -> tuple[tuple[float, float], ...]:
    """Evaluate *curve* at *count* evenly spaced speeds from start to stop.

    Used to hand smooth curve series to chart collaborators.
    """
    if count < 2:
        raise ValueError(f"count must be at least 2, got {count}")
    speeds = np.linspace(start, stop, count)
    values = curve.predict_many(speeds)
    return tuple((float(s), float(v)) for s, v in zip(speeds, values))


def validate_fit(curve: FittedCurve, min_r_squared: float = MIN_FIT_R_SQUARED) -> list[str]:
    """Check a fitted curve for plausibility.

    Returns:
        List of warning strings. Empty list means the fit looks sound.
    """
    warnings: list[str] = []
    label = curve.axis.value.replace("_", " ")

    if not all(np.isfinite(curve.coefficients)):
        warnings.append(f"The {label} fit has non-finite coefficients.")
        return warnings

    if curve.r_squared < min_r_squared:
        warnings.append(
            f"Low R²={curve.r_squared:.3f} for the {label} curve "
            f"(expected ≥{min_r_squared:.2f}). Check the entered values."
        )

    return warnings
