"""Numeric input helpers used ahead of the solvers (parsing, clamping, ranges)"""
from dataclasses import dataclass
from typing import Optional, Union
import math

DEFAULT_MAX_POINTS = 50000


@dataclass(frozen=True)
class RangeValidation:
    """Outcome of validate_range"""
    valid: bool
    points: int
    error: Optional[str]


def parse_number_or_none(value: Union[str, float, int]) -> Optional[float]:
    """Finite float from a number or a user-typed string, else None"""
    if isinstance(value, (int, float)):
        v = float(value)
        return v if math.isfinite(v) else None
    text = value.strip()
    if not text:
        return None
    try:
        parsed = float(text)
    except ValueError:
        return None
    return parsed if math.isfinite(parsed) else None


def clamp_number(value: float, lo: float, hi: float) -> float:
    return min(hi, max(lo, value))


def is_positive_finite(value: float) -> bool:
    return math.isfinite(value) and value > 0


def validate_range(
    start: float,
    end: float,
    step: float,
    max_points: int = DEFAULT_MAX_POINTS,
) -> RangeValidation:
    """
    Check an energy-style scan range before it is handed to a calculation.

    Args:
        start: First value of the range
        end: Last value of the range (must exceed start)
        step: Spacing between points (must be > 0)
        max_points: Largest point count accepted

    Returns:
        RangeValidation with the point count floor((end - start)/step) + 1
        and, when invalid, the reason as a user-facing message
    """
    if not (math.isfinite(start) and math.isfinite(end) and math.isfinite(step)):
        return RangeValidation(False, 0, "Range values must be finite numbers")
    if step <= 0:
        return RangeValidation(False, 0, "Step must be greater than zero")
    if end <= start:
        return RangeValidation(False, 0, "End must be greater than start")

    points = math.floor((end - start) / step) + 1
    if points <= 1:
        return RangeValidation(False, points, "Range must contain at least two points")
    if points > max_points:
        return RangeValidation(
            False,
            points,
            f"Range is too dense ({points} points). Increase step or reduce span",
        )
    return RangeValidation(True, points, None)
