# xasprep/core/validation.py
"""Shared exceptions and argument checks"""
from typing import Union
import math


class XasPrepError(Exception):
    """Base exception for all sample-preparation calculations"""
    pass


class InputError(XasPrepError):
    """Invalid input parameters"""
    pass


class ConvergenceError(XasPrepError):
    """Numerical method failed to converge"""
    pass


def check_finite(name: str, value: Union[float, int]) -> float:
    """Check value is a finite number"""
    v = float(value)
    if not math.isfinite(v):
        raise InputError(f"{name} must be finite, got {v}")
    return v


def check_positive(name: str, value: Union[float, int]) -> float:
    """Check value is positive"""
    v = check_finite(name, value)
    if v <= 0:
        raise InputError(f"{name} must be > 0, got {v}")
    return v


def check_in_closed_01(name: str, value: float) -> float:
    """Check value in [0, 1]"""
    v = float(value)
    if not (0.0 <= v <= 1.0):
        raise InputError(f"{name} must be in [0, 1], got {v}")
    return v


def check_in_open_01(name: str, value: float) -> float:
    """Check value in [0, 1)"""
    v = float(value)
    if not (0.0 <= v < 1.0):
        raise InputError(f"{name} must satisfy 0 <= {name} < 1, got {v}")
    return v


def all_finite(*values: float) -> bool:
    """True when every value is a finite real number"""
    try:
        return all(math.isfinite(float(v)) for v in values)
    except (TypeError, ValueError):
        return False
