# xasprep/core/__init__.py
"""Core utilities shared by the sample-preparation and ion-chamber modules"""

from .validation import (
    check_finite,
    check_positive,
    check_in_closed_01,
    check_in_open_01,
    all_finite,
    XasPrepError,
    InputError,
    ConvergenceError,
)

from .numerical import (
    bisection,
    shrink_bracket,
)

from .inputs import (
    DEFAULT_MAX_POINTS,
    RangeValidation,
    parse_number_or_none,
    clamp_number,
    is_positive_finite,
    validate_range,
)

__all__ = [
    # Validation
    'check_finite', 'check_positive',
    'check_in_closed_01', 'check_in_open_01', 'all_finite',
    'XasPrepError', 'InputError', 'ConvergenceError',
    # Numerical
    'bisection', 'shrink_bracket',
    # Inputs
    'DEFAULT_MAX_POINTS', 'RangeValidation', 'parse_number_or_none',
    'clamp_number', 'is_positive_finite', 'validate_range',
]
