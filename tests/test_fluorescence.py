"""
Tests for the fluorescence self-absorption feasibility solver.

The evaluator stands in for the physics provider: a linear R%(x) with a
known boundary at R% = 90.
"""

from __future__ import annotations

import math

import pytest

from xasprep.core.validation import InputError
from xasprep.sample.fluorescence import (
    FluorescenceSolveSpec,
    solve_dilution_for_fluorescence,
    solve_thickness_for_fluorescence,
)
from xasprep.sample.suitability import classify_fluorescence


def _linear(x: float) -> float:
    # R% = 90 at x = 0.5
    return 100.0 - 20.0 * x


def test_refines_boundary():
    result = solve_dilution_for_fluorescence(FluorescenceSolveSpec(0.0, 1.0, _linear))

    assert result.feasible is True
    assert result.value == pytest.approx(0.5, abs=1e-5)
    assert result.min_retained_percent == pytest.approx(90.0, abs=0.1)
    assert result.min_retained_percent >= 90.0
    assert result.converged is True


@pytest.mark.parametrize("k", [0.3, 0.5, 0.7, 0.9, 1.1, 1.3, 2.0])
def test_exponential_decay_stays_on_feasible_side(k):
    result = solve_dilution_for_fluorescence(
        FluorescenceSolveSpec(0.0, 1.0, lambda x: 100.0 * math.exp(-k * x))
    )
    boundary = math.log(100.0 / 90.0) / k

    assert result.feasible is True
    assert result.min_retained_percent >= 90.0
    assert classify_fluorescence(result.min_retained_percent).suitable is True
    assert result.value <= boundary + 1e-12
    assert result.value == pytest.approx(boundary, abs=1e-5)


def test_undefined_points_inside_refinement_count_as_failing():
    # grid points 31/63 and 32/63 bracket the boundary at 0.5 and stay defined
    def evaluate(x):
        if 0.5 < x < 0.507:
            return None
        return _linear(x)

    result = solve_dilution_for_fluorescence(FluorescenceSolveSpec(0.0, 1.0, evaluate))

    assert result.feasible is True
    assert result.note is None
    assert result.value == pytest.approx(0.5, abs=1e-5)
    assert result.min_retained_percent >= 90.0


def test_thickness_and_dilution_agree():
    spec = FluorescenceSolveSpec(0.0, 1.0, _linear)
    assert solve_thickness_for_fluorescence(spec) == solve_dilution_for_fluorescence(spec)


def test_feasible_everywhere_returns_upper_bound():
    result = solve_dilution_for_fluorescence(FluorescenceSolveSpec(0.0, 2.0, lambda x: 95.0))

    assert result.feasible is True
    assert result.value == pytest.approx(2.0)
    assert result.iterations == 0
    assert result.note == "Feasible at upper search bound"


def test_infeasible_everywhere_reports_reason():
    result = solve_dilution_for_fluorescence(FluorescenceSolveSpec(0.0, 1.0, lambda x: 50.0 + x))

    assert result.feasible is False
    assert result.value == 0.0
    assert result.min_retained_percent == pytest.approx(51.0)
    assert "No value in" in result.reason
    assert "min R >= 90.0%" in result.reason


def test_undefined_points_are_skipped():
    def evaluate(x):
        return None if x > 0.8 else 100.0 - 5.0 * x

    result = solve_dilution_for_fluorescence(FluorescenceSolveSpec(0.0, 1.0, evaluate))

    assert result.feasible is True
    assert result.value == pytest.approx(50 / 63)
    assert result.note == "No failing point found above sampled feasible values"


def test_evaluation_errors_are_treated_as_undefined():
    def evaluate(x):
        if x == 0.0:
            raise ZeroDivisionError("zero thickness")
        return _linear(x)

    result = solve_thickness_for_fluorescence(FluorescenceSolveSpec(0.0, 1.0, evaluate))
    assert result.value == pytest.approx(0.5, abs=1e-5)


def test_custom_target():
    spec = FluorescenceSolveSpec(0.0, 1.0, _linear, target_min_retained_percent=95.0)
    assert solve_dilution_for_fluorescence(spec).value == pytest.approx(0.25, abs=1e-5)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"min_value": 1.0, "max_value": 1.0},
        {"min_value": 2.0, "max_value": 1.0},
        {"min_value": 0.0, "max_value": float("inf")},
        {"min_value": 0.0, "max_value": 1.0, "value_tolerance": 0.0},
        {"min_value": 0.0, "max_value": 1.0, "max_iterations": 0},
    ],
)
def test_invalid_spec_raises(kwargs):
    with pytest.raises(InputError):
        solve_dilution_for_fluorescence(FluorescenceSolveSpec(
            evaluate_min_retained_percent=_linear, **kwargs,
        ))
