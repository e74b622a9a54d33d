"""Absorption / transmission of a sample + diluent pellet."""

from __future__ import annotations

import math

import pytest

from xasprep.sample.absorption import compute_absorption_metrics, total_absorption


def test_total_absorption_uses_areal_density():
    # 10 mg at 100 cm²/g plus 90 mg at 1 cm²/g over 2 cm²
    assert total_absorption(100.0, 1.0, 10.0, 90.0, 2.0) == pytest.approx(0.5 + 0.045)


def test_metrics_below_and_above_edge():
    metrics = compute_absorption_metrics(
        sample_mu_below=10.0,
        sample_mu_above=100.0,
        diluent_mu_below=1.0,
        diluent_mu_above=1.0,
        sample_mass_mg=10.0,
        diluent_mass_mg=90.0,
        area_cm2=2.0,
    )

    assert metrics is not None
    assert metrics.absorption_below == pytest.approx(0.095)
    assert metrics.absorption_above == pytest.approx(0.545)
    assert metrics.transmission_below == pytest.approx(math.exp(-0.095))
    assert metrics.transmission_above == pytest.approx(math.exp(-0.545))


@pytest.mark.parametrize("area", [0.0, -1.0, math.nan])
def test_metrics_need_positive_area(area):
    assert compute_absorption_metrics(10.0, 100.0, 1.0, 1.0, 10.0, 90.0, area) is None


def test_metrics_reject_non_finite_coefficients():
    assert compute_absorption_metrics(math.inf, 100.0, 1.0, 1.0, 10.0, 90.0, 1.0) is None
