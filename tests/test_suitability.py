"""Threshold tests for transmission / fluorescence verdicts."""

from __future__ import annotations

import math

import pytest

from xasprep.sample.suitability import (
    classify_fluorescence,
    classify_transmission,
    classify_transmission_sample,
    summarize_suitability,
)


@pytest.mark.parametrize("mu, expected", [(3.99, True), (4.0, False), (4.01, False), (0.0, True)])
def test_transmission_threshold_is_strict(mu, expected):
    verdict = classify_transmission(mu)
    assert verdict.suitable is expected
    assert verdict.value == mu


@pytest.mark.parametrize("r, expected", [(89.9, False), (90.0, True), (90.1, True), (100.0, True)])
def test_fluorescence_threshold_is_inclusive(r, expected):
    verdict = classify_fluorescence(r)
    assert verdict.suitable is expected
    assert verdict.value == r


def test_labels():
    assert classify_transmission(1.0).label == "Transmission suitable"
    assert classify_transmission(4.0).label == "Transmission not suitable (μt at or above 4.0)"
    assert classify_fluorescence(95.0).label == "Fluorescence suitable"
    assert classify_fluorescence(80.0).label == "Moderate self-absorption"


def test_nan_is_not_suitable():
    assert classify_transmission(math.nan).suitable is False
    assert classify_fluorescence(math.nan).suitable is False


@pytest.mark.parametrize(
    "transmission_ok, fluorescence_ok, expected",
    [
        (True, True, "Transmission suitable / Fluorescence suitable"),
        (False, True, "Transmission not suitable / Fluorescence suitable"),
        (True, False, "Transmission suitable / Fluorescence not suitable"),
        (False, False, "Transmission not suitable / Fluorescence not suitable"),
    ],
)
def test_summary_label(transmission_ok, fluorescence_ok, expected):
    assert summarize_suitability(transmission_ok, fluorescence_ok) == expected


# ============================================================================
# Pellet check: edge-step window plus μt
# ============================================================================


@pytest.mark.parametrize("edge_step", [0.2, 1.0, 2.0])
def test_pellet_inside_window_is_suitable(edge_step):
    verdict = classify_transmission_sample(edge_step, 2.5)
    assert verdict.suitable is True
    assert verdict.value == 2.5
    assert verdict.label == "Transmission suitable"


@pytest.mark.parametrize(
    "edge_step, mu, label",
    [
        (0.1, 2.0, "Transmission not suitable (edge step out of 0.2-2.0)"),
        (2.5, 2.0, "Transmission not suitable (edge step out of 0.2-2.0)"),
        (1.0, 4.0, "Transmission not suitable (μt at or above 4.0)"),
        (3.0, 6.0, "Transmission not suitable (edge step out of 0.2-2.0, μt at or above 4.0)"),
    ],
)
def test_pellet_failures_name_the_reason(edge_step, mu, label):
    verdict = classify_transmission_sample(edge_step, mu)
    assert verdict.suitable is False
    assert verdict.label == label
