"""Pass/fail verdicts for transmission and fluorescence measurements"""
from dataclasses import dataclass

TRANSMISSION_MU_LIMIT = 4.0
FLUORESCENCE_MIN_RETAINED_PERCENT = 90.0
EDGE_STEP_WINDOW = (0.2, 2.0)


@dataclass(frozen=True)
class SuitabilityVerdict:
    suitable: bool
    value: float
    label: str


def classify_transmission(mu: float) -> SuitabilityVerdict:
    """Suitable strictly below μt = 4; μt = 4 itself is not suitable"""
    if mu < TRANSMISSION_MU_LIMIT:
        return SuitabilityVerdict(True, mu, "Transmission suitable")
    return SuitabilityVerdict(
        False, mu, f"Transmission not suitable (μt at or above {TRANSMISSION_MU_LIMIT:.1f})"
    )


def classify_fluorescence(r_percent: float) -> SuitabilityVerdict:
    """Suitable when the minimum retained fluorescence is at least 90 %"""
    if r_percent >= FLUORESCENCE_MIN_RETAINED_PERCENT:
        return SuitabilityVerdict(True, r_percent, "Fluorescence suitable")
    return SuitabilityVerdict(False, r_percent, "Moderate self-absorption")


def classify_transmission_sample(achieved_edge_step: float, absorption_above: float) -> SuitabilityVerdict:
    """
    Full transmission check for a prepared pellet.

    Requires the edge-step inside EDGE_STEP_WINDOW and μt above the edge to
    pass classify_transmission. The label names the failing condition(s).
    The verdict value is absorption_above.
    """
    lo, hi = EDGE_STEP_WINDOW
    edge_step_ok = lo <= achieved_edge_step <= hi
    absorption_ok = classify_transmission(absorption_above).suitable

    if edge_step_ok and absorption_ok:
        return SuitabilityVerdict(True, absorption_above, "Transmission suitable")

    window = f"edge step out of {lo}-{hi}"
    too_thick = f"μt at or above {TRANSMISSION_MU_LIMIT:.1f}"
    if not edge_step_ok and not absorption_ok:
        reason = f"{window}, {too_thick}"
    elif not edge_step_ok:
        reason = window
    else:
        reason = too_thick
    return SuitabilityVerdict(False, absorption_above, f"Transmission not suitable ({reason})")


def summarize_suitability(transmission_ok: bool, fluorescence_ok: bool) -> str:
    """'Transmission <verdict> / Fluorescence <verdict>'"""
    transmission = "suitable" if transmission_ok else "not suitable"
    fluorescence = "suitable" if fluorescence_ok else "not suitable"
    return f"Transmission {transmission} / Fluorescence {fluorescence}"
