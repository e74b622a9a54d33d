# xasprep/sample/mix.py
"""
Sample / diluent mass split for a target edge-step.

Edge-step is taken as additive in areal mass density (masses in g, area in cm²):

    Δμt = [Δμ_s · m_s + Δμ_d · m_d] / A
    m_s + m_d = M

which gives

    m_s = (Δμt · A - Δμ_d · M) / (Δμ_s - Δμ_d)
    m_d = M - m_s
"""
from dataclasses import dataclass
from typing import Optional
import logging

from xasprep.core.validation import all_finite

logger = logging.getLogger(__name__)

MG_PER_G = 1000.0


@dataclass(frozen=True)
class MassMixInput:
    """Inputs for one mass-split calculation"""
    sample_edge_step: float     # edge-step per g/cm² of sample
    diluent_edge_step: float    # edge-step per g/cm² of diluent
    total_mass_mg: float        # fixed total powder mass
    area_cm2: float             # pellet cross-section
    target_edge_step: float     # desired edge-step of the mix


@dataclass(frozen=True)
class MassMixResult:
    """Masses that produce the target edge-step"""
    sample_mass_mg: float
    diluent_mass_mg: float
    sample_fraction_pct: float
    achieved_edge_step: float


def compute_sample_weight_mix(spec: MassMixInput) -> Optional[MassMixResult]:
    """
    Split total_mass_mg between sample and diluent so the mix has target_edge_step.

    Returns None when no physical split exists: non-finite inputs,
    non-positive mass, area or target, indistinguishable edge-steps, or a
    solution with a negative mass. Masses are returned unrounded.
    """
    s = spec.sample_edge_step
    d = spec.diluent_edge_step
    if not all_finite(s, d, spec.total_mass_mg, spec.area_cm2, spec.target_edge_step):
        logger.debug("Mass mix rejected: non-finite input %s", spec)
        return None
    if spec.total_mass_mg <= 0 or spec.area_cm2 <= 0 or spec.target_edge_step <= 0:
        logger.debug("Mass mix rejected: non-positive mass, area or target %s", spec)
        return None

    denominator = s - d
    if abs(denominator) < 1e-12:
        logger.debug("Mass mix rejected: sample and diluent edge-steps are equal (%g)", s)
        return None

    total_g = spec.total_mass_mg / MG_PER_G
    sample_g = (spec.target_edge_step * spec.area_cm2 - d * total_g) / denominator
    diluent_g = total_g - sample_g

    if sample_g < 0 or diluent_g < 0:
        logger.debug(
            "Mass mix infeasible: sample=%g g, diluent=%g g for target %g",
            sample_g, diluent_g, spec.target_edge_step,
        )
        return None

    achieved = (s * sample_g + d * diluent_g) / spec.area_cm2

    return MassMixResult(
        sample_mass_mg=sample_g * MG_PER_G,
        diluent_mass_mg=diluent_g * MG_PER_G,
        sample_fraction_pct=sample_g / total_g * 100.0,
        achieved_edge_step=achieved,
    )
