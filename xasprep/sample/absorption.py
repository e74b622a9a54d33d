"""Total absorption (μt) and transmission of a two-component pellet"""
from dataclasses import dataclass
from typing import Optional
import math

from .mix import MG_PER_G


@dataclass(frozen=True)
class AbsorptionMetrics:
    absorption_below: float
    absorption_above: float
    transmission_below: float
    transmission_above: float


def total_absorption(
    sample_mu: float,
    diluent_mu: float,
    sample_mass_mg: float,
    diluent_mass_mg: float,
    area_cm2: float,
) -> float:
    """
    μt = μ_s · m_s/A + μ_d · m_d/A

    Args:
        sample_mu: Mass-absorption coefficient of the sample (cm²/g)
        diluent_mu: Mass-absorption coefficient of the diluent (cm²/g)
        sample_mass_mg: Sample mass (mg)
        diluent_mass_mg: Diluent mass (mg)
        area_cm2: Pellet area (cm²)
    """
    sample_g = sample_mass_mg / MG_PER_G
    diluent_g = diluent_mass_mg / MG_PER_G
    return sample_mu * (sample_g / area_cm2) + diluent_mu * (diluent_g / area_cm2)


def compute_absorption_metrics(
    sample_mu_below: float,
    sample_mu_above: float,
    diluent_mu_below: float,
    diluent_mu_above: float,
    sample_mass_mg: float,
    diluent_mass_mg: float,
    area_cm2: float,
) -> Optional[AbsorptionMetrics]:
    """μt and exp(-μt) just below and just above the edge; None if not computable"""
    if not area_cm2 > 0:
        return None

    below = total_absorption(sample_mu_below, diluent_mu_below, sample_mass_mg, diluent_mass_mg, area_cm2)
    above = total_absorption(sample_mu_above, diluent_mu_above, sample_mass_mg, diluent_mass_mg, area_cm2)
    if not (math.isfinite(below) and math.isfinite(above)):
        return None

    return AbsorptionMetrics(
        absorption_below=below,
        absorption_above=above,
        transmission_below=math.exp(-below),
        transmission_above=math.exp(-above),
    )
