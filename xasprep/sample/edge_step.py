# xasprep/sample/edge_step.py
"""Suggested target edge-step giving a target total absorption above the edge"""
from dataclasses import dataclass
from typing import Optional
import logging

from xasprep.core.validation import ConvergenceError, all_finite
from xasprep.core.numerical import bisection, shrink_bracket
from .mix import MG_PER_G, MassMixInput, compute_sample_weight_mix
from .absorption import total_absorption

logger = logging.getLogger(__name__)

# Contract on the reported edge-step: μt(e) reproduces the target within this
ABSORPTION_TOL = 1e-4


@dataclass(frozen=True)
class EdgeStepSearchInput:
    """Specification for the target edge-step search"""
    sample_edge_step: float
    diluent_edge_step: float
    sample_mu_above: float      # cm²/g just above the edge
    diluent_mu_above: float     # cm²/g just above the edge
    total_mass_mg: float
    area_cm2: float
    target_absorption: float = 4.0

    tol: float = 1e-9
    maxiter: int = 100


class EdgeStepSolver:
    """
    Bisection over target edge-step e for μt_above(e) = target_absorption.

    The bracket is the range of edge-steps reachable with a fixed total mass,
    [min(Δμ_s, Δμ_d)·M/A, max(Δμ_s, Δμ_d)·M/A], with the left end kept above
    zero. μt is linear in e on that range, so a root exists iff the endpoint
    residuals straddle zero (or one of them is already within tol).
    """

    def __init__(self, spec: EdgeStepSearchInput):
        self.spec = spec

    def _is_well_posed(self) -> bool:
        s = self.spec
        if not all_finite(
            s.sample_edge_step, s.diluent_edge_step,
            s.sample_mu_above, s.diluent_mu_above,
            s.total_mass_mg, s.area_cm2, s.target_absorption,
        ):
            return False
        return s.total_mass_mg > 0 and s.area_cm2 > 0 and s.target_absorption > 0

    def bracket(self) -> Optional[tuple]:
        """
        Feasible (lo, hi) edge-step bracket, or None if it collapses.

        The pure-component ends are used as they are when the mass split is
        defined there; an end that rounds to a negative mass (or a zero
        edge-step on the left) is pulled in slightly instead.
        """
        s = self.spec
        loading = s.total_mass_mg / MG_PER_G / s.area_cm2
        e_min = min(s.sample_edge_step, s.diluent_edge_step) * loading
        e_max = max(s.sample_edge_step, s.diluent_edge_step) * loading
        if abs(e_max - e_min) < 1e-6:
            return None

        inner_lo, inner_hi = shrink_bracket(e_min, e_max)
        # edge-step must stay strictly positive
        inner_lo = max(inner_lo, shrink_bracket(0.0, e_max)[0])

        lo = e_min if e_min > 0 and self.absorption_at(e_min) is not None else inner_lo
        hi = e_max if self.absorption_at(e_max) is not None else inner_hi
        if not hi > lo:
            return None
        return lo, hi

    def absorption_at(self, edge_step: float) -> Optional[float]:
        """μt above the edge for the mix that hits edge_step, None if infeasible"""
        s = self.spec
        mix = compute_sample_weight_mix(MassMixInput(
            sample_edge_step=s.sample_edge_step,
            diluent_edge_step=s.diluent_edge_step,
            total_mass_mg=s.total_mass_mg,
            area_cm2=s.area_cm2,
            target_edge_step=edge_step,
        ))
        if mix is None:
            return None
        mu = total_absorption(
            s.sample_mu_above, s.diluent_mu_above,
            mix.sample_mass_mg, mix.diluent_mass_mg, s.area_cm2,
        )
        return mu if all_finite(mu) else None

    def _residual(self, edge_step: float) -> float:
        mu = self.absorption_at(edge_step)
        if mu is None:
            raise ConvergenceError(f"Mass mix undefined inside bracket at edge-step {edge_step}")
        return mu - self.spec.target_absorption

    def solve(self) -> Optional[float]:
        """Edge-step hitting the target absorption, or None when none is reachable"""
        if not self._is_well_posed():
            logger.debug("Edge-step search rejected: invalid input %s", self.spec)
            return None

        bracket = self.bracket()
        if bracket is None:
            logger.debug("Edge-step search rejected: empty feasible bracket")
            return None
        lo, hi = bracket

        mu_lo = self.absorption_at(lo)
        mu_hi = self.absorption_at(hi)
        if mu_lo is None or mu_hi is None:
            logger.debug("Edge-step search rejected: bracket ends not evaluable")
            return None

        target = self.spec.target_absorption
        f_lo, f_hi = mu_lo - target, mu_hi - target
        if f_lo * f_hi > 0 and abs(f_lo) > self.spec.tol and abs(f_hi) > self.spec.tol:
            logger.debug(
                "No edge-step in [%g, %g] reaches μt=%g (achievable %g..%g)",
                lo, hi, target, min(mu_lo, mu_hi), max(mu_lo, mu_hi),
            )
            return None

        edge_step = bisection(
            self._residual, lo, hi,
            tol=self.spec.tol,
            xtol=1e-12 * max(1.0, abs(hi)),
            maxiter=self.spec.maxiter,
        )

        residual = abs(self._residual(edge_step))
        if residual > ABSORPTION_TOL:
            raise ConvergenceError(
                f"Edge-step search ended at {edge_step} with μt residual {residual:.3g}"
            )
        logger.debug("Suggested edge-step %g for μt=%g", edge_step, target)
        return edge_step


def compute_suggested_target_edge_step(spec: EdgeStepSearchInput) -> Optional[float]:
    """Convenience wrapper around EdgeStepSolver"""
    return EdgeStepSolver(spec).solve()
