# xasprep/sample/fluorescence.py
"""
Largest concentration or thickness that keeps fluorescence self-absorption acceptable.

R%(x) is the minimum retained fluorescence (in percent) over the measured
energy range for a sample described by a single knob x (sample concentration,
pellet thickness). R% falls as x grows, so the answer is the boundary
between the feasible region R% >= target and the region beyond it.

Method:
    1. Scan [min_value, max_value] on a uniform grid.
    2. Keep the largest feasible sample and the first failing sample above it.
    3. Refine between the two with Brent's method on R%(x) - target, counting
       undefined points as failing, then step back onto the feasible side.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional
import logging
import math

import numpy as np
from scipy.optimize import brentq

from xasprep.core.validation import InputError, XasPrepError, check_positive
from .suitability import FLUORESCENCE_MIN_RETAINED_PERCENT

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FluorescenceSolveSpec:
    min_value: float
    max_value: float
    evaluate_min_retained_percent: Callable[[float], Optional[float]]
    target_min_retained_percent: float = FLUORESCENCE_MIN_RETAINED_PERCENT
    target_tolerance: float = 0.1
    value_tolerance: float = 1e-6
    max_iterations: int = 80
    sample_points: int = 64


@dataclass(frozen=True)
class FluorescenceSolveResult:
    """
    feasible=False carries reason, with value/min_retained_percent holding the
    best point seen. feasible=True carries the solved value.
    """
    feasible: bool
    value: float
    min_retained_percent: float
    iterations: int = 0
    converged: bool = False
    note: Optional[str] = None
    reason: Optional[str] = None


class FluorescenceSolver:
    """Solver for the largest x with R%(x) >= target"""

    def __init__(self, spec: FluorescenceSolveSpec):
        self.spec = spec
        self._validate()

    def _validate(self):
        s = self.spec
        if not (math.isfinite(s.min_value) and math.isfinite(s.max_value)):
            raise InputError(f"Search range must be finite, got [{s.min_value}, {s.max_value}]")
        if not s.max_value > s.min_value:
            raise InputError(f"Require max_value > min_value, got [{s.min_value}, {s.max_value}]")
        if not math.isfinite(s.target_min_retained_percent):
            raise InputError("target_min_retained_percent must be finite")
        check_positive("target_tolerance", s.target_tolerance)
        check_positive("value_tolerance", s.value_tolerance)
        check_positive("max_iterations", s.max_iterations)
        self.n_samples = max(8, int(s.sample_points))

    def evaluate(self, x: float) -> Optional[float]:
        """R%(x), or None when the caller's evaluation is undefined at x"""
        try:
            result = self.spec.evaluate_min_retained_percent(x)
        except (ArithmeticError, ValueError, XasPrepError) as exc:
            logger.debug("R%% evaluation failed at %g: %s", x, exc)
            return None
        if result is None or not math.isfinite(result):
            return None
        return float(result)

    def _scan(self):
        target = self.spec.target_min_retained_percent
        best_x, best_y = -math.inf, -math.inf
        first_fail = None

        for x in np.linspace(self.spec.min_value, self.spec.max_value, self.n_samples):
            x = float(x)
            y = self.evaluate(x)
            if y is None:
                continue
            if y >= target:
                best_x, best_y = x, y
                first_fail = None
            elif math.isfinite(best_x) and first_fail is None:
                first_fail = x
            elif not math.isfinite(best_x):
                best_y = max(best_y, y)

        return best_x, best_y, first_fail

    def solve(self) -> FluorescenceSolveResult:
        s = self.spec
        target = s.target_min_retained_percent
        best_x, best_y, first_fail = self._scan()

        if not math.isfinite(best_x):
            reason = (
                f"No value in [{s.min_value:.3e}, {s.max_value:.3e}] "
                f"achieves min R >= {target:.1f}%"
            )
            logger.debug(reason)
            return FluorescenceSolveResult(
                feasible=False,
                value=s.min_value,
                min_retained_percent=best_y,
                reason=reason,
            )

        if abs(best_x - s.max_value) <= s.value_tolerance or first_fail is None:
            note = (
                "Feasible at upper search bound"
                if best_x >= s.max_value - s.value_tolerance
                else "No failing point found above sampled feasible values"
            )
            return FluorescenceSolveResult(
                feasible=True, value=best_x, min_retained_percent=best_y,
                iterations=0, converged=True, note=note,
            )

        def fallback(note: str) -> FluorescenceSolveResult:
            logger.debug("Fluorescence refinement fell back to %g: %s", best_x, note)
            return FluorescenceSolveResult(
                feasible=True, value=best_x, min_retained_percent=best_y,
                iterations=0, converged=False, note=note,
            )

        y_low, y_high = self.evaluate(best_x), self.evaluate(first_fail)
        if y_low is None or y_high is None:
            return fallback("Fell back to sampled feasible point due to unstable evaluation")
        if y_low < target or y_high >= target:
            return fallback("Fell back to sampled feasible point due to non-bracketed evaluations")

        def excess(x: float) -> float:
            y = self.evaluate(x)
            # undefined points count as failing
            if y is None:
                return -s.target_tolerance
            return y - target

        root, info = brentq(
            excess, best_x, first_fail,
            xtol=s.value_tolerance,
            maxiter=int(s.max_iterations),
            full_output=True,
            disp=False,
        )

        value, y_value = self._feasible_side(float(root), best_x)
        if value is None:
            return fallback("Refined boundary missed the target; using sampled feasible point")

        return FluorescenceSolveResult(
            feasible=True,
            value=value,
            min_retained_percent=y_value,
            iterations=info.iterations,
            converged=bool(info.converged),
        )

    def _feasible_side(self, root: float, floor: float):
        """
        Closest point at or below root with R% >= target.

        Steps back from root by value_tolerance, doubling the step, until the
        target is met or floor is reached. Returns (None, None) if only floor
        itself would do.
        """
        target = self.spec.target_min_retained_percent
        step = self.spec.value_tolerance
        x = root
        while x > floor:
            y = self.evaluate(x)
            if y is not None and y >= target:
                return x, y
            x = root - step
            step *= 2.0
        return None, None


def solve_dilution_for_fluorescence(spec: FluorescenceSolveSpec) -> FluorescenceSolveResult:
    """Largest sample concentration keeping min R% at or above the target"""
    return FluorescenceSolver(spec).solve()


def solve_thickness_for_fluorescence(spec: FluorescenceSolveSpec) -> FluorescenceSolveResult:
    """Largest sample thickness keeping min R% at or above the target"""
    return FluorescenceSolver(spec).solve()
