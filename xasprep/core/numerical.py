"""Bracketing root finder shared by the solvers"""
from typing import Callable, Tuple

from .validation import ConvergenceError, check_positive


def bisection(
    f: Callable[[float], float],
    a: float,
    b: float,
    args: tuple = (),
    tol: float = 1e-12,
    xtol: float = 0.0,
    maxiter: int = 400,
) -> float:
    """
    Find a root of f in [a, b] by bisection.

    The bracket must show a sign change (or a root at an endpoint). Iteration
    stops when |f(mid)| <= tol, when the bracket is narrower than xtol, or
    after maxiter halvings, whichever comes first.

    Args:
        f: Function whose root is sought
        a: Left end of the bracket
        b: Right end of the bracket
        args: Additional arguments to pass to f
        tol: Absolute tolerance on f
        xtol: Absolute tolerance on the bracket width (0 disables it)
        maxiter: Maximum number of halvings

    Returns:
        Approximate root

    Raises:
        ConvergenceError: no sign change in [a, b], or the final midpoint
            misses tol by more than a factor of 10
    """
    check_positive("tol", tol)
    check_positive("maxiter", maxiter)

    def f_wrapped(x: float) -> float:
        return f(x, *args) if args else f(x)

    fa, fb = f_wrapped(a), f_wrapped(b)

    if abs(fa) <= tol:
        return a
    if abs(fb) <= tol:
        return b
    if fa * fb > 0:
        raise ConvergenceError(f"No sign change in [{a}, {b}]")

    lo, hi, flo = a, b, fa
    for _ in range(maxiter):
        mid = 0.5 * (lo + hi)
        fm = f_wrapped(mid)

        if abs(fm) <= tol or abs(hi - lo) <= xtol:
            return mid

        if flo * fm <= 0:
            hi = mid
        else:
            lo, flo = mid, fm

    final = 0.5 * (lo + hi)
    if abs(f_wrapped(final)) <= tol * 10 or abs(hi - lo) <= xtol:
        return final

    raise ConvergenceError(f"Bisection failed after {maxiter} iterations")


def shrink_bracket(lo: float, hi: float, rel: float = 1e-6, floor: float = 1e-9) -> Tuple[float, float]:
    """Pull both ends of [lo, hi] inward by max(floor, rel * scale)"""
    eps = max(floor, rel * max(1.0, abs(lo), abs(hi)))
    return lo + eps, hi - eps
