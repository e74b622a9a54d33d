# xasprep/ionchamber/gas_mix.py
"""
Fill-gas mixture editing for ionization chambers.

A mixture is an ordered sequence of GasComponent whose fractions sum to 1.
Every operation validates its input, returns a new list and leaves the
argument untouched:

    add      existing fractions scaled by (1 - f_new) / Σ existing
    remove   remaining fractions scaled by 1 / Σ remaining
    update   other fractions scaled by (1 - f_i) / Σ others

Where the scale factor would divide by zero the remainder is split evenly.
"""
from dataclasses import dataclass
from typing import List, Sequence
import logging

import numpy as np

from xasprep.core.validation import InputError, check_in_closed_01, check_in_open_01

logger = logging.getLogger(__name__)

FRACTION_TOL = 1e-6


@dataclass(frozen=True)
class GasComponent:
    name: str
    fraction: float


def _fractions(mixture: Sequence[GasComponent]) -> np.ndarray:
    """Validated fraction vector of a mixture"""
    names = [gas.name for gas in mixture]
    if len(set(names)) != len(names):
        raise InputError(f"Gas names must be unique, got {names}")

    f = np.array([gas.fraction for gas in mixture], dtype=float)
    if not np.all(np.isfinite(f)):
        raise InputError(f"Gas fractions must be finite, got {f.tolist()}")
    if np.any(f < 0):
        raise InputError(f"Gas fractions cannot be negative, got {f.tolist()}")
    return f


def _check_index(mixture: Sequence[GasComponent], index: int) -> None:
    if not 0 <= index < len(mixture):
        raise IndexError(f"Gas index {index} out of range for {len(mixture)} gases")


def _rebuild(mixture: Sequence[GasComponent], fractions: np.ndarray) -> List[GasComponent]:
    return [GasComponent(gas.name, float(f)) for gas, f in zip(mixture, fractions)]


def _scale_to(f: np.ndarray, total: float) -> np.ndarray:
    """Rescale f to sum to total, keeping ratios; even split if f sums to zero"""
    current = float(np.sum(f))
    if current <= 0:
        return np.full(len(f), total / len(f))
    return f * (total / current)


def total_fraction(mixture: Sequence[GasComponent]) -> float:
    return float(sum(gas.fraction for gas in mixture))


def is_balanced(mixture: Sequence[GasComponent], tol: float = FRACTION_TOL) -> bool:
    """True when fractions are finite and sum to 1 within tol"""
    f = np.array([gas.fraction for gas in mixture], dtype=float)
    return bool(len(f)) and bool(np.all(np.isfinite(f))) and abs(float(np.sum(f)) - 1.0) <= tol


def rebalance_for_added_gas(
    mixture: Sequence[GasComponent],
    new_name: str,
    new_fraction: float = 0.1,
) -> List[GasComponent]:
    """
    Append new_name at new_fraction and shrink the others to make room.

    Args:
        mixture: Current mixture
        new_name: Name of the gas to add (must not already be present)
        new_fraction: Fraction given to the new gas, 0 <= f < 1

    Returns:
        New mixture with the added gas last. An empty mixture yields the new
        gas alone at 1.0.
    """
    check_in_open_01("new_fraction", new_fraction)
    f = _fractions(mixture)
    if any(gas.name == new_name for gas in mixture):
        raise InputError(f"Gas '{new_name}' is already in the mixture")

    if not len(mixture):
        return [GasComponent(new_name, 1.0)]

    if float(np.sum(f)) <= 0:
        logger.debug("Existing gases sum to zero; splitting %g evenly", 1.0 - new_fraction)
    scaled = _scale_to(f, 1.0 - new_fraction)
    return _rebuild(mixture, scaled) + [GasComponent(new_name, float(new_fraction))]


def remove_gas_and_redistribute(mixture: Sequence[GasComponent], index: int) -> List[GasComponent]:
    """
    Drop the gas at index and hand its share to the rest in proportion.

    Removing the only gas leaves that gas alone at 1.0. If the remaining
    gases all sit at zero they share 1 evenly.
    """
    _check_index(mixture, index)
    f = _fractions(mixture)
    if len(mixture) == 1:
        logger.debug("Cannot remove the only gas '%s'; keeping it at 1.0", mixture[0].name)
        return [GasComponent(mixture[0].name, 1.0)]

    remaining = [gas for i, gas in enumerate(mixture) if i != index]
    f_remaining = np.delete(f, index)
    if float(np.sum(f_remaining)) <= 0:
        logger.debug("Remaining gases sum to zero after removing '%s'; splitting evenly", mixture[index].name)
    return _rebuild(remaining, _scale_to(f_remaining, 1.0))


def update_gas_fraction_balanced(
    mixture: Sequence[GasComponent],
    index: int,
    new_fraction: float,
) -> List[GasComponent]:
    """
    Set the gas at index to new_fraction and rescale the others to keep Σ = 1.

    The ratios among the other gases are preserved. A single-gas mixture
    stays at 1.0 whatever is requested; if every other gas is at zero the
    remainder 1 - new_fraction is split evenly among them.
    """
    check_in_closed_01("new_fraction", new_fraction)
    _check_index(mixture, index)
    f = _fractions(mixture)

    if len(mixture) == 1:
        return [GasComponent(mixture[0].name, 1.0)]

    others = np.delete(f, index)
    if float(np.sum(others)) <= 0:
        logger.debug("Other gases sum to zero; splitting %g evenly", 1.0 - new_fraction)
    others = _scale_to(others, 1.0 - new_fraction)

    out = np.insert(others, index, float(new_fraction))
    return _rebuild(mixture, out)
