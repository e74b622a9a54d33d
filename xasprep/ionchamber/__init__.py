"""Ionization-chamber fill-gas mixtures"""

from .gas_mix import (
    FRACTION_TOL,
    GasComponent,
    total_fraction,
    is_balanced,
    rebalance_for_added_gas,
    remove_gas_and_redistribute,
    update_gas_fraction_balanced,
)

__all__ = [
    'FRACTION_TOL', 'GasComponent', 'total_fraction', 'is_balanced',
    'rebalance_for_added_gas', 'remove_gas_and_redistribute',
    'update_gas_fraction_balanced',
]
