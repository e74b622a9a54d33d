"""XAS sample preparation and ion-chamber fill-gas planning"""

__version__ = "0.1.0"

from xasprep.core import XasPrepError, InputError, ConvergenceError, validate_range

from xasprep.sample import (
    MassMixInput,
    MassMixResult,
    compute_sample_weight_mix,
    EdgeStepSearchInput,
    compute_suggested_target_edge_step,
    compute_absorption_metrics,
    SuitabilityVerdict,
    classify_transmission,
    classify_fluorescence,
    summarize_suitability,
)

from xasprep.ionchamber import (
    GasComponent,
    rebalance_for_added_gas,
    remove_gas_and_redistribute,
    update_gas_fraction_balanced,
)
