# xasprep/sample/__init__.py
"""Sample preparation: mass split, edge-step search, absorption and suitability"""

from .mix import (
    MassMixInput,
    MassMixResult,
    compute_sample_weight_mix,
)

from .edge_step import (
    EdgeStepSearchInput,
    EdgeStepSolver,
    compute_suggested_target_edge_step,
)

from .absorption import (
    AbsorptionMetrics,
    total_absorption,
    compute_absorption_metrics,
)

from .suitability import (
    TRANSMISSION_MU_LIMIT,
    FLUORESCENCE_MIN_RETAINED_PERCENT,
    EDGE_STEP_WINDOW,
    SuitabilityVerdict,
    classify_transmission,
    classify_fluorescence,
    classify_transmission_sample,
    summarize_suitability,
)

from .fluorescence import (
    FluorescenceSolveSpec,
    FluorescenceSolveResult,
    FluorescenceSolver,
    solve_dilution_for_fluorescence,
    solve_thickness_for_fluorescence,
)

__all__ = [
    'MassMixInput', 'MassMixResult', 'compute_sample_weight_mix',
    'EdgeStepSearchInput', 'EdgeStepSolver', 'compute_suggested_target_edge_step',
    'AbsorptionMetrics', 'total_absorption', 'compute_absorption_metrics',
    'TRANSMISSION_MU_LIMIT', 'FLUORESCENCE_MIN_RETAINED_PERCENT', 'EDGE_STEP_WINDOW',
    'SuitabilityVerdict', 'classify_transmission', 'classify_fluorescence',
    'classify_transmission_sample', 'summarize_suitability',
    'FluorescenceSolveSpec', 'FluorescenceSolveResult', 'FluorescenceSolver',
    'solve_dilution_for_fluorescence', 'solve_thickness_for_fluorescence',
]
