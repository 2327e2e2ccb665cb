"""
rcengine - reinforced and prestressed concrete design calculations

Stateless limit-state formulas: section primitives, flexural, shear and
axial capacity, prestress losses and serviceability checks.
Units: mm, mm², MPa, N, N·mm
"""

import logging

from .numeric import approx_equal, in_range, is_effectively_zero
from .errors import DomainError, RangeWarning
from .profile import (
    DesignCodeProfile,
    PROFILE_REGISTRY,
    get_design_profile,
    list_design_profiles,
    load_profile,
)
from .results import CapacityResult, DesignStatus
from .section import (
    SectionGeometry,
    MaterialProperties,
    ReinforcementConfig,
    effective_height,
    elastic_modulus_ratio,
    transformed_area,
    rebar_ratio,
    relative_compression_zone_height,
    is_over_reinforced,
    check_material_ranges,
)
from .flexure import (
    compression_zone_depth,
    flexure_capacity_single_rebar,
    flexure_capacity_from_x,
    flexure_capacity_double_rebar,
    check_flexure,
)
from .shear import (
    shear_capacity_concrete_only,
    shear_capacity_with_stirrups,
    stirrup_shear_contribution,
    shear_section_limit,
    check_shear,
)
from .axial import (
    AXIAL_REDUCTION_FACTOR,
    STABILITY_SATURATION_RATIO,
    axial_compression_capacity,
    axial_tension_capacity,
    stability_factor,
    check_axial_compression,
    check_axial_tension,
    plot_stability_curve,
)
from .prestress import (
    PrestressState,
    prestress_loss_anchorage,
    prestress_loss_friction,
    prestress_loss_temperature,
    prestress_loss_elastic_shortening,
    prestress_loss_creep_shrinkage,
    prestress_loss_relaxation,
    total_prestress_loss,
    design_total_prestress_loss,
    effective_prestress,
)
from .serviceability import (
    beam_deflection_uniform,
    beam_deflection_point,
    check_deflection,
    check_min_rebar_ratio,
    check_max_rebar_ratio,
    service_steel_stress,
    effective_tension_rebar_ratio,
    strain_nonuniformity_coefficient,
    max_crack_width,
    check_crack_width,
    estimate_crack_width,
    short_term_stiffness,
    long_term_stiffness,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    'approx_equal', 'in_range', 'is_effectively_zero',
    'DomainError', 'RangeWarning',
    'DesignCodeProfile', 'PROFILE_REGISTRY', 'get_design_profile',
    'list_design_profiles', 'load_profile',
    'CapacityResult', 'DesignStatus',
    'SectionGeometry', 'MaterialProperties', 'ReinforcementConfig',
    'effective_height', 'elastic_modulus_ratio', 'transformed_area',
    'rebar_ratio', 'relative_compression_zone_height', 'is_over_reinforced',
    'check_material_ranges',
    'compression_zone_depth', 'flexure_capacity_single_rebar',
    'flexure_capacity_from_x', 'flexure_capacity_double_rebar', 'check_flexure',
    'shear_capacity_concrete_only', 'shear_capacity_with_stirrups',
    'stirrup_shear_contribution', 'shear_section_limit', 'check_shear',
    'AXIAL_REDUCTION_FACTOR', 'STABILITY_SATURATION_RATIO',
    'axial_compression_capacity', 'axial_tension_capacity', 'stability_factor',
    'check_axial_compression', 'check_axial_tension', 'plot_stability_curve',
    'PrestressState', 'prestress_loss_anchorage', 'prestress_loss_friction',
    'prestress_loss_temperature', 'prestress_loss_elastic_shortening',
    'prestress_loss_creep_shrinkage', 'prestress_loss_relaxation',
    'total_prestress_loss', 'design_total_prestress_loss', 'effective_prestress',
    'beam_deflection_uniform', 'beam_deflection_point', 'check_deflection',
    'check_min_rebar_ratio', 'check_max_rebar_ratio',
    'service_steel_stress', 'effective_tension_rebar_ratio',
    'strain_nonuniformity_coefficient', 'max_crack_width', 'check_crack_width',
    'estimate_crack_width', 'short_term_stiffness', 'long_term_stiffness',
]
