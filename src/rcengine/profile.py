"""
Design code profiles.

A profile bundles every code-specific numeric constant (α1, φ0, ξb,
ρ_min, stability table, minimum prestress losses, ...) so the
calculation groups stay code-agnostic. Profiles are loaded from the
packaged YAML data files, frozen, and passed explicitly to the
functions that need them.

Units: SI (MPa, mm)
"""

from pathlib import Path
from typing import Dict, Any, List, Tuple

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .errors import require_positive


DATA_DIR = Path(__file__).parent / "data"
DEFAULT_PROFILE_NAME = "GB 50010-2010"


class SteelGradeLimit(BaseModel):
    """Design yield strength and balanced ratio ξb of a steel grade."""
    model_config = ConfigDict(frozen=True)

    fy: float = Field(..., gt=0, description="Design yield strength (MPa)")
    xi_b: float = Field(..., gt=0, lt=1, description="Balanced relative height")


class DesignCodeProfile(BaseModel):
    """
    Versioned set of design code constants.

    Attributes:
        name: Code identifier (e.g., "GB 50010-2010")
        concrete_strength_range: Engineering range of fc (MPa)
        steel_strength_range: Engineering range of fy (MPa)
        alpha1: Concrete stress block factor
        beta1: Stress block depth factor (for ξb)
        epsilon_cu: Ultimate concrete compressive strain
        phi0: Axial compression reliability factor
        alpha_cv: Default concrete shear coefficient
        shear_section_factor, beta_c: Web-crushing limit factors
        rho_min_floor, rho_min_ft_factor: ρ_min = max(floor, factor·ft/fy)
        steel_grades: ξb per steel grade
        stability_ratios, stability_factors: Stability table (l0/b → φ)
        min_total_loss_pretensioned, min_total_loss_post_tensioned: MPa
        crack_width_limit: Allowable crack width (mm)
        deflection_limit_ratio: Allowable deflection = span / ratio

    Example:
        >>> profile = get_design_profile("GB 50010-2010")
        >>> profile.xi_b_for(360)
        0.518
    """
    model_config = ConfigDict(frozen=True)

    name: str
    concrete_strength_range: Tuple[float, float] = (10.0, 50.0)
    steel_strength_range: Tuple[float, float] = (200.0, 500.0)
    alpha1: float = Field(1.0, gt=0, le=1.0)
    beta1: float = Field(0.8, gt=0, le=1.0)
    epsilon_cu: float = Field(0.0033, gt=0)
    phi0: float = Field(0.9, gt=0, le=1.0)
    alpha_cv: float = Field(0.7, gt=0)
    shear_section_factor: float = Field(0.25, gt=0)
    beta_c: float = Field(1.0, gt=0)
    rho_min_floor: float = Field(0.002, ge=0)
    rho_min_ft_factor: float = Field(0.45, ge=0)
    steel_grades: Dict[str, SteelGradeLimit] = Field(default_factory=dict)
    stability_ratios: Tuple[float, ...]
    stability_factors: Tuple[float, ...]
    min_total_loss_pretensioned: float = Field(100.0, ge=0)
    min_total_loss_post_tensioned: float = Field(80.0, ge=0)
    crack_width_limit: float = Field(0.3, gt=0)
    deflection_limit_ratio: float = Field(200.0, gt=0)

    @field_validator('concrete_strength_range', 'steel_strength_range')
    @classmethod
    def validate_range(cls, v: Tuple[float, float]) -> Tuple[float, float]:
        if v[0] > v[1]:
            raise ValueError(f"Range {v} has lower bound above upper bound")
        return v

    @model_validator(mode='after')
    def validate_stability_table(self) -> 'DesignCodeProfile':
        ratios, factors = self.stability_ratios, self.stability_factors
        if len(ratios) != len(factors) or len(ratios) < 2:
            raise ValueError("Stability table needs matching ratios/factors (at least 2 points)")
        if any(r2 <= r1 for r1, r2 in zip(ratios, ratios[1:])):
            raise ValueError("Stability ratios must be strictly increasing")
        if any(f2 > f1 for f1, f2 in zip(factors, factors[1:])):
            raise ValueError("Stability factors must be non-increasing")
        if factors[0] != 1.0 or factors[1] >= 1.0:
            raise ValueError("Stability table must saturate at exactly 1.0 on its first point only")
        return self

    @property
    def stability_saturation_ratio(self) -> float:
        """Slenderness at or below which φ = 1.0."""
        return self.stability_ratios[0]

    def balanced_relative_height(self, fy: float, Es: float = 2.0e5) -> float:
        """
        Balanced relative compression zone height for yielding steel.

        ξb = β1 / (1 + fy / (Es · εcu))
        """
        require_positive("fy", fy, "MPa")
        require_positive("Es", Es, "MPa")
        return self.beta1 / (1.0 + fy / (Es * self.epsilon_cu))

    def xi_b_for(self, fy: float, Es: float = 2.0e5) -> float:
        """
        ξb for a steel of design strength fy.

        Uses the tabulated grade value when fy matches a grade, otherwise
        the strain-compatibility expression.
        """
        for grade in self.steel_grades.values():
            if grade.fy == fy:
                return grade.xi_b
        return self.balanced_relative_height(fy, Es)

    def rho_min(self, ft: float, fy: float) -> float:
        """Minimum tension reinforcement ratio max(floor, factor·ft/fy)."""
        require_positive("fy", fy, "MPa")
        return max(self.rho_min_floor, self.rho_min_ft_factor * ft / fy)

    def rho_max(self, fc: float, fy: float, Es: float = 2.0e5) -> float:
        """Maximum tension reinforcement ratio ξb·α1·fc/fy."""
        require_positive("fy", fy, "MPa")
        return self.xi_b_for(fy, Es) * self.alpha1 * fc / fy

    @classmethod
    def from_yaml_data(cls, data: Dict[str, Any]) -> 'DesignCodeProfile':
        """Build a profile from the nested layout of the YAML data files."""
        ranges = data.get('ranges', {})
        flexure = data.get('flexure', {})
        shear = data.get('shear', {})
        reinforcement = data.get('reinforcement', {})
        prestress = data.get('prestress', {})
        sls = data.get('serviceability', {})
        table = data['stability_table']

        return cls(
            name=data['name'],
            concrete_strength_range=tuple(ranges.get('concrete_strength', (10.0, 50.0))),
            steel_strength_range=tuple(ranges.get('steel_strength', (200.0, 500.0))),
            alpha1=flexure.get('alpha1', 1.0),
            beta1=flexure.get('beta1', 0.8),
            epsilon_cu=flexure.get('epsilon_cu', 0.0033),
            phi0=data.get('axial', {}).get('phi0', 0.9),
            alpha_cv=shear.get('alpha_cv', 0.7),
            shear_section_factor=shear.get('section_factor', 0.25),
            beta_c=shear.get('beta_c', 1.0),
            rho_min_floor=reinforcement.get('rho_min_floor', 0.002),
            rho_min_ft_factor=reinforcement.get('rho_min_ft_factor', 0.45),
            steel_grades={
                grade: SteelGradeLimit(**props)
                for grade, props in data.get('steel_grades', {}).items()
            },
            stability_ratios=tuple(table['ratios']),
            stability_factors=tuple(table['factors']),
            min_total_loss_pretensioned=prestress.get('min_total_loss_pretensioned', 100.0),
            min_total_loss_post_tensioned=prestress.get('min_total_loss_post_tensioned', 80.0),
            crack_width_limit=sls.get('crack_width_limit', 0.3),
            deflection_limit_ratio=sls.get('deflection_limit_ratio', 200.0),
        )


def load_profile(path: Path) -> DesignCodeProfile:
    """Load a design code profile from a YAML file."""
    with open(path, 'r', encoding='utf-8') as f:
        return DesignCodeProfile.from_yaml_data(yaml.safe_load(f))


def _load_packaged_profiles() -> Dict[str, DesignCodeProfile]:
    profiles = {}
    for yaml_path in sorted(DATA_DIR.glob("*.yaml")):
        profile = load_profile(yaml_path)
        profiles[profile.name] = profile
    return profiles


# Loaded once on module import; profiles are frozen
PROFILE_REGISTRY: Dict[str, DesignCodeProfile] = _load_packaged_profiles()


def get_design_profile(name: str = DEFAULT_PROFILE_NAME) -> DesignCodeProfile:
    """
    Get a packaged design code profile.

    Args:
        name: Profile identifier (e.g., "GB 50010-2010")

    Returns:
        DesignCodeProfile instance

    Raises:
        ValueError: If name not found in registry
    """
    if name not in PROFILE_REGISTRY:
        available = ", ".join(PROFILE_REGISTRY.keys())
        raise ValueError(f"Unknown design code profile: {name}. Available: {available}")
    return PROFILE_REGISTRY[name]


def list_design_profiles() -> List[str]:
    """Get list of available profile names."""
    return list(PROFILE_REGISTRY.keys())
