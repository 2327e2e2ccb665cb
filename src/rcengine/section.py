"""
Section and material primitives.

Effective height, elastic modulus ratio, transformed area, reinforcement
ratio, relative compression zone height and the over-reinforced
classification, plus the value bundles (SectionGeometry,
MaterialProperties, ReinforcementConfig) the composed checks consume.

Units: mm, mm², MPa
"""

import logging
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .errors import DomainError, RangeWarning, require_non_negative, require_positive
from .numeric import in_range
from .profile import DesignCodeProfile, get_design_profile

logger = logging.getLogger(__name__)


# ============================================================================
# PRIMITIVES
# ============================================================================

def effective_height(h: float, a_s: float) -> float:
    """
    Effective depth h₀ = h - a_s.

    Args:
        h: Overall section height (mm)
        a_s: Distance from tension face to steel centroid (mm)

    Raises:
        DomainError: If h <= 0, a_s < 0 or a_s >= h
    """
    require_positive("h", h, "mm")
    require_non_negative("a_s", a_s, "mm")
    if a_s >= h:
        raise DomainError(f"a_s = {a_s} mm must be smaller than h = {h} mm")
    return h - a_s


def elastic_modulus_ratio(Es: float, Ec: float) -> float:
    """αE = Es / Ec."""
    require_positive("Ec", Ec, "MPa")
    require_positive("Es", Es, "MPa")
    return Es / Ec


def transformed_area(A_concrete: float, alpha_E: float, As: float) -> float:
    """
    Transformed section area A₀ = A_c + (αE - 1)·As.

    Steel area is converted to an equivalent concrete area for elastic
    stiffness and stress estimates.
    """
    require_positive("A_concrete", A_concrete, "mm²")
    require_positive("alpha_E", alpha_E)
    require_non_negative("As", As, "mm²")
    return A_concrete + (alpha_E - 1.0) * As


def rebar_ratio(As: float, b: float, h0: float) -> float:
    """Reinforcement ratio ρ = As / (b·h₀)."""
    if not b * h0 > 0:
        raise DomainError(f"b·h0 = {b}·{h0} must be positive")
    require_non_negative("As", As, "mm²")
    return As / (b * h0)


def relative_compression_zone_height(x: float, h0: float) -> float:
    """ξ = x / h₀."""
    require_positive("h0", h0, "mm")
    return x / h0


def is_over_reinforced(xi: float, xi_b: float) -> bool:
    """
    Over-reinforced classification ξ > ξb.

    Equality resolves to not over-reinforced. ξb is supplied by the
    caller (see DesignCodeProfile.xi_b_for).
    """
    return xi > xi_b


def check_material_ranges(
    fc: float,
    fy: float,
    profile: Optional[DesignCodeProfile] = None,
    **other_steel: float
) -> List[RangeWarning]:
    """
    Compare material strengths with the profile's engineering ranges.

    Args:
        fc: Concrete design compressive strength (MPa)
        fy: Steel design yield strength (MPa)
        profile: Design code profile (default GB 50010-2010)
        **other_steel: Further steel strengths by name (e.g., fyv=270)

    Returns:
        List of RangeWarning, empty when everything is in range
    """
    profile = profile or get_design_profile()
    c_lo, c_hi = profile.concrete_strength_range
    s_lo, s_hi = profile.steel_strength_range

    found = []
    if not in_range(fc, c_lo, c_hi):
        found.append(RangeWarning.outside("fc", fc, c_lo, c_hi))
    for name, value in (("fy", fy),) + tuple(other_steel.items()):
        if value is not None and not in_range(value, s_lo, s_hi):
            found.append(RangeWarning.outside(name, value, s_lo, s_hi))

    for w in found:
        logger.warning("%s (%s)", w.message, profile.name)
    return found


# ============================================================================
# VALUE BUNDLES
# ============================================================================

class SectionGeometry(BaseModel):
    """
    Rectangular section geometry.

    Attributes:
        b: Width (mm)
        h: Overall height (mm)
        a_s: Tension face to tension steel centroid (mm)
        a_s_prime: Compression face to compression steel centroid (mm)
        l: Clear span or member length (mm), optional

    Example:
        >>> section = SectionGeometry(b=200, h=500, a_s=40)
        >>> section.h0
        460.0
    """
    model_config = ConfigDict(frozen=True)

    b: float = Field(..., gt=0, description="Width (mm)")
    h: float = Field(..., gt=0, description="Height (mm)")
    a_s: float = Field(..., ge=0, description="Tension steel centroid distance (mm)")
    a_s_prime: float = Field(default=40.0, ge=0, description="Compression steel centroid distance (mm)")
    l: Optional[float] = Field(default=None, gt=0, description="Span (mm)")

    @model_validator(mode='after')
    def validate_depth(self) -> 'SectionGeometry':
        if self.a_s >= self.h:
            raise DomainError(f"a_s = {self.a_s} mm must be smaller than h = {self.h} mm")
        return self

    @property
    def h0(self) -> float:
        """Effective depth h₀ = h - a_s."""
        return effective_height(self.h, self.a_s)

    @property
    def area(self) -> float:
        """Gross concrete area b·h (mm²)."""
        return self.b * self.h

    @property
    def moment_of_inertia(self) -> float:
        """Gross second moment of area b·h³/12 (mm⁴)."""
        return self.b * self.h ** 3 / 12.0


class MaterialProperties(BaseModel):
    """
    Concrete and steel design properties.

    Attributes:
        fc: Concrete design compressive strength (MPa)
        ft: Concrete design tensile strength (MPa)
        fy: Longitudinal steel design yield strength (MPa)
        fy_prime: Compression steel design strength (MPa), defaults to fy
        fyv: Stirrup design yield strength (MPa), defaults to fy
        Es: Steel elastic modulus (MPa)
        Ec: Concrete elastic modulus (MPa)

    Values outside the profile's engineering range are accepted and
    reported by range_warnings().

    Example:
        >>> mat = MaterialProperties(fc=14.3, ft=1.43, fy=360, Ec=3.0e4)
        >>> mat.alpha_E
        6.666666666666667
    """
    model_config = ConfigDict(frozen=True)

    fc: float = Field(..., gt=0, description="Concrete compressive strength (MPa)")
    ft: float = Field(..., gt=0, description="Concrete tensile strength (MPa)")
    fy: float = Field(..., gt=0, description="Steel yield strength (MPa)")
    fy_prime: Optional[float] = Field(default=None, gt=0, description="Compression steel strength (MPa)")
    fyv: Optional[float] = Field(default=None, gt=0, description="Stirrup yield strength (MPa)")
    Es: float = Field(default=2.0e5, gt=0, description="Steel modulus (MPa)")
    Ec: float = Field(..., gt=0, description="Concrete modulus (MPa)")

    @field_validator('ft')
    @classmethod
    def validate_ft(cls, v: float, info) -> float:
        """Tensile strength cannot exceed compressive strength."""
        fc = info.data.get('fc')
        if fc is not None and v >= fc:
            raise DomainError(f"ft = {v} MPa must be smaller than fc = {fc} MPa")
        return v

    @property
    def fy_compression(self) -> float:
        return self.fy_prime if self.fy_prime is not None else self.fy

    @property
    def fy_stirrup(self) -> float:
        return self.fyv if self.fyv is not None else self.fy

    @property
    def alpha_E(self) -> float:
        """Elastic modulus ratio Es / Ec."""
        return elastic_modulus_ratio(self.Es, self.Ec)

    def range_warnings(self, profile: Optional[DesignCodeProfile] = None) -> List[RangeWarning]:
        """Engineering range findings for these materials."""
        return check_material_ranges(
            self.fc, self.fy, profile,
            fy_prime=self.fy_prime, fyv=self.fyv
        )


class ReinforcementConfig(BaseModel):
    """
    Longitudinal and transverse reinforcement.

    Attributes:
        As: Tension steel area (mm²)
        As_prime: Compression steel area (mm²)
        Asv: Stirrup area per leg (mm²)
        n_legs: Number of stirrup legs
        s: Stirrup spacing (mm)

    Example:
        >>> rebar = ReinforcementConfig(As=1256, Asv=50.3, n_legs=2, s=200)
        >>> rebar.has_stirrups
        True
    """
    model_config = ConfigDict(frozen=True)

    As: float = Field(..., ge=0, description="Tension steel area (mm²)")
    As_prime: float = Field(default=0.0, ge=0, description="Compression steel area (mm²)")
    Asv: float = Field(default=0.0, ge=0, description="Stirrup area per leg (mm²)")
    n_legs: int = Field(default=0, ge=0, description="Number of stirrup legs")
    s: Optional[float] = Field(default=None, gt=0, description="Stirrup spacing (mm)")

    @model_validator(mode='after')
    def validate_stirrups(self) -> 'ReinforcementConfig':
        if self.Asv > 0:
            if self.n_legs < 1:
                raise DomainError("Stirrups need at least one leg (n_legs >= 1)")
            if self.s is None:
                raise DomainError("Stirrup spacing s is required when Asv > 0")
        return self

    @property
    def has_stirrups(self) -> bool:
        return self.Asv > 0

    def ratio(self, section: SectionGeometry) -> float:
        """Tension reinforcement ratio for a section."""
        return rebar_ratio(self.As, section.b, section.h0)
