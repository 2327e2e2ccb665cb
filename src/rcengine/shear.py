"""
Shear capacity of rectangular beams.

Concrete contribution plus truss-analogy stirrup contribution, and the
web-crushing section limit.

Units: mm, mm², MPa, N
"""

import logging
from typing import Optional

from .errors import DomainError, require_non_negative, require_positive
from .profile import DesignCodeProfile, get_design_profile
from .results import CapacityResult, resolve_status, utilization
from .section import MaterialProperties, ReinforcementConfig, SectionGeometry

logger = logging.getLogger(__name__)


def shear_capacity_concrete_only(
    b: float,
    h0: float,
    ft: float,
    alpha_cv: float
) -> float:
    """
    Concrete shear capacity Vc = α_cv·ft·b·h₀.

    Args:
        b: Width (mm)
        h0: Effective depth (mm)
        ft: Concrete design tensile strength (MPa)
        alpha_cv: Code shear coefficient (0.7 for general members)

    Returns:
        Vc (N)

    Example:
        >>> shear_capacity_concrete_only(200, 460, 1.43, 0.7)
        92092.0
    """
    require_positive("b", b, "mm")
    require_positive("h0", h0, "mm")
    require_non_negative("ft", ft, "MPa")
    require_non_negative("alpha_cv", alpha_cv)
    return alpha_cv * ft * b * h0


def stirrup_shear_contribution(
    fyv: float,
    Asv: float,
    s: float,
    n: int,
    h0: float
) -> float:
    """Stirrup contribution Vs = fyv·Asv·n·h₀ / s (N)."""
    if not s > 0:
        raise DomainError(f"Stirrup spacing s = {s} mm must be positive")
    if n < 1:
        raise DomainError(f"Number of stirrup legs n = {n} must be at least 1")
    require_non_negative("Asv", Asv, "mm²")
    require_positive("fyv", fyv, "MPa")
    require_positive("h0", h0, "mm")
    return fyv * Asv * n * h0 / s


def shear_capacity_with_stirrups(
    b: float,
    h0: float,
    ft: float,
    alpha_cv: float,
    fyv: float,
    Asv: float,
    s: float,
    n: int
) -> float:
    """
    Shear capacity with vertical stirrups.

    V = α_cv·ft·b·h₀ + fyv·Asv·n·h₀ / s

    Args:
        b, h0: Section width and effective depth (mm)
        ft: Concrete design tensile strength (MPa)
        alpha_cv: Code shear coefficient
        fyv: Stirrup design yield strength (MPa)
        Asv: Area of one stirrup leg (mm²)
        s: Stirrup spacing (mm)
        n: Number of legs

    Returns:
        V (N)

    Raises:
        DomainError: If s <= 0 or n < 1
    """
    Vs = stirrup_shear_contribution(fyv, Asv, s, n, h0)
    return shear_capacity_concrete_only(b, h0, ft, alpha_cv) + Vs


def shear_section_limit(
    b: float,
    h0: float,
    fc: float,
    beta_c: float = 1.0,
    factor: float = 0.25
) -> float:
    """Web-crushing limit V_max = factor·βc·fc·b·h₀ (N)."""
    require_positive("b", b, "mm")
    require_positive("h0", h0, "mm")
    require_positive("fc", fc, "MPa")
    return factor * beta_c * fc * b * h0


def check_shear(
    section: SectionGeometry,
    materials: MaterialProperties,
    reinforcement: ReinforcementConfig,
    V_u: Optional[float] = None,
    alpha_cv: Optional[float] = None,
    profile: Optional[DesignCodeProfile] = None
) -> CapacityResult:
    """
    Shear capacity check for a rectangular beam.

    The governing capacity is min(Vc + Vs, V_max). A demand above the
    concrete-only capacity with no stirrups fails the check.

    Args:
        section: SectionGeometry
        materials: MaterialProperties
        reinforcement: ReinforcementConfig (stirrups optional)
        V_u: Design shear (N), optional
        alpha_cv: Shear coefficient override; profile default if None
        profile: Design code profile (default GB 50010-2010)

    Returns:
        CapacityResult in N
    """
    profile = profile or get_design_profile()
    alpha_cv = profile.alpha_cv if alpha_cv is None else alpha_cv
    b, h0 = section.b, section.h0

    Vc = shear_capacity_concrete_only(b, h0, materials.ft, alpha_cv)
    if reinforcement.has_stirrups:
        Vs = stirrup_shear_contribution(
            materials.fy_stirrup, reinforcement.Asv, reinforcement.s,
            reinforcement.n_legs, h0
        )
    else:
        Vs = 0.0
    V_max = shear_section_limit(b, h0, materials.fc, profile.beta_c, profile.shear_section_factor)
    V_cap = min(Vc + Vs, V_max)

    warnings = materials.range_warnings(profile)
    UR = utilization(V_u, V_cap)
    status = resolve_status(UR is not None and UR > 1.0, warnings)

    logger.debug("shear: Vc=%.1f N Vs=%.1f N V_max=%.1f N", Vc, Vs, V_max)

    governing = "section limit" if V_cap == V_max else "Vc + Vs"
    demand_line = f"\n  UR = V_u / V = {UR:.3f}" if UR is not None else ""
    details = f"""
Shear Capacity ({profile.name})
---------------------------------------------------
Section: b×h = {b:.0f}×{section.h:.0f} mm, h₀ = {h0:.0f} mm
Materials: ft = {materials.ft:.2f} MPa, fyv = {materials.fy_stirrup:.0f} MPa

  Vc = α_cv·ft·b·h₀ = {Vc / 1e3:.2f} kN (α_cv = {alpha_cv})
  Vs = fyv·Asv·n·h₀/s = {Vs / 1e3:.2f} kN
  V_max = {profile.shear_section_factor}·βc·fc·b·h₀ = {V_max / 1e3:.2f} kN
  V = {V_cap / 1e3:.2f} kN (governed by {governing}){demand_line}

Status: {status.value}
{chr(10).join(w.message for w in warnings)}
    """

    return CapacityResult(
        value=V_cap,
        unit="N",
        status=status,
        UR=UR,
        intermediates={'Vc': Vc, 'Vs': Vs, 'V_max': V_max, 'h0': h0},
        warnings=warnings,
        details=details.strip()
    )
