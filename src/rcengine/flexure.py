"""
Flexural capacity of rectangular sections.

Implements:
- Singly reinforced moment capacity (equivalent rectangular stress block)
- Required tension steel for a given compression zone depth
- Doubly reinforced moment capacity
- Composed flexure check with over-reinforced classification

Units: mm, mm², MPa, N·mm
"""

import logging
from typing import Optional

from .errors import DomainError, require_non_negative, require_positive
from .profile import DesignCodeProfile, get_design_profile
from .results import CapacityResult, resolve_status, utilization
from .section import (
    MaterialProperties,
    ReinforcementConfig,
    SectionGeometry,
    is_over_reinforced,
    rebar_ratio,
    relative_compression_zone_height,
)

logger = logging.getLogger(__name__)

# Stress block factor α1 of the default profile (concrete up to C50)
ALPHA1 = get_design_profile().alpha1


def compression_zone_depth(
    b: float,
    As: float,
    fc: float,
    fy: float,
    alpha1: float = ALPHA1,
    As_prime: float = 0.0,
    fy_prime: Optional[float] = None
) -> float:
    """
    Compression zone depth from force equilibrium.

    x = (fy·As - fy'·As') / (α1·fc·b), not less than 0

    With As' = 0 this is the singly reinforced depth fy·As / (α1·fc·b).
    fy' defaults to fy.

    Raises:
        DomainError: If α1·fc·b <= 0
    """
    if not alpha1 * fc * b > 0:
        raise DomainError(f"α1·fc·b = {alpha1}·{fc}·{b} must be positive")
    require_non_negative("As", As, "mm²")
    require_non_negative("As_prime", As_prime, "mm²")
    require_positive("fy", fy, "MPa")
    if fy_prime is None:
        fy_prime = fy
    x = (fy * As - fy_prime * As_prime) / (alpha1 * fc * b)
    return max(x, 0.0)


def flexure_capacity_single_rebar(
    b: float,
    h0: float,
    As: float,
    fc: float,
    fy: float,
    alpha1: float = ALPHA1
) -> float:
    """
    Moment capacity of a singly reinforced rectangular section.

    x = fy·As / (α1·fc·b)
    Mu = fy·As·(h₀ - x/2)

    The compression zone depth is not capped at ξb·h₀; use
    is_over_reinforced() to detect non-compliant sections.

    Args:
        b: Width (mm)
        h0: Effective depth (mm)
        As: Tension steel area (mm²)
        fc: Concrete design compressive strength (MPa)
        fy: Steel design yield strength (MPa)
        alpha1: Stress block factor

    Returns:
        Mu (N·mm)

    Example:
        >>> Mu = flexure_capacity_single_rebar(200, 460, 1256, 14.3, 360)
        >>> round(Mu / 1e6, 1)
        172.3
    """
    require_positive("h0", h0, "mm")
    x = compression_zone_depth(b, As, fc, fy, alpha1)
    return fy * As * (h0 - x / 2.0)


def flexure_capacity_from_x(
    b: float,
    h0: float,
    x: float,
    fc: float,
    fy: float,
    alpha1: float = ALPHA1
) -> float:
    """
    Tension steel area required for a compression zone depth x.

    As = α1·fc·b·x / fy

    Args:
        b: Width (mm)
        h0: Effective depth (mm), bounds x
        x: Compression zone depth (mm), 0 <= x <= h₀
        fc: Concrete design compressive strength (MPa)
        fy: Steel design yield strength (MPa)
        alpha1: Stress block factor

    Returns:
        As_required (mm²)
    """
    require_positive("b", b, "mm")
    require_positive("h0", h0, "mm")
    require_positive("fc", fc, "MPa")
    require_positive("fy", fy, "MPa")
    if not 0 <= x <= h0:
        raise DomainError(f"x = {x} mm must lie within [0, h0 = {h0}] mm")
    return alpha1 * fc * b * x / fy


def flexure_capacity_double_rebar(
    b: float,
    h0: float,
    As: float,
    As_prime: float,
    fc: float,
    fy: float,
    fy_prime: float,
    a_s_prime: float,
    alpha1: float = ALPHA1
) -> float:
    """
    Moment capacity of a doubly reinforced rectangular section.

    x = (fy·As - fy'·As') / (α1·fc·b)
    x >= 2a's:  Mu = α1·fc·b·x·(h₀ - x/2) + fy'·As'·(h₀ - a's)
    x <  2a's:  Mu = fy·As·(h₀ - a's)  (compression steel not yielded)

    Returns:
        Mu (N·mm)
    """
    require_positive("h0", h0, "mm")
    require_non_negative("As_prime", As_prime, "mm²")
    require_positive("fy_prime", fy_prime, "MPa")
    require_non_negative("a_s_prime", a_s_prime, "mm")
    if a_s_prime >= h0:
        raise DomainError(f"a's = {a_s_prime} mm must be smaller than h0 = {h0} mm")
    if not alpha1 * fc * b > 0:
        raise DomainError(f"α1·fc·b = {alpha1}·{fc}·{b} must be positive")
    require_non_negative("As", As, "mm²")

    x = (fy * As - fy_prime * As_prime) / (alpha1 * fc * b)

    if x < 2.0 * a_s_prime:
        return fy * As * (h0 - a_s_prime)
    return alpha1 * fc * b * x * (h0 - x / 2.0) + fy_prime * As_prime * (h0 - a_s_prime)


def check_flexure(
    section: SectionGeometry,
    materials: MaterialProperties,
    reinforcement: ReinforcementConfig,
    M_u: Optional[float] = None,
    profile: Optional[DesignCodeProfile] = None,
    xi_b: Optional[float] = None
) -> CapacityResult:
    """
    Flexural capacity check for a rectangular beam.

    Algorithm:
        1. h₀ = h - a_s
        2. x = (fy·As - fy'·As') / (α1·fc·b), ξ = x / h₀
        3. Classify ξ against ξb (over-reinforced)
        4. Mu from the singly or doubly reinforced expression
        5. ρ against ρ_min
        6. UR = M_u / Mu when a demand is supplied

    Args:
        section: SectionGeometry
        materials: MaterialProperties
        reinforcement: ReinforcementConfig
        M_u: Design moment (N·mm), optional
        profile: Design code profile (default GB 50010-2010)
        xi_b: Balanced ratio override; profile value for fy if None

    Returns:
        CapacityResult in N·mm with over_reinforced and below_min_ratio set
    """
    profile = profile or get_design_profile()
    b, h0 = section.b, section.h0
    fc, fy = materials.fc, materials.fy
    As, As_prime = reinforcement.As, reinforcement.As_prime
    alpha1 = profile.alpha1

    if xi_b is None:
        xi_b = profile.xi_b_for(fy, materials.Es)

    fy_prime = materials.fy_compression
    x = compression_zone_depth(b, As, fc, fy, alpha1, As_prime, fy_prime)
    xi = relative_compression_zone_height(x, h0)
    over = is_over_reinforced(xi, xi_b)

    if As_prime > 0:
        Mu = flexure_capacity_double_rebar(
            b, h0, As, As_prime, fc, fy, fy_prime,
            section.a_s_prime, alpha1
        )
    else:
        Mu = flexure_capacity_single_rebar(b, h0, As, fc, fy, alpha1)

    rho = rebar_ratio(As, b, h0)
    rho_min = profile.rho_min(materials.ft, fy)
    below_min = rho < rho_min

    warnings = materials.range_warnings(profile)
    UR = utilization(M_u, Mu)
    failed = over or below_min or (UR is not None and UR > 1.0)
    status = resolve_status(failed, warnings)

    logger.debug(
        "flexure: x=%.2f mm xi=%.4f xi_b=%.3f Mu=%.4g N·mm rho=%.5f",
        x, xi, xi_b, Mu, rho
    )

    x_expr = "(fy·As - fy'·As')" if As_prime > 0 else "fy·As"
    demand_line = f"\n  UR = M_u / Mu = {UR:.3f}" if UR is not None else ""
    findings = []
    if over:
        findings.append(f"Over-reinforced: ξ = {xi:.3f} > ξb = {xi_b:.3f}")
    if below_min:
        findings.append(f"Below minimum ratio: ρ = {rho:.4f} < ρ_min = {rho_min:.4f}")
    findings.extend(w.message for w in warnings)

    details = f"""
Flexural Capacity ({profile.name})
---------------------------------------------------
Section: b×h = {b:.0f}×{section.h:.0f} mm, h₀ = {h0:.0f} mm
Materials: fc = {fc:.1f} MPa, fy = {fy:.0f} MPa
Steel: As = {As:.0f} mm², As' = {As_prime:.0f} mm²

  x = {x_expr} / (α1·fc·b) = {x:.1f} mm
  ξ = x / h₀ = {xi:.4f} (ξb = {xi_b:.3f})
  ρ = {rho:.4f} (ρ_min = {rho_min:.4f})
  Mu = {Mu / 1e6:.2f} kN·m{demand_line}

Status: {status.value}
{chr(10).join(findings)}
    """

    return CapacityResult(
        value=Mu,
        unit="N·mm",
        status=status,
        over_reinforced=over,
        below_min_ratio=below_min,
        xi=xi,
        UR=UR,
        intermediates={'x': x, 'h0': h0, 'xi_b': xi_b, 'rho': rho, 'rho_min': rho_min},
        warnings=warnings,
        details=details.strip()
    )
