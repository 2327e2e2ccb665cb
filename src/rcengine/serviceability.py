"""
Serviceability Limit State (SLS) calculations.

Implements:
- Simply supported beam deflection (uniform and midspan point load)
- Reinforcement ratio limit checks
- Crack width (characteristic load combination)
- Short- and long-term flexural stiffness
- Deflection limit check

Units: mm, mm², MPa, N, N·mm
"""

import logging
from typing import Any, Dict, Optional

from .errors import DomainError, require_non_negative, require_positive

logger = logging.getLogger(__name__)

# Lever arm factor for service steel stress, z = 0.87·h₀
SERVICE_LEVER_ARM_FACTOR = 0.87
# Floor of the effective tension reinforcement ratio
MIN_EFFECTIVE_TENSION_RATIO = 0.01
# Bounds of the strain non-uniformity coefficient ψ
PSI_MIN = 0.2
PSI_MAX = 1.0


# ============================================================================
# DEFLECTION
# ============================================================================

def beam_deflection_uniform(load: float, span: float, EI: float) -> float:
    """
    Midspan deflection of a simply supported beam under uniform load.

    f = 5·w·l⁴ / (384·EI)

    Args:
        load: Uniform load w (N/mm)
        span: Span l (mm)
        EI: Flexural stiffness (N·mm²)

    Returns:
        f (mm)
    """
    require_positive("span", span, "mm")
    require_positive("EI", EI, "N·mm²")
    return 5.0 * load * span ** 4 / (384.0 * EI)


def beam_deflection_point(load: float, span: float, EI: float) -> float:
    """
    Midspan deflection of a simply supported beam under a midspan point load.

    f = P·l³ / (48·EI)
    """
    require_positive("span", span, "mm")
    require_positive("EI", EI, "N·mm²")
    return load * span ** 3 / (48.0 * EI)


def check_deflection(f: float, span: float, limit_ratio: float) -> bool:
    """True if f <= span / limit_ratio (e.g., limit_ratio=200 for l/200)."""
    require_positive("span", span, "mm")
    require_positive("limit_ratio", limit_ratio)
    return abs(f) <= span / limit_ratio


# ============================================================================
# REINFORCEMENT RATIO LIMITS
# ============================================================================

def check_min_rebar_ratio(rho: float, rho_min: float) -> bool:
    """ρ >= ρ_min."""
    return rho >= rho_min


def check_max_rebar_ratio(rho: float, rho_max: float) -> bool:
    """ρ <= ρ_max."""
    return rho <= rho_max


# ============================================================================
# CRACK WIDTH
# ============================================================================

def service_steel_stress(Mk: float, As: float, h0: float) -> float:
    """
    Tension steel stress under service moment.

    σs = Mk / (0.87·h₀·As)
    """
    require_positive("As", As, "mm²")
    require_positive("h0", h0, "mm")
    return Mk / (SERVICE_LEVER_ARM_FACTOR * h0 * As)


def effective_tension_rebar_ratio(As: float, b: float, h: float) -> float:
    """
    Reinforcement ratio over the effective tension area 0.5·b·h.

    ρte = As / (0.5·b·h), not less than 0.01.
    """
    require_non_negative("As", As, "mm²")
    require_positive("b", b, "mm")
    require_positive("h", h, "mm")
    return max(As / (0.5 * b * h), MIN_EFFECTIVE_TENSION_RATIO)


def strain_nonuniformity_coefficient(ftk: float, rho_te: float, sigma_s: float) -> float:
    """
    Strain non-uniformity coefficient of cracked tension steel.

    ψ = 1.1 - 0.65·ftk / (ρte·σs), clamped to [0.2, 1.0]

    An unstressed bar (σs = 0, no service moment) takes the lower bound.
    """
    require_positive("rho_te", rho_te)
    require_non_negative("sigma_s", sigma_s, "MPa")
    if sigma_s == 0:
        return PSI_MIN
    psi = 1.1 - 0.65 * ftk / (rho_te * sigma_s)
    return min(max(psi, PSI_MIN), PSI_MAX)


def max_crack_width(
    alpha_cr: float,
    psi: float,
    sigma_s: float,
    Es: float,
    c: float,
    d_eq: float,
    rho_te: float
) -> float:
    """
    Maximum crack width.

    w_max = α_cr·ψ·(σs/Es)·(1.9·c + 0.08·d_eq/ρte)

    Args:
        alpha_cr: Member stress characteristic coefficient (1.9 for flexure)
        psi: Strain non-uniformity coefficient
        sigma_s: Service steel stress (MPa)
        Es: Steel modulus (MPa)
        c: Clear cover to outermost tension bars (mm)
        d_eq: Equivalent bar diameter (mm)
        rho_te: Effective tension reinforcement ratio

    Returns:
        w_max (mm)
    """
    require_positive("Es", Es, "MPa")
    require_positive("rho_te", rho_te)
    require_non_negative("c", c, "mm")
    require_positive("d_eq", d_eq, "mm")
    if sigma_s < 0:
        raise DomainError(f"Steel stress σs = {sigma_s} MPa must be tensile (>= 0)")
    w_max = alpha_cr * psi * (sigma_s / Es) * (1.9 * c + 0.08 * d_eq / rho_te)
    logger.debug("crack width: psi=%.3f sigma_s=%.1f w_max=%.3f mm", psi, sigma_s, w_max)
    return w_max


def check_crack_width(w_max: float, w_lim: float) -> bool:
    """w_max <= w_lim."""
    require_positive("w_lim", w_lim, "mm")
    return w_max <= w_lim


# ============================================================================
# STIFFNESS
# ============================================================================

def short_term_stiffness(
    Es: float,
    As: float,
    h0: float,
    psi: float,
    alpha_E: float,
    rho: float,
    gamma_f: float = 0.0
) -> float:
    """
    Short-term stiffness of a cracked flexural member.

    Bs = Es·As·h₀² / (1.15ψ + 0.2 + 6αE·ρ / (1 + 3.5γf'))

    Args:
        gamma_f: Compression flange ratio γf' (0 for rectangular sections)

    Returns:
        Bs (N·mm²)
    """
    require_positive("Es", Es, "MPa")
    require_positive("As", As, "mm²")
    require_positive("h0", h0, "mm")
    require_non_negative("gamma_f", gamma_f)
    denominator = 1.15 * psi + 0.2 + 6.0 * alpha_E * rho / (1.0 + 3.5 * gamma_f)
    if not denominator > 0:
        raise DomainError(f"Stiffness denominator {denominator} must be positive")
    return Es * As * h0 ** 2 / denominator


def long_term_stiffness(
    Bs: float,
    Mk: float,
    Mq: float,
    theta: float = 2.0
) -> float:
    """
    Long-term stiffness including sustained-load creep.

    B = Mk / (Mq·(θ - 1) + Mk) · Bs

    Args:
        Bs: Short-term stiffness (N·mm²)
        Mk: Characteristic combination moment (N·mm)
        Mq: Quasi-permanent combination moment (N·mm)
        theta: Long-term deflection factor (2.0 without compression steel)
    """
    require_positive("Bs", Bs, "N·mm²")
    require_positive("Mk", Mk, "N·mm")
    require_non_negative("Mq", Mq, "N·mm")
    if theta < 1.0:
        raise DomainError(f"θ = {theta} must be at least 1.0")
    return Mk / (Mq * (theta - 1.0) + Mk) * Bs


def estimate_crack_width(
    Mk: float,
    As: float,
    b: float,
    h: float,
    h0: float,
    ftk: float,
    Es: float,
    c: float,
    d_eq: float,
    alpha_cr: float = 1.9,
    w_lim: Optional[float] = None
) -> Dict[str, Any]:
    """
    Crack width of a rectangular flexural member from service moment.

    Chains service_steel_stress, effective_tension_rebar_ratio,
    strain_nonuniformity_coefficient and max_crack_width.

    Returns:
        {
            'sigma_s': float,  # MPa
            'rho_te': float,
            'psi': float,
            'w_max': float,  # mm
            'ok': Optional[bool]  # None when w_lim not given
        }
    """
    sigma_s = service_steel_stress(Mk, As, h0)
    rho_te = effective_tension_rebar_ratio(As, b, h)
    psi = strain_nonuniformity_coefficient(ftk, rho_te, sigma_s)
    w_max = max_crack_width(alpha_cr, psi, sigma_s, Es, c, d_eq, rho_te)
    return {
        'sigma_s': sigma_s,
        'rho_te': rho_te,
        'psi': psi,
        'w_max': w_max,
        'ok': check_crack_width(w_max, w_lim) if w_lim is not None else None,
    }
