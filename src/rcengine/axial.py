"""
Axial capacity of reinforced concrete members.

Implements:
- Axial compression capacity with stability factor φ
- Axial tension capacity
- Stability factor lookup (tabulated l0/b, linear interpolation)
- Plotly chart of the stability curve

Units: mm, mm², MPa, N
"""

import logging
from typing import Optional

import numpy as np
import plotly.graph_objects as go

from .errors import DomainError, require_non_negative, require_positive
from .profile import DesignCodeProfile, get_design_profile
from .results import CapacityResult, resolve_status, utilization
from .section import MaterialProperties, ReinforcementConfig, SectionGeometry

logger = logging.getLogger(__name__)

_DEFAULT_PROFILE = get_design_profile()

# Reliability factor φ0 applied to axial compression capacity
AXIAL_REDUCTION_FACTOR = _DEFAULT_PROFILE.phi0

# Stability table of the default profile (GB 50010 Table 6.2.15, l0/b)
STABILITY_RATIOS = _DEFAULT_PROFILE.stability_ratios
STABILITY_FACTORS = _DEFAULT_PROFILE.stability_factors
STABILITY_SATURATION_RATIO = _DEFAULT_PROFILE.stability_saturation_ratio

# Longitudinal ratio above which the steel area is deducted from A
HIGH_STEEL_RATIO = 0.03


def axial_compression_capacity(
    fc: float,
    A: float,
    fy_prime: float,
    As_prime: float,
    phi: float,
    phi0: float = AXIAL_REDUCTION_FACTOR
) -> float:
    """
    Axial compression capacity of a tied column.

    Nu = φ·φ0·(fc·A + fy'·As')

    Args:
        fc: Concrete design compressive strength (MPa)
        A: Concrete section area (mm²)
        fy_prime: Compression steel design strength (MPa)
        As_prime: Longitudinal steel area (mm²)
        phi: Stability factor, see stability_factor()
        phi0: Reliability factor (0.9)

    Returns:
        Nu (N)

    Example:
        >>> round(axial_compression_capacity(14.3, 100000, 360, 1256, 0.9))
        1524550
    """
    require_positive("fc", fc, "MPa")
    require_positive("A", A, "mm²")
    require_non_negative("fy_prime", fy_prime, "MPa")
    require_non_negative("As_prime", As_prime, "mm²")
    if not 0 < phi <= 1.0:
        raise DomainError(f"Stability factor φ = {phi} must lie in (0, 1]")
    if not 0 < phi0 <= 1.0:
        raise DomainError(f"Reduction factor φ0 = {phi0} must lie in (0, 1]")
    return phi * phi0 * (fc * A + fy_prime * As_prime)


def axial_tension_capacity(fy: float, As: float) -> float:
    """Axial tension capacity Nu = fy·As (N); concrete carries no tension."""
    require_positive("fy", fy, "MPa")
    require_non_negative("As", As, "mm²")
    return fy * As


def stability_factor(
    slenderness_ratio: float,
    profile: Optional[DesignCodeProfile] = None
) -> float:
    """
    Stability factor φ for a compression member.

    Piecewise linear interpolation of the profile's stability table
    (l0/b for rectangular sections):
    - l0/b <= saturation ratio (8.0): φ = 1.0 exactly
    - between tabulated points: linear interpolation
    - beyond the last tabulated point: last value held

    Args:
        slenderness_ratio: l0/b
        profile: Design code profile (default GB 50010-2010)

    Returns:
        φ in (0, 1], monotonically non-increasing in slenderness

    Raises:
        DomainError: If slenderness_ratio < 0
    """
    require_non_negative("slenderness_ratio", slenderness_ratio)
    profile = profile or _DEFAULT_PROFILE
    ratios = profile.stability_ratios
    factors = profile.stability_factors

    if slenderness_ratio <= ratios[0]:
        return 1.0
    if slenderness_ratio > ratios[-1]:
        logger.warning(
            "Slenderness %.1f beyond stability table (max %.1f); holding φ = %.2f",
            slenderness_ratio, ratios[-1], factors[-1]
        )
    return float(np.interp(slenderness_ratio, ratios, factors))


def check_axial_compression(
    section: SectionGeometry,
    materials: MaterialProperties,
    reinforcement: ReinforcementConfig,
    l0: float,
    N_u: Optional[float] = None,
    profile: Optional[DesignCodeProfile] = None
) -> CapacityResult:
    """
    Axial compression check for a rectangular tied column.

    Longitudinal steel is As + As' (all bars). When the steel ratio
    exceeds 3% the steel area is deducted from the concrete area.

    Args:
        section: SectionGeometry (b is taken as the smaller side)
        materials: MaterialProperties
        reinforcement: ReinforcementConfig
        l0: Effective length (mm)
        N_u: Design axial force (N), optional
        profile: Design code profile (default GB 50010-2010)

    Returns:
        CapacityResult in N
    """
    profile = profile or get_design_profile()
    require_positive("l0", l0, "mm")

    b_min = min(section.b, section.h)
    slenderness = l0 / b_min
    phi = stability_factor(slenderness, profile)

    As_total = reinforcement.As + reinforcement.As_prime
    A = section.area
    rho = As_total / A
    if rho > HIGH_STEEL_RATIO:
        A = A - As_total

    Nu = axial_compression_capacity(
        materials.fc, A, materials.fy_compression, As_total, phi, profile.phi0
    )

    warnings = materials.range_warnings(profile)
    UR = utilization(N_u, Nu)
    status = resolve_status(UR is not None and UR > 1.0, warnings)

    logger.debug("axial: l0/b=%.2f phi=%.3f A=%.0f Nu=%.1f N", slenderness, phi, A, Nu)

    demand_line = f"\n  UR = N_u / Nu = {UR:.3f}" if UR is not None else ""
    details = f"""
Axial Compression Capacity ({profile.name})
---------------------------------------------------
Section: b×h = {section.b:.0f}×{section.h:.0f} mm, l0 = {l0:.0f} mm
  l0/b = {slenderness:.2f} → φ = {phi:.3f}
  ρ' = {rho:.4f}, A = {A:.0f} mm²
  Nu = φ·φ0·(fc·A + fy'·As') = {Nu / 1e3:.1f} kN (φ0 = {profile.phi0}){demand_line}

Status: {status.value}
{chr(10).join(w.message for w in warnings)}
    """

    return CapacityResult(
        value=Nu,
        unit="N",
        status=status,
        UR=UR,
        intermediates={'slenderness': slenderness, 'phi': phi, 'A': A, 'rho': rho},
        warnings=warnings,
        details=details.strip()
    )


def check_axial_tension(
    materials: MaterialProperties,
    reinforcement: ReinforcementConfig,
    N_u: Optional[float] = None,
    profile: Optional[DesignCodeProfile] = None
) -> CapacityResult:
    """Axial tension check; all longitudinal steel (As + As') carries the force."""
    profile = profile or get_design_profile()
    As_total = reinforcement.As + reinforcement.As_prime
    Nu = axial_tension_capacity(materials.fy, As_total)

    warnings = materials.range_warnings(profile)
    UR = utilization(N_u, Nu)
    status = resolve_status(UR is not None and UR > 1.0, warnings)

    return CapacityResult(
        value=Nu,
        unit="N",
        status=status,
        UR=UR,
        intermediates={'As_total': As_total},
        warnings=warnings,
        details=f"Nu = fy·As = {materials.fy:.0f} × {As_total:.0f} = {Nu / 1e3:.1f} kN"
    )


def plot_stability_curve(
    profile: Optional[DesignCodeProfile] = None,
    slenderness: Optional[float] = None,
    title: str = "Stability Factor"
) -> go.Figure:
    """
    Plotly chart of the stability table with an optional design point.

    Args:
        profile: Design code profile (default GB 50010-2010)
        slenderness: l0/b of a member to mark on the curve
        title: Chart title

    Returns:
        Plotly Figure
    """
    profile = profile or get_design_profile()
    ratios = np.linspace(0.0, profile.stability_ratios[-1], 200)
    factors = [stability_factor(r, profile) for r in ratios]

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=ratios,
        y=factors,
        mode='lines',
        name='φ(l0/b)',
        line=dict(color='blue', width=3),
        hovertemplate='l0/b = %{x:.1f}<br>φ = %{y:.3f}<extra></extra>'
    ))
    fig.add_trace(go.Scatter(
        x=list(profile.stability_ratios),
        y=list(profile.stability_factors),
        mode='markers',
        name='Tabulated',
        marker=dict(size=7, color='darkblue')
    ))

    if slenderness is not None:
        fig.add_trace(go.Scatter(
            x=[slenderness],
            y=[stability_factor(slenderness, profile)],
            mode='markers',
            name='Member',
            marker=dict(size=15, color='red', symbol='star',
                        line=dict(color='darkred', width=2))
        ))

    fig.update_layout(
        title={'text': f"{title} ({profile.name})", 'x': 0.5, 'xanchor': 'center'},
        xaxis_title='Slenderness l0/b',
        yaxis_title='Stability factor φ',
        yaxis=dict(range=[0, 1.05], showgrid=True, gridcolor='lightgray'),
        xaxis=dict(showgrid=True, gridcolor='lightgray'),
        plot_bgcolor='white',
        hovermode='closest'
    )
    return fig
