"""
Prestress losses and effective prestress.

One pure function per loss mechanism, each returning a non-negative
loss in MPa:

    σl1  anchorage deformation and tendon slip
    σl2  friction along the duct (post-tensioning)
    σl3  temperature difference during steam curing (pretensioning)
    σl4  steel relaxation
    σl5  concrete creep and shrinkage

Elastic shortening is provided separately for callers that track it
as its own term.

Units: mm, MPa
"""

import logging
import math
from typing import Optional

import numpy as np
import pandas as pd
from pydantic import BaseModel, ConfigDict, Field

from .errors import DomainError, require_non_negative, require_positive
from .profile import DesignCodeProfile, get_design_profile

logger = logging.getLogger(__name__)

# Creep/shrinkage coefficients (constant, σpc/f'cu factor)
CREEP_SHRINKAGE_PRETENSIONED = (60.0, 340.0)
CREEP_SHRINKAGE_POST_TENSIONED = (55.0, 300.0)
# Upper bound of σpc/f'cu for the linear creep expression
CREEP_STRESS_RATIO_LIMIT = 0.5


def prestress_loss_anchorage(a: float, Es: float, l: float) -> float:
    """
    Anchorage deformation loss σl1 = a·Es / l.

    Args:
        a: Anchorage deformation and slip (mm)
        Es: Tendon elastic modulus (MPa)
        l: Distance between anchorages (mm)

    Raises:
        DomainError: If l <= 0

    Example:
        >>> prestress_loss_anchorage(5, 200000, 10000)
        100.0
    """
    if not l > 0:
        raise DomainError(f"Tendon length l = {l} mm must be positive")
    require_non_negative("a", a, "mm")
    require_positive("Es", Es, "MPa")
    return a * Es / l


def prestress_loss_friction(
    sigma_con: float,
    kappa: float,
    x: float,
    mu: float,
    theta: float
) -> float:
    """
    Duct friction loss σl2 = σcon·(1 - e^-(κx + μθ)).

    Args:
        sigma_con: Jacking stress (MPa)
        kappa: Wobble coefficient per mm of duct
        x: Duct length from jacking end (mm)
        mu: Curvature friction coefficient
        theta: Cumulative angle change (rad)
    """
    require_non_negative("sigma_con", sigma_con, "MPa")
    for name, value in (("kappa", kappa), ("x", x), ("mu", mu), ("theta", theta)):
        require_non_negative(name, value)
    return float(sigma_con * (1.0 - np.exp(-(kappa * x + mu * theta))))


def prestress_loss_temperature(delta_t: float) -> float:
    """Steam curing loss σl3 = 2·Δt (Δt in °C between tendon and bed)."""
    require_non_negative("delta_t", delta_t, "°C")
    return 2.0 * delta_t


def prestress_loss_elastic_shortening(
    alpha_E: float,
    sigma_pc: float,
    n_tendons: Optional[int] = None
) -> float:
    """
    Elastic shortening loss.

    Pretensioned (n_tendons=None): αE·σpc
    Post-tensioned, n tendons stressed in sequence: (n - 1)/(2n)·αE·σpc

    Args:
        alpha_E: Es / Ec
        sigma_pc: Concrete stress at tendon level after transfer (MPa)
        n_tendons: Number of sequentially stressed tendons
    """
    require_positive("alpha_E", alpha_E)
    require_non_negative("sigma_pc", sigma_pc, "MPa")
    if n_tendons is None:
        return alpha_E * sigma_pc
    if n_tendons < 1:
        raise DomainError(f"n_tendons = {n_tendons} must be at least 1")
    return (n_tendons - 1) / (2.0 * n_tendons) * alpha_E * sigma_pc


def prestress_loss_creep_shrinkage(
    sigma_pc: float,
    fcu_prime: float,
    rho: float,
    post_tensioned: bool = False
) -> float:
    """
    Creep and shrinkage loss σl5.

    Pretensioned:   (60 + 340·σpc/f'cu) / (1 + 15ρ)
    Post-tensioned: (55 + 300·σpc/f'cu) / (1 + 15ρ)

    Args:
        sigma_pc: Concrete stress at tendon level (MPa)
        fcu_prime: Concrete cube strength at transfer (MPa)
        rho: Reinforcement ratio (prestressed + non-prestressed)
        post_tensioned: Tendon type

    Raises:
        DomainError: If σpc > 0.5·f'cu (non-linear creep range)
    """
    require_non_negative("sigma_pc", sigma_pc, "MPa")
    require_positive("fcu_prime", fcu_prime, "MPa")
    require_non_negative("rho", rho)
    stress_ratio = sigma_pc / fcu_prime
    if stress_ratio > CREEP_STRESS_RATIO_LIMIT:
        raise DomainError(
            f"σpc/f'cu = {stress_ratio:.3f} exceeds {CREEP_STRESS_RATIO_LIMIT} "
            f"(linear creep expression not applicable)"
        )
    base, factor = CREEP_SHRINKAGE_POST_TENSIONED if post_tensioned else CREEP_SHRINKAGE_PRETENSIONED
    return (base + factor * stress_ratio) / (1.0 + 15.0 * rho)


def prestress_loss_relaxation(psi: float, sigma_con: float) -> float:
    """Relaxation loss σl4 = ψ·σcon."""
    require_non_negative("psi", psi)
    require_non_negative("sigma_con", sigma_con, "MPa")
    return psi * sigma_con


def total_prestress_loss(
    sigma_l1: float = 0.0,
    sigma_l2: float = 0.0,
    sigma_l3: float = 0.0,
    sigma_l4: float = 0.0,
    sigma_l5: float = 0.0
) -> float:
    """
    Total loss σl = σl1 + σl2 + σl3 + σl4 + σl5.

    Order-independent (correctly rounded sum); pass 0 for unused mechanisms.

    Example:
        >>> total_prestress_loss(100, 50, 20, 70, 100)
        340.0
    """
    losses = (sigma_l1, sigma_l2, sigma_l3, sigma_l4, sigma_l5)
    for i, value in enumerate(losses, start=1):
        require_non_negative(f"sigma_l{i}", value, "MPa")
    return math.fsum(losses)


def design_total_prestress_loss(
    total_loss: float,
    post_tensioned: bool,
    profile: Optional[DesignCodeProfile] = None
) -> float:
    """Total loss raised to the profile minimum (100 MPa pre-, 80 MPa post-tensioned)."""
    profile = profile or get_design_profile()
    require_non_negative("total_loss", total_loss, "MPa")
    minimum = (
        profile.min_total_loss_post_tensioned if post_tensioned
        else profile.min_total_loss_pretensioned
    )
    return max(total_loss, minimum)


def effective_prestress(sigma_con: float, total_loss: float) -> float:
    """
    Effective prestress σpe = σcon - σl.

    A negative result (losses exceeding the jacking stress) is returned
    as-is and logged; callers decide how to treat it.
    """
    sigma_pe = sigma_con - total_loss
    if sigma_pe < 0:
        logger.warning(
            "Total loss %.1f MPa exceeds jacking stress %.1f MPa (σpe = %.1f MPa)",
            total_loss, sigma_con, sigma_pe
        )
    return sigma_pe


class PrestressState(BaseModel):
    """
    Jacking stress and loss breakdown of a tendon.

    Attributes:
        sigma_con: Jacking (control) stress (MPa)
        sigma_l1..sigma_l5: Loss per mechanism (MPa)
        sigma_elastic: Elastic shortening loss (MPa), see
            prestress_loss_elastic_shortening()

    Example:
        >>> state = PrestressState(sigma_con=1395, sigma_l1=100, sigma_l2=50,
        ...                        sigma_l3=20, sigma_l4=70, sigma_l5=100)
        >>> state.effective_prestress
        1055.0
    """
    model_config = ConfigDict(frozen=True)

    sigma_con: float = Field(..., gt=0, description="Jacking stress (MPa)")
    sigma_l1: float = Field(default=0.0, ge=0, description="Anchorage loss (MPa)")
    sigma_l2: float = Field(default=0.0, ge=0, description="Friction loss (MPa)")
    sigma_l3: float = Field(default=0.0, ge=0, description="Temperature loss (MPa)")
    sigma_l4: float = Field(default=0.0, ge=0, description="Relaxation loss (MPa)")
    sigma_l5: float = Field(default=0.0, ge=0, description="Creep/shrinkage loss (MPa)")
    sigma_elastic: float = Field(default=0.0, ge=0, description="Elastic shortening loss (MPa)")

    @property
    def total_loss(self) -> float:
        return math.fsum((
            self.sigma_l1, self.sigma_l2, self.sigma_l3, self.sigma_l4, self.sigma_l5,
            self.sigma_elastic,
        ))

    @property
    def effective_prestress(self) -> float:
        return effective_prestress(self.sigma_con, self.total_loss)

    @property
    def is_over_lost(self) -> bool:
        """True when losses exceed the jacking stress."""
        return self.total_loss > self.sigma_con

    def loss_summary(self) -> pd.DataFrame:
        """
        Loss breakdown as a pandas DataFrame.

        Returns:
            DataFrame with columns Mechanism, Loss (MPa), Share (%)
        """
        total = self.total_loss
        rows = [
            ("σl1 anchorage", self.sigma_l1),
            ("σl2 friction", self.sigma_l2),
            ("σl3 temperature", self.sigma_l3),
            ("σl4 relaxation", self.sigma_l4),
            ("σl5 creep/shrinkage", self.sigma_l5),
            ("elastic shortening", self.sigma_elastic),
        ]
        data = [
            {
                "Mechanism": name,
                "Loss (MPa)": value,
                "Share (%)": 100.0 * value / total if total > 0 else 0.0,
            }
            for name, value in rows
        ]
        data.append({"Mechanism": "Total", "Loss (MPa)": total, "Share (%)": 100.0 if total > 0 else 0.0})
        return pd.DataFrame(data)
