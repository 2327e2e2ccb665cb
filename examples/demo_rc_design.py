"""
Reinforced Concrete Design Quick Demonstration
==============================================

This script demonstrates:
1. Beam flexure and shear checks
2. Column axial compression with stability factor
3. Prestress loss breakdown
4. Serviceability (crack width, deflection)
"""

import logging

from rcengine import (
    MaterialProperties,
    PrestressState,
    ReinforcementConfig,
    SectionGeometry,
    beam_deflection_uniform,
    check_axial_compression,
    check_flexure,
    check_shear,
    estimate_crack_width,
    get_design_profile,
    prestress_loss_anchorage,
    prestress_loss_relaxation,
)


def demo_beam_design():
    """Demonstrate beam design workflow."""
    print("\n" + "=" * 70)
    print("BEAM DESIGN DEMO")
    print("=" * 70)

    profile = get_design_profile("GB 50010-2010")
    section = SectionGeometry(b=200, h=500, a_s=40, l=6000)
    materials = MaterialProperties(fc=14.3, ft=1.43, fy=360, fyv=270, Ec=3.0e4)
    rebar = ReinforcementConfig(As=1256, Asv=50.3, n_legs=2, s=200)  # 4Φ20, Φ8@200

    flex = check_flexure(section, materials, rebar, M_u=150e6, profile=profile)
    print(flex.details)

    shear = check_shear(section, materials, rebar, V_u=110e3, profile=profile)
    print("\n" + shear.details)

    crack = estimate_crack_width(
        Mk=100e6, As=rebar.As, b=section.b, h=section.h, h0=section.h0,
        ftk=2.01, Es=materials.Es, c=25, d_eq=20, w_lim=profile.crack_width_limit
    )
    print(f"\nCrack width w_max = {crack['w_max']:.3f} mm (limit {profile.crack_width_limit} mm)")

    f = beam_deflection_uniform(20, section.l, 2.0e13)
    print(f"Deflection f = {f:.2f} mm (limit {section.l / profile.deflection_limit_ratio:.1f} mm)")


def demo_column_design():
    """Demonstrate column compression check."""
    print("\n" + "=" * 70)
    print("COLUMN DESIGN DEMO")
    print("=" * 70)

    section = SectionGeometry(b=400, h=400, a_s=40)
    materials = MaterialProperties(fc=14.3, ft=1.43, fy=360, Ec=3.0e4)
    rebar = ReinforcementConfig(As=1256, As_prime=1256)  # 8Φ20

    result = check_axial_compression(section, materials, rebar, l0=6000, N_u=2.0e6)
    print(result.details)


def demo_prestress_losses():
    """Demonstrate prestress loss aggregation."""
    print("\n" + "=" * 70)
    print("PRESTRESS LOSS DEMO")
    print("=" * 70)

    state = PrestressState(
        sigma_con=1395,
        sigma_l1=prestress_loss_anchorage(5, 2.0e5, 10000),
        sigma_l2=50,
        sigma_l3=20,
        sigma_l4=prestress_loss_relaxation(0.05, 1395),
        sigma_l5=100,
    )
    print(state.loss_summary().to_string(index=False))
    print(f"\nEffective prestress σpe = {state.effective_prestress:.1f} MPa")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    demo_beam_design()
    demo_column_design()
    demo_prestress_losses()
