"""
Unit tests for serviceability module
"""

import pytest
from rcengine.errors import DomainError
from rcengine.serviceability import (
    beam_deflection_point,
    beam_deflection_uniform,
    check_crack_width,
    check_deflection,
    check_max_rebar_ratio,
    check_min_rebar_ratio,
    effective_tension_rebar_ratio,
    estimate_crack_width,
    long_term_stiffness,
    max_crack_width,
    service_steel_stress,
    short_term_stiffness,
    strain_nonuniformity_coefficient,
)


class TestDeflection:
    """Test simply supported beam deflections."""

    def test_uniform_load(self):
        f = beam_deflection_uniform(20, 6000, 2.0e14)
        assert f == pytest.approx(5 * 20 * 6000 ** 4 / (384 * 2.0e14))
        assert f == pytest.approx(1.6875)

    def test_point_load(self):
        f = beam_deflection_point(100e3, 6000, 2.0e14)
        assert f == pytest.approx(2.25)

    def test_deflection_scales_with_stiffness(self):
        f1 = beam_deflection_uniform(20, 6000, 1.0e14)
        f2 = beam_deflection_uniform(20, 6000, 2.0e14)
        assert f1 == pytest.approx(2 * f2)

    def test_zero_stiffness(self):
        with pytest.raises(DomainError, match="EI"):
            beam_deflection_uniform(20, 6000, 0)
        with pytest.raises(DomainError):
            beam_deflection_point(100e3, 6000, -1)

    def test_deflection_limit(self):
        assert check_deflection(25.0, 6000, 200)
        assert check_deflection(30.0, 6000, 200)
        assert not check_deflection(31.0, 6000, 200)


class TestRebarRatioChecks:
    """Test ρ limit predicates."""

    def test_min_ratio(self):
        assert check_min_rebar_ratio(0.0137, 0.002)
        assert check_min_rebar_ratio(0.002, 0.002)
        assert not check_min_rebar_ratio(0.0015, 0.002)

    def test_max_ratio(self):
        assert check_max_rebar_ratio(0.0137, 0.0206)
        assert check_max_rebar_ratio(0.0206, 0.0206)
        assert not check_max_rebar_ratio(0.025, 0.0206)


class TestCrackWidth:
    """Test crack width chain."""

    def test_service_steel_stress(self):
        assert service_steel_stress(100e6, 1256, 460) == pytest.approx(
            100e6 / (0.87 * 460 * 1256)
        )

    def test_effective_tension_ratio(self):
        assert effective_tension_rebar_ratio(1256, 200, 500) == pytest.approx(0.02512)

    def test_effective_tension_ratio_floor(self):
        assert effective_tension_rebar_ratio(200, 200, 500) == 0.01

    def test_psi_lower_clamp(self):
        assert strain_nonuniformity_coefficient(2.01, 0.01, 50.0) == 0.2

    def test_psi_upper_clamp(self):
        assert strain_nonuniformity_coefficient(0.0, 0.02, 200.0) == 1.0

    def test_psi_between_bounds(self):
        psi = strain_nonuniformity_coefficient(2.01, 0.02512, 198.9)
        assert psi == pytest.approx(1.1 - 0.65 * 2.01 / (0.02512 * 198.9))

    def test_psi_unstressed_steel(self):
        assert strain_nonuniformity_coefficient(2.01, 0.02512, 0.0) == 0.2

    def test_psi_negative_stress(self):
        with pytest.raises(DomainError, match="sigma_s"):
            strain_nonuniformity_coefficient(2.01, 0.02512, -5.0)

    def test_max_crack_width(self):
        w = max_crack_width(1.9, 0.8, 200.0, 2.0e5, 25, 20, 0.025)
        assert w == pytest.approx(1.9 * 0.8 * 0.001 * (1.9 * 25 + 0.08 * 20 / 0.025))

    def test_compressive_steel_stress(self):
        with pytest.raises(DomainError, match="tensile"):
            max_crack_width(1.9, 0.8, -10.0, 2.0e5, 25, 20, 0.025)

    def test_check_crack_width(self):
        assert check_crack_width(0.18, 0.3)
        assert not check_crack_width(0.35, 0.3)

    def test_estimate_crack_width(self):
        result = estimate_crack_width(
            Mk=100e6, As=1256, b=200, h=500, h0=460,
            ftk=2.01, Es=2.0e5, c=25, d_eq=20, w_lim=0.3
        )
        assert 0.1 < result['w_max'] < 0.3
        assert result['ok'] is True
        assert result['psi'] == pytest.approx(
            strain_nonuniformity_coefficient(2.01, result['rho_te'], result['sigma_s'])
        )

    def test_estimate_without_limit(self):
        result = estimate_crack_width(
            Mk=100e6, As=1256, b=200, h=500, h0=460,
            ftk=2.01, Es=2.0e5, c=25, d_eq=20
        )
        assert result['ok'] is None

    def test_estimate_zero_service_moment(self):
        result = estimate_crack_width(
            Mk=0.0, As=1256, b=200, h=500, h0=460,
            ftk=2.01, Es=2.0e5, c=25, d_eq=20, w_lim=0.3
        )
        assert result['sigma_s'] == 0.0
        assert result['psi'] == 0.2
        assert result['w_max'] == 0.0
        assert result['ok'] is True


class TestStiffness:
    """Test short- and long-term stiffness."""

    def test_short_term_stiffness(self):
        alpha_E = 2.0e5 / 3.0e4
        rho = 1256 / (200 * 460)
        Bs = short_term_stiffness(2.0e5, 1256, 460, 0.84, alpha_E, rho)
        expected = 2.0e5 * 1256 * 460 ** 2 / (1.15 * 0.84 + 0.2 + 6 * alpha_E * rho)
        assert Bs == pytest.approx(expected)

    def test_long_term_all_sustained(self):
        """Mq = Mk gives B = Bs / θ."""
        assert long_term_stiffness(4.0e13, 100e6, 100e6, theta=2.0) == pytest.approx(2.0e13)

    def test_long_term_no_sustained_load(self):
        assert long_term_stiffness(4.0e13, 100e6, 0.0) == pytest.approx(4.0e13)

    def test_theta_below_one(self):
        with pytest.raises(DomainError):
            long_term_stiffness(4.0e13, 100e6, 80e6, theta=0.5)
