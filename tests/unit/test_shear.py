"""
Unit tests for shear capacity module
"""

import pytest
from rcengine.errors import DomainError
from rcengine.numeric import approx_equal
from rcengine.results import DesignStatus
from rcengine.section import MaterialProperties, ReinforcementConfig, SectionGeometry
from rcengine.shear import (
    check_shear,
    shear_capacity_concrete_only,
    shear_capacity_with_stirrups,
    shear_section_limit,
    stirrup_shear_contribution,
)


class TestConcreteOnly:
    """Test concrete shear capacity."""

    def test_worked_example(self):
        Vc = shear_capacity_concrete_only(200, 460, 1.43, 0.7)
        assert approx_equal(Vc, 92000, 1000)
        assert Vc == pytest.approx(0.7 * 1.43 * 200 * 460)

    def test_scales_with_coefficient(self):
        V_07 = shear_capacity_concrete_only(200, 460, 1.43, 0.7)
        V_035 = shear_capacity_concrete_only(200, 460, 1.43, 0.35)
        assert V_07 == pytest.approx(2 * V_035)

    def test_invalid_depth(self):
        with pytest.raises(DomainError):
            shear_capacity_concrete_only(200, 0, 1.43, 0.7)


class TestWithStirrups:
    """Test stirrup-augmented shear capacity."""

    def test_stirrup_contribution(self):
        Vs = stirrup_shear_contribution(270, 50.3, 200, 2, 460)
        assert Vs == pytest.approx(270 * 50.3 * 2 * 460 / 200)

    def test_total_capacity(self):
        V = shear_capacity_with_stirrups(200, 460, 1.43, 0.7, 270, 50.3, 200, 2)
        expected = 0.7 * 1.43 * 200 * 460 + 270 * 50.3 * 2 * 460 / 200
        assert V == pytest.approx(expected)

    def test_stirrups_add_to_concrete(self):
        Vc = shear_capacity_concrete_only(200, 460, 1.43, 0.7)
        V = shear_capacity_with_stirrups(200, 460, 1.43, 0.7, 270, 50.3, 200, 2)
        assert V > Vc

    def test_closer_spacing_increases_capacity(self):
        V_200 = shear_capacity_with_stirrups(200, 460, 1.43, 0.7, 270, 50.3, 200, 2)
        V_100 = shear_capacity_with_stirrups(200, 460, 1.43, 0.7, 270, 50.3, 100, 2)
        assert V_100 > V_200

    def test_zero_spacing(self):
        with pytest.raises(DomainError, match="spacing"):
            shear_capacity_with_stirrups(200, 460, 1.43, 0.7, 270, 50.3, 0, 2)

    def test_negative_spacing(self):
        with pytest.raises(DomainError):
            shear_capacity_with_stirrups(200, 460, 1.43, 0.7, 270, 50.3, -100, 2)

    def test_zero_legs(self):
        with pytest.raises(DomainError, match="legs"):
            shear_capacity_with_stirrups(200, 460, 1.43, 0.7, 270, 50.3, 200, 0)


def test_section_limit():
    assert shear_section_limit(200, 460, 14.3) == pytest.approx(0.25 * 14.3 * 200 * 460)


class TestShearCheck:
    """Test composed shear check."""

    @pytest.fixture
    def section(self):
        return SectionGeometry(b=200, h=500, a_s=40)

    @pytest.fixture
    def materials(self):
        return MaterialProperties(fc=14.3, ft=1.43, fy=360, fyv=270, Ec=3.0e4)

    def test_concrete_only(self, section, materials):
        result = check_shear(section, materials, ReinforcementConfig(As=1256))
        assert result.value == pytest.approx(0.7 * 1.43 * 200 * 460)
        assert result.intermediates['Vs'] == 0.0
        assert result.status == DesignStatus.PASS

    def test_with_stirrups_and_demand(self, section, materials):
        rebar = ReinforcementConfig(As=1256, Asv=50.3, n_legs=2, s=200)
        result = check_shear(section, materials, rebar, V_u=100e3)
        assert result.value == pytest.approx(0.7 * 1.43 * 200 * 460 + 270 * 50.3 * 2 * 460 / 200)
        assert result.UR == pytest.approx(100e3 / result.value)
        assert result.status == DesignStatus.PASS

    def test_section_limit_governs(self, section, materials):
        rebar = ReinforcementConfig(As=1256, Asv=113.1, n_legs=4, s=50)
        result = check_shear(section, materials, rebar)
        assert result.value == pytest.approx(result.intermediates['V_max'])
        assert "section limit" in result.details

    def test_demand_exceeds_capacity(self, section, materials):
        result = check_shear(section, materials, ReinforcementConfig(As=1256), V_u=150e3)
        assert result.status == DesignStatus.FAIL

    def test_alpha_cv_override(self, section, materials):
        result = check_shear(section, materials, ReinforcementConfig(As=1256), alpha_cv=0.5)
        assert result.intermediates['Vc'] == pytest.approx(0.5 * 1.43 * 200 * 460)
