"""
Unit tests for section and material primitives
"""

import pytest
from rcengine.errors import DomainError, RangeWarning
from rcengine.section import (
    MaterialProperties,
    ReinforcementConfig,
    SectionGeometry,
    check_material_ranges,
    effective_height,
    elastic_modulus_ratio,
    is_over_reinforced,
    rebar_ratio,
    relative_compression_zone_height,
    transformed_area,
)


class TestEffectiveHeight:
    """Test h₀ = h - a_s."""

    def test_effective_height(self):
        assert effective_height(500, 40) == 460

    @pytest.mark.parametrize("h,a_s", [(500, 40), (450, 35), (800, 60), (300, 0)])
    def test_round_trip(self, h, a_s):
        assert effective_height(h, a_s) + a_s == h

    def test_cover_equal_to_height(self):
        with pytest.raises(DomainError, match="smaller than h"):
            effective_height(500, 500)

    def test_cover_exceeds_height(self):
        with pytest.raises(DomainError):
            effective_height(500, 600)

    def test_non_positive_height(self):
        with pytest.raises(DomainError, match="must be positive"):
            effective_height(0, 0)


class TestModulusAndAreas:
    """Test αE, transformed area and reinforcement ratio."""

    def test_elastic_modulus_ratio(self):
        assert elastic_modulus_ratio(2.0e5, 3.0e4) == pytest.approx(6.6667, rel=1e-4)

    def test_zero_concrete_modulus(self):
        with pytest.raises(DomainError, match="Ec"):
            elastic_modulus_ratio(2.0e5, 0)

    def test_transformed_area(self):
        alpha_E = 2.0e5 / 3.0e4
        A0 = transformed_area(100000, alpha_E, 1256)
        assert A0 == pytest.approx(100000 + (alpha_E - 1) * 1256)
        assert A0 > 100000

    def test_transformed_area_without_steel(self):
        assert transformed_area(100000, 6.67, 0) == 100000

    def test_rebar_ratio(self):
        assert rebar_ratio(1256, 200, 460) == pytest.approx(1256 / 92000)

    def test_rebar_ratio_zero_section(self):
        with pytest.raises(DomainError, match="must be positive"):
            rebar_ratio(1256, 0, 460)

    def test_domain_error_is_value_error(self):
        """Callers catching ValueError also catch DomainError."""
        with pytest.raises(ValueError):
            rebar_ratio(1256, 200, -1)


class TestCompressionZone:
    """Test ξ and the over-reinforced classification."""

    def test_relative_height(self):
        assert relative_compression_zone_height(230, 460) == 0.5

    def test_relative_height_zero_depth(self):
        with pytest.raises(DomainError):
            relative_compression_zone_height(100, 0)

    def test_equality_is_not_over_reinforced(self):
        assert is_over_reinforced(0.518, 0.518) is False

    def test_above_balanced(self):
        assert is_over_reinforced(0.52, 0.518) is True

    def test_below_balanced(self):
        assert is_over_reinforced(0.3, 0.518) is False


class TestMaterialRanges:
    """Test engineering range findings."""

    def test_in_range(self):
        assert check_material_ranges(14.3, 360) == []

    def test_concrete_out_of_range(self):
        found = check_material_ranges(60.0, 360)
        assert len(found) == 1
        assert isinstance(found[0], RangeWarning)
        assert found[0].parameter == "fc"
        assert found[0].lo == 10.0 and found[0].hi == 50.0
        assert "outside engineering range" in found[0].message

    def test_stirrup_steel_out_of_range(self):
        found = check_material_ranges(14.3, 360, fyv=150.0)
        assert [w.parameter for w in found] == ["fyv"]

    def test_warning_is_logged(self, caplog):
        with caplog.at_level("WARNING", logger="rcengine.section"):
            check_material_ranges(8.0, 600.0)
        assert "fc = 8" in caplog.text
        assert "fy = 600" in caplog.text


class TestSectionGeometry:
    """Test SectionGeometry model."""

    def test_section_creation(self):
        section = SectionGeometry(b=200, h=500, a_s=40)
        assert section.h0 == 460
        assert section.area == 100000
        assert section.moment_of_inertia == pytest.approx(200 * 500 ** 3 / 12)

    def test_invalid_width(self):
        with pytest.raises(ValueError):
            SectionGeometry(b=0, h=500, a_s=40)

    def test_cover_not_below_height(self):
        with pytest.raises(ValueError, match="must be smaller"):
            SectionGeometry(b=200, h=500, a_s=500)


class TestMaterialProperties:
    """Test MaterialProperties model."""

    def test_material_creation(self):
        mat = MaterialProperties(fc=14.3, ft=1.43, fy=360, Ec=3.0e4)
        assert mat.Es == 2.0e5
        assert mat.fy_compression == 360
        assert mat.fy_stirrup == 360
        assert mat.alpha_E == pytest.approx(2.0e5 / 3.0e4)

    def test_separate_stirrup_steel(self):
        mat = MaterialProperties(fc=14.3, ft=1.43, fy=360, fyv=270, Ec=3.0e4)
        assert mat.fy_stirrup == 270

    def test_non_positive_strength(self):
        with pytest.raises(ValueError):
            MaterialProperties(fc=-14.3, ft=1.43, fy=360, Ec=3.0e4)

    def test_tensile_above_compressive(self):
        with pytest.raises(ValueError, match="smaller than fc"):
            MaterialProperties(fc=14.3, ft=20.0, fy=360, Ec=3.0e4)

    def test_out_of_range_is_accepted_and_reported(self):
        mat = MaterialProperties(fc=55.0, ft=2.1, fy=360, Ec=3.6e4)
        warnings = mat.range_warnings()
        assert [w.parameter for w in warnings] == ["fc"]


class TestReinforcementConfig:
    """Test ReinforcementConfig model."""

    def test_longitudinal_only(self):
        rebar = ReinforcementConfig(As=1256)
        assert rebar.As_prime == 0
        assert not rebar.has_stirrups

    def test_with_stirrups(self):
        rebar = ReinforcementConfig(As=1256, Asv=50.3, n_legs=2, s=200)
        assert rebar.has_stirrups

    def test_stirrups_need_legs(self):
        with pytest.raises(ValueError, match="at least one leg"):
            ReinforcementConfig(As=1256, Asv=50.3, n_legs=0, s=200)

    def test_stirrups_need_spacing(self):
        with pytest.raises(ValueError, match="spacing"):
            ReinforcementConfig(As=1256, Asv=50.3, n_legs=2)

    def test_negative_area(self):
        with pytest.raises(ValueError):
            ReinforcementConfig(As=-1)

    def test_ratio(self):
        section = SectionGeometry(b=200, h=500, a_s=40)
        rebar = ReinforcementConfig(As=1256)
        assert rebar.ratio(section) == pytest.approx(1256 / (200 * 460))
