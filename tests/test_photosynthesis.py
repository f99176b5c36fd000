"""
Tests for gross photosynthetic assimilation.
"""

import logging

import pytest

from podostemum.environment.solar import PARProfile
from podostemum.errors import DomainError
from podostemum.processes.physiology.photosynthesis import (
    gross_assimilation,
    light_limitation,
    resource_limitation,
    temperature_limitation,
)

PAR = (3000.0, 2000.0, 500.0)
BASE = {"par": PAR, "pbiomass": 1.0, "pmax": 0.2, "daylength": 13.0, "glucose_req": 1.5}


class TestGrossAssimilationValues:
    """Reference values for the full and unlimited model."""

    def test_reference_with_light_and_temperature(self):
        assert gross_assimilation(**BASE, hi=30, temp=17) == pytest.approx(0.9980636, rel=1e-6)

    def test_unlimited(self):
        """Without limiting factors the weighted rate is Pmax (weights sum to 1)."""
        expected = 0.2 * 1.0 * 1.0 * 13.0 * (30 / 44) / 1.5
        assert gross_assimilation(**BASE) == pytest.approx(expected)

    def test_accepts_par_profile(self):
        assert gross_assimilation(**{**BASE, "par": PARProfile(*PAR)}, hi=30, temp=17) == pytest.approx(
            0.9980636, rel=1e-6
        )

    def test_zero_daylength_gives_zero(self):
        assert gross_assimilation(**{**BASE, "daylength": 0.0}, hi=30) == 0.0

    def test_result_is_non_negative_in_cold_water(self):
        assert gross_assimilation(**BASE, hi=30, temp=-5) == 0.0


class TestLimitingFactors:
    """Optional limiting factors default to non-limiting."""

    def test_light_factor(self):
        assert light_limitation(30, None) == 1.0
        assert light_limitation(30, 30) == pytest.approx(0.5)
        assert light_limitation(0, 0) == 0.0

    def test_temperature_factor(self):
        assert temperature_limitation(None) == 1.0
        assert temperature_limitation(14) == pytest.approx(1.35 / 2)
        assert temperature_limitation(0) == 0.0
        assert temperature_limitation(-14) == 0.0

    def test_resource_factor_needs_both_inputs(self):
        assert resource_limitation(None, 1.0) == 1.0
        assert resource_limitation(1.0, None) == 1.0
        assert resource_limitation(1.0, 1.0) == pytest.approx(0.5)

    @pytest.mark.parametrize(
        "limits",
        [
            {"hi": 30},
            {"depth": 0.5, "hd": 1.0},
            {"carbonate": 30, "hc": 60},
            {"nutrient": 0.1, "hn": 0.2},
        ],
    )
    def test_omitting_a_factor_never_reduces_assimilation(self, limits):
        assert gross_assimilation(**BASE) >= gross_assimilation(**BASE, **limits)

    def test_depth_without_half_saturation_is_ignored(self):
        assert gross_assimilation(**BASE, depth=5.0) == pytest.approx(gross_assimilation(**BASE))

    def test_each_factor_multiplies(self):
        unlimited = gross_assimilation(**BASE)
        limited = gross_assimilation(**BASE, depth=1.0, hd=1.0, carbonate=60, hc=60)
        assert limited == pytest.approx(unlimited * 0.25)


class TestMonotonicity:
    """Assimilation is non-decreasing in Pmax, biomass and day length."""

    @pytest.mark.parametrize("name, low, high", [("pmax", 0.1, 0.3), ("pbiomass", 0.5, 2.0), ("daylength", 8, 16)])
    def test_non_decreasing(self, name, low, high):
        low_result = gross_assimilation(**{**BASE, name: low}, hi=30, temp=17)
        high_result = gross_assimilation(**{**BASE, name: high}, hi=30, temp=17)
        assert high_result >= low_result

    def test_more_light_more_assimilation(self):
        dim = gross_assimilation(**{**BASE, "par": (300, 200, 50)}, hi=30)
        bright = gross_assimilation(**BASE, hi=30)
        assert bright > dim


class TestPhotosynthesisValidation:
    """Domain errors and warnings."""

    @pytest.mark.parametrize(
        "override",
        [
            {"par": (3000, float("nan"), 500)},
            {"pbiomass": float("nan")},
            {"pmax": float("nan")},
            {"daylength": float("nan")},
            {"glucose_req": float("nan")},
            {"temp": float("nan")},
            {"hi": float("nan")},
            {"depth": float("nan"), "hd": 1.0},
        ],
    )
    def test_nan_inputs(self, override):
        with pytest.raises(DomainError):
            gross_assimilation(**{**BASE, **override})

    @pytest.mark.parametrize(
        "override",
        [
            {"par": (100, -1, 10)},
            {"par": (100, 10)},
            {"pbiomass": -1},
            {"pmax": -0.1},
            {"daylength": -1},
            {"daylength": 24.5},
            {"glucose_req": -1},
            {"glucose_req": 0},
        ],
    )
    def test_invalid_core_inputs(self, override):
        with pytest.raises(DomainError):
            gross_assimilation(**{**BASE, **override})

    @pytest.mark.parametrize("constant", ["hi", "hd", "hc", "hn"])
    def test_negative_half_saturation(self, constant):
        with pytest.raises(DomainError, match="Half-saturation"):
            gross_assimilation(**BASE, **{constant: -1})

    @pytest.mark.parametrize("covariate", ["depth", "carbonate", "nutrient"])
    def test_negative_covariate(self, covariate):
        with pytest.raises(DomainError, match="Limiting factor"):
            gross_assimilation(**BASE, **{covariate: -1})

    def test_scalar_par_rejected(self):
        with pytest.raises(DomainError):
            gross_assimilation(**{**BASE, "par": 1000})

    def test_implausible_temperature_warns(self, caplog):
        with caplog.at_level(logging.WARNING):
            result = gross_assimilation(**BASE, temp=65)
        assert result > 0
        assert "has not been recorded in nature" in caplog.text
