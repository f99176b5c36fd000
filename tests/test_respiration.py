"""
Tests for maintenance respiration and net assimilation.
"""

import logging

import pytest

from podostemum.errors import DomainError
from podostemum.processes.physiology.respiration import (
    daily_respiration,
    maintenance_coefficient,
    net_assimilation,
)


class TestDailyRespiration:
    """Reference values and temperature scaling."""

    def test_all_live_tissue(self):
        assert daily_respiration(0.0225, 15, 2, 2, 1.5) == pytest.approx(0.015)

    def test_partly_dead_tissue(self):
        assert daily_respiration(0.0225, 15, 2, 3, 1.5) == pytest.approx(0.01)

    def test_q10_doubles_every_ten_degrees(self):
        assert maintenance_coefficient(0.03, 25) == pytest.approx(0.03)
        assert maintenance_coefficient(0.03, 35) == pytest.approx(0.06)
        assert daily_respiration(0.03, 30, 1, 1, 1.5) == pytest.approx(
            2 * daily_respiration(0.03, 20, 1, 1, 1.5)
        )

    def test_no_tissue_no_respiration(self):
        assert daily_respiration(0.03, 20, 0, 0, 1.5) == 0.0

    def test_non_negative(self):
        assert daily_respiration(0.03, -5, 1.0, 1.5, 1.5) >= 0


class TestRespirationValidation:
    """Domain errors and warnings."""

    @pytest.mark.parametrize(
        "args",
        [
            (float("nan"), 15, 2, 2, 1.5),
            (0.0225, float("nan"), 2, 2, 1.5),
            (0.0225, 15, float("nan"), 2, 1.5),
            (0.0225, 15, 2, float("nan"), 1.5),
            (0.0225, 15, 2, 2, float("nan")),
        ],
    )
    def test_nan_inputs(self, args):
        with pytest.raises(DomainError):
            daily_respiration(*args)

    def test_total_less_than_live(self):
        with pytest.raises(DomainError, match="total_weight"):
            daily_respiration(0.0225, 15, 3, 2, 1.5)

    def test_negative_weights(self):
        with pytest.raises(DomainError):
            daily_respiration(0.0225, 15, -1, 0, 1.5)

    @pytest.mark.parametrize("glucose_req", [-1, 0])
    def test_invalid_glucose_requirement(self, glucose_req):
        with pytest.raises(DomainError):
            daily_respiration(0.0225, 15, 2, 2, glucose_req)

    def test_negative_km_prime(self):
        with pytest.raises(DomainError):
            daily_respiration(-0.01, 15, 2, 2, 1.5)

    def test_implausible_temperature_warns(self, caplog):
        with caplog.at_level(logging.WARNING):
            result = daily_respiration(0.0225, -95, 2, 2, 1.5)
        assert result > 0
        assert "has not been recorded in nature" in caplog.text


class TestNetAssimilation:
    def test_gross_minus_respiration(self):
        assert net_assimilation(0.998, 0.015) == pytest.approx(0.983)

    def test_can_be_negative(self):
        assert net_assimilation(0.0, 0.015) == pytest.approx(-0.015)
