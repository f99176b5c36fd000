"""
Tests for empirical growth and size-loss models.
"""

import numpy as np
import pytest

from podostemum.errors import DomainError, ModelSpecificationError
from podostemum.processes.disturbance.losses import breakage, desiccation, herbivory, mortality, scour
from podostemum.processes.morphology.growth import growth_empirical


class TestGrowthEmpirical:
    def test_exponential(self):
        assert growth_empirical(10, 0.1, model_type=1) == pytest.approx(1.0)

    def test_logistic(self):
        assert growth_empirical(10, 0.1, max_size=20, model_type=2) == pytest.approx(0.5)

    def test_logistic_at_capacity_stops(self):
        assert growth_empirical(20, 0.1, max_size=20, model_type=2) == pytest.approx(0.0)

    @pytest.mark.parametrize("kwargs", [{"old_size": -1}, {"growth_rate": -0.1}])
    def test_negative_inputs(self, kwargs):
        args = {"old_size": 10, "growth_rate": 0.1, "model_type": 1, **kwargs}
        with pytest.raises(DomainError):
            growth_empirical(**args)

    def test_negative_max_size(self):
        with pytest.raises(DomainError):
            growth_empirical(10, 0.1, max_size=-5, model_type=2)

    def test_unknown_type(self):
        with pytest.raises(ModelSpecificationError):
            growth_empirical(10, 0.1, model_type=3)


class TestScour:
    @pytest.mark.parametrize(
        "old_size, S, v, model_type, expected",
        [
            (10, 0.5, 2.5, 1, 5.0),
            (0.8, 0.5, 2.5, 2, 0.0),
            (0.8, 0.5, 3.6, 2, 0.4),
            (10, 0.6, 1.0, 3, 0.0),
            (10, 0.6, 2.5, 3, 2.0),
            (10, 0.6, 3.6, 3, 6.0),
        ],
    )
    def test_velocity_forms(self, old_size, S, v, model_type, expected):
        loss = scour(old_size=old_size, size_min=2, S=S, v_low=2.0, v_high=3.5, v=v, model_type=model_type)
        assert loss == pytest.approx(expected)

    def test_ramp_is_continuous_at_thresholds(self):
        kwargs = {"old_size": 10, "size_min": 0, "S": 0.6, "v_low": 2.0, "v_high": 3.5, "model_type": 3}
        assert scour(v=2.0, **kwargs) == pytest.approx(0.0)
        assert scour(v=3.4999, **kwargs) == pytest.approx(6.0, abs=1e-3)

    @pytest.mark.parametrize(
        "override",
        [{"S": 1.5}, {"old_size": -1}, {"size_min": -1}, {"v": -1}, {"v_low": 4.0}, {"model_type": 4}],
    )
    def test_invalid_inputs(self, override):
        kwargs = {"old_size": 10, "size_min": 2, "S": 0.5, "v_low": 2.0, "v_high": 3.5, "v": 2.5, "model_type": 1}
        kwargs.update(override)
        with pytest.raises(DomainError):
            scour(**kwargs)


class TestHerbivory:
    @pytest.mark.parametrize(
        "old_size, H, v, model_type, remaining",
        [
            (20, 0.1, 1.0, 1, 18.0),
            (0.2, 0.5, 1.0, 2, 0.1),
            (0.2, 0.5, 2.7, 2, 0.2),
            (20, 0.3, 0.2, 3, 14.0),
            (20, 0.3, 1.1, 3, 15.8),
            (20, 0.3, 2.6, 3, 20.0),
        ],
    )
    def test_velocity_forms(self, old_size, H, v, model_type, remaining):
        loss = herbivory(old_size, H=H, v_low=0.5, v_high=2.5, v=v, model_type=model_type)
        assert old_size - loss == pytest.approx(remaining)

    def test_rate_outside_unit_interval(self):
        with pytest.raises(DomainError):
            herbivory(20, H=1.2, v_low=0.5, v_high=2.5, v=1, model_type=1)

    def test_unknown_type(self):
        with pytest.raises(ModelSpecificationError):
            herbivory(20, H=0.1, v_low=0.5, v_high=2.5, v=1, model_type=0)


class TestDesiccationMortalityBreakage:
    def test_desiccation_when_shallow_for_long(self):
        assert desiccation(10, depth=0.05, depth_limit=0.1, dry_time=3, dry_time_limit=2, D=0.2) == pytest.approx(2.0)

    def test_no_desiccation_when_deep_enough(self):
        assert desiccation(10, depth=0.5, depth_limit=0.1, dry_time=3, dry_time_limit=2, D=0.2) == 0.0

    def test_no_desiccation_before_time_limit(self):
        assert desiccation(10, depth=0.05, depth_limit=0.1, dry_time=1, dry_time_limit=2, D=0.2) == 0.0

    def test_desiccation_rate_validated(self):
        with pytest.raises(DomainError):
            desiccation(10, depth=0.05, depth_limit=0.1, dry_time=3, dry_time_limit=2, D=-0.1)

    def test_mortality(self):
        assert mortality(10, 0.1) == pytest.approx(1.0)

    @pytest.mark.parametrize("args", [(-1, 0.1), (10, 1.5), (10, -0.1)])
    def test_mortality_validation(self, args):
        with pytest.raises(DomainError):
            mortality(*args)

    def test_breakage_caps_length(self):
        assert breakage(30, 20) == 20
        assert breakage(15, 20) == 15

    def test_breakage_is_element_wise(self):
        stems = np.arange(10, 101, 10)
        result = breakage(stems, 50)
        assert list(result) == [10, 20, 30, 40, 50, 50, 50, 50, 50, 50]
        assert isinstance(breakage(60.0, 50), float)
