"""Tests for the timing curve model and the generated timing function."""

from __future__ import annotations

import numpy as np
import pytest

from timingcurve.model.geometry_primitives import UnitPoint
from timingcurve.model.timing import ControlPoint, TimingCurveModel, TimingFunction


class TestTimingCurveModel:
    def test_defaults(self, default_model):
        assert default_model.cp0 == UnitPoint(0.4, 0.4)
        assert default_model.cp1 == UnitPoint(0.6, 0.6)

    def test_default_timing_function(self, default_model):
        assert default_model.generate_timing_function(1.0) == (0.4, 0.4, 0.6, 0.6, 1.0)

    def test_default_duration(self):
        model = TimingCurveModel(cp0=UnitPoint(0.2, 0.8), cp1=UnitPoint(0.9, 0.1))
        assert model.generate_timing_function() == (0.2, 0.8, 0.9, 0.1, 0.35)

    def test_set_first_leaves_second(self, default_model):
        default_model.set_control_point(ControlPoint.FIRST, UnitPoint(0.1, 0.9))
        assert default_model.cp0 == UnitPoint(0.1, 0.9)
        assert default_model.cp1 == UnitPoint(0.6, 0.6)

    def test_set_second_leaves_first(self, default_model):
        default_model.set_control_point(ControlPoint.SECOND, UnitPoint(0.7, 0.2))
        assert default_model.cp0 == UnitPoint(0.4, 0.4)
        assert default_model.cp1 == UnitPoint(0.7, 0.2)

    def test_out_of_range_accepted(self, default_model):
        default_model.set_control_point(ControlPoint.FIRST, UnitPoint(-0.5, 1.8))
        assert default_model.generate_timing_function(2.0) == (-0.5, 1.8, 0.6, 0.6, 2.0)

    def test_unknown_selector_rejected(self, default_model):
        with pytest.raises(ValueError):
            default_model.set_control_point("cp2", UnitPoint(0, 0))
        with pytest.raises(ValueError):
            default_model.control_point("cp2")

    def test_control_point_lookup(self, default_model):
        assert default_model.control_point(ControlPoint.FIRST) is default_model.cp0
        assert default_model.control_point(ControlPoint.SECOND) is default_model.cp1

    def test_duration_not_validated(self, default_model):
        assert default_model.generate_timing_function(0.0).duration == 0.0
        assert default_model.generate_timing_function(-1.0).duration == -1.0


class TestTimingFunction:
    def test_fields(self):
        fn = TimingFunction(0.1, 0.2, 0.3, 0.4, 5.0)
        assert (fn.x1, fn.y1, fn.x2, fn.y2, fn.duration) == (0.1, 0.2, 0.3, 0.4, 5.0)

    def test_ease_endpoints(self):
        fn = TimingFunction(0.42, 0.0, 0.58, 1.0, 1.0)
        assert fn.ease(0.0) == 0.0
        assert fn.ease(1.0) == 1.0
        assert fn.ease(-3.0) == 0.0
        assert fn.ease(7.0) == 1.0

    @pytest.mark.parametrize("progress", [0.1, 0.3, 0.5, 0.77])
    def test_diagonal_control_points_are_linear(self, default_model, progress):
        fn = default_model.generate_timing_function(1.0)
        assert fn.ease(progress) == pytest.approx(progress, abs=1e-5)

    def test_ease_in_out_is_symmetric(self):
        fn = TimingFunction(0.42, 0.0, 0.58, 1.0, 1.0)
        assert fn.ease(0.5) == pytest.approx(0.5, abs=1e-5)
        assert fn.ease(0.25) + fn.ease(0.75) == pytest.approx(1.0, abs=1e-5)
        assert fn.ease(0.25) < 0.25

    def test_ease_in_out_is_monotonic(self):
        samples = TimingFunction(0.42, 0.0, 0.58, 1.0, 1.0).sample(51)
        assert np.all(np.diff(samples[:, 1]) >= -1e-9)

    def test_overshoot(self, overshoot_model):
        fn = overshoot_model.generate_timing_function(1.0)
        assert fn.ease(0.5) == pytest.approx(1.25, abs=1e-5)

    def test_value_at(self, default_model):
        fn = default_model.generate_timing_function(2.0)
        assert fn.value_at(1.0) == pytest.approx(0.5, abs=1e-5)
        assert fn.value_at(5.0) == 1.0

    def test_zero_duration_is_instant(self, default_model):
        fn = default_model.generate_timing_function(0.0)
        assert fn.value_at(0.0) == 1.0

    def test_sample(self, default_model):
        samples = default_model.generate_timing_function().sample(11)
        assert samples.shape == (11, 2)
        np.testing.assert_allclose(samples[0], [0.0, 0.0])
        np.testing.assert_allclose(samples[-1], [1.0, 1.0])
        np.testing.assert_allclose(samples[:, 0], np.linspace(0.0, 1.0, 11))

    def test_sample_needs_two_points(self, default_model):
        with pytest.raises(ValueError):
            default_model.generate_timing_function().sample(1)
