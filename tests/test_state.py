"""Tests for the central Store and its change notifications."""

from __future__ import annotations

import pytest

from timingcurve.app.state import DemoKind, Store
from timingcurve.model.geometry_primitives import UnitPoint
from timingcurve.model.timing import ControlPoint, TimingCurveModel


class TestCurveState:
    def test_defaults(self, store):
        assert store.control_point(ControlPoint.FIRST) == UnitPoint(0.4, 0.4)
        assert store.control_point(ControlPoint.SECOND) == UnitPoint(0.6, 0.6)

    def test_set_control_point_emits_once(self, store, signal_spy):
        received = signal_spy(store.curve_changed)
        store.set_control_point(ControlPoint.FIRST, UnitPoint(0.1, 0.2))
        assert len(received) == 1
        assert received[0][0] is store.curve_store
        assert store.timing.cp0 == UnitPoint(0.1, 0.2)
        assert store.timing.cp1 == UnitPoint(0.6, 0.6)

    def test_store_shares_the_model(self, qt_app):
        model = TimingCurveModel()
        store = Store(model)
        store.set_control_point(ControlPoint.SECOND, UnitPoint(0.9, 0.9))
        assert model.cp1 == UnitPoint(0.9, 0.9)

    def test_timing_function_reflects_updates(self, store):
        store.set_control_point(ControlPoint.FIRST, UnitPoint(0.2, 0.8))
        store.set_control_point(ControlPoint.SECOND, UnitPoint(0.9, 0.1))
        assert store.timing_function() == (0.2, 0.8, 0.9, 0.1, 0.35)
        assert store.timing_function(1.0) == (0.2, 0.8, 0.9, 0.1, 1.0)


class TestDemoState:
    def test_default_demo(self, store):
        assert store.demo_store.kind == DemoKind.COLOR
        assert store.demo_store.running is False

    def test_set_demo_emits(self, store, signal_spy):
        received = signal_spy(store.demo_changed)
        store.set_demo("dots")
        assert store.demo_store.kind == DemoKind.DOTS
        assert len(received) == 1

    def test_set_same_demo_is_silent(self, store, signal_spy):
        received = signal_spy(store.demo_changed)
        store.set_demo("color")
        assert received == []

    def test_unknown_demo_rejected(self, store):
        with pytest.raises(ValueError, match="Unknown demo"):
            store.set_demo("spinner")

    def test_set_running(self, store, signal_spy):
        received = signal_spy(store.demo_changed)
        store.set_running(True)
        store.set_running(True)
        store.set_running(False)
        assert len(received) == 2
        assert store.demo_store.running is False
