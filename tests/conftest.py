"""Shared pytest fixtures for timingcurve tests."""

from __future__ import annotations

import os

# Must be set before the first Qt import
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from timingcurve.app.state import Store
from timingcurve.model.geometry_primitives import UnitPoint
from timingcurve.model.timing import TimingCurveModel

# ============================================================================
# Qt Fixtures
# ============================================================================


@pytest.fixture(scope="session")
def qt_app() -> QApplication:
    """One QApplication for the whole test session."""
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


@pytest.fixture
def store(qt_app: QApplication) -> Store:
    """Store with the default control points."""
    return Store()


@pytest.fixture
def signal_spy():
    """Collect emitted signal arguments: spy = signal_spy(obj.signal)."""

    def _connect(signal) -> list[tuple]:
        received: list[tuple] = []
        signal.connect(lambda *args: received.append(args))
        return received

    return _connect


# ============================================================================
# Model Fixtures
# ============================================================================


@pytest.fixture
def default_model() -> TimingCurveModel:
    return TimingCurveModel()


@pytest.fixture
def overshoot_model() -> TimingCurveModel:
    """Control points outside the unit square in y."""
    return TimingCurveModel(cp0=UnitPoint(0.2, 1.5), cp1=UnitPoint(0.8, 1.5))
