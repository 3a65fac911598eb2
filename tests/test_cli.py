"""Tests for command line parsing and small helpers."""

from __future__ import annotations

import logging

import pytest

from timingcurve.logging_config import setup_logging
from timingcurve.main import build_parser
from timingcurve.model.geometry_primitives import UnitPoint
from timingcurve.utils import format_control_point, seconds_to_ms


class TestParser:
    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.demo is None
        assert args.debug is False
        assert args.log_file is None

    def test_options(self):
        args = build_parser().parse_args(["--demo", "dots", "--debug", "--log-file", "out.log"])
        assert args.demo == "dots"
        assert args.debug is True
        assert args.log_file == "out.log"

    def test_unknown_demo(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--demo", "spinner"])


class TestHelpers:
    def test_format_control_point(self):
        assert format_control_point("CP0", UnitPoint(0.4, 0.4)) == "CP0: (0.40, 0.40)"
        assert format_control_point("CP1", UnitPoint(-0.256, 1.0)) == "CP1: (-0.26, 1.00)"

    def test_seconds_to_ms(self):
        assert seconds_to_ms(1.0) == 1000
        assert seconds_to_ms(0.2) == 200
        assert seconds_to_ms(0.35) == 350
        assert seconds_to_ms(-1.0) == 0


class TestLogging:
    def test_setup_logging_replaces_handlers(self, tmp_path):
        log_file = tmp_path / "app.log"
        setup_logging(level=logging.DEBUG, log_file=str(log_file), capture_qt=False)
        setup_logging(level=logging.DEBUG, log_file=str(log_file), capture_qt=False)
        logger = logging.getLogger("timingcurve")
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 2
        for handler in logger.handlers:
            handler.flush()
        assert "Logging initialized." in log_file.read_text(encoding="utf-8")
        logger.handlers.clear()
