"""
Application Initialization
==========================
This module constructs the Model / Controller / View objects and starts
the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Parses command line options and sets up logging.
2. Instantiates the global state store (Store).
3. Instantiates the Main Window (View), passing the store in.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

import pyqtgraph as pg

from timingcurve.app.application import create_app, load_last_demo
from timingcurve.app.state import Store
from timingcurve.config import DEMO_KEYS, DEFAULT_DEMO
from timingcurve.logging_config import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="timingcurve",
        description="Drag the control points of a cubic Bezier timing curve and watch the animation change."
    )
    parser.add_argument("--demo", default=None, choices=list(DEMO_KEYS),
                        help="Animation shown next to the editor (default: last used, else color)")
    parser.add_argument("--debug", action="store_true",
                        help="Log control point updates and timer events")
    parser.add_argument("--log-file", default=None,
                        help="Also write the log to this file")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=logging.DEBUG if args.debug else logging.INFO, log_file=args.log_file)

    # 2. Create the Qt Application
    app = create_app()
    pg.setConfigOption("background", "w")
    pg.setConfigOption("foreground", "k")

    # 3. Initialize the Data Model
    store = Store()
    store.set_demo(args.demo or load_last_demo(DEFAULT_DEMO))

    # 4. Initialize the Main Window, passing the store
    from timingcurve.view.main_window import MainWindow
    window = MainWindow(store)
    window.show()

    # 5. Start Event Loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
