"""
Application Initialization
==========================
This module constructs the Model/View/Controller objects and starts the Qt
event loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the live clock state (Store holding a HubTime).
2. Instantiates the real-time driver (ClockDriver).
3. Instantiates the Main Window (View), passing both in.
4. Prevents circular import errors by being the orchestrator.
"""
import argparse
import logging
import sys
from typing import Optional, Sequence


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="hubclock", description="Hub time clock.")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default from HUBCLOCK_LOG_LEVEL, else INFO).",
    )
    parser.add_argument("--log-file", default=None, help="Also write logs to this file.")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)

    # Qt imports are deferred so --help works without a display
    from hubclock.app.application import create_app
    from hubclock.app.state import Store
    from hubclock.controller.driver import ClockDriver
    from hubclock.logging_config import setup_logging
    from hubclock.model.hub_time import HubTime
    from hubclock.view.main_window import ClockWindow

    # 1. Setup Logging (Console + Optional File)
    level = getattr(logging, args.log_level) if args.log_level else None
    setup_logging(level=level, log_file=args.log_file)

    # 2. Create the Qt Application
    app = create_app()

    # 3. Initialize the Data Model and the driver
    store = Store(HubTime())
    driver = ClockDriver(store)

    # 4. Initialize the Main Window
    window = ClockWindow(store, driver)
    window.show()

    # 5. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
