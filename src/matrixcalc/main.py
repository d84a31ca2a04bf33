"""
Application Initialization
==========================
This module wires model, controller and view together and starts the Qt
event loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the single Session via the SessionController.
2. Instantiates the Main Window (View) and passes the controller in.
3. Prevents circular import errors by being the orchestrator.
"""
import argparse
import logging
import sys
from typing import Optional, Sequence

from PySide6.QtWidgets import QApplication

from matrixcalc import config
from matrixcalc.controller.session import SessionController
from matrixcalc.logging_config import setup_logging
from matrixcalc.view.main_window import MainWindow


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="matrixcalc", description=config.APP_NAME)
    parser.add_argument("--log-level", default=None, help="logging level name, e.g. INFO")
    parser.add_argument("--debug", action="store_true", help="log every state transition (same as --log-level DEBUG)")
    parser.add_argument("--log-file", default=None, help="also write the log to this file")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)

    # 1. Setup Logging (Console + Optional File)
    if args.debug:
        level = logging.DEBUG
    else:
        level = args.log_level or config.DEFAULT_LOG_LEVEL
    setup_logging(level=level, log_file=args.log_file)

    # 2. Create the Qt Application
    app = QApplication(sys.argv[:1])
    app.setApplicationName(config.APP_NAME)

    # 3. Initialize the Session behind its controller
    controller = SessionController()

    # 4. Initialize the Main Window, passing the controller
    window = MainWindow(controller)
    window.show()

    # 5. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
