# File: expense_tracker/core/logging_config.py

"""
Logging setup for the API.

``setup_logging`` attaches a console handler to the root logger the first
time it is called; later calls (tests, repeated ``create_application``)
are no-ops.
"""

import logging


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger with a single console handler."""
    logger = logging.getLogger()
    if logger.handlers:
        return

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
