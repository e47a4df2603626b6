# taskboard/config/logging.py

import logging
import sys

from taskboard.config.settings import Settings


def setup_logging(level: str = None) -> None:
    """Configure the root logger once at process start"""
    root = logging.getLogger()
    root.setLevel((level or Settings.LOG_LEVEL).upper())

    # Remove any pre-existing handlers to avoid duplicates
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    root.addHandler(handler)
