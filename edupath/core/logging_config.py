"""
Logging setup for the EduPath backend.

``setup_logging`` attaches a console handler to the root logger exactly once;
modules log through ``logging.getLogger(__name__)``.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger with a console handler.

    Calling it again (tests, repeated ``create_app``) leaves existing
    handlers untouched.
    """
    root = logging.getLogger()
    if root.handlers:
        return
    root.setLevel(getattr(logging, (level or "INFO").upper(), logging.INFO))
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)
