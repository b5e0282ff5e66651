"""Logging helpers shared by the mesh and interpolation modules."""

from __future__ import annotations

import logging
from typing import Mapping, Optional

PACKAGE_LOGGER = "fvgrid"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def format_summary(name: str, values: Mapping[str, object]) -> str:
    pieces = [name]
    for key, value in values.items():
        if isinstance(value, float):
            pieces.append(f"{key} = {value:.3e}")
        else:
            pieces.append(f"{key} = {value}")
    return " | ".join(pieces)


def enable_console_logging(level: int = logging.INFO, fmt: Optional[str] = None) -> logging.Handler:
    """Attach a stream handler to the package logger and return it."""
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt or "%(asctime)s %(name)s %(levelname)s: %(message)s"))
    root = logging.getLogger(PACKAGE_LOGGER)
    root.addHandler(handler)
    root.setLevel(level)
    return handler
