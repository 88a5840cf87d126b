"""Shared logging utilities for bestsubset modules."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def verbosity_to_level(verbosity: int) -> int:
    """Map a small verbosity integer to a logging level."""
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return logging.WARNING


def configure_logging(verbosity: int = 0) -> None:
    """Configure root logging for command line use."""
    logging.basicConfig(level=verbosity_to_level(verbosity), format=LOG_FORMAT)
