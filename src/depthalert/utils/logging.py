"""Logging configuration."""

from __future__ import annotations

import logging


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logging for the application.

    Per-frame analysis logs at DEBUG; alert level changes and speech at INFO.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s [%(levelname)-5s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=handlers,
    )
    # requests/urllib3 log every haptic request at DEBUG
    logging.getLogger("urllib3").setLevel(max(numeric_level, logging.INFO))
