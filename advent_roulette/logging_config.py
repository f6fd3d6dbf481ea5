"""Logging configuration."""

from __future__ import annotations

import logging

from flask import Flask


def configure_logging(app: Flask) -> None:
    """Configure plain stdlib logging from LOG_LEVEL."""

    level_name = str(app.config.get("LOG_LEVEL", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    logging.getLogger("advent_roulette").setLevel(level)

    # SQL echo is too chatty for a single-row store.
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
