"""Logging configuration."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from flask import Flask


def configure_logging(app: Flask | None = None, level_name: str | None = None) -> None:
    """Configure plain key/value friendly logs.

    Works for both the Flask app (reads ``LOG_LEVEL`` from its config) and
    the command line entrypoint (passes ``level_name`` directly).
    """

    config: Mapping[str, Any] = app.config if app is not None else {}
    level_name = str(level_name or config.get("LOG_LEVEL", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    # Reduce noisy loggers if needed
    logging.getLogger("urllib3").setLevel(logging.WARNING)
