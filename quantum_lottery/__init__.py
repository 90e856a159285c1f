"""Quantum lottery Flask application package."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv
from flask import Flask

if TYPE_CHECKING:
    from quantum_lottery.random_source import ByteSource


def create_app(overrides: Mapping[str, Any] | None = None, byte_source: ByteSource | None = None) -> Flask:
    """Application factory.

    Args:
        overrides: config values applied on top of the environment config.
        byte_source: random byte source to use instead of ``RANDOM_SOURCE``.

    Returns:
        Configured Flask application.
    """
    load_dotenv()

    from quantum_lottery.config import get_config
    from quantum_lottery.error_handlers import register_error_handlers
    from quantum_lottery.logging_config import configure_logging
    from quantum_lottery.random_source import init_random_source
    from quantum_lottery.routes.draw import draw_bp
    from quantum_lottery.routes.health import health_bp

    app = Flask(__name__)
    app.config.from_object(get_config())
    if overrides:
        app.config.update(overrides)

    configure_logging(app)
    init_random_source(app, byte_source)
    register_error_handlers(app)

    app.register_blueprint(health_bp)
    app.register_blueprint(draw_bp)

    return app
