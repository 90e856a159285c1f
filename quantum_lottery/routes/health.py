"""Health check routes."""

from __future__ import annotations

from flask import Blueprint

from quantum_lottery.random_source import get_byte_source
from quantum_lottery.utils.responses import ok

health_bp = Blueprint("health", __name__)


@health_bp.get("/health")
def health_check():
    """Health check endpoint."""

    source = get_byte_source()
    return ok({"status": "ok", "random_source": getattr(source, "name", type(source).__name__)})
