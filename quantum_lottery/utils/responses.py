"""JSON envelope shared by every endpoint: ``{success, data, error}``."""

from __future__ import annotations

from typing import Any

from flask import Response, jsonify

from quantum_lottery.errors import AppError


def ok(data: Any, status_code: int = 200) -> tuple[Response, int]:
    return jsonify({"success": True, "data": data, "error": None}), status_code


def fail(code: str, message: str, status_code: int, details: Any | None = None) -> tuple[Response, int]:
    body = {
        "success": False,
        "data": None,
        "error": {"code": code, "message": message, "details": details},
    }
    return jsonify(body), status_code


def fail_with(exc: AppError) -> tuple[Response, int]:
    """Error envelope for an application error."""

    return fail(exc.code, exc.message, exc.status_code, exc.details)
