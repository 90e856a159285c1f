"""Draw routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint, current_app, request

from quantum_lottery.errors import InvalidDrawSpecError
from quantum_lottery.random_source import get_byte_source
from quantum_lottery.schemas.draw import (
    DrawRequestSchema,
    DrawResponseSchema,
    PlanQuerySchema,
    PlanResponseSchema,
)
from quantum_lottery.services.draw_service import LotteryDrawService, describe_draw
from quantum_lottery.utils.responses import ok


draw_bp = Blueprint("draw", __name__)

_plan_query_schema = PlanQuerySchema()
_plan_response_schema = PlanResponseSchema()
_request_schema = DrawRequestSchema()
_response_schema = DrawResponseSchema()


def _resolve_spec(data: dict) -> tuple[int, int]:
    config = current_app.config
    ball_count = int(data.get("ball_count") or config["DEFAULT_BALL_COUNT"])
    max_number = int(data.get("max_number") or config["DEFAULT_MAX_NUMBER"])

    limit = int(config["MAX_NUMBER_LIMIT"])
    if max_number > limit:
        raise InvalidDrawSpecError(
            message=f"max_number must be <= {limit}",
            details={"max_number": [f"Must be <= {limit}"]},
        )
    return ball_count, max_number


@draw_bp.get("/draw/plan")
def draw_plan():
    data = _plan_query_schema.load(request.args)
    ball_count, max_number = _resolve_spec(data)

    spec, combinations, plan = LotteryDrawService.plan(ball_count, max_number)
    return ok(
        _plan_response_schema.dump(
            {
                "ball_count": spec.ball_count,
                "max_number": spec.max_number,
                "combinations": str(combinations),
                "bits_needed": plan.bits_needed,
                "bytes_needed": plan.bytes_needed,
                "random_number_max": str(plan.random_number_max),
                "overlap": str(plan.overlap(combinations)),
            }
        )
    )


@draw_bp.post("/draw")
def draw_numbers():
    payload = request.get_json(silent=True) or {}
    data = _request_schema.load(payload)
    ball_count, max_number = _resolve_spec(data)

    service = LotteryDrawService(get_byte_source())
    result = service.draw(ball_count, max_number)

    body = {
        "numbers": list(result.numbers),
        "ball_count": result.spec.ball_count,
        "max_number": result.spec.max_number,
        "combinations": str(result.combinations),
        "bits_needed": result.plan.bits_needed,
        "bytes_needed": result.plan.bytes_needed,
        "raw_bytes": list(result.raw_bytes),
        "candidate": str(result.sample.candidate),
        "index": str(result.sample.index),
        "reduced": result.sample.reduced,
    }
    if data.get("include_steps"):
        body["steps"] = describe_draw(result)
    return ok(_response_schema.dump(body))
