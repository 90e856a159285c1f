"""Schemas for the lottery draw API."""

from __future__ import annotations

from marshmallow import Schema, fields, validate


class PlanQuerySchema(Schema):
    ball_count = fields.Integer(required=False, load_default=None, validate=validate.Range(min=1))
    max_number = fields.Integer(required=False, load_default=None, validate=validate.Range(min=1))


class DrawRequestSchema(PlanQuerySchema):
    include_steps = fields.Boolean(required=False, load_default=False)


class PlanResponseSchema(Schema):
    ball_count = fields.Integer(required=True)
    max_number = fields.Integer(required=True)

    # Counts can exceed 2**53, so they travel as decimal strings.
    combinations = fields.String(required=True)
    bits_needed = fields.Integer(required=True)
    bytes_needed = fields.Integer(required=True)
    random_number_max = fields.String(required=True)
    overlap = fields.String(required=True)


class DrawResponseSchema(Schema):
    numbers = fields.List(fields.Integer(), required=True)
    ball_count = fields.Integer(required=True)
    max_number = fields.Integer(required=True)
    combinations = fields.String(required=True)
    bits_needed = fields.Integer(required=True)
    bytes_needed = fields.Integer(required=True)
    raw_bytes = fields.List(fields.Integer(), required=True)
    candidate = fields.String(required=True)
    index = fields.String(required=True)
    reduced = fields.Boolean(required=True)

    # Only present when include_steps is requested.
    steps = fields.List(fields.String(), required=False)
