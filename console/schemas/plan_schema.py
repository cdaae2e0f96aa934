# schemas/plan_schema.py

from marshmallow import Schema, fields, validate, EXCLUDE

from ..services.plans.plan_draft import BILLING_CYCLES
from ..utils.validation import (
    FIELD_KEY_PATTERN,
    validate_objectid,
    validate_currency_code,
    validate_non_negative,
)


class PriceSchema(Schema):
    """One currency's price. Amount > 0 for the base currency is enforced by the draft validator."""
    class Meta:
        unknown = EXCLUDE

    amount = fields.Float(required=False, allow_none=True)
    currency = fields.Str(required=False, allow_none=True, validate=validate_currency_code)


class PlanCreateSchema(Schema):
    """Schema for creating a subscription plan."""
    class Meta:
        unknown = EXCLUDE

    # Missing name/display_name are reported by the draft validator as field errors
    name = fields.Str(load_default="", validate=validate.Length(max=100))
    display_name = fields.Str(load_default="", validate=validate.Length(max=100))
    description = fields.Str(required=False, allow_none=True, validate=validate.Length(max=1000))
    tagline = fields.Str(required=False, allow_none=True, validate=validate.Length(max=200))

    pricing = fields.Dict(
        keys=fields.Str(validate=validate_currency_code),
        values=fields.Nested(PriceSchema),
        required=False,
        allow_none=True,
    )
    setup_fee = fields.Dict(
        keys=fields.Str(validate=validate_currency_code),
        values=fields.Float(validate=validate_non_negative),
        required=False,
        allow_none=True,
    )

    billing_cycle = fields.Str(required=False, allow_none=True, validate=validate.OneOf(BILLING_CYCLES))
    billing_cycle_days = fields.Int(required=False, allow_none=True, validate=validate.Range(min=1))
    trial_enabled = fields.Bool(required=False, allow_none=True)
    trial_days = fields.Int(required=False, allow_none=True, validate=validate_non_negative)

    visible = fields.Bool(required=False, allow_none=True)
    featured = fields.Bool(required=False, allow_none=True)
    display_order = fields.Int(required=False, allow_none=True)
    available_for_new_signups = fields.Bool(required=False, allow_none=True)
    cta_text = fields.Str(required=False, allow_none=True, validate=validate.Length(max=50))
    highlights = fields.List(fields.Str(), required=False, allow_none=True)

    # featureId -> true/false, a number or "unlimited"
    feature_values = fields.Dict(keys=fields.Str(), values=fields.Raw(), load_default={})

    save_as_draft = fields.Bool(load_default=False)


class PlanUpdateSchema(Schema):
    """Schema for updating a plan (partial updates allowed; name is immutable)."""
    class Meta:
        unknown = EXCLUDE

    plan_id = fields.Str(
        required=True,
        validate=[validate.Length(min=1, max=36), validate_objectid],
        error_messages={"required": "Plan ID is required", "invalid": "Invalid Plan ID"},
    )

    display_name = fields.Str(required=False, allow_none=True, validate=validate.Length(max=100))
    description = fields.Str(required=False, allow_none=True, validate=validate.Length(max=1000))
    tagline = fields.Str(required=False, allow_none=True, validate=validate.Length(max=200))

    pricing = fields.Dict(
        keys=fields.Str(validate=validate_currency_code),
        values=fields.Nested(PriceSchema),
        required=False,
        allow_none=True,
    )
    setup_fee = fields.Dict(
        keys=fields.Str(validate=validate_currency_code),
        values=fields.Float(validate=validate_non_negative),
        required=False,
        allow_none=True,
    )

    billing_cycle = fields.Str(required=False, allow_none=True, validate=validate.OneOf(BILLING_CYCLES))
    billing_cycle_days = fields.Int(required=False, allow_none=True, validate=validate.Range(min=1))
    trial_enabled = fields.Bool(required=False, allow_none=True)
    trial_days = fields.Int(required=False, allow_none=True, validate=validate_non_negative)

    visible = fields.Bool(required=False, allow_none=True)
    featured = fields.Bool(required=False, allow_none=True)
    display_order = fields.Int(required=False, allow_none=True)
    available_for_new_signups = fields.Bool(required=False, allow_none=True)
    cta_text = fields.Str(required=False, allow_none=True, validate=validate.Length(max=50))
    highlights = fields.List(fields.Str(), required=False, allow_none=True)

    feature_values = fields.Dict(keys=fields.Str(), values=fields.Raw(), load_default={})


class PlanPreviewSchema(PlanCreateSchema):
    """Same payload as create; nothing is persisted."""


class PlanQuerySchema(Schema):
    """Schema for querying a single plan by ID."""

    plan_id = fields.Str(
        required=True,
        validate=[validate.Length(min=1, max=36), validate_objectid],
        error_messages={"required": "Plan ID is required", "invalid": "Invalid Plan ID"},
    )


class PlanStatusSchema(Schema):
    """Publish or unpublish a plan."""

    plan_id = fields.Str(
        required=True,
        validate=[validate.Length(min=1, max=36), validate_objectid],
        error_messages={"required": "Plan ID is required", "invalid": "Invalid Plan ID"},
    )
    active = fields.Bool(required=True, error_messages={"required": "active is required"})


class FeatureFlagSchema(Schema):
    """Set one global feature flag in the system config."""

    config_key = fields.Str(
        required=True,
        validate=[
            validate.Length(min=1, max=100),
            validate.Regexp(
                FIELD_KEY_PATTERN,
                error="config_key may only contain letters, digits and underscores",
            ),
        ],
        error_messages={"required": "config_key is required"},
    )
    enabled = fields.Bool(required=True, error_messages={"required": "enabled is required"})
