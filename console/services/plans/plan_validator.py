# console/services/plans/plan_validator.py

from numbers import Number
from typing import Dict

from ...constants.service_code import DEFAULT_BASE_CURRENCY
from .plan_draft import PlanDraft


def _is_blank(value) -> bool:
    return value is None or not str(value).strip()


def validate_plan_draft(draft: PlanDraft, base_currency: str = DEFAULT_BASE_CURRENCY) -> Dict[str, str]:
    """
    Check the fields a plan cannot be saved without.
    Returns {field: message}; an empty dict means the draft may be persisted.
    """
    errors = {}

    if _is_blank(draft.name):
        errors["name"] = "Plan ID is required"

    if _is_blank(draft.display_name):
        errors["displayName"] = "Display name is required"

    amount = draft.base_amount(base_currency)
    if isinstance(amount, bool) or not isinstance(amount, Number) or not amount > 0:
        errors[f"pricing{base_currency}"] = f"{base_currency} pricing must be greater than 0"

    return errors
