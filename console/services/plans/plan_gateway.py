# console/services/plans/plan_gateway.py

from typing import Any, Mapping

from pymongo.errors import PyMongoError

from ...models.subscription_plan_model import SubscriptionPlanModel
from ...utils.logger import Log
from ...utils.validation import is_field_key
from .catalog import Limit
from .plan_draft import PlanDraft


class PersistenceError(Exception):
    """The plan store rejected or failed a write."""


class PlanNotFoundError(PersistenceError):
    """An update targeted a plan id that does not exist."""


def _store_value(value: Any) -> Any:
    if isinstance(value, Limit):
        return value.to_document()
    if isinstance(value, dict):
        return {k: _store_value(v) for k, v in value.items()}
    if isinstance(value, tuple):
        return [_store_value(v) for v in value]
    return value


def _is_updatable(key: str) -> bool:
    """Top-level updatable field, or one entry of a map field (`limits.teamMembers`)."""
    parent, _, child = key.partition(".")
    if not child:
        return parent in SubscriptionPlanModel.UPDATABLE_FIELDS
    return parent in SubscriptionPlanModel.MAP_FIELDS and is_field_key(child)


def create_plan(draft: PlanDraft, actor_id: str, save_as_draft: bool = False) -> str:
    """
    Insert a new plan and return its id.

    `active` is decided here from `save_as_draft`; whatever the draft holds
    is overwritten. Raises PersistenceError if the insert fails.
    """
    log_tag = f"[plan_gateway.py][create_plan][{draft.name}][actor:{actor_id}]"

    document = draft.to_document()
    document["active"] = not save_as_draft
    document.update(SubscriptionPlanModel.audit_fields(actor_id, include_created=True))

    try:
        plan_id = SubscriptionPlanModel.insert(document)
    except PyMongoError as e:
        Log.error(f"{log_tag} insert failed: {e}")
        raise PersistenceError(f"Failed to create plan: {e}") from e

    Log.info(f"{log_tag} plan created: {plan_id} active={document['active']}")
    return plan_id


def update_plan(plan_id: str, partial_update: Mapping[str, Any], actor_id: str) -> None:
    """
    Merge `partial_update` (document field names) into an existing plan and
    restamp updatedAt/updatedBy. Fields not named are left alone; a
    `limits.<planKey>` or `features.<planKey>` key replaces that one entry.

    Raises PlanNotFoundError for an unknown id, PersistenceError on store failure.
    """
    log_tag = f"[plan_gateway.py][update_plan][{plan_id}][actor:{actor_id}]"

    fields = {}
    for key, value in partial_update.items():
        if not _is_updatable(key):
            Log.warning(f"{log_tag} ignoring non-updatable field: {key}")
            continue
        fields[key] = _store_value(value)

    fields.update(SubscriptionPlanModel.audit_fields(actor_id))

    try:
        matched = SubscriptionPlanModel.merge_update(plan_id, fields)
    except PyMongoError as e:
        Log.error(f"{log_tag} update failed: {e}")
        raise PersistenceError(f"Failed to update plan: {e}") from e

    if not matched:
        Log.info(f"{log_tag} plan not found")
        raise PlanNotFoundError(f"Plan {plan_id} not found")

    Log.info(f"{log_tag} plan updated: {sorted(k for k in fields if k not in ('updatedAt', 'updatedBy'))}")


def set_plan_active(plan_id: str, active: bool, actor_id: str) -> None:
    """Publish or unpublish a plan."""
    update_plan(plan_id, {"active": bool(active)}, actor_id)
