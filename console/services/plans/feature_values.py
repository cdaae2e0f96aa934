# console/services/plans/feature_values.py
"""
Read and write a feature's value on a plan draft.

The map a value lives in is decided by the feature's slot, resolved when the
catalog was loaded. Reads check `features` before `limits` so a draft that
holds the same key in both maps always reports the boolean.
"""

from typing import Any, Optional, Union

from .catalog import Limit, LimitSlot, PlatformFeature, ToggleSlot
from .plan_draft import PlanDraft

FeatureValue = Union[bool, Limit]


def get_feature_value(draft: PlanDraft, feature: PlatformFeature) -> Optional[FeatureValue]:
    if feature.slot is None:
        return None

    plan_key = feature.slot.plan_key
    if plan_key in draft.features:
        return draft.features[plan_key]
    return draft.limits.get(plan_key)


def _check_value_kind(feature: PlatformFeature, value: Any) -> None:
    slot = feature.slot
    if isinstance(slot, ToggleSlot):
        if not isinstance(value, bool):
            raise TypeError(f"{feature.feature_id} takes a boolean, got {type(value).__name__}")
        return

    if isinstance(value, Limit):
        return
    if isinstance(value, bool) and slot.toggleable:
        return
    raise TypeError(f"{feature.feature_id} takes a limit, got {type(value).__name__}")


def set_feature_value(draft: PlanDraft, feature: PlatformFeature, value: FeatureValue) -> PlanDraft:
    """
    Return a new draft with `value` stored under the feature's plan key.
    Features without a plan key are informational; the draft comes back
    unchanged.
    """
    if feature.slot is None:
        return draft

    _check_value_kind(feature, value)
    plan_key = feature.slot.plan_key

    if isinstance(feature.slot, LimitSlot):
        limits = dict(draft.limits)
        limits[plan_key] = value
        return draft.with_changes(limits=limits)

    features = dict(draft.features)
    features[plan_key] = value
    return draft.with_changes(features=features)


def is_feature_enabled(draft: PlanDraft, feature: PlatformFeature) -> bool:
    value = get_feature_value(draft, feature)
    if isinstance(feature.slot, LimitSlot):
        return value is True or isinstance(value, Limit)
    return value is True


def coerce_feature_value(feature: PlatformFeature, raw: Any) -> FeatureValue:
    """
    Turn a JSON payload value (true, 25, "unlimited") into the kind the
    feature's slot stores. Raises ValueError when it cannot.
    """
    slot = feature.slot
    if slot is None:
        raise ValueError(f"{feature.feature_id} cannot be configured on a plan")

    if isinstance(slot, ToggleSlot):
        if isinstance(raw, bool):
            return raw
        raise ValueError("Value must be true or false")

    if isinstance(raw, bool):
        if slot.toggleable:
            return raw
        raise ValueError("Value must be a number or 'unlimited'")

    return Limit.parse(raw)
