# console/services/plans/editing_session.py

from typing import Any, Dict, Mapping, Optional, Tuple

from flask import current_app, has_app_context

from ...constants.service_code import DEFAULT_BASE_CURRENCY
from ...models.subscription_plan_model import SubscriptionPlanModel
from ...utils.logger import Log
from .catalog import Catalog, ConfigSnapshot, PlatformFeature
from .catalog_loader import CatalogLoad, load_catalog_or_empty
from .category_grouper import category_label, group_by_category
from .dependency_resolver import resolve_assignable, unmet_dependencies
from .feature_values import coerce_feature_value, get_feature_value, set_feature_value
from .plan_draft import DOCUMENT_FIELDS, PlanDraft, new_draft
from .plan_gateway import create_plan, update_plan
from .plan_validator import validate_plan_draft

UNKNOWN_FEATURE = "unknown_feature"
GLOBALLY_DISABLED = "globally_disabled"
DEPENDENCY_NOT_MET = "dependency_not_met"
NOT_ASSIGNABLE = "not_assignable"

REASON_MESSAGES = {
    UNKNOWN_FEATURE: "Feature is not in the active catalog",
    GLOBALLY_DISABLED: "Feature is disabled platform-wide",
    DEPENDENCY_NOT_MET: "A required feature is missing or disabled",
    NOT_ASSIGNABLE: "Feature cannot be configured on a plan",
}


def _config_value(key, default):
    if has_app_context():
        return current_app.config.get(key, default)
    return default


class PlanEditingSession:
    """
    One admin's create/edit pass over a plan.

    The catalog and config snapshot are loaded once when the session opens
    and stay fixed for its lifetime; the draft is replaced on every change.
    """

    def __init__(self, load: CatalogLoad, draft: Optional[PlanDraft] = None,
                 base_currency: str = DEFAULT_BASE_CURRENCY):
        self.load = load
        self.base_currency = base_currency
        self.assignable = resolve_assignable(load.catalog, load.snapshot)
        self.groups = group_by_category(self.assignable)
        self._original = draft or new_draft()
        self.draft = self._original

    @classmethod
    def open(cls, draft: Optional[PlanDraft] = None, config_id: Optional[str] = None) -> "PlanEditingSession":
        load = load_catalog_or_empty(
            config_id,
            max_workers=_config_value("CATALOG_LOAD_WORKERS", 2),
        )
        return cls(
            load,
            draft=draft,
            base_currency=_config_value("BASE_CURRENCY", DEFAULT_BASE_CURRENCY),
        )

    @property
    def catalog(self) -> Catalog:
        return self.load.catalog

    @property
    def snapshot(self) -> ConfigSnapshot:
        return self.load.snapshot

    @property
    def catalog_available(self) -> bool:
        return self.load.available

    # ------------------------------------------------------------------
    # Feature lookup
    # ------------------------------------------------------------------

    def assignable_feature(self, feature_id: str) -> Optional[PlatformFeature]:
        feature = self.catalog.get(feature_id)
        if feature is not None and feature in self.assignable:
            return feature
        return None

    def unavailable_reason(self, feature_id: str) -> Optional[str]:
        """Why a feature cannot be set on this plan, or None if it can."""
        feature = self.catalog.get(feature_id)
        if feature is None:
            return UNKNOWN_FEATURE
        if not self.snapshot.is_enabled(feature.config_key):
            return GLOBALLY_DISABLED
        if unmet_dependencies(feature, self.catalog, self.snapshot):
            return DEPENDENCY_NOT_MET
        if not feature.is_assignable_to_plan:
            return NOT_ASSIGNABLE
        return None

    def feature_catalog(self) -> Dict[str, Any]:
        """
        Assignable features grouped for display, plus every catalog feature
        that cannot be assigned and why.
        """
        categories = [
            {
                "category": category,
                "label": category_label(category),
                "features": [feature.to_summary() for feature in features],
            }
            for category, features in self.groups.items()
        ]

        blocked = []
        for feature in sorted(self.catalog, key=lambda f: (f.display_order, f.feature_id)):
            if feature in self.assignable:
                continue
            blocked.append({
                "featureId": feature.feature_id,
                "displayName": feature.display_name,
                "reason": self.unavailable_reason(feature.feature_id),
                "unmetDependencies": unmet_dependencies(feature, self.catalog, self.snapshot),
            })

        return {
            "catalog_available": self.catalog_available,
            "categories": categories,
            "blocked": blocked,
        }

    # ------------------------------------------------------------------
    # Values
    # ------------------------------------------------------------------

    def get_value(self, feature_id: str):
        feature = self.catalog.get(feature_id)
        if feature is None:
            return None
        return get_feature_value(self.draft, feature)

    def set_value(self, feature_id: str, raw_value: Any) -> PlanDraft:
        reason = self.unavailable_reason(feature_id)
        if reason:
            raise ValueError(REASON_MESSAGES[reason])

        feature = self.catalog.get(feature_id)
        value = coerce_feature_value(feature, raw_value)
        self.draft = set_feature_value(self.draft, feature, value)
        return self.draft

    def apply_values(self, values: Mapping[str, Any]) -> Dict[str, str]:
        """
        Set several feature values by featureId. Values that cannot be
        applied are reported as {"features.<featureId>": message}; the rest
        are applied.
        """
        errors = {}
        for feature_id, raw_value in (values or {}).items():
            try:
                self.set_value(feature_id, raw_value)
            except ValueError as e:
                errors[f"features.{feature_id}"] = str(e)
        return errors

    def update_fields(self, payload: Mapping[str, Any]) -> PlanDraft:
        self.draft = PlanDraft.from_payload(payload, base=self.draft)
        return self.draft

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def validate(self) -> Dict[str, str]:
        return validate_plan_draft(self.draft, self.base_currency)

    def submit(self, actor_id: str, save_as_draft: bool = False) -> Tuple[Optional[str], Dict[str, str]]:
        """
        Validate and create the plan. Returns (plan_id, {}) on success or
        (None, errors) when validation fails; nothing is written in that case.
        """
        errors = self.validate()
        if errors:
            Log.info(f"[editing_session.py][submit][{self.draft.name}] validation failed: {errors}")
            return None, errors

        plan_id = create_plan(self.draft, actor_id, save_as_draft=save_as_draft)
        self._original = self.draft
        return plan_id, {}

    def changed_fields(self) -> Dict[str, Any]:
        """
        Document fields that differ from the draft the session opened with.
        `features`/`limits` are reported per key (`limits.<planKey>`) so
        stored entries the draft could not read are left in place.
        """
        current = self.draft.to_document()
        original = self._original.to_document()
        changed = {}
        for key, value in current.items():
            if key == "name":
                continue
            if key in SubscriptionPlanModel.MAP_FIELDS:
                before = original.get(key) or {}
                for map_key, map_value in value.items():
                    if map_key not in before or before[map_key] != map_value:
                        changed[f"{key}.{map_key}"] = map_value
            elif original.get(key) != value:
                changed[key] = value
        return changed

    def save_changes(self, plan_id: str, partial: Mapping[str, Any], actor_id: str) -> Dict[str, str]:
        """
        Overlay `partial` (snake_case plan fields) on the draft, validate the
        merged result and write only what changed. `name` is never updated.
        Returns the validation errors; an empty dict means the plan was saved.
        """
        partial = {k: v for k, v in (partial or {}).items() if k != "name"}
        self.update_fields(partial)

        errors = self.validate()
        if errors:
            Log.info(f"[editing_session.py][save_changes][{plan_id}] validation failed: {errors}")
            return errors

        fields = self.changed_fields()
        document = self.draft.to_document()
        for attr in partial:
            key = DOCUMENT_FIELDS.get(attr)
            if key and key != "name" and key not in SubscriptionPlanModel.MAP_FIELDS:
                fields.setdefault(key, document[key])

        update_plan(plan_id, fields, actor_id)
        self._original = self.draft
        return {}

    def cancel(self) -> PlanDraft:
        self._original = new_draft()
        self.draft = self._original
        return self.draft
