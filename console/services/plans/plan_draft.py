# console/services/plans/plan_draft.py

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, Mapping, Tuple, Union

from ...utils.logger import Log
from .catalog import Limit

LimitValue = Union[Limit, bool]

BILLING_CYCLES = ("monthly", "quarterly", "yearly", "one_time")

# Python attribute -> document field
DOCUMENT_FIELDS = {
    "name": "name",
    "display_name": "displayName",
    "description": "description",
    "tagline": "tagline",
    "pricing": "pricing",
    "setup_fee": "setupFee",
    "billing_cycle": "billingCycle",
    "billing_cycle_days": "billingCycleDays",
    "trial_enabled": "trialEnabled",
    "trial_days": "trialDays",
    "visible": "visible",
    "featured": "featured",
    "display_order": "displayOrder",
    "active": "active",
    "available_for_new_signups": "availableForNewSignups",
    "cta_text": "ctaText",
    "highlights": "highlights",
    "features": "features",
    "limits": "limits",
}


def _default_pricing():
    return {
        "GHS": {"amount": 0, "currency": "GHS"},
        "USD": {"amount": 0, "currency": "USD"},
    }


def _default_setup_fee():
    return {"GHS": 0, "USD": 0}


@dataclass(frozen=True)
class PlanDraft:
    """
    In-memory state of a plan being created or edited. Owned by one editing
    session; never persisted until it passes validation.
    """
    name: str = ""
    display_name: str = ""
    description: str = ""
    tagline: str = ""
    pricing: Dict[str, Dict[str, Any]] = field(default_factory=_default_pricing)
    setup_fee: Dict[str, Any] = field(default_factory=_default_setup_fee)
    billing_cycle: str = "monthly"
    billing_cycle_days: int = 30
    trial_enabled: bool = False
    trial_days: int = 14
    visible: bool = True
    featured: bool = False
    display_order: int = 0
    active: bool = False
    available_for_new_signups: bool = True
    cta_text: str = "Get Started"
    highlights: Tuple[str, ...] = ()
    features: Dict[str, bool] = field(default_factory=dict)
    limits: Dict[str, LimitValue] = field(default_factory=dict)

    def with_changes(self, **changes) -> "PlanDraft":
        return replace(self, **changes)

    def base_amount(self, currency: str):
        entry = (self.pricing or {}).get(currency) or {}
        if isinstance(entry, Mapping):
            return entry.get("amount")
        return None

    def to_document(self) -> Dict[str, Any]:
        """Plan fields in store shape (no id, no audit fields)."""
        doc = {}
        for attr, key in DOCUMENT_FIELDS.items():
            doc[key] = getattr(self, attr)

        doc["highlights"] = list(self.highlights)
        doc["features"] = dict(self.features)
        doc["limits"] = {
            k: (v.to_document() if isinstance(v, Limit) else v)
            for k, v in self.limits.items()
        }
        return doc

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "PlanDraft":
        """
        Rebuild a draft from a stored plan so it can be edited. Values in
        `features`/`limits` that do not fit their map are dropped and logged.
        """
        log_tag = f"[plan_draft.py][PlanDraft][from_document][{doc.get('name')}]"
        defaults = cls()
        values = {}

        for attr, key in DOCUMENT_FIELDS.items():
            if key in doc and doc[key] is not None:
                values[attr] = doc[key]

        features = {}
        for key, value in (doc.get("features") or {}).items():
            if isinstance(value, bool):
                features[key] = value
            else:
                Log.warning(f"{log_tag} dropping non-boolean feature value {key}={value!r}")

        limits = {}
        for key, value in (doc.get("limits") or {}).items():
            if isinstance(value, bool):
                limits[key] = value
                continue
            try:
                limits[key] = Limit.parse(value)
            except (TypeError, ValueError):
                Log.warning(f"{log_tag} dropping malformed limit {key}={value!r}")

        values["features"] = features
        values["limits"] = limits
        values["highlights"] = tuple(values.get("highlights") or defaults.highlights)

        return cls(**values)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any], base: "PlanDraft" = None) -> "PlanDraft":
        """
        Overlay loaded request data (snake_case keys) on `base` or on a fresh
        draft. Unknown keys are ignored; features/limits only change through
        the feature value accessor.
        """
        base = base or cls()
        allowed = {f.name for f in fields(cls)} - {"features", "limits"}
        changes = {k: v for k, v in payload.items() if k in allowed and v is not None}
        if "highlights" in changes:
            changes["highlights"] = tuple(changes["highlights"])
        return replace(base, **changes)


def new_draft() -> PlanDraft:
    """Empty draft with the console defaults applied."""
    return PlanDraft()
