# console/services/plans/plan_summary.py

from typing import Any, Dict, Iterable, Mapping

from ...constants.service_code import DEFAULT_BASE_CURRENCY
from .catalog import Limit
from .plan_draft import PlanDraft


def plan_stats(plans: Iterable[Mapping[str, Any]]) -> Dict[str, int]:
    """Counters shown above the plan list. Inactive plans count as drafts."""
    stats = {"total": 0, "active": 0, "featured": 0, "draft": 0}
    for plan in plans:
        stats["total"] += 1
        if plan.get("active"):
            stats["active"] += 1
        else:
            stats["draft"] += 1
        if plan.get("featured"):
            stats["featured"] += 1
    return stats


def plan_preview(draft: PlanDraft, base_currency: str = DEFAULT_BASE_CURRENCY) -> Dict[str, Any]:
    enabled_features = sum(1 for value in draft.features.values() if value is True)
    configured_limits = sum(1 for value in draft.limits.values() if isinstance(value, Limit))

    return {
        "displayName": draft.display_name or "Plan Name",
        "tagline": draft.tagline,
        "currency": base_currency,
        "price": draft.base_amount(base_currency) or 0,
        "billingCycle": draft.billing_cycle,
        "featured": draft.featured,
        "trial": {
            "enabled": draft.trial_enabled,
            "days": draft.trial_days if draft.trial_enabled else 0,
        },
        "enabledFeatures": enabled_features,
        "configuredLimits": configured_limits,
        "highlights": list(draft.highlights),
    }
