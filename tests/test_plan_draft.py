from console.services.plans.catalog import UNLIMITED, Finite
from console.services.plans.plan_draft import PlanDraft, new_draft


def test_defaults():
    draft = new_draft()

    assert draft.billing_cycle == "monthly"
    assert draft.trial_days == 14
    assert draft.pricing["GHS"] == {"amount": 0, "currency": "GHS"}
    assert draft.features == {} and draft.limits == {}


def test_to_document_uses_store_field_names():
    draft = new_draft().with_changes(
        name="pro",
        display_name="Pro",
        highlights=("Fast", "Friendly"),
        limits={"teamMembers": Finite(5), "emailsPerMonth": UNLIMITED, "apiAccess": True},
    )
    doc = draft.to_document()

    assert doc["displayName"] == "Pro"
    assert doc["highlights"] == ["Fast", "Friendly"]
    assert doc["limits"] == {"teamMembers": 5, "emailsPerMonth": "unlimited", "apiAccess": True}
    assert "display_name" not in doc


def test_from_document_parses_limits_and_drops_malformed_values():
    draft = PlanDraft.from_document({
        "name": "pro",
        "displayName": "Pro",
        "billingCycle": "yearly",
        "features": {"customBranding": True, "broken": "yes"},
        "limits": {"teamMembers": 3, "emailsPerMonth": "unlimited", "apiAccess": False, "bad": -1},
        "createdAt": "ignored",
    })

    assert draft.display_name == "Pro"
    assert draft.billing_cycle == "yearly"
    assert draft.features == {"customBranding": True}
    assert draft.limits == {"teamMembers": Finite(3), "emailsPerMonth": UNLIMITED, "apiAccess": False}


def test_from_payload_overlays_plain_fields_only():
    base = new_draft().with_changes(features={"customBranding": True})
    draft = PlanDraft.from_payload(
        {"display_name": "Starter", "trial_days": None, "features": {"x": True}, "unknown": 1},
        base=base,
    )

    assert draft.display_name == "Starter"
    assert draft.trial_days == 14
    assert draft.features == {"customBranding": True}
