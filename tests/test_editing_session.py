import pytest
from bson import ObjectId
from pymongo.errors import PyMongoError

from console.models.subscription_plan_model import SubscriptionPlanModel
from console.services.plans.catalog import UNLIMITED, Catalog, ConfigSnapshot, Finite
from console.services.plans.catalog_loader import CatalogLoad
from console.services.plans.editing_session import PlanEditingSession
from console.services.plans.plan_draft import PlanDraft
from console.services.plans.plan_gateway import PersistenceError
from factories import make_feature

BASIC_FIELDS = {
    "name": "pro",
    "display_name": "Pro",
    "pricing": {"GHS": {"amount": 120, "currency": "GHS"}},
}


def session_for(features, flags):
    return PlanEditingSession(CatalogLoad(Catalog(features), ConfigSnapshot(flags)))


def test_single_feature_end_to_end(mongo):
    f1 = make_feature("f1", config_key="c1", plan_key="k1")
    session = session_for([f1], {"c1": True})

    assert session.assignable == frozenset({f1})

    session.set_value("f1", True)
    assert session.draft.features["k1"] is True

    session.update_fields(BASIC_FIELDS)
    assert session.validate() == {}

    plan_id, errors = session.submit("admin-1")
    assert errors == {}
    assert plan_id
    assert mongo["subscriptionPlans"].find_one({"_id": ObjectId(plan_id)})["features"] == {"k1": True}


def test_disabled_feature_is_not_assignable():
    f1 = make_feature("f1", config_key="c1", plan_key="k1", depends_on=("f0",))
    session = session_for([f1, make_feature("f0")], {"c1": False})

    assert f1 not in session.assignable
    assert session.unavailable_reason("f1") == "globally_disabled"
    with pytest.raises(ValueError):
        session.set_value("f1", True)


def test_open_loads_catalog_from_store(seeded_catalog):
    session = PlanEditingSession.open()

    assert session.catalog_available
    assert session.assignable_feature("role_based_access") is not None
    assert list(session.groups) == ["core_business", "collaboration", "integration", "customization"]
    assert [f.feature_id for f in session.groups["core_business"]] == ["basic_dashboard", "invoice_creation"]


def test_unavailable_reasons(seeded_catalog):
    seeded_catalog["systemConfig"].update_one(
        {"_id": "platform_config_v1"}, {"$set": {"features.teamMembers": False}}
    )
    session = PlanEditingSession.open()

    assert session.unavailable_reason("team_members") == "globally_disabled"
    assert session.unavailable_reason("role_based_access") == "dependency_not_met"
    assert session.unavailable_reason("nope") == "unknown_feature"
    assert session.unavailable_reason("basic_dashboard") == "not_assignable"
    assert session.unavailable_reason("invoice_creation") is None


def test_feature_catalog_report(seeded_catalog):
    seeded_catalog["systemConfig"].update_one(
        {"_id": "platform_config_v1"}, {"$set": {"features.teamMembers": False}}
    )
    report = PlanEditingSession.open().feature_catalog()

    assert report["catalog_available"] is True
    labels = [c["label"] for c in report["categories"]]
    assert labels == ["Core Business Limits", "API & Integration", "Customization & Branding"]
    assert {b["featureId"]: b["reason"] for b in report["blocked"]} == {
        "team_members": "globally_disabled",
        "role_based_access": "dependency_not_met",
    }


def test_apply_values_reports_per_feature_errors(seeded_catalog):
    session = PlanEditingSession.open()

    errors = session.apply_values({
        "invoice_creation": "unlimited",
        "api_access": 500,
        "custom_branding": 3,
        "ghost": True,
    })

    assert set(errors) == {"features.custom_branding", "features.ghost"}
    assert session.get_value("invoice_creation") is UNLIMITED
    assert session.get_value("api_access") == Finite(500)


def test_submit_with_errors_persists_nothing(seeded_catalog):
    session = PlanEditingSession.open()

    plan_id, errors = session.submit("admin-1")

    assert plan_id is None
    assert set(errors) == {"name", "displayName", "pricingGHS"}
    assert seeded_catalog["subscriptionPlans"].count_documents({}) == 0


def test_persistence_failure_keeps_the_draft(seeded_catalog, monkeypatch):
    def fail(cls, document):
        raise PyMongoError("primary stepped down")

    monkeypatch.setattr(SubscriptionPlanModel, "insert", classmethod(fail))

    session = PlanEditingSession.open()
    session.update_fields(BASIC_FIELDS)
    session.set_value("team_members", 4)

    with pytest.raises(PersistenceError):
        session.submit("admin-1", save_as_draft=True)

    assert session.draft.name == "pro"
    assert session.get_value("team_members") == Finite(4)


def test_save_changes_writes_merged_plan(seeded_catalog):
    session = PlanEditingSession.open()
    session.update_fields(BASIC_FIELDS)
    session.set_value("custom_branding", True)
    plan_id, _ = session.submit("admin-1")

    existing = seeded_catalog["subscriptionPlans"].find_one({"_id": ObjectId(plan_id)})
    editor = PlanEditingSession.open(draft=PlanDraft.from_document(existing))
    editor.set_value("team_members", "unlimited")

    errors = editor.save_changes(plan_id, {"name": "renamed", "display_name": "Pro Plus"}, "admin-2")

    doc = seeded_catalog["subscriptionPlans"].find_one({"_id": ObjectId(plan_id)})
    assert errors == {}
    assert doc["name"] == "pro"
    assert doc["displayName"] == "Pro Plus"
    assert doc["features"] == {"customBranding": True}
    assert doc["limits"] == {"teamMembers": "unlimited"}
    assert doc["updatedBy"] == "admin-2"


def test_save_changes_leaves_unreadable_entries_alone(seeded_catalog):
    session = PlanEditingSession.open()
    session.update_fields(BASIC_FIELDS)
    session.set_value("team_members", 2)
    plan_id, _ = session.submit("admin-1")
    seeded_catalog["subscriptionPlans"].update_one(
        {"_id": ObjectId(plan_id)},
        {"$set": {"limits.legacyCap": 2.5, "features.beta": "yes"}},
    )

    existing = seeded_catalog["subscriptionPlans"].find_one({"_id": ObjectId(plan_id)})
    editor = PlanEditingSession.open(draft=PlanDraft.from_document(existing))
    editor.set_value("team_members", 7)
    editor.set_value("custom_branding", True)

    assert editor.changed_fields() == {"limits.teamMembers": 7, "features.customBranding": True}
    assert editor.save_changes(plan_id, {}, "admin-2") == {}

    doc = seeded_catalog["subscriptionPlans"].find_one({"_id": ObjectId(plan_id)})
    assert doc["limits"] == {"teamMembers": 7, "legacyCap": 2.5}
    assert doc["features"] == {"beta": "yes", "customBranding": True}

def test_save_changes_validates_merged_draft(seeded_catalog):
    session = PlanEditingSession.open()
    session.update_fields(BASIC_FIELDS)
    plan_id, _ = session.submit("admin-1")

    existing = seeded_catalog["subscriptionPlans"].find_one({"_id": ObjectId(plan_id)})
    editor = PlanEditingSession.open(draft=PlanDraft.from_document(existing))

    errors = editor.save_changes(plan_id, {"pricing": {"GHS": {"amount": 0, "currency": "GHS"}}}, "admin-2")

    assert errors == {"pricingGHS": "GHS pricing must be greater than 0"}
    doc = seeded_catalog["subscriptionPlans"].find_one({"_id": ObjectId(plan_id)})
    assert doc["pricing"]["GHS"]["amount"] == 120


def test_degraded_session_has_nothing_to_configure(app, monkeypatch):
    from console.models.platform_feature_model import PlatformFeatureModel

    def fail(cls):
        raise PyMongoError("unreachable")

    monkeypatch.setattr(PlatformFeatureModel, "get_all_active", classmethod(fail))
    session = PlanEditingSession.open()

    assert not session.catalog_available
    assert session.assignable == frozenset()
    assert session.feature_catalog()["categories"] == []
    assert session.apply_values({"invoice_creation": 5}) == {
        "features.invoice_creation": "Feature is not in the active catalog",
    }


def test_cancel_resets_draft():
    session = session_for([make_feature("f1", plan_key="k1")], {})
    session.update_fields(BASIC_FIELDS)
    session.set_value("f1", True)

    draft = session.cancel()

    assert draft.name == ""
    assert draft.features == {}
