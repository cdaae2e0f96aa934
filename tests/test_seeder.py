from console.constants.feature_catalog import DEFAULT_PLATFORM_FEATURES
from console.services.plans.catalog_loader import load_catalog
from console.services.plans.dependency_resolver import resolve_assignable
from console.services.seeders.platform_feature_seeder import PlatformFeatureSeeder


def test_seed_features_is_idempotent(mongo):
    first = PlatformFeatureSeeder.seed_features()
    second = PlatformFeatureSeeder.seed_features()

    assert first == {"created": len(DEFAULT_PLATFORM_FEATURES), "updated": 0}
    assert second == {"created": 0, "updated": len(DEFAULT_PLATFORM_FEATURES)}
    assert mongo["platformFeatures"].count_documents({}) == len(DEFAULT_PLATFORM_FEATURES)

    doc = mongo["platformFeatures"].find_one({"featureId": "whatsapp_messaging"})
    assert doc["active"] is True
    assert doc["dependsOn"] == ["whatsapp_business_integration"]
    assert "enabledGlobally" not in doc


def test_init_system_config_does_not_overwrite(mongo):
    assert PlatformFeatureSeeder.init_system_config() is True

    mongo["systemConfig"].update_one({"_id": "platform_config_v1"}, {"$set": {"features.smsNotifications": True}})
    assert PlatformFeatureSeeder.init_system_config() is False

    flags = mongo["systemConfig"].find_one({"_id": "platform_config_v1"})["features"]
    assert flags["smsNotifications"] is True
    assert flags["invoiceCreation"] is True
    assert flags["webhooks"] is False


def test_seeded_catalog_resolves(mongo):
    PlatformFeatureSeeder.seed_features()
    PlatformFeatureSeeder.init_system_config()

    catalog, snapshot = load_catalog()
    assignable = {f.feature_id for f in resolve_assignable(catalog, snapshot)}

    assert "whatsapp_messaging" in assignable
    assert "role_based_access" in assignable
    assert "sms_notifications" not in assignable
    assert "webhooks" not in assignable


def test_cli_commands(app, mongo):
    runner = app.test_cli_runner()

    result = runner.invoke(args=["seed-platform-features"])
    assert "created=" in result.output

    result = runner.invoke(args=["init-system-config"])
    assert "created=True" in result.output
    assert mongo["systemConfig"].count_documents({}) == 1
