import os

os.environ.setdefault("APP_LOG_TO_FILE", "false")
os.environ.setdefault("APP_LOG_LEVEL", "WARNING")

import mongomock
import pytest

from console import create_super_admin_app
from factories import SECRET, feature_doc, make_token


@pytest.fixture
def mongo_client():
    return mongomock.MongoClient(tz_aware=True)


@pytest.fixture
def app(mongo_client):
    app = create_super_admin_app(
        config_overrides={"APP_ENV": "testing", "SECRET_KEY": SECRET},
        mongo_client=mongo_client,
    )
    with app.app_context():
        yield app


@pytest.fixture
def mongo(app):
    from console.extensions.db import db
    return db.db


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {make_token()}"}


@pytest.fixture
def seeded_catalog(mongo):
    """A small catalog: a plain toggle, a limit, a toggle-with-limit and a dependent feature."""
    mongo["platformFeatures"].insert_many([
        feature_doc("custom_branding", configKey="customBranding", planKey="customBranding",
                    category="customization", displayOrder=10),
        feature_doc("invoice_creation", configKey="invoiceCreation", planKey="invoicesPerMonth",
                    planType="number", hasUsageLimit=True, defaultLimit=10, displayOrder=10),
        feature_doc("api_access", configKey="apiAccess", planKey="apiAccess",
                    hasUsageLimit=True, category="integration", displayOrder=10),
        feature_doc("team_members", configKey="teamMembers", planKey="teamMembers",
                    planType="number", category="collaboration", displayOrder=10),
        feature_doc("role_based_access", configKey="roleBasedAccess", planKey="roleBasedAccess",
                    category="collaboration", dependsOn=["team_members"], displayOrder=20),
        feature_doc("basic_dashboard", configKey="basicDashboard", displayOrder=5),
    ])
    mongo["systemConfig"].insert_one({
        "_id": "platform_config_v1",
        "features": {"customBranding": True, "apiAccess": True},
    })
    return mongo
