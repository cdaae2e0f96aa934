from datetime import datetime, timedelta, timezone

import jwt

from console.services.plans.catalog import PlatformFeature

SECRET = "test-secret-key"


def make_feature(feature_id, category="core_business", **kwargs):
    """Catalog entry whose configKey defaults to its featureId."""
    kwargs.setdefault("config_key", feature_id)
    return PlatformFeature(feature_id=feature_id, category=category, **kwargs)


def feature_doc(feature_id, **overrides):
    doc = {
        "featureId": feature_id,
        "name": feature_id.replace("_", " ").title(),
        "configKey": feature_id,
        "category": "core_business",
        "planType": "boolean",
        "hasUsageLimit": False,
        "displayOrder": 0,
        "active": True,
    }
    doc.update(overrides)
    return doc


def make_token(admin_id="admin-1", account_type="super_admin", expires_in=3600, secret=SECRET):
    payload = {
        "admin_id": admin_id,
        "account_type": account_type,
        "exp": datetime.now(timezone.utc) + timedelta(seconds=expires_in),
    }
    return jwt.encode(payload, secret, algorithm="HS256")
