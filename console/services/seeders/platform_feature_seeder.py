# console/services/seeders/platform_feature_seeder.py

from typing import Any, Dict, List

from flask import current_app
from pymongo.errors import PyMongoError

from ...constants.feature_catalog import DEFAULT_PLATFORM_FEATURES
from ...constants.service_code import DEFAULT_SYSTEM_CONFIG_ID
from ...models.platform_feature_model import PlatformFeatureModel
from ...models.system_config_model import SystemConfigModel
from ...utils.logger import Log

SEED_ACTOR = "system"


def _feature_document(template: Dict[str, Any], display_order: int) -> Dict[str, Any]:
    doc = {k: v for k, v in template.items() if k != "enabledGlobally"}
    doc.setdefault("displayName", doc.get("name"))
    doc.setdefault("dependsOn", [])
    doc["displayOrder"] = display_order
    doc["active"] = True
    return doc


class PlatformFeatureSeeder:
    """
    Seeds the default feature catalog and the system config flag map.

    Idempotent strategy:
      - features are upserted by featureId, so re-running refreshes metadata
      - the system config is only created when missing; existing flags are
        never overwritten
    """

    @classmethod
    def seed_features(cls, templates: List[Dict[str, Any]] = None, actor_id: str = SEED_ACTOR) -> Dict[str, int]:
        log_tag = "[platform_feature_seeder.py][seed_features]"
        templates = DEFAULT_PLATFORM_FEATURES if templates is None else templates

        created = 0
        updated = 0
        for index, template in enumerate(templates, start=1):
            doc = _feature_document(template, display_order=index * 10)
            if PlatformFeatureModel.upsert(doc, actor_id):
                created += 1
            else:
                updated += 1

        Log.info(f"{log_tag} created={created} updated={updated}")
        return {"created": created, "updated": updated}

    @classmethod
    def init_system_config(cls, config_id: str = DEFAULT_SYSTEM_CONFIG_ID,
                           templates: List[Dict[str, Any]] = None, actor_id: str = SEED_ACTOR) -> bool:
        log_tag = f"[platform_feature_seeder.py][init_system_config][{config_id}]"
        templates = DEFAULT_PLATFORM_FEATURES if templates is None else templates

        flags = {t["configKey"]: bool(t.get("enabledGlobally", True)) for t in templates}
        created = SystemConfigModel.ensure_exists(config_id, flags, actor_id)

        if created:
            Log.info(f"{log_tag} system config created with {len(flags)} flags")
        else:
            Log.info(f"{log_tag} system config already exists, left unchanged")
        return created


# =========================================================
# FLASK CLI COMMANDS
# =========================================================

def register_catalog_commands(app):
    """
    Register Flask CLI commands for seeding the feature catalog.
    """

    @app.cli.command("seed-platform-features")
    def seed_platform_features_command():
        """Upsert the default platform feature catalog."""
        try:
            result = PlatformFeatureSeeder.seed_features()
        except PyMongoError as e:
            print(f"[seed-platform-features] failed: {e}")
            raise SystemExit(1)
        print(
            f"[seed-platform-features] created={result['created']} "
            f"updated={result['updated']}"
        )

    @app.cli.command("init-system-config")
    def init_system_config_command():
        """Create the system config document if it does not exist."""
        config_id = current_app.config.get("SYSTEM_CONFIG_ID", DEFAULT_SYSTEM_CONFIG_ID)
        try:
            created = PlatformFeatureSeeder.init_system_config(config_id)
        except PyMongoError as e:
            print(f"[init-system-config] failed: {e}")
            raise SystemExit(1)
        print(f"[init-system-config] config_id={config_id} created={created}")
