# console/models/system_config_model.py

from ..constants.service_code import COLLECTIONS
from ..utils.logger import Log
from ..utils.validation import is_field_key
from .base_model import BaseModel


class SystemConfigModel(BaseModel):
    """
    Process-wide platform configuration (`systemConfig`), a single document
    per config id. Only the `features` flag map is used by the plan engine.
    """

    collection_name = COLLECTIONS["SYSTEM_CONFIG"]

    @classmethod
    def get_feature_flags(cls, config_id):
        """
        configKey -> bool map. A missing document or a missing `features`
        map yields {} (every feature globally enabled).
        """
        doc = cls.get_collection().find_one({"_id": config_id}, {"features": 1})
        if not doc:
            Log.info(f"[system_config_model.py][get_feature_flags][{config_id}] no config document")
            return {}

        features = doc.get("features") or {}
        if not isinstance(features, dict):
            Log.warning(f"[system_config_model.py][get_feature_flags][{config_id}] features is not a map")
            return {}

        return dict(features)

    @classmethod
    def set_feature_flag(cls, config_id, config_key, enabled, actor_id):
        """Flip one global flag. The config document is created if missing."""
        if not is_field_key(config_key):
            raise ValueError(f"Invalid config key: {config_key!r}")

        update = {f"features.{config_key}": bool(enabled)}
        update.update(cls.audit_fields(actor_id))

        result = cls.get_collection().update_one(
            {"_id": config_id},
            {"$set": update, "$setOnInsert": {"configId": config_id}},
            upsert=True,
        )

        Log.info(
            f"[system_config_model.py][set_feature_flag][{config_id}] "
            f"{config_key}={bool(enabled)} by {actor_id}"
        )
        return result.acknowledged

    @classmethod
    def ensure_exists(cls, config_id, flags, actor_id):
        """
        Create the config document with the given flags unless it already
        exists. Returns True when a document was created.
        """
        audit = cls.audit_fields(actor_id, include_created=True)
        result = cls.get_collection().update_one(
            {"_id": config_id},
            {"$setOnInsert": {"configId": config_id, "features": dict(flags), **audit}},
            upsert=True,
        )
        return result.upserted_id is not None
