# console/models/platform_feature_model.py

from pymongo import ASCENDING

from ..constants.service_code import COLLECTIONS
from ..utils.logger import Log
from .base_model import BaseModel


class PlatformFeatureModel(BaseModel):
    """
    Catalog of definable platform features (`platformFeatures`).

    Documents are keyed by their stable `featureId`. Inactive features are a
    soft delete and never leave this model through get_all_active().
    """

    collection_name = COLLECTIONS["PLATFORM_FEATURES"]

    @classmethod
    def get_all_active(cls):
        """Raw documents of every active feature. Store errors propagate."""
        collection = cls.get_collection()
        return list(collection.find({"active": True}))

    @classmethod
    def upsert(cls, feature_doc, actor_id):
        """
        Insert or replace the editable fields of a feature, keyed by featureId.
        createdAt is only written on insert.
        """
        log_tag = f"[platform_feature_model.py][PlatformFeatureModel][upsert][{feature_doc.get('featureId')}]"

        audit = cls.audit_fields(actor_id, include_created=True)
        created_at = audit.pop("createdAt")

        fields = {k: v for k, v in feature_doc.items() if v is not None}
        fields.update(audit)

        result = cls.get_collection().update_one(
            {"featureId": feature_doc["featureId"]},
            {"$set": fields, "$setOnInsert": {"createdAt": created_at}},
            upsert=True,
        )

        inserted = result.upserted_id is not None
        Log.info(f"{log_tag} {'inserted' if inserted else 'updated'}")
        return inserted

    @classmethod
    def create_indexes(cls):
        log_tag = "[platform_feature_model.py][PlatformFeatureModel][create_indexes]"
        collection = cls.get_collection()

        collection.create_index([("featureId", ASCENDING)], unique=True)
        collection.create_index([("active", ASCENDING), ("displayOrder", ASCENDING)])
        collection.create_index([("category", ASCENDING)])

        Log.info(f"{log_tag} Indexes created successfully")
        return True
