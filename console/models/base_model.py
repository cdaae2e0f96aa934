# console/models/base_model.py

from bson.objectid import ObjectId

from ..extensions.db import db
from ..utils.helpers import utc_now, to_json_safe


class BaseModel:
    """
    Base class for document models: collection access, audit stamping and
    JSON normalisation shared by every collection the console touches.
    """
    collection_name = None
    id_field = None

    @classmethod
    def get_collection(cls):
        return db.get_collection(cls.collection_name)

    @staticmethod
    def audit_fields(actor_id, include_created=False):
        """
        Audit metadata for a write. `updatedBy` is always the acting admin.
        """
        now = utc_now()
        fields = {"updatedAt": now, "updatedBy": actor_id}
        if include_created:
            fields["createdAt"] = now
        return fields

    @staticmethod
    def to_object_id(record_id):
        if isinstance(record_id, ObjectId):
            return record_id
        if not ObjectId.is_valid(record_id):
            return None
        return ObjectId(record_id)

    @classmethod
    def normalise(cls, doc):
        """
        Make a document JSON-safe. The Mongo `_id` is exposed under the
        model's id field (e.g. `planId`) when one is declared.
        """
        if not doc:
            return None

        doc = dict(doc)
        if cls.id_field and "_id" in doc:
            doc[cls.id_field] = str(doc.pop("_id"))

        return to_json_safe(doc)

    @classmethod
    def get_by_id(cls, record_id):
        object_id = cls.to_object_id(record_id)
        if object_id is None:
            return None

        doc = cls.get_collection().find_one({"_id": object_id})
        return cls.normalise(doc)
