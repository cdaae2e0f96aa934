# console/models/subscription_plan_model.py

from pymongo import ASCENDING

from ..constants.service_code import COLLECTIONS
from ..utils.logger import Log
from .base_model import BaseModel


class SubscriptionPlanModel(BaseModel):
    """
    Subscription plans offered to merchants (`subscriptionPlans`).

    Notes:
      - `name` is the plan's external id; it is set on create and never updated.
      - `features` holds boolean access flags, `limits` holds numeric caps or
        the "unlimited" sentinel.
      - Audit fields (createdAt/updatedAt/updatedBy) are stamped by the
        persistence gateway, never taken from client payloads.
    """

    collection_name = COLLECTIONS["SUBSCRIPTION_PLANS"]
    id_field = "planId"

    # Top-level fields a partial update may touch
    UPDATABLE_FIELDS = {
        "displayName",
        "description",
        "tagline",
        "pricing",
        "setupFee",
        "billingCycle",
        "billingCycleDays",
        "trialEnabled",
        "trialDays",
        "visible",
        "featured",
        "displayOrder",
        "active",
        "availableForNewSignups",
        "ctaText",
        "highlights",
        "features",
        "limits",
    }

    # Map fields a partial update may set one key at a time (`limits.<planKey>`)
    MAP_FIELDS = ("features", "limits")

    @classmethod
    def insert(cls, document):
        """Insert a new plan document and return its generated id as a string."""
        result = cls.get_collection().insert_one(dict(document))
        return str(result.inserted_id)

    @classmethod
    def merge_update(cls, plan_id, fields):
        """
        $set the given fields (top-level or dotted map entries). Returns the
        number of matched documents (0 when the plan does not exist).
        """
        object_id = cls.to_object_id(plan_id)
        if object_id is None:
            return 0

        result = cls.get_collection().update_one({"_id": object_id}, {"$set": dict(fields)})
        return result.matched_count

    @classmethod
    def get_raw(cls, plan_id):
        """Un-normalised document (datetimes and ObjectId intact)."""
        object_id = cls.to_object_id(plan_id)
        if object_id is None:
            return None
        return cls.get_collection().find_one({"_id": object_id})

    @classmethod
    def get_all(cls):
        """Every plan, drafts included, ordered by displayOrder."""
        cursor = cls.get_collection().find({}).sort("displayOrder", ASCENDING)
        return [cls.normalise(doc) for doc in cursor]

    @classmethod
    def exists_by_name(cls, name):
        return cls.get_collection().find_one({"name": name}, {"_id": 1}) is not None

    @classmethod
    def create_indexes(cls):
        log_tag = "[subscription_plan_model.py][SubscriptionPlanModel][create_indexes]"
        collection = cls.get_collection()

        collection.create_index([("name", ASCENDING)])
        collection.create_index([("displayOrder", ASCENDING)])
        collection.create_index([("active", ASCENDING), ("displayOrder", ASCENDING)])

        Log.info(f"{log_tag} Indexes created successfully")
        return True
