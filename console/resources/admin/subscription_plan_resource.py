# resources/admin/subscription_plan_resource.py
from flask import g, request
from flask.views import MethodView
from flask_smorest import Blueprint
from pymongo.errors import PyMongoError

from .auth import token_required
from ...models.subscription_plan_model import SubscriptionPlanModel
from ...schemas.plan_schema import (
    PlanCreateSchema, PlanUpdateSchema, PlanPreviewSchema, PlanQuerySchema, PlanStatusSchema
)
from ...services.plans.editing_session import PlanEditingSession
from ...services.plans.plan_draft import PlanDraft
from ...services.plans.plan_gateway import PersistenceError, PlanNotFoundError, set_plan_active
from ...services.plans.plan_summary import plan_preview, plan_stats
from ...constants.service_code import ERROR_MESSAGES
from ...utils.json_response import prepared_response
from ...utils.helpers import make_log_tag
from ...utils.logger import Log

blp_subscription_plan = Blueprint(
    "subscription_plans", __name__, description="Subscription plan configuration"
)

# Request keys that are not plan fields
NON_PLAN_FIELDS = ("feature_values", "save_as_draft", "plan_id")


def _plan_fields(json_data):
    return {k: v for k, v in json_data.items() if k not in NON_PLAN_FIELDS}


def _log_tag(resource, method, **kwargs):
    user_info = g.get("current_user", {})
    return make_log_tag(
        "subscription_plan_resource.py",
        resource,
        method,
        request.remote_addr,
        user_info.get("admin_id"),
        user_info.get("account_type"),
        **kwargs,
    )


# GET SINGLE PLAN
@blp_subscription_plan.route("/plan", methods=["GET"])
class GetPlan(MethodView):

    @token_required
    @blp_subscription_plan.arguments(PlanQuerySchema, location="query")
    def get(self, item_data):
        """Get a plan by ID."""
        plan_id = item_data.get("plan_id")
        log_tag = _log_tag("GetPlan", "get", plan_id=plan_id)

        try:
            plan = SubscriptionPlanModel.get_by_id(plan_id)
        except PyMongoError as e:
            Log.error(f"{log_tag} Error retrieving plan: {e}")
            return prepared_response(
                status=False,
                status_code="INTERNAL_SERVER_ERROR",
                message="Failed to retrieve plan",
                errors=[str(e)],
            )

        if not plan:
            Log.info(f"{log_tag} plan not found")
            return prepared_response(
                status=False,
                status_code="NOT_FOUND",
                message="Plan not found",
            )

        return prepared_response(
            status=True,
            status_code="OK",
            message="Plan retrieved successfully",
            data=plan,
        )


# FEATURE CATALOG
@blp_subscription_plan.route("/plans/feature-catalog", methods=["GET"])
class PlanFeatureCatalog(MethodView):

    @token_required
    def get(self):
        """Features that can be configured on a plan, grouped by category."""
        log_tag = _log_tag("PlanFeatureCatalog", "get")

        session = PlanEditingSession.open()
        catalog = session.feature_catalog()

        if not session.catalog_available:
            Log.info(f"{log_tag} catalog unavailable: {session.load.error}")
            return prepared_response(
                status=True,
                status_code="OK",
                message="Feature catalog unavailable",
                data=catalog,
                warnings=[ERROR_MESSAGES["CATALOG_UNAVAILABLE"]],
            )

        return prepared_response(
            status=True,
            status_code="OK",
            message="Feature catalog retrieved successfully",
            data=catalog,
        )


# PREVIEW PLAN
@blp_subscription_plan.route("/plans/preview", methods=["POST"])
class PreviewPlan(MethodView):

    @token_required
    @blp_subscription_plan.arguments(PlanPreviewSchema, location="json")
    def post(self, json_data):
        """Render the plan preview for a draft without saving it."""
        session = PlanEditingSession.open()
        session.update_fields(_plan_fields(json_data))

        errors = session.apply_values(json_data.get("feature_values"))
        errors.update(session.validate())

        return prepared_response(
            status=True,
            status_code="OK",
            message="Plan preview generated",
            data={
                "preview": plan_preview(session.draft, session.base_currency),
                "errors": errors,
            },
        )


# LIST / CREATE / UPDATE PLANS
@blp_subscription_plan.route("/plans", methods=["GET", "POST", "PUT"])
class PlanResource(MethodView):

    @token_required
    def get(self):
        """List every plan (drafts included) with summary counters."""
        log_tag = _log_tag("PlanResource", "get")

        try:
            plans = SubscriptionPlanModel.get_all()
        except PyMongoError as e:
            Log.error(f"{log_tag} Error retrieving plans: {e}")
            return prepared_response(
                status=False,
                status_code="INTERNAL_SERVER_ERROR",
                message="Failed to retrieve plans",
                errors=[str(e)],
            )

        return prepared_response(
            status=True,
            status_code="OK",
            message="Plans retrieved successfully",
            data={"plans": plans, "stats": plan_stats(plans)},
        )

    @token_required
    @blp_subscription_plan.arguments(PlanCreateSchema, location="json")
    def post(self, json_data):
        """Create a plan, published or as a draft."""
        actor_id = g.current_user["admin_id"]
        save_as_draft = json_data.get("save_as_draft", False)
        log_tag = _log_tag("PlanResource", "post", name=json_data.get("name"), draft=save_as_draft)

        session = PlanEditingSession.open()
        session.update_fields(_plan_fields(json_data))

        errors = session.apply_values(json_data.get("feature_values"))
        errors.update(session.validate())
        if errors:
            Log.info(f"{log_tag} validation failed: {errors}")
            return prepared_response(
                status=False,
                status_code="VALIDATION_ERROR",
                message=ERROR_MESSAGES["VALIDATION_FAILED"],
                errors=errors,
            )

        try:
            Log.info(f"{log_tag} Checking if plan already exists")
            exists = SubscriptionPlanModel.exists_by_name(session.draft.name)
        except PyMongoError as e:
            Log.error(f"{log_tag} Error while checking duplicate plan: {e}")
            return prepared_response(
                status=False,
                status_code="INTERNAL_SERVER_ERROR",
                message="Error occurred while checking duplicate plan",
                errors=[str(e)],
            )

        if exists:
            Log.info(f"{log_tag} plan already exists")
            return prepared_response(
                status=False,
                status_code="CONFLICT",
                message="Plan with this ID already exists",
            )

        try:
            plan_id, errors = session.submit(actor_id, save_as_draft=save_as_draft)
        except PersistenceError as e:
            Log.error(f"{log_tag} {e}")
            return prepared_response(
                status=False,
                status_code="INTERNAL_SERVER_ERROR",
                message="Failed to create plan",
                errors=[str(e)],
            )

        if errors:
            return prepared_response(
                status=False,
                status_code="VALIDATION_ERROR",
                message=ERROR_MESSAGES["VALIDATION_FAILED"],
                errors=errors,
            )

        return prepared_response(
            status=True,
            status_code="CREATED",
            message="Plan saved as draft" if save_as_draft else "Plan created successfully",
            data={"plan_id": plan_id, "active": not save_as_draft},
        )

    @token_required
    @blp_subscription_plan.arguments(PlanUpdateSchema, location="json")
    def put(self, json_data):
        """Update an existing plan. Only the fields sent are changed."""
        actor_id = g.current_user["admin_id"]
        plan_id = json_data.get("plan_id")
        log_tag = _log_tag("PlanResource", "put", plan_id=plan_id)

        try:
            existing = SubscriptionPlanModel.get_raw(plan_id)
        except PyMongoError as e:
            Log.error(f"{log_tag} Error retrieving plan: {e}")
            return prepared_response(
                status=False,
                status_code="INTERNAL_SERVER_ERROR",
                message="Failed to retrieve plan",
                errors=[str(e)],
            )

        if not existing:
            Log.info(f"{log_tag} plan not found")
            return prepared_response(
                status=False,
                status_code="NOT_FOUND",
                message="Plan not found",
            )

        session = PlanEditingSession.open(draft=PlanDraft.from_document(existing))

        errors = session.apply_values(json_data.get("feature_values"))
        if errors:
            Log.info(f"{log_tag} feature values rejected: {errors}")
            return prepared_response(
                status=False,
                status_code="VALIDATION_ERROR",
                message=ERROR_MESSAGES["VALIDATION_FAILED"],
                errors=errors,
            )

        try:
            errors = session.save_changes(plan_id, _plan_fields(json_data), actor_id)
        except PlanNotFoundError:
            return prepared_response(
                status=False,
                status_code="NOT_FOUND",
                message="Plan not found",
            )
        except PersistenceError as e:
            Log.error(f"{log_tag} {e}")
            return prepared_response(
                status=False,
                status_code="INTERNAL_SERVER_ERROR",
                message="Failed to update plan",
                errors=[str(e)],
            )

        if errors:
            Log.info(f"{log_tag} validation failed: {errors}")
            return prepared_response(
                status=False,
                status_code="VALIDATION_ERROR",
                message=ERROR_MESSAGES["VALIDATION_FAILED"],
                errors=errors,
            )

        return prepared_response(
            status=True,
            status_code="OK",
            message="Plan updated successfully",
            data=SubscriptionPlanModel.get_by_id(plan_id),
        )


# PUBLISH / UNPUBLISH
@blp_subscription_plan.route("/plans/status", methods=["PATCH"])
class PlanStatus(MethodView):

    @token_required
    @blp_subscription_plan.arguments(PlanStatusSchema, location="json")
    def patch(self, json_data):
        """Activate or deactivate a plan."""
        actor_id = g.current_user["admin_id"]
        plan_id = json_data["plan_id"]
        active = json_data["active"]
        log_tag = _log_tag("PlanStatus", "patch", plan_id=plan_id, active=active)

        try:
            set_plan_active(plan_id, active, actor_id)
        except PlanNotFoundError:
            Log.info(f"{log_tag} plan not found")
            return prepared_response(
                status=False,
                status_code="NOT_FOUND",
                message="Plan not found",
            )
        except PersistenceError as e:
            Log.error(f"{log_tag} {e}")
            return prepared_response(
                status=False,
                status_code="INTERNAL_SERVER_ERROR",
                message="Failed to update plan status",
                errors=[str(e)],
            )

        return prepared_response(
            status=True,
            status_code="OK",
            message="Plan activated" if active else "Plan deactivated",
            data={"plan_id": plan_id, "active": active},
        )
