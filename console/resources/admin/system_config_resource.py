# resources/admin/system_config_resource.py
from flask import current_app, g, request
from flask.views import MethodView
from flask_smorest import Blueprint
from pymongo.errors import PyMongoError

from .auth import token_required
from ...models.system_config_model import SystemConfigModel
from ...schemas.plan_schema import FeatureFlagSchema
from ...utils.json_response import prepared_response
from ...utils.helpers import make_log_tag
from ...utils.logger import Log

blp_system_config = Blueprint("system_config", __name__, description="Global feature flags")


def _config_id():
    return current_app.config["SYSTEM_CONFIG_ID"]


@blp_system_config.route("/system-config/features", methods=["GET", "PATCH"])
class SystemFeatureFlags(MethodView):

    @token_required
    def get(self):
        """Global feature flags (configKey -> enabled)."""
        user_info = g.current_user
        log_tag = make_log_tag(
            "system_config_resource.py", "SystemFeatureFlags", "get",
            request.remote_addr, user_info.get("admin_id"), user_info.get("account_type"),
        )

        try:
            flags = SystemConfigModel.get_feature_flags(_config_id())
        except PyMongoError as e:
            Log.error(f"{log_tag} Error retrieving feature flags: {e}")
            return prepared_response(
                status=False,
                status_code="INTERNAL_SERVER_ERROR",
                message="Failed to retrieve feature flags",
                errors=[str(e)],
            )

        return prepared_response(
            status=True,
            status_code="OK",
            message="Feature flags retrieved successfully",
            data={"config_id": _config_id(), "features": flags},
        )

    @token_required
    @blp_system_config.arguments(FeatureFlagSchema, location="json")
    def patch(self, json_data):
        """Enable or disable one feature platform-wide."""
        user_info = g.current_user
        config_key = json_data["config_key"]
        enabled = json_data["enabled"]
        log_tag = make_log_tag(
            "system_config_resource.py", "SystemFeatureFlags", "patch",
            request.remote_addr, user_info.get("admin_id"), user_info.get("account_type"),
            config_key=config_key,
        )

        try:
            SystemConfigModel.set_feature_flag(_config_id(), config_key, enabled, user_info["admin_id"])
            flags = SystemConfigModel.get_feature_flags(_config_id())
        except PyMongoError as e:
            Log.error(f"{log_tag} Error updating feature flag: {e}")
            return prepared_response(
                status=False,
                status_code="INTERNAL_SERVER_ERROR",
                message="Failed to update feature flag",
                errors=[str(e)],
            )

        Log.info(f"{log_tag} {config_key} set to {enabled}")
        return prepared_response(
            status=True,
            status_code="OK",
            message="Feature flag updated successfully",
            data={"config_id": _config_id(), "features": flags},
        )
