# Blueprints for Super Admin only
from ..resources import (
    blp_subscription_plan,
    blp_system_config,
)


def register_admin_routes(app, api):
    blueprints = [
        blp_subscription_plan,
        blp_system_config,
    ]

    for blueprint in blueprints:
        api.register_blueprint(blueprint, url_prefix="/v1/admin")
