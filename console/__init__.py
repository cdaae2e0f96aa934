from flask import Flask
from werkzeug.middleware.proxy_fix import ProxyFix
from marshmallow import ValidationError
from flask_smorest import Api
from pymongo.errors import PyMongoError

from .extensions import db, cors
from .config import load_config
from .routes import register_admin_routes
from .models.platform_feature_model import PlatformFeatureModel
from .models.subscription_plan_model import SubscriptionPlanModel
from .services.plans.plan_gateway import PersistenceError
from .services.seeders.platform_feature_seeder import register_catalog_commands
from .utils.error_handlers import (
    handle_permission_error, handle_validation_error, handle_type_error,
    handle_persistence_error,
)
from .utils.logger import Log


def setup_database_indexes():
    try:
        PlatformFeatureModel.create_indexes()
        SubscriptionPlanModel.create_indexes()
    except PyMongoError as e:
        Log.error(f"[console/__init__.py][setup_database_indexes] index creation failed: {e}")


# instantiate super admin app
def create_super_admin_app(config_overrides=None, mongo_client=None):
    app = Flask(__name__)

    #get actual client IP
    app.wsgi_app = ProxyFix(
        app.wsgi_app,
        x_for=1,      # Trust X-Forwarded-For
        x_proto=1,    # Trust X-Forwarded-Proto
        x_host=1,     # Trust X-Forwarded-Host
        x_port=1,     # Trust X-Forwarded-Port
        x_prefix=1    # Trust X-Forwarded-Prefix
    )

    # Load configuration (API_* / OPENAPI_* keys included)
    load_config(app, config_overrides)

    api = Api(app)

    # Initialize all extensions
    db.init_app(app, client=mongo_client)
    cors.init_app(app, origins=app.config.get("ALLOWED_ORIGINS") or "*")

    #Setup database indexes
    with app.app_context():
        setup_database_indexes()

    # Register custom error handlers
    app.errorhandler(PermissionError)(handle_permission_error)
    app.errorhandler(ValidationError)(handle_validation_error)
    app.errorhandler(TypeError)(handle_type_error)
    app.errorhandler(PersistenceError)(handle_persistence_error)

    # Register all blueprints using `api.register_blueprint(...)`
    register_admin_routes(app, api)

    # CLI
    register_catalog_commands(app)

    return app
