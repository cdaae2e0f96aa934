from dotenv import load_dotenv
load_dotenv()  # Load environment variables from .env file

import os

from .constants.service_code import DEFAULT_BASE_CURRENCY, DEFAULT_SYSTEM_CONFIG_ID


def _build_mongo_uri():
    uri = os.getenv("MONGO_URI")
    if uri:
        return uri

    username = os.getenv("DB_USERNAME")
    password = os.getenv("DB_PASSWORD")
    cluster = os.getenv("DB_CLUSTER")
    if username and password and cluster:
        return f"mongodb+srv://{username}:{password}@{cluster}.mongodb.net/?retryWrites=true&w=majority"

    return "mongodb://localhost:27017"


class Config:
    """Base configuration class."""
    APP_NAME = os.getenv("APP_NAME", "Super Admin Console")

    SECRET_KEY = os.getenv("SECRET_KEY", "change-me")
    DEBUG = os.getenv("FLASK_DEBUG", "False") == "True"
    TESTING = False

    # ========================================
    # DOCUMENT STORE
    # ========================================
    MONGO_URI = _build_mongo_uri()
    DB_NAME = os.getenv("DB_NAME", "merchant_platform")

    # ========================================
    # PLAN CONFIGURATION ENGINE
    # ========================================
    SYSTEM_CONFIG_ID = os.getenv("SYSTEM_CONFIG_ID", DEFAULT_SYSTEM_CONFIG_ID)
    BASE_CURRENCY = os.getenv("BASE_CURRENCY", DEFAULT_BASE_CURRENCY)
    CATALOG_LOAD_WORKERS = int(os.getenv("CATALOG_LOAD_WORKERS", 2))

    # ========================================
    # API
    # ========================================
    API_TITLE = "Super Admin API"
    API_VERSION = "v1"
    OPENAPI_VERSION = "3.0.3"
    OPENAPI_URL_PREFIX = "/api"
    OPENAPI_JSON_PATH = "openapi.json"
    OPENAPI_SWAGGER_UI_PATH = "/docs"
    OPENAPI_SWAGGER_UI_URL = "https://cdn.jsdelivr.net/npm/swagger-ui-dist/"

    ALLOWED_ORIGINS = [o.strip() for o in os.getenv("ALLOWED_ORIGINS", "").split(",") if o.strip()]


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class TestingConfig(Config):
    """Testing configuration."""
    DEBUG = False
    TESTING = True
    DB_NAME = os.getenv("TEST_DB_NAME", "merchant_platform_test")
    SECRET_KEY = "test-secret-key"


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


CONFIG_BY_ENV = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
}


def load_config(app, overrides=None):
    load_dotenv()
    app_env = (overrides or {}).get("APP_ENV") or os.getenv("APP_ENV", "development")
    config_class = CONFIG_BY_ENV.get(app_env, DevelopmentConfig)

    app.config.from_object(config_class)
    app.config["APP_ENV"] = app_env

    if overrides:
        app.config.update(overrides)
