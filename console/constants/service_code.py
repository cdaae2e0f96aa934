
HTTP_STATUS_CODES = {
    "OK": 200,
    "CREATED": 201,
    "BAD_REQUEST": 400,
    "UNAUTHORIZED": 401,
    "FORBIDDEN": 403,
    "NOT_FOUND": 404,
    "CONFLICT": 409,
    "VALIDATION_ERROR": 422,
    "INTERNAL_SERVER_ERROR": 500,
}

ERROR_MESSAGES = {
    "VALIDATION_FAILED": "Validation failed. Please check your inputs.",
    "CATALOG_UNAVAILABLE": "Feature catalog is unavailable. No features can be configured right now.",
}

AUTHENTICATION_MESSAGES = {
    "AUTHENTICATION_REQUIRED": "Authentication Required",
    "TOKEN_EXPIRED": "Token expired",
    "INVALID_TOKEN": "Invalid token",
    "SUPER_ADMIN_REQUIRED": "Only super administrators can manage subscription plans",
}

SYSTEM_USERS = {
    "SYSTEM_OWNER": "system_owner",
    "SUPER_ADMIN": "super_admin",
    "ADMIN": "admin",
    "SUPPORT": "support",
}

# Account types allowed to manage plans and global feature flags
PLAN_MANAGER_ACCOUNT_TYPES = (
    SYSTEM_USERS["SYSTEM_OWNER"],
    SYSTEM_USERS["SUPER_ADMIN"],
)

COLLECTIONS = {
    "SYSTEM_CONFIG": "systemConfig",
    "PLATFORM_FEATURES": "platformFeatures",
    "SUBSCRIPTION_PLANS": "subscriptionPlans",
}

DEFAULT_SYSTEM_CONFIG_ID = "platform_config_v1"
DEFAULT_BASE_CURRENCY = "GHS"

UNLIMITED_SENTINEL = "unlimited"
