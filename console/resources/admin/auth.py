# resources/admin/auth.py
import jwt

from functools import wraps
from flask import current_app, g, request
from flask_smorest import abort

from ...constants.service_code import AUTHENTICATION_MESSAGES, PLAN_MANAGER_ACCOUNT_TYPES
from ...utils.logger import Log


def token_required(f):
    """
    Require a super-admin bearer token.

    Tokens are issued by the platform's auth service and signed with
    SECRET_KEY (HS256). Claims used: `admin_id`, `account_type`.
    """
    @wraps(f)
    def decorated(*args, **kwargs):
        auth_header = request.headers.get("Authorization")
        log_tag = f"[auth.py][token_required][ip:{request.remote_addr}]"

        if not auth_header or not auth_header.startswith("Bearer "):
            abort(401, message=AUTHENTICATION_MESSAGES["AUTHENTICATION_REQUIRED"])

        token = auth_header.split()[1] if len(auth_header.split()) > 1 else ""

        try:
            data = jwt.decode(token, current_app.config["SECRET_KEY"], algorithms=["HS256"])
        except jwt.ExpiredSignatureError:
            Log.info(f"{log_tag} expired token")
            abort(401, message=AUTHENTICATION_MESSAGES["TOKEN_EXPIRED"])
        except jwt.InvalidTokenError as e:
            Log.info(f"{log_tag} invalid token: {e}")
            abort(401, message=AUTHENTICATION_MESSAGES["INVALID_TOKEN"])

        admin_id = data.get("admin_id")
        account_type = data.get("account_type")

        if not admin_id:
            abort(401, message=AUTHENTICATION_MESSAGES["INVALID_TOKEN"])

        if account_type not in PLAN_MANAGER_ACCOUNT_TYPES:
            Log.info(f"{log_tag}[admin:{admin_id}] account type {account_type} refused")
            abort(403, message=AUTHENTICATION_MESSAGES["SUPER_ADMIN_REQUIRED"])

        g.current_user = {"admin_id": str(admin_id), "account_type": account_type}
        return f(*args, **kwargs)

    return decorated
