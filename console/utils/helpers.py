from datetime import datetime, date, timezone
from bson import ObjectId


def make_log_tag(file, resource, method, ip, admin_id, role, **kwargs):
    # Base tag
    log_tag = (
        f"[{file}]"
        f"[{resource}]"
        f"[{method}]"
        f"[ip:{ip}]"
        f"[admin:{admin_id}]"
        f"[role:{role}]"
    )

    # Append extra context fields
    for key, value in kwargs.items():
        log_tag += f"[{key}:{value}]"

    return log_tag


def utc_now():
    """Timezone-aware UTC timestamp used for audit fields."""
    return datetime.now(timezone.utc)


def to_json_safe(value):
    """
    Convert Mongo values (ObjectId, datetime) nested in dicts/lists into
    JSON-serialisable primitives.
    """
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: to_json_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json_safe(v) for v in value]
    return value
