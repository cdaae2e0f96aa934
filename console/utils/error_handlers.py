from flask import jsonify

from .logger import Log


# Handle PermissionError
def handle_permission_error(error):
    response = {
        "error": "PermissionError",
        "message": str(error),
        "status_code": 403  # Forbidden
    }
    return jsonify(response), 403

# Handle marshmallow ValidationError
def handle_validation_error(error):
    response = {
        "error": "Validation Error",
        "message": error.messages,
        "status_code": 400  # Bad Request
    }
    return jsonify(response), 400

# Handle TypeError
def handle_type_error(error):
    response = {
        "error": "Type Error",
        "message": str(error),
        "status_code": 400  # Bad Request
    }
    return jsonify(response), 400

# Handle PersistenceError that escaped a resource
def handle_persistence_error(error):
    Log.error(f"[error_handlers.py][handle_persistence_error] {error}")
    response = {
        "error": "Persistence Error",
        "message": str(error),
        "status_code": 500
    }
    return jsonify(response), 500
