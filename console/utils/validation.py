import re

from bson import ObjectId
from marshmallow import ValidationError

# Keys that may appear as one segment of a dotted Mongo path
FIELD_KEY_PATTERN = r"^[A-Za-z0-9_]+$"
_FIELD_KEY_RE = re.compile(FIELD_KEY_PATTERN)

def is_field_key(value):
    return isinstance(value, str) and bool(_FIELD_KEY_RE.match(value))

def validate_objectid(value):
    if not ObjectId.is_valid(value):
        raise ValidationError(f"{value} is not a valid ID. Ensure you add a valid Item ID.")

def validate_currency_code(value):
    if not isinstance(value, str) or len(value) != 3 or not value.isalpha() or not value.isupper():
        raise ValidationError("Currency code must be a 3-letter upper-case ISO code.")

def validate_non_negative(value):
    if value is not None and value < 0:
        raise ValidationError("Value must be greater than or equal to 0.")
