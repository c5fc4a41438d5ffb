import base64
import binascii
import json
from typing import Any, Dict

from .config import CONTACT_FIELDS, PATCHABLE_FIELDS, RESERVED_NAMES
from .errors import ValidationError

FIELD_LABELS = {
    "name": "Name",
    "gender": "Gender",
    "phone_num": "Phone number",
    "email": "Email",
    "address": "Address",
}


def parse_body(event) -> Dict[str, Any]:
    body = event.get("body")
    if body is None or body == "":
        raise ValidationError("Request body must be a JSON object")
    try:
        if event.get("isBase64Encoded"):
            body = base64.b64decode(body).decode("utf-8")
        payload = json.loads(body)
    except (binascii.Error, UnicodeDecodeError, json.JSONDecodeError):
        raise ValidationError("Invalid JSON body")
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return payload


def _require_string(field, value):
    if not isinstance(value, str):
        raise ValidationError(f"{FIELD_LABELS[field]} must be a string")


def validate_new_contact(payload: Dict[str, Any]) -> Dict[str, str]:
    """Check a create payload, stopping at the first bad field.

    Returns only the five contact attributes; other keys are dropped.
    """
    for field in CONTACT_FIELDS:
        _require_string(field, payload.get(field))

    name = payload["name"]
    if not name:
        raise ValidationError("Name must not be empty")
    if name in RESERVED_NAMES:
        raise ValidationError("Contact name is reserved")

    return {field: payload[field] for field in CONTACT_FIELDS}


def validate_patch(payload: Dict[str, Any]) -> Dict[str, str]:
    if not payload:
        raise ValidationError("Update body must not be empty")
    for key, value in payload.items():
        if key not in PATCHABLE_FIELDS:
            raise ValidationError(f"Field cannot be updated: {key}")
        _require_string(key, value)
    return dict(payload)
