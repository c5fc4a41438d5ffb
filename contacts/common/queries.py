"""Expression builders for DynamoDB update and scan calls."""

from boto3.dynamodb.conditions import Attr

from .config import PATCHABLE_FIELDS
from .errors import ValidationError


def build_update_expression(fields):
    """Build a ``SET`` update for ``fields``.

    Attribute names go through ``#placeholders`` so reserved words such as
    ``name`` never reach the expression. Only ``PATCHABLE_FIELDS`` may be
    set, and they come out in that order.
    """
    if not fields:
        raise ValidationError("Update body must not be empty")

    for f in fields:
        if f not in PATCHABLE_FIELDS:
            raise ValidationError(f"Field cannot be updated: {f}")
    ordered = [f for f in PATCHABLE_FIELDS if f in fields]

    exp = {
        "UpdateExpression": "SET " + ", ".join(f"#{f} = :{f}" for f in ordered),
        "ExpressionAttributeNames": {},
        "ExpressionAttributeValues": {},
    }
    for f in ordered:
        exp["ExpressionAttributeNames"][f"#{f}"] = f
        exp["ExpressionAttributeValues"][f":{f}"] = fields[f]
    return exp


def gender_equals(gender):
    return Attr("gender").eq(gender)


def email_contains(fragment):
    return Attr("email").contains(fragment)
