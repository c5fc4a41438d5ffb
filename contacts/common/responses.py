import json
from decimal import Decimal


class DecimalEncoder(json.JSONEncoder):
    """DynamoDB hands numbers back as Decimal."""

    def default(self, o):
        if isinstance(o, Decimal):
            if o % 1 != 0:
                return float(o)
            return int(o)
        return super().default(o)


def respond(status, body):
    return {
        "statusCode": status,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, cls=DecimalEncoder)
    }


def message(text, status=200):
    return respond(status, {"message": text})


def error(text, status):
    return respond(status, {"error": text})
