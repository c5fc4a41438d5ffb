import os

TABLE_NAME = os.environ.get("CONTACTS_TABLE", "contacts")
# LocalStack / DynamoDB Local
ENDPOINT_URL = os.environ.get("DYNAMODB_ENDPOINT_URL")

CONTACT_FIELDS = ("name", "gender", "phone_num", "email", "address")
PATCHABLE_FIELDS = ("gender", "phone_num", "email", "address")

# /contacts/all and /contacts/recent shadow contacts with these names
RESERVED_NAMES = frozenset({"all", "recent"})

RECENT_LIMIT = 5


def service_name(default):
    return os.environ.get("POWERTOOLS_SERVICE_NAME", default)
