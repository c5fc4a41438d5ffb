import time

from aws_lambda_powertools import Logger

from contacts.common.config import service_name
from contacts.common.errors import StoreError, ValidationError
from contacts.common.store import ContactStore
from contacts.common.validation import validate_new_contact

logger = Logger(service=service_name("contacts-ingest"))


def import_contacts(store, payloads):
    """Validate every contact first, then write them all in one batch."""
    if not isinstance(payloads, list):
        return {"ok": False, "error": "contacts must be a list"}

    contacts = []
    for i, payload in enumerate(payloads):
        try:
            if not isinstance(payload, dict):
                raise ValidationError("Contact must be a JSON object")
            contacts.append(validate_new_contact(payload))
        except ValidationError as e:
            logger.warning("Rejected import", extra={"index": i, "reason": e.message})
            return {"ok": False, "index": i, "error": e.message}

    now = int(time.time())
    for c in contacts:
        c["created_at"] = now

    try:
        store.put_many(contacts)
    except StoreError:
        logger.exception("Batch write failed", extra={"count": len(contacts)})
        return {"ok": False, "error": "Could not import contacts"}

    logger.info("Imported contacts", extra={"count": len(contacts)})
    return {"ok": True, "count": len(contacts)}


@logger.inject_lambda_context
def handler(event, context):
    return import_contacts(ContactStore.from_environment(), event.get("contacts", []))
