"""Contacts HTTP API, served from Lambda behind API Gateway.

Routes (first match wins):
  GET    /health
  GET    /contacts/all               all contacts, sorted by name ignoring case
  GET    /contacts/recent            the 5 most recently created contacts
  GET    /contacts/gender/{gender}   exact match on gender
  GET    /contacts/email/{email}     substring match on email
  GET    /contacts/{name}
  POST   /contacts
  PUT    /contacts/{name}            partial update of gender/phone_num/email/address
  DELETE /contacts/{name}

"all" and "recent" are reserved and cannot be used as contact names.
"""

import re
import time
from dataclasses import dataclass
from typing import Callable, Optional
from urllib.parse import unquote

from aws_lambda_powertools import Logger

from contacts.common import queries, results
from contacts.common.config import RESERVED_NAMES, service_name
from contacts.common.errors import ContactsError, NotFoundError, RouteNotFoundError, StoreError, ValidationError
from contacts.common.responses import error, message, respond
from contacts.common.store import ContactStore
from contacts.common.validation import parse_body, validate_new_contact, validate_patch

logger = Logger(service=service_name("contacts-api"))

_store = None


def get_store():
    global _store
    if _store is None:
        _store = ContactStore.from_environment()
    return _store


@dataclass
class Route:
    method: str
    pattern: str
    regex: re.Pattern
    handler: Callable
    failure: Optional[str] = None


ROUTES = []


def _compile(pattern):
    # /contacts/:name -> ^/contacts/(?P<name>[^/]+)$
    return re.compile("^" + re.sub(r":(\w+)", r"(?P<\1>[^/]+)", pattern) + "$")


def route(method, pattern, failure=None):
    def register(fn):
        ROUTES.append(Route(method, pattern, _compile(pattern), fn, failure))
        return fn
    return register


def _request_line(event):
    path = event.get("rawPath") or event.get("path") or "/"
    method = event.get("requestContext", {}).get("http", {}).get("method")
    if method is None:
        method = event.get("httpMethod", "")
    if len(path) > 1:
        path = path.rstrip("/")
    return method.upper(), path


def dispatch(event, store):
    method, path = _request_line(event)
    logger.info("Received request", extra={"method": method, "path": path})

    for r in ROUTES:
        if r.method != method:
            continue
        m = r.regex.match(path)
        if not m:
            continue
        params = {k: unquote(v) for k, v in m.groupdict().items()}
        try:
            return r.handler(store, event, **params)
        except StoreError as e:
            logger.exception("Store call failed", extra={"route": f"{r.method} {r.pattern}", "operation": e.operation})
            return error(r.failure, e.status)
        except ContactsError as e:
            return respond(e.status, e.to_body())

    err = RouteNotFoundError()
    return respond(err.status, err.to_body())


@route("GET", "/health")
def health(store, event):
    return respond(200, {"ok": True, "table": store.table_name})


@route("GET", "/contacts/all", failure="Could not retrieve all contacts")
def list_all(store, event):
    items = store.scan()
    if not items:
        return message("No contacts created yet")
    return respond(200, {"sortedContacts": results.sort_by_name(items)})


@route("GET", "/contacts/recent", failure="Could not retrieve latest contacts")
def list_recent(store, event):
    # created_at ordering needs the whole table; a Limit'ed scan has no order
    items = store.scan()
    if not items:
        return message("No contacts created yet")
    return respond(200, {"contacts": results.most_recent(items)})


@route("GET", "/contacts/gender/:gender", failure="Could not retrieve contacts")
def filter_by_gender(store, event, gender):
    items = store.scan(queries.gender_equals(gender))
    if not items:
        return message("No contacts with specified gender found!")
    return respond(200, {"contacts": items})


@route("GET", "/contacts/email/:email", failure="Could not retrieve contacts")
def filter_by_email(store, event, email):
    items = store.scan(queries.email_contains(email))
    if not items:
        return message("No contacts with specified email found!")
    return respond(200, {"contacts": items})


@route("GET", "/contacts/:name", failure="Could not retrieve contact")
def get_contact(store, event, name):
    item = store.get(name)
    if not item:
        raise NotFoundError()
    return respond(200, results.contact_view(item))


@route("POST", "/contacts", failure="Could not create contact")
def create_contact(store, event):
    contact = validate_new_contact(parse_body(event))
    contact["created_at"] = int(time.time())
    store.put(contact)
    logger.info("Contact created", extra={"contact": contact["name"]})
    return message("Contact created")


@route("PUT", "/contacts/:name", failure="Could not update contact")
def update_contact(store, event, name):
    if name in RESERVED_NAMES:
        raise ValidationError("Contact name is reserved")
    patch = validate_patch(parse_body(event))
    store.update(name, queries.build_update_expression(patch))
    return message("Contact updated")


@route("DELETE", "/contacts/:name", failure="Could not delete contact")
def delete_contact(store, event, name):
    store.delete(name)
    return message("Contact deleted")


@logger.inject_lambda_context
def handler(event, context):
    try:
        return dispatch(event, get_store())
    except Exception:
        logger.exception("Unhandled exception in handler")
        return error("Internal Server Error", 500)
