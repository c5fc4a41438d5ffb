"""
pytest configuration and fixtures.
"""

import json
import os
from dataclasses import dataclass

# Must be set before contacts.common.config is imported
os.environ.setdefault("CONTACTS_TABLE", "contacts-test")
os.environ["AWS_DEFAULT_REGION"] = "us-east-1"
os.environ["AWS_ACCESS_KEY_ID"] = "testing"
os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
os.environ["AWS_SECURITY_TOKEN"] = "testing"
os.environ["AWS_SESSION_TOKEN"] = "testing"
os.environ.pop("DYNAMODB_ENDPOINT_URL", None)

import boto3
import pytest
from botocore.exceptions import ClientError
from moto import mock_aws

from contacts.common.store import ContactStore
from contacts.lambda_api.app import dispatch


@dataclass
class LambdaContext:
    function_name: str = "contacts-api"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = "arn:aws:lambda:us-east-1:123456789012:function:contacts-api"
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"


class BrokenTable:
    """Stands in for a boto3 Table whose every call fails."""

    name = "contacts-test"

    def __getattr__(self, operation):
        def fail(*args, **kwargs):
            raise ClientError(
                {"Error": {"Code": "InternalServerError", "Message": "boom"}},
                operation,
            )
        return fail


def make_event(method, path, body=None, raw_body=None):
    """Build an API Gateway HTTP API (payload v2.0) event."""
    event = {
        "version": "2.0",
        "rawPath": path,
        "requestContext": {"http": {"method": method, "path": path}},
        "isBase64Encoded": False,
    }
    if raw_body is not None:
        event["body"] = raw_body
    elif body is not None:
        event["body"] = json.dumps(body)
    return event


@pytest.fixture
def table():
    """A fresh, empty contacts table in moto."""
    with mock_aws():
        ddb = boto3.resource("dynamodb", region_name="us-east-1")
        t = ddb.create_table(
            TableName="contacts-test",
            KeySchema=[{"AttributeName": "name", "KeyType": "HASH"}],
            AttributeDefinitions=[{"AttributeName": "name", "AttributeType": "S"}],
            BillingMode="PAY_PER_REQUEST",
        )
        yield t


@pytest.fixture
def store(table) -> ContactStore:
    return ContactStore(table)


@pytest.fixture
def broken_store() -> ContactStore:
    return ContactStore(BrokenTable())


class ApiClient:
    """Calls the router directly and decodes the JSON response."""

    def __init__(self, store):
        self.store = store

    def request(self, method, path, body=None, raw_body=None):
        resp = dispatch(make_event(method, path, body=body, raw_body=raw_body), self.store)
        return resp["statusCode"], json.loads(resp["body"])

    def get(self, path):
        return self.request("GET", path)

    def post(self, path, body=None, **kwargs):
        return self.request("POST", path, body=body, **kwargs)

    def put(self, path, body=None, **kwargs):
        return self.request("PUT", path, body=body, **kwargs)

    def delete(self, path):
        return self.request("DELETE", path)


@pytest.fixture
def api(store) -> ApiClient:
    return ApiClient(store)


@pytest.fixture
def broken_api(broken_store) -> ApiClient:
    return ApiClient(broken_store)


@pytest.fixture
def lambda_context() -> LambdaContext:
    return LambdaContext()


@pytest.fixture
def alice() -> dict:
    return {
        "name": "Alice",
        "gender": "female",
        "phone_num": "555-0100",
        "email": "alice@example.com",
        "address": "1 Main St",
    }
