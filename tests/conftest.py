import os
import sys
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from storefront.app.config import TestConfig
from storefront.app.extensions import client as storefront_client
from storefront.app.factory import create_app
from storefront.client.client import operation_name


class FakeStorefrontAPI:
    """Stands in for the GraphQL API; answers are keyed by operation name."""

    def __init__(self):
        self.responses = {}
        self.calls = []

    def respond(self, operation, payload):
        self.responses[operation] = payload

    def fetch(self, document, variables=None, customer_id=None):
        name = operation_name(document)
        self.calls.append({"operation": name, "variables": variables, "customer_id": customer_id})
        payload = self.responses[name]
        if isinstance(payload, Exception):
            raise payload
        return payload

    def last_call(self, operation):
        return [c for c in self.calls if c["operation"] == operation][-1]


CUSTOMER_SETTINGS_RESPONSE = {
    "data": {
        "customer": {
            "entityId": 42,
            "email": "jane@example.com",
            "firstName": "Jane",
            "lastName": "Doe",
            "company": None,
            "phone": "555-0100",
        },
        "site": {
            "settings": {
                "formFields": {
                    "shippingAddress": [
                        {"entityId": 4, "label": "First Name", "isRequired": True, "__typename": "TextFormField"},
                        {"entityId": 5, "label": "Last Name", "isRequired": True, "__typename": "TextFormField"},
                        {"entityId": 6, "label": "Company", "isRequired": False, "__typename": "TextFormField"},
                        {"entityId": 7, "label": "Phone", "isRequired": False, "__typename": "TextFormField"},
                    ],
                },
                "reCaptcha": {"isEnabledOnStorefront": False, "siteKey": None},
            }
        },
    }
}


@pytest.fixture()
def app():
    return create_app(TestConfig)


@pytest.fixture()
def fake_api(monkeypatch):
    fake = FakeStorefrontAPI()
    monkeypatch.setattr(storefront_client, "fetch", fake.fetch)
    return fake


@pytest.fixture()
def client(app, fake_api):
    with app.test_client() as client:
        yield client


@pytest.fixture()
def logged_in_client(client):
    with client.session_transaction() as sess:
        sess["customer_id"] = 42
    return client


def flashes(client):
    with client.session_transaction() as sess:
        return list(sess.get("_flashes", []))
