"""Pytest configuration and fixtures."""

import json

import pytest

from cf_services import VCAP_SERVICES

SCENARIO_A = {
    "serviceA": [
        {
            "name": "service_a",
            "credentials": {
                "uri": "example_uri",
                "port": 8080,
            },
        }
    ]
}


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the real process environment out of every test."""
    monkeypatch.delenv(VCAP_SERVICES, raising=False)
    monkeypatch.delenv("CF_SERVICES_STRICT_TEXT", raising=False)


@pytest.fixture
def scenario_a_json() -> str:
    return json.dumps(SCENARIO_A)


@pytest.fixture
def full_binding_payload() -> dict:
    """A binding that sets every wire field, plus a few unknown ones."""
    return {
        "name": "orders-db",
        "instance_name": "orders-db-instance",
        "binding_name": "orders",
        "label": "p-mysql",
        "plan": "100mb",
        "tags": ["mysql", "relational"],
        "credentials": {
            "uri": "mysql://user:pw@db.internal:3306/orders",
            "jdbcUrl": "jdbc:mysql://db.internal:3306/orders",
            "http_api_uri": "https://api.internal/orders",
            "licenseKey": "lic-123",
            "client_secret": "s3cr3t",
            "client_id": "orders-app",
            "access_token_uri": "https://uaa.internal/oauth/token",
            "hostname": "db.internal",
            "username": "user",
            "password": "pw",
            "port": 3306,
            "name": "orders",
            "ca_certificate": "-----BEGIN CERTIFICATE-----",
        },
    }
