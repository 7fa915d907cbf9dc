"""Tests for the domain models: defaults, wire names and immutability."""

import pytest
from pydantic import ValidationError

from cf_services import CREDENTIALS_WIRE_NAMES, Credentials, ServiceBinding
from cf_services.core.domain.models import credentials_wire_name

STRING_FIELDS = [
    "uri",
    "jdbc_url",
    "api_uri",
    "license_key",
    "client_secret",
    "client_id",
    "access_token_uri",
    "hostname",
    "username",
    "password",
    "name",
]


class TestWireNames:
    def test_renamed_fields(self):
        assert CREDENTIALS_WIRE_NAMES == {
            "jdbc_url": "jdbcUrl",
            "api_uri": "http_api_uri",
            "license_key": "licenseKey",
        }

    @pytest.mark.parametrize("field", ["uri", "hostname", "port", "client_id"])
    def test_unmapped_fields_keep_their_name(self, field: str):
        assert credentials_wire_name(field) == field

    def test_model_aliases_follow_the_table(self):
        for field, wire in CREDENTIALS_WIRE_NAMES.items():
            assert Credentials.model_fields[field].alias == wire


class TestCredentialsDefaults:
    def test_empty_object_takes_declared_defaults(self):
        creds = Credentials.model_validate({})

        for field in STRING_FIELDS:
            assert getattr(creds, field) == ""
        assert creds.port == 0

    def test_wire_names_populate_internal_attributes(self):
        creds = Credentials.model_validate(
            {"jdbcUrl": "jdbc:x", "http_api_uri": "https://api", "licenseKey": "k"}
        )

        assert creds.jdbc_url == "jdbc:x"
        assert creds.api_uri == "https://api"
        assert creds.license_key == "k"

    def test_unknown_fields_are_ignored(self):
        creds = Credentials.model_validate({"uri": "u", "tls": {"ca": "x"}})

        assert creds.uri == "u"
        assert not hasattr(creds, "tls")

    def test_constructible_by_attribute_name(self):
        creds = Credentials(jdbc_url="jdbc:x", port=5432)

        assert creds.jdbc_url == "jdbc:x"
        assert creds.port == 5432

    def test_value_semantics(self):
        a = Credentials(uri="u", port=1)
        b = a.model_copy()

        assert a == b
        assert a is not b
        assert hash(a) == hash(b)

    def test_frozen(self):
        creds = Credentials(uri="u")

        with pytest.raises(ValidationError):
            creds.uri = "other"


class TestServiceBinding:
    def test_credentials_are_required(self):
        with pytest.raises(ValidationError):
            ServiceBinding.model_validate({"name": "svc"})

    def test_optional_strings_default_to_empty(self):
        binding = ServiceBinding.model_validate({"credentials": {}})

        assert binding.name == ""
        assert binding.instance_name == ""
        assert binding.binding_name == ""
        assert binding.label == ""
        assert binding.credentials == Credentials()

    def test_full_payload(self, full_binding_payload: dict):
        binding = ServiceBinding.model_validate(full_binding_payload)

        assert binding.name == "orders-db"
        assert binding.instance_name == "orders-db-instance"
        assert binding.binding_name == "orders"
        assert binding.label == "p-mysql"
        assert binding.credentials.jdbc_url == "jdbc:mysql://db.internal:3306/orders"
        assert binding.credentials.api_uri == "https://api.internal/orders"
        assert binding.credentials.license_key == "lic-123"
        assert binding.credentials.port == 3306
