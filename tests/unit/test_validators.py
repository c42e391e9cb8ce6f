"""Tests for request field validators."""

import pytest

from structure_api.validators import validate_connection_params, validate_query_text, validate_relation_params


class TestValidateConnectionParams:
    """Test cases for validate_connection_params."""

    def test_all_present(self):
        assert validate_connection_params("acct1", "u", "p") is None

    @pytest.mark.parametrize(
        "account, username, password, reason",
        [
            (None, None, None, "invalid account"),
            ("", "u", "p", "invalid account"),
            (None, None, "p", "invalid account"),
            ("acct1", None, None, "invalid username"),
            ("acct1", "", "p", "invalid username"),
            ("acct1", "u", None, "invalid password"),
        ],
    )
    def test_first_missing_field_wins(self, account, username, password, reason):
        assert validate_connection_params(account, username, password) == reason


class TestValidateQueryText:
    def test_present(self):
        assert validate_query_text("SELECT 1;") is None

    @pytest.mark.parametrize("query", [None, ""])
    def test_missing(self, query):
        assert validate_query_text(query) == "A query must be provided"


class TestValidateRelationParams:
    def test_all_present(self):
        assert validate_relation_params("DB", "PUBLIC", "ORDERS") == []

    def test_reports_every_missing_identifier_in_order(self):
        errors = validate_relation_params(None, "", None)

        assert errors == [
            "A database must be provided",
            "A schema must be provided",
            "A relation must be provided",
        ]

    def test_skips_present_identifiers(self):
        errors = validate_relation_params("DB", None, "ORDERS")

        assert errors == ["A schema must be provided"]
