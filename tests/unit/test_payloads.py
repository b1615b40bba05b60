"""Unit tests for Plaid request body builders"""

from datetime import date

from plaid_proxy.config import Settings
from plaid_proxy.domain.payloads import (
    build_exchange_request,
    build_link_token_request,
    build_transactions_request,
    build_update_link_token_request,
)


def test_link_token_request_constants(settings: Settings):
    payload = build_link_token_request(settings)

    assert payload == {
        "client_id": settings.plaid_client_id,
        "secret": settings.plaid_secret,
        "client_name": "Plaid Demo App",
        "user": {"client_user_id": "user-123"},
        "products": ["transactions"],
        "country_codes": ["US"],
        "language": "en",
        "update": {"account_selection_enabled": True},
    }


def test_link_token_request_lists_are_fresh(settings: Settings):
    """Test mutating one payload does not leak into the next"""
    first = build_link_token_request(settings)
    first["products"].append("auth")

    assert build_link_token_request(settings)["products"] == ["transactions"]


def test_update_link_token_request_includes_user_and_token(settings: Settings):
    payload = build_update_link_token_request(settings, "access-sandbox-1")

    assert payload["user"] == {"client_user_id": "user-123"}
    assert payload["access_token"] == "access-sandbox-1"
    assert payload["client_name"] == "Plaid Demo App"
    assert "products" not in payload
    assert "update" not in payload


def test_client_name_and_user_follow_settings():
    settings = Settings(plaid_client_name="Budget App", plaid_client_user_id="user-9")

    payload = build_update_link_token_request(settings, "access-sandbox-1")

    assert payload["client_name"] == "Budget App"
    assert payload["user"] == {"client_user_id": "user-9"}


def test_exchange_request(settings: Settings):
    assert build_exchange_request(settings, "public-sandbox-1") == {
        "client_id": settings.plaid_client_id,
        "secret": settings.plaid_secret,
        "public_token": "public-sandbox-1",
    }


def test_transactions_request_window(settings: Settings):
    payload = build_transactions_request(settings, "access-sandbox-1", today=date(2024, 3, 15))

    assert payload["access_token"] == "access-sandbox-1"
    assert payload["start_date"] == "2024-02-14"
    assert payload["end_date"] == "2024-03-15"
