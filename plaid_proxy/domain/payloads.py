"""Request bodies sent to the Plaid API.

Every builder injects the server-held credentials. Nothing here performs I/O.
"""

from datetime import date
from typing import Any, Dict, Optional

from plaid_proxy.config import Settings
from plaid_proxy.utils.date_utils import transactions_window

PRODUCTS = ["transactions"]
COUNTRY_CODES = ["US"]
LANGUAGE = "en"


def _credentials(settings: Settings) -> Dict[str, Any]:
    return {"client_id": settings.plaid_client_id, "secret": settings.plaid_secret}


def build_link_token_request(settings: Settings) -> Dict[str, Any]:
    """Body for /link/token/create when linking a new account"""
    return {
        **_credentials(settings),
        "client_name": settings.plaid_client_name,
        "user": {"client_user_id": settings.plaid_client_user_id},
        "products": list(PRODUCTS),
        "country_codes": list(COUNTRY_CODES),
        "language": LANGUAGE,
        "update": {"account_selection_enabled": True},
    }


def build_update_link_token_request(settings: Settings, access_token: str) -> Dict[str, Any]:
    """
    Body for /link/token/create in update mode (re-authentication).

    Plaid rejects update-mode requests without a `user` object even though
    the item is already linked, so it is always sent.
    """
    return {
        **_credentials(settings),
        "client_name": settings.plaid_client_name,
        "user": {"client_user_id": settings.plaid_client_user_id},
        "access_token": access_token,
    }


def build_exchange_request(settings: Settings, public_token: str) -> Dict[str, Any]:
    """Body for /item/public_token/exchange"""
    return {**_credentials(settings), "public_token": public_token}


def build_transactions_request(
    settings: Settings,
    access_token: str,
    today: Optional[date] = None,
) -> Dict[str, Any]:
    """Body for /transactions/get covering the configured rolling window"""
    start_date, end_date = transactions_window(today, days=settings.transactions_window_days)
    return {
        **_credentials(settings),
        "access_token": access_token,
        "start_date": start_date,
        "end_date": end_date,
    }
