"""Dependency injection for FastAPI endpoints"""

from fastapi import Request

from plaid_proxy.config import Settings
from plaid_proxy.infrastructure.clients.plaid import PlaidClient


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_settings(request: Request) -> Settings:
    """Provide the settings the app was created with"""
    return request.app.state.settings


def get_plaid_client(request: Request) -> PlaidClient:
    """Provide the shared Plaid API client"""
    return request.app.state.plaid_client
