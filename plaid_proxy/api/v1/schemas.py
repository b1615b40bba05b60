"""Pydantic schemas for API responses"""

from pydantic import BaseModel


class LinkTokenResponse(BaseModel):
    """Response for POST /api/link-token and /api/link-token-update"""

    link_token: str


class ExchangeTokenResponse(BaseModel):
    """Response for POST /api/exchange-token"""

    access_token: str


class ValidationErrorResponse(BaseModel):
    """400 body when a required field is missing"""

    error: str


class ReauthRequiredResponse(BaseModel):
    """401 body from POST /api/transactions when the item needs re-authentication"""

    error: str
    message: str
    access_token: str


class ProblemDetail(BaseModel):
    """RFC 7807 problem details"""

    type: str = "about:blank"
    title: str
    status: int
    detail: str


class HealthResponse(BaseModel):
    status: str
    service: str
