"""POST /api/link-token and /api/link-token-update - Plaid Link token creation"""

from fastapi import APIRouter, Depends, Request

from plaid_proxy.api.dependencies import get_plaid_client, get_request_id, get_settings
from plaid_proxy.api.requests import read_json_body, require_field
from plaid_proxy.api.responses import describe_failure, problem
from plaid_proxy.api.v1.schemas import LinkTokenResponse, ProblemDetail, ValidationErrorResponse
from plaid_proxy.config import Settings
from plaid_proxy.domain.payloads import build_link_token_request, build_update_link_token_request
from plaid_proxy.domain.results import UpstreamFailure, UpstreamSuccess
from plaid_proxy.infrastructure.clients.plaid import LINK_TOKEN_CREATE, PlaidClient
from plaid_proxy.infrastructure.observability.logging import log_upstream_result
from plaid_proxy.infrastructure.observability.metrics import record_upstream_result

router = APIRouter()

MISSING_LINK_TOKEN = "link_token missing from Plaid response"


@router.post(
    "/link-token",
    response_model=LinkTokenResponse,
    responses={500: {"model": ProblemDetail}},
)
async def create_link_token(
    request: Request,
    settings: Settings = Depends(get_settings),
    plaid: PlaidClient = Depends(get_plaid_client),
):
    """Create a link token for linking a new account. Takes no input."""
    result = await plaid.create_link_token(build_link_token_request(settings))
    record_upstream_result(LINK_TOKEN_CREATE, result)
    log_upstream_result(get_request_id(request), LINK_TOKEN_CREATE, result)

    if isinstance(result, UpstreamSuccess):
        link_token = result.payload.get("link_token")
        if isinstance(link_token, str):
            return LinkTokenResponse(link_token=link_token)
        message = MISSING_LINK_TOKEN
    else:
        message = describe_failure(result)

    return problem(500, f"Error creating link token: {message}")


@router.post(
    "/link-token-update",
    response_model=LinkTokenResponse,
    responses={400: {"model": ValidationErrorResponse}, 500: {"model": ProblemDetail}},
)
async def create_update_link_token(
    request: Request,
    settings: Settings = Depends(get_settings),
    plaid: PlaidClient = Depends(get_plaid_client),
):
    """
    Create a link token in update mode for an existing item.

    Link opens straight to the credential screen instead of bank selection.
    Upstream errors pass through with Plaid's status and raw body so the
    caller can see why Plaid refused.
    """
    body = await read_json_body(request)
    access_token = require_field(body, "access_token")

    result = await plaid.create_link_token(build_update_link_token_request(settings, access_token))
    record_upstream_result(LINK_TOKEN_CREATE, result)
    log_upstream_result(get_request_id(request), LINK_TOKEN_CREATE, result)

    if isinstance(result, UpstreamFailure):
        return problem(result.status_code, f"Plaid API error: {result.body}")

    if isinstance(result, UpstreamSuccess):
        link_token = result.payload.get("link_token")
        if isinstance(link_token, str):
            return LinkTokenResponse(link_token=link_token)
        message = MISSING_LINK_TOKEN
    else:
        message = result.message

    return problem(500, f"Error creating update link token: {message}")
