"""POST /api/exchange-token - swap a Link public token for an access token"""

from fastapi import APIRouter, Depends, Request

from plaid_proxy.api.dependencies import get_plaid_client, get_request_id, get_settings
from plaid_proxy.api.requests import read_json_body, require_field
from plaid_proxy.api.responses import describe_failure, problem
from plaid_proxy.api.v1.schemas import ExchangeTokenResponse, ProblemDetail, ValidationErrorResponse
from plaid_proxy.config import Settings
from plaid_proxy.domain.payloads import build_exchange_request
from plaid_proxy.domain.results import UpstreamSuccess
from plaid_proxy.infrastructure.clients.plaid import PUBLIC_TOKEN_EXCHANGE, PlaidClient
from plaid_proxy.infrastructure.observability.logging import log_upstream_result
from plaid_proxy.infrastructure.observability.metrics import record_upstream_result

router = APIRouter()


@router.post(
    "/exchange-token",
    response_model=ExchangeTokenResponse,
    responses={400: {"model": ValidationErrorResponse}, 500: {"model": ProblemDetail}},
)
async def exchange_public_token(
    request: Request,
    settings: Settings = Depends(get_settings),
    plaid: PlaidClient = Depends(get_plaid_client),
):
    body = await read_json_body(request)
    public_token = require_field(body, "public_token")

    result = await plaid.exchange_public_token(build_exchange_request(settings, public_token))
    record_upstream_result(PUBLIC_TOKEN_EXCHANGE, result)
    log_upstream_result(get_request_id(request), PUBLIC_TOKEN_EXCHANGE, result)

    if isinstance(result, UpstreamSuccess):
        access_token = result.payload.get("access_token")
        if isinstance(access_token, str):
            return ExchangeTokenResponse(access_token=access_token)
        message = "access_token missing from Plaid response"
    else:
        message = describe_failure(result)

    return problem(500, f"Error exchanging token: {message}")
