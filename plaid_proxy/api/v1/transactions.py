"""POST /api/transactions - last 30 days of transactions for a linked item"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from plaid_proxy.api.dependencies import get_plaid_client, get_request_id, get_settings
from plaid_proxy.api.requests import read_json_body, require_field
from plaid_proxy.api.responses import ITEM_LOGIN_REQUIRED, problem, reauth_required
from plaid_proxy.api.v1.schemas import ProblemDetail, ReauthRequiredResponse, ValidationErrorResponse
from plaid_proxy.config import Settings
from plaid_proxy.domain.payloads import build_transactions_request
from plaid_proxy.domain.results import UpstreamFailure, UpstreamSuccess
from plaid_proxy.infrastructure.clients.plaid import TRANSACTIONS_GET, PlaidClient
from plaid_proxy.infrastructure.observability.logging import log_upstream_result
from plaid_proxy.infrastructure.observability.metrics import item_login_required_counter, record_upstream_result

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post(
    "/transactions",
    responses={
        400: {"model": ValidationErrorResponse},
        401: {"model": ReauthRequiredResponse},
        500: {"model": ProblemDetail},
    },
)
async def get_transactions(
    request: Request,
    settings: Settings = Depends(get_settings),
    plaid: PlaidClient = Depends(get_plaid_client),
):
    """
    Fetch transactions for the rolling window ending today.

    Flow:
    1. Validate access_token
    2. Call /transactions/get with injected credentials
    3. Success: return Plaid's payload unchanged
    4. ITEM_LOGIN_REQUIRED: 401 with the access token echoed back so the
       frontend can start update-mode Link
    5. Any other Plaid error: Plaid's status with its raw body
    6. Error body that is not a JSON object: 500
    """
    request_id = get_request_id(request)
    body = await read_json_body(request)
    access_token = require_field(body, "access_token")

    result = await plaid.get_transactions(build_transactions_request(settings, access_token))
    record_upstream_result(TRANSACTIONS_GET, result)
    log_upstream_result(request_id, TRANSACTIONS_GET, result)

    if isinstance(result, UpstreamSuccess):
        return JSONResponse(content=result.payload)

    if isinstance(result, UpstreamFailure):
        try:
            error_code = result.error_code()
        except ValueError as e:
            return problem(500, f"Error fetching transactions: Invalid JSON from Plaid: {e}")
        if error_code == ITEM_LOGIN_REQUIRED:
            item_login_required_counter.inc()
            logger.info("Item requires re-authentication", extra={"request_id": request_id})
            return reauth_required(access_token)
        return problem(result.status_code, result.body)

    return problem(500, f"Error fetching transactions: {result.message}")
