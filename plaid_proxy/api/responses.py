"""Response builders shared by the /api routes"""

from http import HTTPStatus

from fastapi.responses import JSONResponse

from plaid_proxy.api.v1.schemas import ProblemDetail, ReauthRequiredResponse
from plaid_proxy.domain.results import TransportFailure, UpstreamFailure

PROBLEM_MEDIA_TYPE = "application/problem+json"
ITEM_LOGIN_REQUIRED = "ITEM_LOGIN_REQUIRED"
REAUTH_MESSAGE = "Your bank account requires re-authentication. Please log in again."


def _error_status(status_code: int) -> int:
    """Upstream status if it is a known 4xx/5xx code, otherwise 500"""
    try:
        status = HTTPStatus(status_code)
    except ValueError:
        return 500
    return status.value if 400 <= status.value < 600 else 500


def problem(status_code: int, detail: str) -> JSONResponse:
    """RFC 7807 problem details response"""
    status = _error_status(status_code)
    body = ProblemDetail(title=HTTPStatus(status).phrase, status=status, detail=detail)
    return JSONResponse(status_code=status, content=body.model_dump(), media_type=PROBLEM_MEDIA_TYPE)


def describe_failure(result: UpstreamFailure | TransportFailure) -> str:
    """Short message for handlers that do not pass the raw upstream body through"""
    if isinstance(result, UpstreamFailure):
        return f"Plaid returned status {result.status_code}"
    return result.message


def reauth_required(access_token: str) -> JSONResponse:
    """401 telling the frontend to open Link in update mode for this item"""
    body = ReauthRequiredResponse(
        error=ITEM_LOGIN_REQUIRED,
        message=REAUTH_MESSAGE,
        access_token=access_token,
    )
    return JSONResponse(status_code=401, content=body.model_dump())
