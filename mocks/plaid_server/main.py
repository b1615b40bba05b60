from datetime import date, timedelta
from typing import Any, Dict
import uuid

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

app = FastAPI(title="Mock Plaid Server", version="1.0.0")

LOGIN_REQUIRED_TOKEN = "access-sandbox-login-required"
PUBLIC_TOKEN_PREFIX = "public-sandbox-"


def plaid_error(status: int, error_type: str, error_code: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status,
        content={
            "error_type": error_type,
            "error_code": error_code,
            "error_message": message,
            "display_message": None,
            "request_id": uuid.uuid4().hex[:15],
        },
    )


def check_keys(body: Dict[str, Any]) -> JSONResponse | None:
    if not body.get("client_id") or not body.get("secret"):
        return plaid_error(400, "INVALID_INPUT", "INVALID_API_KEYS", "invalid client_id or secret provided")
    return None


@app.get("/health")
def health(): return {"status": "ok"}


@app.post("/link/token/create")
async def link_token_create(request: Request):
    body = await request.json()
    err = check_keys(body)
    if err is not None:
        return err
    if "user" not in body:
        return plaid_error(400, "INVALID_REQUEST", "MISSING_FIELDS", "the following required fields are missing: user")
    mode = "update" if body.get("access_token") else "new"
    return {
        "link_token": f"link-sandbox-{mode}-{uuid.uuid4()}",
        "expiration": "2099-01-01T00:00:00Z",
        "request_id": uuid.uuid4().hex[:15],
    }


@app.post("/item/public_token/exchange")
async def public_token_exchange(request: Request):
    body = await request.json()
    err = check_keys(body)
    if err is not None:
        return err
    public_token = body.get("public_token", "")
    if not public_token.startswith(PUBLIC_TOKEN_PREFIX):
        return plaid_error(400, "INVALID_INPUT", "INVALID_PUBLIC_TOKEN", "provided public token is in an invalid format")
    return {
        "access_token": f"access-sandbox-{uuid.uuid4()}",
        "item_id": uuid.uuid4().hex,
        "request_id": uuid.uuid4().hex[:15],
    }


@app.post("/transactions/get")
async def transactions_get(request: Request):
    body = await request.json()
    err = check_keys(body)
    if err is not None:
        return err
    if body.get("access_token") == LOGIN_REQUIRED_TOKEN:
        return plaid_error(
            400,
            "ITEM_ERROR",
            "ITEM_LOGIN_REQUIRED",
            "the login details of this item have changed (credentials, MFA, or required user action) and a user login is required to update this information",
        )
    start = date.fromisoformat(body["start_date"])
    transactions = [
        {
            "transaction_id": f"txn_{i}",
            "account_id": "acc_checking",
            "amount": round(12.5 * (i + 1), 2),
            "date": (start + timedelta(days=i * 3)).isoformat(),
            "name": f"Merchant {i}",
            "pending": False,
        }
        for i in range(10)
    ]
    return {
        "accounts": [{"account_id": "acc_checking", "name": "Plaid Checking", "type": "depository"}],
        "transactions": transactions,
        "total_transactions": len(transactions),
        "request_id": uuid.uuid4().hex[:15],
    }
