"""Inbound body reading and required-field validation"""

import json
from typing import Any, Dict

from fastapi import Request

from plaid_proxy.domain.exceptions import MissingFieldError


async def read_json_body(request: Request) -> Dict[str, Any]:
    """
    Read the request body as a JSON object.

    Empty, malformed or non-object bodies come back as an empty dict so that
    required-field validation reports them as a 400 instead of crashing.
    """
    raw = await request.body()
    if not raw:
        return {}
    try:
        data = json.loads(raw)
    except (ValueError, RecursionError):
        return {}
    return data if isinstance(data, dict) else {}


def require_field(body: Dict[str, Any], field: str) -> str:
    """Return body[field] if it is a non-empty string, else raise MissingFieldError"""
    value = body.get(field)
    if not isinstance(value, str) or not value:
        raise MissingFieldError(field)
    return value
