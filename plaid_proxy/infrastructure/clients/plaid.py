"""Plaid API HTTP client that injects credentials and returns explicit results"""

from typing import Any, Dict, Optional

import httpx

from plaid_proxy.config import Settings
from plaid_proxy.domain.results import TransportFailure, UpstreamFailure, UpstreamResult, UpstreamSuccess
from plaid_proxy.infrastructure.observability.metrics import upstream_latency_histogram

LINK_TOKEN_CREATE = "/link/token/create"
PUBLIC_TOKEN_EXCHANGE = "/item/public_token/exchange"
TRANSACTIONS_GET = "/transactions/get"

REDACTED = "[REDACTED]"


class PlaidClient:
    """Client for the Plaid aggregation API.

    One pooled ``httpx.AsyncClient`` is shared by every request the app serves;
    call :meth:`aclose` on shutdown.
    """

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings
        self.timeout = settings.http_timeout_seconds
        self._http = httpx.AsyncClient(
            base_url=settings.plaid_base_url,
            timeout=self.timeout,
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._http.aclose()

    async def post(self, path: str, payload: Dict[str, Any]) -> UpstreamResult:
        """
        POST a JSON body to a Plaid endpoint.

        Never raises for HTTP or network problems; the caller branches on the
        returned variant instead.

        Returns:
            UpstreamSuccess: 2xx status with a JSON object body
            UpstreamFailure: non-2xx status, raw body with credentials redacted
            TransportFailure: timeout, connection error or unparseable success body
        """
        try:
            with upstream_latency_histogram.labels(endpoint=path).time():
                response = await self._http.post(path, json=payload)
        except httpx.TimeoutException:
            return TransportFailure(f"Plaid API timeout after {self.timeout}s")
        except httpx.HTTPError as e:
            return TransportFailure(self.redact(f"{type(e).__name__}: {e}"))

        if not response.is_success:
            return UpstreamFailure(status_code=response.status_code, body=self.redact(response.text))

        try:
            data = response.json()
        except (ValueError, RecursionError) as e:
            return TransportFailure(f"Invalid JSON from Plaid: {e}")
        if not isinstance(data, dict):
            return TransportFailure("Invalid JSON from Plaid: expected an object")

        return UpstreamSuccess(status_code=response.status_code, payload=data)

    async def create_link_token(self, payload: Dict[str, Any]) -> UpstreamResult:
        return await self.post(LINK_TOKEN_CREATE, payload)

    async def exchange_public_token(self, payload: Dict[str, Any]) -> UpstreamResult:
        return await self.post(PUBLIC_TOKEN_EXCHANGE, payload)

    async def get_transactions(self, payload: Dict[str, Any]) -> UpstreamResult:
        return await self.post(TRANSACTIONS_GET, payload)

    def redact(self, text: str) -> str:
        """Strip configured credential values from text bound for a caller"""
        for secret in (self.settings.plaid_secret, self.settings.plaid_client_id):
            if secret:
                text = text.replace(secret, REDACTED)
        return text
