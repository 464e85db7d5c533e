"""HTTP adapter for the Paypack mobile-money API.

Every public operation is a single provider interaction: obtain an agent
access token with the configured client credentials, then issue the request.
There is no retry policy; cash-in and cash-out are not idempotent, so
retrying is left to callers and only for :class:`GatewayUnavailableError`.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from marketplace.core.config import PaypackSettings
from marketplace.modules.payments.exceptions import GatewayRejectedError, GatewayUnavailableError
from marketplace.modules.payments.models import ProviderResponse

logger = logging.getLogger(__name__)

ENVIRONMENT_HEADER = "X-Webhook-Mode"
REJECTED_MESSAGE = "Payment request was declined by the provider"


class PaypackClient:
    def __init__(
        self,
        config: PaypackSettings,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._config = config
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def _http(self) -> httpx.AsyncClient:
        # Opened on first use so the adapter survives a close between app lifespans.
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._config.base_url,
                timeout=self._config.timeout_seconds,
                transport=self._transport,
                headers={"Accept": "application/json", "Content-Type": "application/json"},
            )
        return self._client

    # ------------------------------------------------------------------
    # Provider operations
    # ------------------------------------------------------------------
    async def cash_in(self, number: str, amount: int, environment: str) -> ProviderResponse:
        data = await self._call(
            "POST",
            "/transactions/cashin",
            json={"amount": amount, "number": number},
            headers={ENVIRONMENT_HEADER: environment},
        )
        return ProviderResponse(data=data)

    async def cash_out(self, number: str, amount: int, environment: str) -> ProviderResponse:
        data = await self._call(
            "POST",
            "/transactions/cashout",
            json={"amount": amount, "number": number},
            headers={ENVIRONMENT_HEADER: environment},
        )
        return ProviderResponse(data=data)

    async def list_transactions(self, offset: int, limit: int) -> ProviderResponse:
        data = await self._call("GET", "/transactions/list", params={"offset": offset, "limit": limit})
        return ProviderResponse(data=data)

    async def list_events(self, offset: int, limit: int) -> ProviderResponse:
        data = await self._call("GET", "/events/transactions", params={"offset": offset, "limit": limit})
        return ProviderResponse(data=data)

    async def account_info(self) -> ProviderResponse:
        data = await self._call("GET", "/merchants/me")
        return ProviderResponse(data=data)

    # ------------------------------------------------------------------
    # Low-level request handling
    # ------------------------------------------------------------------
    async def _call(
        self,
        method: str,
        path: str,
        *,
        json: Optional[dict[str, Any]] = None,
        params: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> Any:
        access_token = await self._authorize()
        request_headers = {"Authorization": f"Bearer {access_token}"}
        if headers:
            request_headers.update(headers)
        response = await self._send(method, path, json=json, params=params, headers=request_headers)
        if response.status_code >= 400:
            self._raise_for_status(response, path)
        return self._decode(response, path)

    async def _authorize(self) -> str:
        response = await self._send(
            "POST",
            "/auth/agents/authorize",
            json={"client_id": self._config.client_id, "client_secret": self._config.client_secret},
        )
        if response.status_code >= 400:
            # Bad client credentials are a deployment fault, never the caller's.
            logger.error("Paypack authorisation failed with HTTP %s", response.status_code)
            raise GatewayUnavailableError("Payment provider authorisation failed")
        payload = self._decode(response, "/auth/agents/authorize")
        token = payload.get("access") if isinstance(payload, dict) else None
        if not token:
            logger.error("Paypack authorisation response carried no access token")
            raise GatewayUnavailableError("Payment provider authorisation failed")
        return token

    async def _send(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            return await self._http().request(method, path, **kwargs)
        except httpx.TimeoutException as exc:
            logger.error("Paypack %s %s timed out after %ss", method, path, self._config.timeout_seconds)
            raise GatewayUnavailableError("Payment provider timed out") from exc
        except httpx.TransportError as exc:
            logger.error("Paypack %s %s transport error: %s", method, path, exc)
            raise GatewayUnavailableError("Payment provider is unreachable") from exc

    @staticmethod
    def _raise_for_status(response: httpx.Response, path: str) -> None:
        status_code = response.status_code
        if status_code >= 500 or status_code == httpx.codes.TOO_MANY_REQUESTS:
            logger.error("Paypack %s failed with HTTP %s", path, status_code)
            raise GatewayUnavailableError(f"Payment provider unavailable (HTTP {status_code})")

        provider_message = response.text
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            provider_message = str(body.get("message") or body.get("error") or provider_message)
        logger.warning("Paypack %s rejected with HTTP %s: %s", path, status_code, provider_message)
        raise GatewayRejectedError(REJECTED_MESSAGE)

    @staticmethod
    def _decode(response: httpx.Response, path: str) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            logger.error("Paypack %s returned a non-JSON body", path)
            raise GatewayUnavailableError("Payment provider returned an invalid response") from exc
