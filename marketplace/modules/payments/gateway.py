"""Port implemented by mobile-money provider adapters."""

from __future__ import annotations

from typing import Protocol

from .models import ProviderResponse


class PaymentGateway(Protocol):
    async def cash_in(self, number: str, amount: int, environment: str) -> ProviderResponse:
        ...

    async def cash_out(self, number: str, amount: int, environment: str) -> ProviderResponse:
        ...

    async def list_transactions(self, offset: int, limit: int) -> ProviderResponse:
        ...

    async def list_events(self, offset: int, limit: int) -> ProviderResponse:
        ...

    async def account_info(self) -> ProviderResponse:
        ...
