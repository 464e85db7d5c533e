"""Simple dependency container for wiring process-wide services."""

from __future__ import annotations

from dataclasses import dataclass, field

from fastapi import Request

from marketplace.core.config import Settings
from marketplace.infrastructure.database.session import get_engine
from marketplace.infrastructure.paypack import PaypackClient
from marketplace.modules.payments import KeyedLock


@dataclass(slots=True)
class ApplicationContainer:
    settings: Settings
    payment_gateway: PaypackClient
    purchase_locks: KeyedLock = field(default_factory=KeyedLock)

    @classmethod
    def from_settings(cls, settings: Settings) -> "ApplicationContainer":
        return cls(settings=settings, payment_gateway=PaypackClient(settings.paypack))

    def init_infrastructure(self) -> None:
        """Ensure infrastructure singletons (database engine, etc.) are initialised."""
        get_engine()

    async def shutdown(self) -> None:
        await self.payment_gateway.aclose()


def get_container(request: Request) -> ApplicationContainer:
    """Return the container owned by the application serving ``request``."""
    return request.app.state.container


__all__ = ["ApplicationContainer", "get_container"]
