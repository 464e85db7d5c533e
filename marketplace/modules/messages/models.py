"""Domain models for buyer/seller messages."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

STATUS_NOT_REPLIED = "not replied"


@dataclass(slots=True)
class Message:
    id: str
    message: str
    product_id: str
    status: str = STATUS_NOT_REPLIED
    date_created: Optional[datetime] = None


@dataclass(slots=True)
class MessageCreateInput:
    message: str
    product_id: str
