"""Domain models for notifications."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True, frozen=True)
class LikeNotification:
    user_id: str
    user_name: str
    product_id: str
    product_name: str
    product_type: str
    recipient_id: Optional[str] = None
