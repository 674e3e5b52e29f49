"""Domain models for accounts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True)
class AccountProfile:
    id: str
    first_name: str
    last_name: str
    email: Optional[str] = None
    role: str = "user"

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
