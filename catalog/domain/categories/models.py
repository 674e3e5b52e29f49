"""Domain models for categories."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class CategorySummary:
    id: str
    name: str
    slug: str
    type: str
    product_count: int
