"""Data Transfer Objects: plain containers that cross layer boundaries.

Update DTOs carry only the fields the caller wants to change; a field
left as ``None`` keeps its persisted value.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductUpdate:
    """Input: fields to change on an existing product."""

    name: str | None = None
    price: str | None = None  # e.g. "15.00"
    type: str | None = None


@dataclass(frozen=True)
class StoreUpdate:
    """Input: fields to change on an existing store."""

    name: str | None = None
    city: str | None = None
    address: str | None = None
