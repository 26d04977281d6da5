"""
Product Lookup Protocol — Interface for catalog access.

Entryman defines this protocol; the catalog app (or any other system) implements it.
Only id and name are needed: both are copied into batch and entry snapshots.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class ProductInfo:
    """Minimal product descriptor."""

    id: str
    name: str


@runtime_checkable
class ProductLookup(Protocol):
    """Protocol for resolving product ids."""

    def find_by_id(self, product_id) -> ProductInfo | None:
        """
        Resolve a product id.

        Args:
            product_id: Product identifier (any type the catalog accepts)

        Returns:
            ProductInfo or None if not found
        """
        ...
