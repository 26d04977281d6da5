"""
Entryman Adapters.

Implementations of protocols for external systems.
"""

from entryman.adapters.catalog import (
    ModelProductLookup,
    get_product_lookup,
    reset_product_lookup,
)

__all__ = [
    "ModelProductLookup",
    "get_product_lookup",
    "reset_product_lookup",
]
