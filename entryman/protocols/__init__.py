"""
Entryman Protocols.

Defines interfaces for external system integration.
"""

from entryman.protocols.catalog import ProductInfo, ProductLookup

__all__ = [
    "ProductInfo",
    "ProductLookup",
]
