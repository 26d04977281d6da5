"""
Entryman Catalog Adapter — product lookup backed by a Django model.

Usage:
    from entryman.adapters import get_product_lookup

    lookup = get_product_lookup()
    info = lookup.find_by_id(42)   # ProductInfo(id='42', name='Dipirona') or None

Settings:
    ENTRYMAN = {
        "PRODUCT_LOOKUP": "entryman.adapters.catalog.ModelProductLookup",
        "PRODUCT_MODEL": "catalog.Product",
    }

If the lookup class cannot be imported, or ModelProductLookup has no
PRODUCT_MODEL, get_product_lookup() raises ImproperlyConfigured.
"""

from __future__ import annotations

import logging
import threading

from django.apps import apps
from django.core.exceptions import ImproperlyConfigured, ValidationError
from django.utils.module_loading import import_string

from entryman.conf import entryman_settings
from entryman.protocols.catalog import ProductInfo, ProductLookup
from entryman.services.store import exact_pk

logger = logging.getLogger(__name__)


class ModelProductLookup:
    """
    Resolve products from a local Django model.

    The model must expose ``pk`` and ``name``.
    """

    def __init__(self, model_label: str | None = None):
        label = model_label or entryman_settings.PRODUCT_MODEL
        if not label:
            raise ImproperlyConfigured(
                "ENTRYMAN['PRODUCT_MODEL'] must be configured. Example: 'catalog.Product'"
            )
        try:
            self.model = apps.get_model(label)
        except (LookupError, ValueError) as e:
            raise ImproperlyConfigured(
                f"ENTRYMAN['PRODUCT_MODEL'] refers to unknown model '{label}'"
            ) from e

    def find_by_id(self, product_id) -> ProductInfo | None:
        product_id = exact_pk(product_id)
        if product_id is None:
            return None
        try:
            product = self.model._default_manager.filter(pk=product_id).first()
        except (TypeError, ValueError, ValidationError):
            # Malformed id for this pk type: cannot exist
            return None
        if product is None:
            return None
        return ProductInfo(id=str(product.pk), name=product.name)


# Cached lookup instance
_lock = threading.Lock()
_product_lookup: ProductLookup | None = None


def get_product_lookup() -> ProductLookup:
    """
    Return the configured product lookup.

    Raises:
        ImproperlyConfigured: If PRODUCT_LOOKUP cannot be imported or built
    """
    global _product_lookup

    if _product_lookup is None:
        with _lock:
            if _product_lookup is None:  # double-checked
                lookup_path = entryman_settings.PRODUCT_LOOKUP
                try:
                    lookup_class = import_string(lookup_path)
                except ImportError as e:
                    raise ImproperlyConfigured(
                        f"Failed to import product lookup '{lookup_path}': {e}"
                    ) from e
                _product_lookup = lookup_class()
                logger.debug("Loaded product lookup: %s", lookup_path)

    return _product_lookup


def reset_product_lookup() -> None:
    """Reset the cached lookup. Useful for testing."""
    global _product_lookup
    _product_lookup = None
