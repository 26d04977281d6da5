"""
Entryman configuration.

Usage in settings.py:
    ENTRYMAN = {
        "PRODUCT_LOOKUP": "entryman.adapters.catalog.ModelProductLookup",
        "PRODUCT_MODEL": "catalog.Product",
        "ALLOW_BULK_DELETE": DEBUG,
        "EXPIRY_DATE_FORMATS": ["%m-%d-%Y", "%Y-%m-%d"],
    }
"""

from dataclasses import dataclass, field
from typing import Any

from django.conf import settings


@dataclass
class EntrymanSettings:
    """Entryman configuration settings."""

    # Product lookup backend (dotted path)
    PRODUCT_LOOKUP: str = "entryman.adapters.catalog.ModelProductLookup"

    # Product model used by ModelProductLookup ("app_label.ModelName")
    PRODUCT_MODEL: str = ""

    # Allow delete_all_entries() (keep False in production)
    ALLOW_BULK_DELETE: bool = False

    # Accepted expiry date formats (strptime), tried in order
    EXPIRY_DATE_FORMATS: list[str] = field(
        default_factory=lambda: ["%m-%d-%Y", "%Y-%m-%d"]
    )


def get_entryman_settings() -> EntrymanSettings:
    """Load settings from Django settings."""
    user_settings: dict[str, Any] = getattr(settings, "ENTRYMAN", {})
    return EntrymanSettings(**{
        k: v for k, v in user_settings.items()
        if k in EntrymanSettings.__dataclass_fields__
    })


class _LazySettings:
    """Lazy proxy that re-reads settings on every attribute access."""

    def __getattr__(self, name):
        return getattr(get_entryman_settings(), name)


entryman_settings = _LazySettings()
