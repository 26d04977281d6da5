"""
Entry store — plain persistence for entries. No business rules here.
"""

import math
from decimal import Decimal

from django.core.exceptions import ValidationError

from entryman.models.entry import Entry
from entryman.snapshots import BatchSnapshot


def exact_pk(value):
    """
    Value usable as an exact primary key, or None.

    Django truncates floats when preparing an integer lookup (1.9 -> 1),
    so bools and non-integral numbers are refused here.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            return None
        return int(value)
    if isinstance(value, Decimal):
        if not value.is_finite() or value != value.to_integral_value():
            return None
        return int(value)
    return value


def _lookup(entry_id):
    """Queryset for entry_id, or None when the id cannot be a primary key."""
    entry_id = exact_pk(entry_id)
    if entry_id is None:
        return None
    try:
        return Entry.objects.filter(pk=entry_id)
    except (TypeError, ValueError, ValidationError):
        return None


class EntryStore:
    """Identifier-keyed CRUD over Entry."""

    @classmethod
    def all(cls):
        return Entry.objects.all()

    @classmethod
    def create(cls, batch: BatchSnapshot, quantity: int) -> Entry:
        return Entry.objects.create(
            product_id=batch.product.id,
            product_name=batch.product.name,
            batch_number=batch.batch_number,
            quantity=quantity,
        )

    @classmethod
    def find_by_id(cls, entry_id) -> Entry | None:
        qs = _lookup(entry_id)
        return qs.first() if qs is not None else None

    @classmethod
    def update(cls, entry_id, **fields) -> Entry | None:
        """Patch the given fields and return the fresh record (None if gone)."""
        qs = _lookup(entry_id)
        if qs is None:
            return None
        if fields:
            qs.update(**fields)
        return qs.first()

    @classmethod
    def delete(cls, entry_id) -> int:
        """Delete one entry. Returns number of rows removed (0 or 1)."""
        qs = _lookup(entry_id)
        if qs is None:
            return 0
        deleted, _ = qs.delete()
        return deleted

    @classmethod
    def delete_all(cls) -> int:
        deleted, _ = Entry.objects.all().delete()
        return deleted
