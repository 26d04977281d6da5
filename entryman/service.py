"""
Entry Service — The single public interface for stock entries.

Usage:
    from entryman import entries, EntryError

    result = entries.create_entry(product.pk, 'B1', 10, '12-31-2025')  # BatchAndEntry
    result = entries.create_entry(product.pk, 'B1', 5)                 # EntryOnly
    Batch.objects.get(batch_number='B1').stock                          # 15
"""

import logging
from datetime import date, datetime
from decimal import Decimal, InvalidOperation

from django.db import transaction

from entryman.adapters.catalog import get_product_lookup
from entryman.conf import entryman_settings
from entryman.exceptions import EntryError
from entryman.models.entry import Entry
from entryman.results import BatchAndEntry, CreateEntryResult, EntryOnly
from entryman.services.batches import BatchRegistry
from entryman.services.store import EntryStore
from entryman.snapshots import BatchSnapshot, ProductSnapshot

logger = logging.getLogger('entryman')

# Largest value a PositiveIntegerField holds on every supported database
MAX_QUANTITY = 2147483647


def _is_missing(value) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def _parse_quantity(value) -> int | None:
    """Integer-valued, > 0 and <= MAX_QUANTITY, else None. Accepts '10', 10.0, Decimal('10')."""
    if isinstance(value, bool):
        return None
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    if not number.is_finite() or number <= 0 or number > MAX_QUANTITY:
        return None
    # Bounded above, so to_integral_value() cannot expand a huge exponent
    if number != number.to_integral_value():
        return None
    return int(number)


def _parse_expiry_date(value) -> date | None:
    """date/datetime as-is, strings tried against EXPIRY_DATE_FORMATS."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    for fmt in entryman_settings.EXPIRY_DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


class Entries:
    """
    Single interface for entry operations.

    Parameter convention: (product_id, batch_number, quantity, expiry_date)
    Follows the receiving form: "product, lot, how many, valid until".

    All validation happens before any write. Database errors propagate
    unchanged; only domain failures are raised as EntryError.
    """

    # ══════════════════════════════════════════════════════════════
    # CREATE
    # ══════════════════════════════════════════════════════════════

    @classmethod
    def create_entry(cls, product_id, batch_number, quantity,
                     expiry_date=None) -> CreateEntryResult:
        """
        Record incoming stock for a product batch.

        Existing batch: entry created, batch stock incremented.
        Unknown batch: batch opened with stock=quantity, then entry created.

        Raises:
            EntryError('MISSING_REQUIRED_FIELD'): product_id, batch_number or quantity absent
            EntryError('INVALID_QUANTITY'): quantity is not a positive integer
            EntryError('PRODUCT_NOT_FOUND'): product_id doesn't resolve
            EntryError('BATCH_MISSING_EXPIRY'): new batch without expiry_date
            EntryError('INVALID_EXPIRY_DATE'): new batch with unparseable expiry_date
            EntryError('DUPLICATE_BATCH'): batch opened concurrently (retry takes update path)

        Returns:
            EntryOnly(entry) or BatchAndEntry(batch, entry)
        """
        missing = [
            name for name, value in (
                ('product_id', product_id),
                ('batch_number', batch_number),
                ('quantity', quantity),
            )
            if _is_missing(value)
        ]
        if missing:
            raise EntryError('MISSING_REQUIRED_FIELD', missing=', '.join(missing))

        qty = _parse_quantity(quantity)
        if qty is None:
            raise EntryError('INVALID_QUANTITY', requested=quantity)

        info = get_product_lookup().find_by_id(product_id)
        if info is None:
            raise EntryError('PRODUCT_NOT_FOUND', product_id=product_id)
        product = ProductSnapshot.of(info)

        batch_number = str(batch_number)
        batch = BatchRegistry.find_by_key(product.id, batch_number)

        if batch is not None:
            with transaction.atomic():
                entry = EntryStore.create(BatchSnapshot(product, batch.batch_number), qty)
                BatchRegistry.increment_stock(batch.pk, qty)
            cls._log_created(entry, batch_id=batch.pk, new_batch=False)
            return EntryOnly(entry)

        if _is_missing(expiry_date):
            raise EntryError(
                'BATCH_MISSING_EXPIRY',
                product_id=product.id,
                batch_number=batch_number,
            )
        expiry = _parse_expiry_date(expiry_date)
        if expiry is None:
            raise EntryError('INVALID_EXPIRY_DATE', expiry_date=expiry_date)

        with transaction.atomic():
            batch = BatchRegistry.create(product, batch_number, expiry, stock=qty)
            entry = EntryStore.create(BatchSnapshot(product, batch.batch_number), qty)
        cls._log_created(entry, batch_id=batch.pk, new_batch=True)
        return BatchAndEntry(batch, entry)

    @staticmethod
    def _log_created(entry: Entry, batch_id, new_batch: bool) -> None:
        logger.info(
            "entry.create",
            extra={
                "entry_id": entry.pk,
                "batch_id": batch_id,
                "product_id": entry.product_id,
                "batch_number": entry.batch_number,
                "qty": entry.quantity,
                "new_batch": new_batch,
            },
        )

    # ══════════════════════════════════════════════════════════════
    # READ / UPDATE / DELETE
    # ══════════════════════════════════════════════════════════════

    @classmethod
    def get_entries(cls) -> list[Entry]:
        """All entries, oldest first."""
        return list(EntryStore.all())

    @classmethod
    def update_entry(cls, entry_id, patch: dict) -> Entry:
        """
        Raw field patch on an entry.

        Only Entry.EDITABLE_FIELDS are applied; other keys are ignored.
        The owning batch's stock is NOT adjusted.

        Raises:
            EntryError('ENTRY_NOT_FOUND')
        """
        if EntryStore.find_by_id(entry_id) is None:
            raise EntryError('ENTRY_NOT_FOUND', entry_id=entry_id)

        fields = {
            k: v for k, v in (patch or {}).items()
            if k in Entry.EDITABLE_FIELDS
        }
        if 'product_id' in fields:
            fields['product_id'] = str(fields['product_id'])

        entry = EntryStore.update(entry_id, **fields)
        if entry is None:
            # Deleted between the check and the update
            raise EntryError('ENTRY_NOT_FOUND', entry_id=entry_id)

        logger.info(
            "entry.update",
            extra={"entry_id": entry.pk, "fields": sorted(fields)},
        )
        return entry

    @classmethod
    def delete_entry(cls, entry_id):
        """
        Delete a single entry. Batch stock is NOT adjusted.

        Raises:
            EntryError('MISSING_ID'): entry_id absent
            EntryError('ENTRY_NOT_FOUND')

        Returns:
            The deleted entry's id
        """
        if _is_missing(entry_id):
            raise EntryError('MISSING_ID')

        entry = EntryStore.find_by_id(entry_id)
        if entry is None:
            raise EntryError('ENTRY_NOT_FOUND', entry_id=entry_id)

        EntryStore.delete(entry.pk)
        logger.info("entry.delete", extra={"entry_id": entry.pk})
        return entry.pk

    @classmethod
    def delete_all_entries(cls, confirm: bool = False) -> int:
        """
        Delete every entry. Development only.

        Requires ENTRYMAN['ALLOW_BULK_DELETE'] = True AND confirm=True.
        Batch stock counters are left untouched.

        Raises:
            EntryError('BULK_DELETE_DISABLED')

        Returns:
            Number of entries deleted
        """
        if not entryman_settings.ALLOW_BULK_DELETE:
            raise EntryError('BULK_DELETE_DISABLED', reason='ALLOW_BULK_DELETE is off')
        if not confirm:
            raise EntryError('BULK_DELETE_DISABLED', reason='confirm=True required')

        count = EntryStore.delete_all()
        logger.warning("entry.delete_all", extra={"count": count})
        return count
