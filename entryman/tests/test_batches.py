"""
Tests for BatchRegistry, EntryStore and the Batch model.
"""

from datetime import date, timedelta
from decimal import Decimal

import pytest

from entryman import EntryError
from entryman.models import Batch, Entry
from entryman.services import BatchRegistry, EntryStore
from entryman.snapshots import BatchSnapshot, ProductSnapshot


pytestmark = pytest.mark.django_db


class TestBatchRegistry:
    """Tests for BatchRegistry."""

    def test_find_by_key(self, product, batch):
        assert BatchRegistry.find_by_key(product.pk, 'B1') == batch
        assert BatchRegistry.find_by_key(str(product.pk), 'B1') == batch

    def test_find_by_key_miss(self, product, other_product, batch):
        assert BatchRegistry.find_by_key(product.pk, 'B2') is None
        assert BatchRegistry.find_by_key(other_product.pk, 'B1') is None

    def test_create(self, product, expiry):
        snapshot = ProductSnapshot.of(product)

        created = BatchRegistry.create(snapshot, 'L-01', expiry, stock=4)

        assert created.pk is not None
        assert created.product == snapshot
        assert created.stock == 4

    def test_create_duplicate(self, product, batch, expiry):
        """Same (product, batch_number) twice raises DUPLICATE_BATCH."""
        with pytest.raises(EntryError) as exc:
            BatchRegistry.create(ProductSnapshot.of(product), 'B1', expiry)

        assert exc.value.code == 'DUPLICATE_BATCH'
        assert exc.value.retryable
        assert Batch.objects.count() == 1

    def test_increment_stock(self, batch):
        updated = BatchRegistry.increment_stock(batch.pk, 7)

        assert updated.stock == 27

    def test_increment_applies_delta_not_snapshot(self, batch):
        """Increments on a stale instance never overwrite each other."""
        stale = Batch.objects.get(pk=batch.pk)

        BatchRegistry.increment_stock(stale.pk, 5)
        BatchRegistry.increment_stock(stale.pk, 3)

        assert stale.stock == 20
        stale.refresh_from_db()
        assert stale.stock == 28

    def test_increment_unknown_batch(self, db):
        with pytest.raises(EntryError) as exc:
            BatchRegistry.increment_stock(999999, 1)

        assert exc.value.code == 'BATCH_NOT_FOUND'


class TestBatchModel:
    """Tests for Batch model helpers."""

    def test_queryset_filters(self, product, other_product, batch):
        old = Batch.objects.create(
            product_id=str(other_product.pk),
            product_name=other_product.name,
            batch_number='OLD',
            expiry_date=date.today() - timedelta(days=1),
        )

        assert list(Batch.objects.for_product(product.pk)) == [batch]
        assert list(Batch.objects.expired()) == [old]
        assert list(Batch.objects.expiring_before(date.today())) == [old]
        assert old.is_expired
        assert not batch.is_expired

    def test_recalculate_fixes_drift(self, product, batch):
        """recalculate() re-derives stock from matching entries."""
        snapshot = BatchSnapshot(ProductSnapshot.of(product), 'B1')
        EntryStore.create(snapshot, 4)
        EntryStore.create(snapshot, 6)

        assert batch.recalculate() == 10
        batch.refresh_from_db()
        assert batch.stock == 10

    def test_recalculate_without_entries(self, batch):
        assert batch.recalculate() == 0

    def test_str(self, batch):
        assert 'B1' in str(batch)


class TestEntryStore:
    """Tests for EntryStore CRUD."""

    @pytest.fixture
    def snapshot(self, product):
        return BatchSnapshot(ProductSnapshot.of(product), 'B1')

    def test_create_and_find(self, snapshot):
        entry = EntryStore.create(snapshot, 3)

        found = EntryStore.find_by_id(entry.pk)
        assert found == entry
        assert found.batch == snapshot

    def test_find_malformed_id(self, db):
        assert EntryStore.find_by_id('all') is None
        assert EntryStore.find_by_id(123456) is None

    def test_float_id_not_truncated(self, snapshot):
        entry = EntryStore.create(snapshot, 3)

        assert EntryStore.find_by_id(entry.pk + 0.9) is None
        assert EntryStore.find_by_id(Decimal(entry.pk) + Decimal('0.5')) is None
        assert EntryStore.delete(entry.pk + 0.9) == 0
        assert EntryStore.find_by_id(Decimal(entry.pk)) == entry

    def test_update(self, snapshot):
        entry = EntryStore.create(snapshot, 3)

        updated = EntryStore.update(entry.pk, quantity=9)

        assert updated.quantity == 9

    def test_update_missing(self, db):
        assert EntryStore.update(123456, quantity=1) is None

    def test_delete(self, snapshot):
        entry = EntryStore.create(snapshot, 3)

        assert EntryStore.delete(entry.pk) == 1
        assert EntryStore.delete(entry.pk) == 0
        assert EntryStore.delete('all') == 0

    def test_delete_all(self, snapshot):
        EntryStore.create(snapshot, 1)
        EntryStore.create(snapshot, 2)

        assert EntryStore.delete_all() == 2
        assert Entry.objects.count() == 0


class TestSnapshots:
    """Snapshots are frozen copies."""

    def test_product_rename_does_not_propagate(self, product, batch):
        entry = EntryStore.create(BatchSnapshot(ProductSnapshot.of(product), 'B1'), 1)

        product.name = 'Renomeado'
        product.save()

        entry.refresh_from_db()
        batch.refresh_from_db()
        assert entry.batch.product.name == 'Dipirona 500mg'
        assert batch.product.name == 'Dipirona 500mg'

    def test_frozen(self, product):
        snapshot = ProductSnapshot.of(product)

        with pytest.raises(AttributeError):
            snapshot.name = 'x'
