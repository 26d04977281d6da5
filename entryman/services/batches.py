"""
Batch registry — lookup, creation and atomic stock increments.

Stock is never read-modified-written in Python: increment_stock() issues a
single UPDATE with an F() expression, so concurrent restocks of the same
batch are all reflected in the final value.
"""

import logging
from datetime import date

from django.db import IntegrityError, transaction
from django.db.models import F
from django.utils import timezone

from entryman.exceptions import EntryError
from entryman.models.batch import Batch
from entryman.snapshots import ProductSnapshot

logger = logging.getLogger('entryman')


class BatchRegistry:
    """Batch persistence with the stock counter invariant."""

    @classmethod
    def find_by_key(cls, product_id, batch_number: str) -> Batch | None:
        """Get batch by (product_id, batch_number)."""
        return Batch.objects.filter(
            product_id=str(product_id),
            batch_number=batch_number,
        ).first()

    @classmethod
    def create(cls, product: ProductSnapshot, batch_number: str,
               expiry_date: date, stock: int = 0) -> Batch:
        """
        Open a new batch.

        Raises:
            EntryError('DUPLICATE_BATCH'): If the product already has this batch number
                (e.g. a concurrent request created it first)

        Concurrency:
            - Runs in its own savepoint so the conflict doesn't poison
              an enclosing transaction
        """
        try:
            with transaction.atomic():
                batch = Batch.objects.create(
                    product_id=product.id,
                    product_name=product.name,
                    batch_number=batch_number,
                    expiry_date=expiry_date,
                    stock=stock,
                )
        except IntegrityError as e:
            logger.info(
                "batch.duplicate",
                extra={"product_id": product.id, "batch_number": batch_number},
            )
            raise EntryError(
                'DUPLICATE_BATCH',
                product_id=product.id,
                batch_number=batch_number,
            ) from e

        logger.info(
            "batch.create",
            extra={
                "batch_id": batch.pk,
                "product_id": product.id,
                "batch_number": batch_number,
                "stock": stock,
            },
        )
        return batch

    @classmethod
    def increment_stock(cls, batch_id, delta: int) -> Batch:
        """
        Add delta to the batch stock at the storage layer.

        Raises:
            EntryError('BATCH_NOT_FOUND'): If no batch has this id
        """
        updated = Batch.objects.filter(pk=batch_id).update(
            stock=F('stock') + delta,
            updated_at=timezone.now(),
        )
        if not updated:
            raise EntryError('BATCH_NOT_FOUND', batch_id=batch_id)

        logger.info(
            "batch.increment",
            extra={"batch_id": batch_id, "delta": delta},
        )
        return Batch.objects.get(pk=batch_id)
