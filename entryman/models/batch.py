"""
Batch model — lot of a product with expiry date and aggregate stock.

A Batch is identified by (product_id, batch_number). Its stock is a counter
incremented atomically each time an entry is recorded against it.

Usage:
    batch = Batch.objects.for_product(product.pk).get(batch_number="B1")
    batch.stock         # 15
    batch.product.name  # name captured when the batch was opened
"""

import logging
from datetime import date

from django.db import models
from django.db.models import Sum
from django.db.models.functions import Coalesce
from django.utils.translation import gettext_lazy as _

from entryman.snapshots import ProductSnapshot

logger = logging.getLogger('entryman')


class BatchQuerySet(models.QuerySet):
    """Custom QuerySet for Batch with convenience filters."""

    def for_product(self, product_id):
        """Filter batches for a specific product id."""
        return self.filter(product_id=str(product_id))

    def expiring_before(self, day):
        """Batches expiring on or before the given date."""
        return self.filter(expiry_date__lte=day)

    def expired(self):
        """Batches past their expiry date."""
        return self.filter(expiry_date__lt=date.today())


class Batch(models.Model):
    """
    Lot of a product.

    Rules:
    - batch_number is unique per product (enforced by the database)
    - stock only changes through BatchRegistry.increment_stock()
    - never deleted by Entryman
    """

    # Product snapshot (id + name at creation time)
    product_id = models.CharField(
        max_length=64,
        db_index=True,
        verbose_name=_('ID do Produto'),
    )
    product_name = models.CharField(
        max_length=200,
        verbose_name=_('Nome do Produto'),
        help_text=_('Cópia do nome no momento da criação do lote'),
    )

    batch_number = models.CharField(
        max_length=50,
        verbose_name=_('Número do Lote'),
    )

    # Aggregate counter (updated atomically via F())
    stock = models.PositiveIntegerField(
        default=0,
        verbose_name=_('Estoque'),
    )

    expiry_date = models.DateField(
        db_index=True,
        verbose_name=_('Data de Validade'),
        help_text=_('Último dia em que o lote pode ser utilizado'),
    )

    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_('Criado em'))
    updated_at = models.DateTimeField(auto_now=True, verbose_name=_('Atualizado em'))

    objects = BatchQuerySet.as_manager()

    class Meta:
        app_label = 'entryman'
        verbose_name = _('Lote')
        verbose_name_plural = _('Lotes')
        ordering = ['expiry_date', 'batch_number']
        constraints = [
            models.UniqueConstraint(
                fields=['product_id', 'batch_number'],
                name='unique_batch_per_product',
            )
        ]

    @property
    def product(self) -> ProductSnapshot:
        return ProductSnapshot(id=self.product_id, name=self.product_name)

    @property
    def is_expired(self) -> bool:
        """Is this batch past its expiry date?"""
        return date.today() > self.expiry_date

    def entries(self):
        """Entries recorded against this batch (matched by snapshot)."""
        from entryman.models.entry import Entry
        return Entry.objects.filter(
            product_id=self.product_id,
            batch_number=self.batch_number,
        )

    def recalculate(self) -> int:
        """
        Recalculate stock from entries.

        Use for:
        - Integrity audit
        - Correction after entries were edited or deleted

        Returns:
            New calculated stock
        """
        total = self.entries().aggregate(
            t=Coalesce(Sum('quantity'), 0, output_field=models.IntegerField())
        )['t']

        if total != self.stock:
            old = self.stock
            self.stock = total
            self.save(update_fields=['stock', 'updated_at'])

            logger.warning(
                "Batch %s recalculated: %s → %s (diff: %s)",
                self.pk, old, total, total - old,
            )

        return total

    def as_dict(self) -> dict:
        return {
            'id': self.pk,
            'product': {'id': self.product_id, 'name': self.product_name},
            'batch_number': self.batch_number,
            'stock': self.stock,
            'expiry_date': self.expiry_date.isoformat(),
        }

    def __str__(self) -> str:
        return f"Lote {self.batch_number} ({self.product_name}) val:{self.expiry_date}"
