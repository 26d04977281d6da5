"""
Entry model — a single recorded stock movement against a batch.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _

from entryman.snapshots import BatchSnapshot, ProductSnapshot


class Entry(models.Model):
    """
    Incoming stock movement.

    The batch is embedded as a snapshot (product id, product name, batch
    number) captured at creation time, not as a foreign key.

    Editing or deleting an Entry does NOT change the batch stock.
    Use Batch.recalculate() to re-derive the counter after such edits.
    """

    product_id = models.CharField(
        max_length=64,
        db_index=True,
        verbose_name=_('ID do Produto'),
    )
    product_name = models.CharField(
        max_length=200,
        verbose_name=_('Nome do Produto'),
    )
    batch_number = models.CharField(
        max_length=50,
        verbose_name=_('Número do Lote'),
    )

    quantity = models.PositiveIntegerField(verbose_name=_('Quantidade'))

    created_at = models.DateTimeField(auto_now_add=True, db_index=True, verbose_name=_('Criado em'))

    # Fields a raw patch may overwrite
    EDITABLE_FIELDS = ('product_id', 'product_name', 'batch_number', 'quantity')

    class Meta:
        app_label = 'entryman'
        verbose_name = _('Entrada')
        verbose_name_plural = _('Entradas')
        ordering = ['created_at', 'id']
        indexes = [
            models.Index(fields=['product_id', 'batch_number'], name='entryman_en_product_5c1f2a_idx'),
        ]

    @property
    def batch(self) -> BatchSnapshot:
        return BatchSnapshot(
            product=ProductSnapshot(id=self.product_id, name=self.product_name),
            batch_number=self.batch_number,
        )

    def as_dict(self) -> dict:
        return {
            'id': self.pk,
            'batch': self.batch.as_dict(),
            'quantity': self.quantity,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }

    def __str__(self) -> str:
        return f"+{self.quantity} | {self.product_name} / {self.batch_number}"
