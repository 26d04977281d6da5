"""
Snapshots — immutable copies of identifying fields captured at write time.

Batches and entries store the product's id and name as they were when the
record was written. Renaming a product later does not touch these copies;
old entries keep reading the old name.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductSnapshot:
    """Product identity as seen when a batch or entry was written."""

    id: str
    name: str

    @classmethod
    def of(cls, product) -> 'ProductSnapshot':
        """Capture a snapshot from anything with .id and .name (ProductInfo, Product)."""
        return cls(id=str(product.id), name=product.name)


@dataclass(frozen=True)
class BatchSnapshot:
    """Batch identity embedded in an entry."""

    product: ProductSnapshot
    batch_number: str

    def as_dict(self) -> dict:
        return {
            'product': {'id': self.product.id, 'name': self.product.name},
            'batch_number': self.batch_number,
        }
