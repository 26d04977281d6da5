"""
Entryman Models.

- Batch: Lot of a product with expiry and aggregate stock counter
- Entry: Recorded incoming movement (batch snapshot + quantity)
"""

from entryman.models.batch import Batch
from entryman.models.entry import Entry

__all__ = [
    'Batch',
    'Entry',
]
