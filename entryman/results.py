"""
Entry creation results.

create_entry() returns exactly one of these:

    EntryOnly      — stock added to an existing batch (code 1)
    BatchAndEntry  — a new batch was opened for this entry (code 2)

Usage:
    result = entries.create_entry(product.pk, 'B1', 10, '12-31-2025')
    match result:
        case BatchAndEntry(batch=batch, entry=entry):
            ...
        case EntryOnly(entry=entry):
            ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Union

if TYPE_CHECKING:
    from entryman.models import Batch, Entry


@dataclass(frozen=True)
class EntryOnly:
    """Entry recorded against an existing batch."""

    entry: Entry

    code: ClassVar[int] = 1

    def as_dict(self) -> dict:
        return {'success_code': self.code, 'data': [self.entry.as_dict()]}


@dataclass(frozen=True)
class BatchAndEntry:
    """New batch opened, then the entry recorded against it."""

    batch: Batch
    entry: Entry

    code: ClassVar[int] = 2

    def as_dict(self) -> dict:
        return {
            'success_code': self.code,
            'data': [self.batch.as_dict(), self.entry.as_dict()],
        }


CreateEntryResult = Union[EntryOnly, BatchAndEntry]
