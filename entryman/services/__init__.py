"""
Entry services — persistence collaborators of the Entries facade.

    from entryman.services import BatchRegistry, EntryStore
"""

from entryman.services.batches import BatchRegistry
from entryman.services.store import EntryStore

__all__ = [
    'BatchRegistry',
    'EntryStore',
]
