"""
Django Entryman — Entradas de Estoque por Lote.

Registers incoming stock against product batches, opening a batch
automatically the first time a batch number shows up.

Uso:
    from entryman import entries, EntryError

    entries.create_entry(produto.pk, 'L-0425', 10, '12-31-2025')  # novo lote
    entries.create_entry(produto.pk, 'L-0425', 5)                 # reposição
"""


def __getattr__(name):
    """Lazy import to avoid circular imports during app loading."""
    if name == 'entries':
        from entryman.service import Entries
        return Entries
    elif name == 'EntryError':
        from entryman.exceptions import EntryError
        return EntryError
    elif name == 'ErrorKind':
        from entryman.exceptions import ErrorKind
        return ErrorKind
    elif name == 'EntryOnly':
        from entryman.results import EntryOnly
        return EntryOnly
    elif name == 'BatchAndEntry':
        from entryman.results import BatchAndEntry
        return BatchAndEntry
    elif name == 'Batch':
        from entryman.models.batch import Batch
        return Batch
    elif name == 'Entry':
        from entryman.models.entry import Entry
        return Entry
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    'entries',
    'EntryError',
    'ErrorKind',
    'EntryOnly',
    'BatchAndEntry',
    'Batch',
    'Entry',
]

__version__ = '0.1.0'
