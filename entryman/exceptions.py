"""
Exceptions for Entryman.

All domain errors are EntryError with a structured code for programmatic handling.
Database/infrastructure errors are never wrapped: they propagate as raised by Django.
"""

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Closed set of domain error codes."""

    MISSING_REQUIRED_FIELD = 'MISSING_REQUIRED_FIELD'
    INVALID_QUANTITY = 'INVALID_QUANTITY'
    PRODUCT_NOT_FOUND = 'PRODUCT_NOT_FOUND'
    BATCH_MISSING_EXPIRY = 'BATCH_MISSING_EXPIRY'
    INVALID_EXPIRY_DATE = 'INVALID_EXPIRY_DATE'
    ENTRY_NOT_FOUND = 'ENTRY_NOT_FOUND'
    MISSING_ID = 'MISSING_ID'
    DUPLICATE_BATCH = 'DUPLICATE_BATCH'
    BATCH_NOT_FOUND = 'BATCH_NOT_FOUND'
    BULK_DELETE_DISABLED = 'BULK_DELETE_DISABLED'


# Numeric codes clients of the entry endpoint already understand
LEGACY_ERROR_CODES = {
    ErrorKind.INVALID_QUANTITY: 0,
    ErrorKind.PRODUCT_NOT_FOUND: 1,
    ErrorKind.BATCH_MISSING_EXPIRY: 2,
}

RETRYABLE = frozenset({ErrorKind.DUPLICATE_BATCH})


class EntryError(Exception):
    """
    Structured exception for entry operations.

    Usage:
        try:
            entries.create_entry(product.pk, 'B1', 10)
        except EntryError as e:
            if e.code == 'BATCH_MISSING_EXPIRY':
                print("Lote novo, informe a validade")

    Attributes:
        code: Error code for programmatic handling (ErrorKind value)
        message: Human-readable message
        data: Additional context data
    """

    _default_messages = {
        ErrorKind.MISSING_REQUIRED_FIELD: 'productId, batchNumber e quantity são obrigatórios',
        ErrorKind.INVALID_QUANTITY: 'Quantidade inválida (deve ser inteiro positivo)',
        ErrorKind.PRODUCT_NOT_FOUND: 'Produto não encontrado',
        ErrorKind.BATCH_MISSING_EXPIRY: 'Lote não existe. Data de validade é obrigatória',
        ErrorKind.INVALID_EXPIRY_DATE: 'Data de validade inválida',
        ErrorKind.ENTRY_NOT_FOUND: 'Entrada não encontrada',
        ErrorKind.MISSING_ID: 'ID é obrigatório',
        ErrorKind.DUPLICATE_BATCH: 'Lote criado concorrentemente, tente novamente',
        ErrorKind.BATCH_NOT_FOUND: 'Lote não encontrado',
        ErrorKind.BULK_DELETE_DISABLED: 'Remoção em massa desabilitada',
    }

    def __init__(self, code: str, message: str | None = None, **data: Any):
        self.kind = ErrorKind(code)
        self.code = self.kind.value
        self.message = message or self._default_messages[self.kind]
        self.data = data
        super().__init__(f"[{self.code}] {self.message}")

    @property
    def error_code(self) -> int | None:
        """Legacy numeric code, None for errors that never had one."""
        return LEGACY_ERROR_CODES.get(self.kind)

    @property
    def retryable(self) -> bool:
        """Can the caller resubmit the same request unchanged?"""
        return self.kind in RETRYABLE

    def as_dict(self) -> dict[str, Any]:
        """Serialize to dict (useful for APIs)."""
        payload = {
            'code': self.code,
            'message': self.message,
            'data': {k: str(v) for k, v in self.data.items()},
        }
        if self.error_code is not None:
            payload['error_code'] = self.error_code
        return payload
