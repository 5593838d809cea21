"""Exceptions raised during a dictionary export.

Every error here is fatal to the current run. Nothing is retried; the
caller rebuilds from scratch.
"""

from typing import Optional


class ExportError(Exception):
    """Base class for all export failures."""


class SchemaCreationError(ExportError):
    """Creating the dictionary tables or bootstrap rows failed."""


class RowInsertError(ExportError):
    """Writing a word/disjunct row failed."""

    def __init__(self, word: str, status: str, detail: Optional[str] = None):
        self.word = word
        self.status = status
        self.detail = detail
        message = f"Insert failed for word {word!r}: {status}"
        if detail:
            message += f" ({detail})"
        super().__init__(message)


class UsageError(ExportError):
    """A writer operation was called in the wrong state."""


class RecordFormatError(ExportError, ValueError):
    """An input record could not be parsed."""


class EmptyConnectorSetError(ExportError, ValueError):
    """A connector set has no connectors, so there is no disjunct."""
