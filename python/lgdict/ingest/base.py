"""Base record source interface.

All sources inherit from RecordSource and implement all_records(). The
export only needs the records in a stable order; it never mutates them.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Iterator

from ..schema import ConnectorSet


class RecordSource(ABC):
    """Base class for connector set sources.

    Subclasses must implement:
        - all_records() -> Iterator of ConnectorSet, in the same order on
          every call

    Link names follow first-seen order, so a source that reorders between
    runs changes the exported names.
    """

    name: str = "base"

    @abstractmethod
    def all_records(self) -> Iterator[ConnectorSet]:
        """Yield every connector set."""
        pass

    def __iter__(self) -> Iterator[ConnectorSet]:
        return self.all_records()


class MemorySource(RecordSource):
    """Source over an in-memory sequence of connector sets."""

    name = "memory"

    def __init__(self, records: Iterable[ConnectorSet]):
        self.records = list(records)

    def all_records(self) -> Iterator[ConnectorSet]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)
