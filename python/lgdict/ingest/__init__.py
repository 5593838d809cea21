"""Connector set sources.

Provides pluggable sources for the records to export:
- In-memory sequences (tests, embedding in a pipeline)
- JSON Lines dumps of connector sets

Usage:
    from lgdict.ingest import MemorySource, JsonLinesSource

    source = JsonLinesSource("csets.jsonl")
    for record in source.all_records():
        ...
"""

from .base import MemorySource, RecordSource
from .json_lines import JsonLinesSource

# Register available sources
SOURCES: dict[str, type[RecordSource]] = {
    "memory": MemorySource,
    "jsonl": JsonLinesSource,
}


def get_source(name: str) -> type[RecordSource]:
    """Get source class by name."""
    if name not in SOURCES:
        raise ValueError(f"Unknown source: {name}. Available: {list(SOURCES.keys())}")
    return SOURCES[name]


def register_source(name: str, source_cls: type[RecordSource]) -> None:
    """Register a custom source."""
    SOURCES[name] = source_cls


__all__ = [
    "RecordSource",
    "MemorySource",
    "JsonLinesSource",
    "get_source",
    "register_source",
    "SOURCES",
]
