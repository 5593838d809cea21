"""Dictionary builder module.

Builds Link Grammar SQLite dictionaries:
- Disjunct rendering from connector sets
- Streaming writer for the Morphemes / Disjuncts tables
- Export driver tying source, renderer and writer together
"""

from .disjunct import DisjunctRenderer
from .export import ExportDriver, ExportStats, export_dictionary
from .writer import DictionaryWriter, WriterState, resolve_target

__all__ = [
    "DisjunctRenderer",
    "DictionaryWriter",
    "WriterState",
    "ExportDriver",
    "ExportStats",
    "export_dictionary",
    "resolve_target",
]
