"""JSON Lines connector set source.

Format, one record per line:
    {"germ": "dog", "connectors": [{"partner": "the", "direction": "-"},
                                   {"partner": "barks", "direction": "+"}]}

Blank lines and lines starting with # are skipped. Records are read
lazily, so the file is never held in memory at once.
"""

import json
from pathlib import Path
from typing import Iterator

from ..errors import RecordFormatError
from ..normalizer import normalize_and_validate
from ..schema import ConnectorSet
from .base import RecordSource


class JsonLinesSource(RecordSource):
    """Source reading connector sets from a .jsonl file."""

    name = "jsonl"

    def __init__(self, filepath: Path | str, comment_char: str = "#"):
        self.filepath = Path(filepath)
        self.comment_char = comment_char

    def all_records(self) -> Iterator[ConnectorSet]:
        """Parse records in file order.

        Yields:
            ConnectorSet per non-blank, non-comment line.

        Raises:
            RecordFormatError: On bad JSON, a missing field or an invalid
                germ, naming the file and line.
        """
        with open(self.filepath, "r", encoding="utf-8") as f:
            for line_num, line in enumerate(f, start=1):
                line = line.strip()
                if not line or line.startswith(self.comment_char):
                    continue
                yield self.parse_line(line, line_num)

    def parse_line(self, line: str, line_num: int) -> ConnectorSet:
        """Parse one JSON line into a ConnectorSet."""
        where = f"{self.filepath}:{line_num}"
        try:
            data = json.loads(line)
        except json.JSONDecodeError as e:
            raise RecordFormatError(f"{where}: invalid JSON: {e}") from e

        try:
            record = ConnectorSet.from_dict(data)
        except RecordFormatError as e:
            raise RecordFormatError(f"{where}: {e}") from e

        if normalize_and_validate(record.germ) is None:
            raise RecordFormatError(f"{where}: invalid germ {record.germ!r}")
        return record


def load(filepath: Path | str) -> list[ConnectorSet]:
    """Convenience function to read every record of a .jsonl file."""
    return list(JsonLinesSource(filepath).all_records())
