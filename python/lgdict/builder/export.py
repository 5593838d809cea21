"""Full dictionary export.

Pulls every connector set from a record source, renders its disjunct and
writes one dictionary entry per set. Each run builds a fresh dictionary;
there is no incremental mode.
"""

import logging
import sqlite3
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from ..errors import RecordFormatError
from ..ingest.base import RecordSource
from ..naming import LinkNamer, TagGenerator
from ..normalizer import normalize_and_validate
from ..scoring import CostFunction, zero_cost
from .disjunct import DisjunctRenderer
from .writer import DictionaryWriter

logger = logging.getLogger(__name__)


@dataclass
class ExportStats:
    """Statistics from an export run."""

    output_path: str = ""
    records_seen: int = 0
    rows_written: int = 0
    skipped_empty: int = 0
    links_issued: int = 0


class ExportDriver:
    """Runs one export from a record source into a dictionary file."""

    def __init__(
        self,
        source: RecordSource,
        commit_every: int = 10000,
        log_every: int = 10000,
        link_prefix: str = "T",
        connect: Callable[[str], sqlite3.Connection] = sqlite3.connect,
    ):
        """Initialize driver.

        Args:
            source: Where the connector sets come from.
            commit_every: Rows per database commit.
            log_every: Log progress after this many records.
            link_prefix: Leading marker of generated link names.
            connect: Connection factory handed to the writer.
        """
        self.source = source
        self.commit_every = commit_every
        self.log_every = log_every
        self.link_prefix = link_prefix
        self.connect = connect

    def export(
        self,
        output_target: Path | str,
        locale: str,
        cost_fn: Optional[CostFunction] = None,
    ) -> ExportStats:
        """Export every record of the source.

        Link names and subscripts start fresh on every call. If the run
        aborts, the partially written dictionary file is removed.

        Args:
            output_target: Output directory or ".db" file path.
            locale: Dictionary locale, e.g. "EN_us".
            cost_fn: Cost per record (default: zero).

        Returns:
            ExportStats for the run.

        Raises:
            SchemaCreationError: If the dictionary cannot be created.
            RowInsertError: If a row cannot be written.
            RecordFormatError: If a germ is not a valid dictionary word.
            Exception: Anything raised by cost_fn, unchanged.
        """
        cost_fn = cost_fn or zero_cost
        namer = LinkNamer(TagGenerator(self.link_prefix))
        renderer = DisjunctRenderer(namer)
        writer = DictionaryWriter(
            output_target, locale,
            commit_every=self.commit_every,
            connect=self.connect,
        )
        stats = ExportStats(output_path=str(writer.path))

        writer.open()
        try:
            for record in self.source.all_records():
                stats.records_seen += 1
                if record.is_empty():
                    logger.warning("Skipping %r: no connectors", record.germ)
                    stats.skipped_empty += 1
                    continue

                word = normalize_and_validate(record.germ)
                if word is None:
                    raise RecordFormatError(f"Invalid germ: {record.germ!r}")

                disjunct = renderer.render(record)
                writer.add(word, disjunct, cost_fn(record))
                stats.rows_written += 1

                if stats.records_seen % self.log_every == 0:
                    logger.info(
                        "Exported %d records, %d links",
                        stats.records_seen, namer.issued,
                    )
        except Exception:
            logger.error(
                "Export to %s aborted after %d records",
                writer.path, stats.records_seen,
            )
            writer.close(commit=False)
            # The file was created by this run; a partial dictionary must
            # not be left for the parser or block the next rebuild
            writer.path.unlink(missing_ok=True)
            raise

        writer.close()
        stats.links_issued = namer.issued
        logger.info(
            "Exported %d entries with %d links to %s",
            stats.rows_written, stats.links_issued, writer.path,
        )
        return stats


def export_dictionary(
    source: RecordSource,
    output_target: Path | str,
    locale: str,
    cost_fn: Optional[CostFunction] = None,
) -> ExportStats:
    """Convenience function to run a full export with default settings."""
    return ExportDriver(source).export(output_target, locale, cost_fn)
