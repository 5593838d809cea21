"""SQLite dictionary writer.

Writes the two-table layout read by the Link Grammar SQL dictionary
backend:

    Morphemes(morpheme, subscript, classname)
    Disjuncts(classname, disjunct, cost)

Output structure:
    output/
    └── dict.db

Lifecycle: open() -> add() ... -> close(). The writer cannot be reused
once closed.
"""

import logging
import sqlite3
from enum import Enum
from pathlib import Path
from typing import Callable, Optional

from ..errors import RowInsertError, SchemaCreationError, UsageError

logger = logging.getLogger(__name__)

DICT_FILENAME = "dict.db"
DICTIONARY_VERSION = "V5v4v0+"
VERSION_WORD = "<dictionary-version-number>"
LOCALE_WORD = "<dictionary-locale>"

SCHEMA = (
    """
    CREATE TABLE Morphemes (
        morpheme TEXT NOT NULL,
        subscript TEXT UNIQUE NOT NULL,
        classname TEXT NOT NULL
    )
    """,
    "CREATE INDEX morph_idx ON Morphemes(morpheme)",
    """
    CREATE TABLE Disjuncts (
        classname TEXT NOT NULL,
        disjunct TEXT NOT NULL,
        cost REAL
    )
    """,
    "CREATE INDEX class_idx ON Disjuncts(classname)",
)

INSERT_MORPHEME = "INSERT INTO Morphemes VALUES (?, ?, ?)"
INSERT_DISJUNCT = "INSERT INTO Disjuncts VALUES (?, ?, ?)"


class WriterState(Enum):
    """Lifecycle states of a DictionaryWriter."""

    UNINITIALIZED = "uninitialized"
    SCHEMA_READY = "schema_ready"
    CLOSED = "closed"


def resolve_target(target: Path | str) -> Path:
    """Database path for an output target.

    A path ending in ".db" is used as is; anything else is a directory
    that gets the fixed "dict.db" file name.
    """
    path = Path(target)
    if path.suffix == ".db":
        return path
    return path / DICT_FILENAME


def locale_disjunct(locale: str) -> str:
    """Locale marker disjunct: "EN_us" -> "EN4us+"."""
    return locale.replace("_", "4") + "+"


def _status(exc: sqlite3.Error) -> str:
    """Store status name for an sqlite3 error."""
    return getattr(exc, "sqlite_errorname", None) or type(exc).__name__


class DictionaryWriter:
    """Streams word/disjunct/cost rows into a fresh SQLite dictionary."""

    def __init__(
        self,
        target: Path | str,
        locale: str,
        commit_every: int = 10000,
        connect: Callable[[str], sqlite3.Connection] = sqlite3.connect,
    ):
        """Initialize writer.

        Args:
            target: Output directory or ".db" file path.
            locale: Dictionary locale, e.g. "EN_us".
            commit_every: Commit after this many added rows.
            connect: Connection factory taking the database path.
        """
        if commit_every < 1:
            raise ValueError("commit_every must be positive")
        self.path = resolve_target(target)
        self.locale = locale
        self.commit_every = commit_every
        self._connect = connect
        self._conn: Optional[sqlite3.Connection] = None
        self._state = WriterState.UNINITIALIZED
        self._count = 0
        self._pending = 0

    @property
    def state(self) -> WriterState:
        return self._state

    @property
    def count(self) -> int:
        """Number of rows added so far (bootstrap rows excluded)."""
        return self._count

    @property
    def connection(self) -> sqlite3.Connection:
        """Underlying connection; only valid while the schema is ready."""
        self._require_ready("connection")
        return self._conn

    def _require_ready(self, operation: str) -> None:
        if self._state is not WriterState.SCHEMA_READY:
            raise UsageError(
                f"Cannot {operation}: writer is {self._state.value}"
            )

    def open(self) -> "DictionaryWriter":
        """Create the schema and bootstrap rows.

        Raises:
            UsageError: If the writer was already opened.
            SchemaCreationError: If any table, index or row creation fails.
        """
        if self._state is not WriterState.UNINITIALIZED:
            raise UsageError(f"Cannot open: writer is {self._state.value}")

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            conn = self._connect(str(self.path))
        except (OSError, sqlite3.Error) as e:
            raise SchemaCreationError(f"Cannot open {self.path}: {e}") from e

        try:
            for statement in SCHEMA:
                conn.execute(statement)
            for word, disjunct in (
                (VERSION_WORD, DICTIONARY_VERSION),
                (LOCALE_WORD, locale_disjunct(self.locale)),
            ):
                conn.execute(INSERT_MORPHEME, (word, word, word))
                conn.execute(INSERT_DISJUNCT, (word, disjunct, 0.0))
            conn.commit()
        except sqlite3.Error as e:
            conn.close()
            raise SchemaCreationError(
                f"Cannot create dictionary schema in {self.path}: {e}"
            ) from e

        self._conn = conn
        self._state = WriterState.SCHEMA_READY
        logger.info("Created dictionary schema in %s (locale %s)", self.path, self.locale)
        return self

    def add(self, word: str, disjunct: str, cost: float) -> str:
        """Add one dictionary entry.

        Args:
            word: Dictionary word; also used as its class name.
            disjunct: Rendered disjunct string.
            cost: Disjunct cost.

        Returns:
            The subscript assigned to the morpheme row.

        Raises:
            UsageError: If the writer is not open.
            RowInsertError: If cost is not a number (nothing is written), or
                if either insert fails. The first insert is not rolled back.
        """
        self._require_ready("add")
        try:
            cost = float(cost)
        except (TypeError, ValueError) as e:
            raise RowInsertError(word, "INVALID_COST", repr(cost)) from e

        self._count += 1
        subscript = f"{word}.{self._count}"
        try:
            self._conn.execute(INSERT_MORPHEME, (word, subscript, word))
            self._conn.execute(INSERT_DISJUNCT, (word, disjunct, cost))
        except sqlite3.Error as e:
            raise RowInsertError(word, _status(e), str(e)) from e

        self._pending += 1
        if self._pending >= self.commit_every:
            self.flush()
        return subscript

    def flush(self) -> None:
        """Commit rows added since the last commit."""
        self._require_ready("flush")
        try:
            self._conn.commit()
        except sqlite3.Error as e:
            raise RowInsertError("<commit>", _status(e), str(e)) from e
        self._pending = 0

    def close(self, commit: bool = True) -> None:
        """Release the database handle.

        Args:
            commit: Commit pending rows first. Pass False when aborting.

        Closing twice is a no-op; closing before open just marks the writer
        closed.
        """
        if self._state is WriterState.CLOSED:
            return
        conn, self._conn = self._conn, None
        self._state = WriterState.CLOSED
        if conn is None:
            return
        try:
            if commit:
                conn.commit()
        finally:
            conn.close()
        logger.info("Closed %s after %d entries", self.path, self._count)

    def __enter__(self) -> "DictionaryWriter":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close(commit=exc_type is None)
