"""Connector set schema for lgdict.

Core concept:
    - A connector set anchors on one word (the germ)
    - Each connector links the germ to a partner word, to its left or right
    - A link is the word pair itself, independent of which end it is seen from

Example:
    germ "dog" with connectors [("the", LEFT), ("barks", RIGHT)]
    word pairs: ("the", "dog") and ("dog", "barks")
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .errors import RecordFormatError

WordPairKey = tuple[str, str]


class Direction(Enum):
    """Side of the germ a connector points to."""

    LEFT = "-"
    RIGHT = "+"

    @property
    def marker(self) -> str:
        """Single-character suffix used in disjunct tokens."""
        return self.value

    @classmethod
    def parse(cls, value: Any) -> "Direction":
        """Parse a direction from a marker or a name."""
        if isinstance(value, Direction):
            return value
        text = str(value).strip().lower()
        mapping = {
            "-": cls.LEFT, "left": cls.LEFT,
            "+": cls.RIGHT, "right": cls.RIGHT,
        }
        if text not in mapping:
            raise RecordFormatError(f"Unknown connector direction: {value!r}")
        return mapping[text]


@dataclass(frozen=True)
class Connector:
    """One left or right connection of a germ."""

    partner: str
    direction: Direction

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {"partner": self.partner, "direction": self.direction.marker}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Connector":
        """Create from dictionary."""
        try:
            partner = data["partner"]
            direction = data["direction"]
        except (KeyError, TypeError) as e:
            raise RecordFormatError(f"Malformed connector: {data!r}") from e
        return cls(partner=str(partner), direction=Direction.parse(direction))


@dataclass(frozen=True)
class ConnectorSet:
    """A germ word and its ordered connectors."""

    germ: str
    connectors: tuple[Connector, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept lists from callers but store an immutable sequence
        if not isinstance(self.connectors, tuple):
            object.__setattr__(self, "connectors", tuple(self.connectors))

    def is_empty(self) -> bool:
        """True if the set has no connectors."""
        return not self.connectors

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "germ": self.germ,
            "connectors": [c.to_dict() for c in self.connectors],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ConnectorSet":
        """Create from dictionary."""
        if not isinstance(data, dict) or "germ" not in data:
            raise RecordFormatError(f"Record has no germ: {data!r}")
        connectors = data.get("connectors", [])
        if not isinstance(connectors, list):
            raise RecordFormatError(
                f"Connectors of {data['germ']!r} must be a list"
            )
        return cls(
            germ=str(data["germ"]),
            connectors=tuple(Connector.from_dict(c) for c in connectors),
        )


def word_pair_key(connector: Connector, germ: str) -> WordPairKey:
    """Canonical (left word, right word) pair for a connector.

    A LEFT connector from germ G to partner W is the same link as a RIGHT
    connector from germ W to partner G; both give (W, G).
    """
    if connector.direction is Direction.LEFT:
        return (connector.partner, germ)
    return (germ, connector.partner)
