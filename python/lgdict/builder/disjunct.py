"""Disjunct rendering for connector sets.

A disjunct lists a germ's connectors in their original order, each as a
link name followed by its direction marker:

    germ "dog", connectors [("the", LEFT), ("barks", RIGHT)]
    -> "TA- & TB+"
"""

from typing import Optional

from ..errors import EmptyConnectorSetError
from ..naming import LinkNamer
from ..schema import ConnectorSet

CONNECTOR_SEPARATOR = " & "


class DisjunctRenderer:
    """Renders connector sets to disjunct strings."""

    def __init__(self, namer: Optional[LinkNamer] = None):
        """Initialize renderer.

        Args:
            namer: Link namer shared across the run. A fresh one is created
                if not given.
        """
        self.namer = namer or LinkNamer()

    def token(self, connector, germ: str) -> str:
        """Single connector token, e.g. "TA-"."""
        return self.namer.name_for(connector, germ) + connector.direction.marker

    def render(self, record: ConnectorSet) -> str:
        """Render a connector set to its disjunct string.

        Args:
            record: Connector set to render.

        Returns:
            Tokens joined by " & ", in connector order.

        Raises:
            EmptyConnectorSetError: If the record has no connectors.
        """
        if record.is_empty():
            raise EmptyConnectorSetError(
                f"Connector set for {record.germ!r} has no connectors"
            )
        return CONNECTOR_SEPARATOR.join(
            self.token(connector, record.germ) for connector in record.connectors
        )
