"""Link naming for word-pair connectors.

Every distinct word pair gets one name for the whole export run. Names are
issued in first-seen order, so the same input order always yields the same
names.
"""

from types import MappingProxyType
from typing import Mapping, Optional

from ..schema import Connector, WordPairKey, word_pair_key
from .cache import NameCache
from .tags import TagGenerator


class LinkNamer:
    """Assigns direction-independent names to word-pair links."""

    def __init__(self, tags: Optional[TagGenerator] = None):
        """Initialize namer.

        Args:
            tags: Tag generator for rendering names (default prefix "T").
        """
        self.tags = tags or TagGenerator()
        self._cache: NameCache[WordPairKey, str] = NameCache()
        self._issued = 0

    def _issue(self) -> str:
        self._issued += 1
        return self.tags.tag(self._issued)

    def name_for(self, connector: Connector, germ: str) -> str:
        """Name of the link a connector of germ participates in."""
        key = word_pair_key(connector, germ)
        return self._cache.get_or_compute(key, self._issue)

    @property
    def issued(self) -> int:
        """Number of names issued so far."""
        return self._issued

    def links(self) -> Mapping[WordPairKey, str]:
        """Read-only view of word pair -> name, in issue order."""
        return MappingProxyType(dict(self._cache.items()))
