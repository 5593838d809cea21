"""Memoizing map from a deduplication key to a generated value."""

from typing import Callable, Generic, Hashable, Iterator, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class NameCache(Generic[K, V]):
    """Generate each value once per distinct key.

    Keys are compared by value, so any two equal tuples share one entry.
    Entries are never evicted. Not safe for concurrent mutation.
    """

    def __init__(self):
        self._entries: dict[K, V] = {}

    def get_or_compute(self, key: K, generator_fn: Callable[[], V]) -> V:
        """Return the cached value for key, generating it on first use.

        Args:
            key: Hashable deduplication key.
            generator_fn: Called with no arguments, at most once per key.

        Returns:
            The value stored for key.
        """
        try:
            return self._entries[key]
        except KeyError:
            value = generator_fn()
            self._entries[key] = value
            return value

    def get(self, key: K) -> V | None:
        """Look up a key without generating."""
        return self._entries.get(key)

    def items(self) -> Iterator[tuple[K, V]]:
        """Iterate entries in insertion order."""
        return iter(self._entries.items())

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
