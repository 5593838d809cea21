"""Short alphabetic identifiers from integer counters.

Numbering follows spreadsheet columns (1 -> A, 26 -> Z, 27 -> AA), with a
fixed leading marker so a tag can never collide with connector names the
parser reserves for itself.
"""

import string

LETTERS = string.ascii_uppercase
DEFAULT_PREFIX = "T"


def letters_for(n: int) -> str:
    """Bijective base-26 encoding of a positive integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise ValueError(f"Tag number must be an int, got {n!r}")
    if n < 1:
        raise ValueError(f"Tag number must be positive, got {n}")

    digits = []
    while n > 0:
        n, rem = divmod(n - 1, 26)
        digits.append(LETTERS[rem])
    return "".join(reversed(digits))


class TagGenerator:
    """Renders counters as prefixed tags: 1 -> TA, 27 -> TAA."""

    def __init__(self, prefix: str = DEFAULT_PREFIX):
        if not prefix:
            raise ValueError("Tag prefix must not be empty")
        self.prefix = prefix

    def tag(self, n: int) -> str:
        """Tag for the n-th issued name (n >= 1)."""
        return self.prefix + letters_for(n)
