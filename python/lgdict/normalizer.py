"""Word text normalization for lgdict.

Maps upstream marker atoms to the names the Link Grammar dictionary uses,
and rejects words the dictionary cannot hold.
"""

import re
from typing import Optional

# Upstream marker atoms -> Link Grammar dictionary words
WALL_MAP: dict[str, str] = {
    "###LEFT-WALL###": "LEFT-WALL",
    "###RIGHT-WALL###": "RIGHT-WALL",
}

WHITESPACE_PATTERN = re.compile(r"\s")


def normalize_word(word: str) -> str:
    """Dictionary form of a word.

    Args:
        word: Word as produced by the upstream pipeline.

    Returns:
        Wall markers mapped to LEFT-WALL / RIGHT-WALL, anything else as is.
    """
    return WALL_MAP.get(word, word)


def is_valid_word(word: str) -> bool:
    """Check if a word can be a dictionary entry.

    Args:
        word: Normalized word.

    Returns:
        True if word is non-empty and has no whitespace.
    """
    return bool(word) and not WHITESPACE_PATTERN.search(word)


def normalize_and_validate(word: str) -> Optional[str]:
    """Normalize word and return if valid, else None."""
    normalized = normalize_word(word)
    if is_valid_word(normalized):
        return normalized
    return None
