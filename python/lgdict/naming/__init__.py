"""Link naming module.

Turns word pairs into short, stable connector names:
- NameCache: one generation per distinct key
- TagGenerator: counter -> "TA", "TB", ..., "TAA"
- LinkNamer: word pair -> name, shared by both directions of a link
"""

from .cache import NameCache
from .links import LinkNamer
from .tags import TagGenerator, letters_for

__all__ = [
    "NameCache",
    "LinkNamer",
    "TagGenerator",
    "letters_for",
]
