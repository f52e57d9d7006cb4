"""
Serbian Latin → Cyrillic transliteration submodule.

Basic usage:
    >>> from srbtr.cyrillic import transliterate
    >>> transliterate("Ljubav je čudo")
    'Љубав је чудо'

Streaming usage:
    >>> from srbtr.cyrillic import Transcoder
    >>> with open("pesma.txt", "rb") as f:
    ...     for original, cyrillic in Transcoder.from_stream(f):
    ...         ...
"""

from srbtr.cyrillic._tables import (
    COMPOSITE_DIGRAPHS,
    DIGRAPH_LEADS,
    LATIN_TO_CYRILLIC,
    LEGACY_ALIASES,
    nfc,
)
from srbtr.cyrillic._transcoder import (
    Letter,
    Peekable,
    SourceError,
    Transcoder,
    TransliterationResult,
    collect,
    transliterate,
    transliterate_detailed,
)

__all__ = [
    "COMPOSITE_DIGRAPHS",
    "DIGRAPH_LEADS",
    "LATIN_TO_CYRILLIC",
    "LEGACY_ALIASES",
    "Letter",
    "Peekable",
    "SourceError",
    "Transcoder",
    "TransliterationResult",
    "collect",
    "nfc",
    "transliterate",
    "transliterate_detailed",
]
