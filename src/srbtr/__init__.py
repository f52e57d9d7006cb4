"""
srbtr: Serbian Latin → Cyrillic transliteration.

Transliterates one letter at a time, keeping the original spelling next to
each Cyrillic letter. Handles the digraphs Lj, Nj and Dž (also written in
capitals or as single precomposed codepoints), input in any Unicode
normalization form, and the informal "dj" spelling of "đ".

Basic usage:
    >>> from srbtr import transliterate
    >>> transliterate("Njegov džak")
    'Његов џак'

Per-letter usage:
    >>> from srbtr import Transcoder
    >>> [tuple(letter) for letter in Transcoder.from_text("LJUT")]
    [('LJ', 'Љ'), ('U', 'У'), ('T', 'Т')]
"""

from srbtr._graphemes import iter_graphemes, split_graphemes
from srbtr.cyrillic import (
    Letter,
    SourceError,
    Transcoder,
    TransliterationResult,
    collect,
    transliterate,
    transliterate_detailed,
)

__version__ = "0.1.0"
__all__ = [
    "Letter",
    "SourceError",
    "Transcoder",
    "TransliterationResult",
    "collect",
    "iter_graphemes",
    "split_graphemes",
    "transliterate",
    "transliterate_detailed",
]


# Lazy import for the spaCy component (only when spacy is installed)
def __getattr__(name: str):
    if name == "SerbianCyrillicComponent":
        try:
            from srbtr.spacy import SerbianCyrillicComponent
            return SerbianCyrillicComponent
        except ImportError:
            raise ImportError(
                "spaCy integration requires spacy. "
                "Install with: pip install srbtr[spacy]"
            )
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
