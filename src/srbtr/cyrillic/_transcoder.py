"""
Streaming Serbian Latin → Cyrillic transcoder.

Consumes grapheme clusters one at a time and yields, for every letter of
the Serbian alphabet, the original spelling together with its Cyrillic
counterpart. Digraphs (Lj, Nj, Dž) are resolved with one grapheme of
lookahead; precomposed digraph codepoints (ǈ, ǋ, ǅ, ...) are expanded
without lookahead. Anything outside the alphabet passes through unchanged.

Example:
    >>> from srbtr.cyrillic import transliterate
    >>> transliterate("Njegov džak")
    'Његов џак'

    >>> from srbtr.cyrillic import Transcoder
    >>> list(Transcoder.from_text("Lju"))
    [Letter(original='Lj', cyrillic='Љ'), Letter(original='u', cyrillic='у')]
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import IO, AnyStr, Iterable, Iterator, NamedTuple, Optional

from srbtr._graphemes import DEFAULT_CHUNK_SIZE, iter_graphemes, split_graphemes
from srbtr.cyrillic._tables import (
    COMPOSITE_DIGRAPHS,
    DIGRAPH_LEADS,
    LATIN_TO_CYRILLIC,
    LEGACY_ALIASES,
    nfc,
)

__all__ = [
    "Letter",
    "Peekable",
    "SourceError",
    "Transcoder",
    "TransliterationResult",
    "collect",
    "transliterate",
    "transliterate_detailed",
]

logger = logging.getLogger(__name__)

# Failures a grapheme source may raise while reading.
_SOURCE_ERRORS = (OSError, UnicodeDecodeError)

_EMPTY = object()


# =============================================================================
# Data Classes
# =============================================================================


class Letter(NamedTuple):
    """One transliterated unit: the source spelling and its Cyrillic form."""

    original: str
    cyrillic: str


@dataclass
class TransliterationResult:
    """Fully drained transcoder output."""

    original: str
    cyrillic: str
    letters: list[Letter] = field(default_factory=list)


class SourceError(OSError):
    """
    Reading from the grapheme source failed.

    The underlying exception is available as ``error`` (and as
    ``__cause__`` when raised by the transcoder).
    """

    def __init__(self, error: BaseException) -> None:
        if isinstance(error, OSError) and error.errno is not None:
            super().__init__(error.errno, error.strerror)
        else:
            super().__init__(str(error))
        self.error = error

    def __str__(self) -> str:
        return f"failed to read source: {self.error}"


# =============================================================================
# Lookahead
# =============================================================================


class Peekable:
    """
    Single-slot lookahead over an iterator.

    A failure raised by the underlying iterator during ``peek()`` is kept in
    the slot: ``peek()`` raises it, and so does the ``advance()`` that
    consumes that position. The iterator itself is never pulled twice for
    the same element.
    """

    def __init__(self, iterable: Iterable[str]) -> None:
        self._it = iter(iterable)
        self._slot = _EMPTY
        self._failure: Optional[BaseException] = None

    def _fill(self) -> None:
        if self._slot is _EMPTY and self._failure is None:
            try:
                self._slot = next(self._it)
            except _SOURCE_ERRORS as err:
                self._failure = err

    def peek(self) -> str:
        """Return the next element without consuming it."""
        self._fill()
        if self._failure is not None:
            raise self._failure
        return self._slot

    def advance(self) -> str:
        """Consume and return the next element."""
        self._fill()
        if self._failure is not None:
            failure, self._failure = self._failure, None
            raise failure
        item, self._slot = self._slot, _EMPTY
        return item

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        return self.advance()


# =============================================================================
# Transcoder
# =============================================================================


class Transcoder:
    """
    Iterator of ``Letter`` pairs over a source of grapheme clusters.

    The source is read exactly once. After a read failure has been raised
    as ``SourceError`` the transcoder is exhausted.

    Args:
        source: Iterable of grapheme clusters; iterating it may raise
            ``OSError`` or ``UnicodeDecodeError``
        legacy_dj: Treat "Dj"/"dj" as "Đ"/"đ" (default True)
    """

    def __init__(self, source: Iterable[str], *, legacy_dj: bool = True) -> None:
        self._input = Peekable(source)
        self.legacy_dj = legacy_dj
        self._done = False

    @classmethod
    def from_text(cls, text: str, *, legacy_dj: bool = True) -> "Transcoder":
        """Build a transcoder over an in-memory string."""
        return cls(split_graphemes(text), legacy_dj=legacy_dj)

    @classmethod
    def from_stream(
        cls,
        stream: IO[AnyStr],
        *,
        encoding: str = "utf-8",
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        legacy_dj: bool = True,
    ) -> "Transcoder":
        """Build a transcoder over a text or binary file object."""
        return cls(
            iter_graphemes(stream, encoding=encoding, chunk_size=chunk_size),
            legacy_dj=legacy_dj,
        )

    def __iter__(self) -> Iterator[Letter]:
        return self

    def __next__(self) -> Letter:
        if self._done:
            raise StopIteration
        try:
            grapheme = self._input.advance()
        except StopIteration:
            self._done = True
            raise
        except _SOURCE_ERRORS as err:
            self._done = True
            raise SourceError(err) from err

        original, spelling = self._resolve(grapheme)
        return Letter(original, LATIN_TO_CYRILLIC.get(spelling, spelling))

    def _resolve(self, grapheme: str) -> tuple[str, str]:
        """
        Classify the letter starting at ``grapheme``.

        Returns the source text consumed (as read, not normalized) and the
        NFC Latin spelling to look up.
        """
        latin = nfc(grapheme)

        composite = COMPOSITE_DIGRAPHS.get(latin)
        if composite is not None:
            return grapheme, composite

        if latin not in DIGRAPH_LEADS:
            return grapheme, latin

        try:
            following = self._input.peek()
        except StopIteration:
            return grapheme, latin
        except _SOURCE_ERRORS as err:
            # Resurfaces when the next letter is read.
            logger.debug("lookahead after %r failed: %s", grapheme, err)
            return grapheme, latin

        # Only the second letter is lower-cased, so "LJ" matches "Lj".
        digraph = latin + nfc(following).lower()

        if self.legacy_dj and digraph in LEGACY_ALIASES:
            self._input.advance()
            logger.debug("legacy alias %r read as %r", digraph, LEGACY_ALIASES[digraph])
            return grapheme + following, LEGACY_ALIASES[digraph]

        if digraph in LATIN_TO_CYRILLIC:
            self._input.advance()
            return grapheme + following, digraph

        return grapheme, latin


# =============================================================================
# Bulk helpers
# =============================================================================


def collect(letters: Iterable[Letter]) -> TransliterationResult:
    """
    Drain a letter sequence into concatenated original and Cyrillic text.

    Stops at the first failure: ``SourceError`` propagates to the caller and
    no partial result is returned.
    """
    drained = list(letters)
    return TransliterationResult(
        original="".join(letter.original for letter in drained),
        cyrillic="".join(letter.cyrillic for letter in drained),
        letters=drained,
    )


def transliterate_detailed(text: str, *, legacy_dj: bool = True) -> TransliterationResult:
    """
    Transliterate text and keep the per-letter pairs.

    Args:
        text: Serbian Latin text

    Returns:
        TransliterationResult with original, cyrillic and letters
    """
    return collect(Transcoder.from_text(text, legacy_dj=legacy_dj))


def transliterate(text: str, *, legacy_dj: bool = True) -> str:
    """
    Transliterate Serbian Latin text to Serbian Cyrillic.

    Case is preserved per letter; characters outside the alphabet (digits,
    punctuation, Cyrillic, other scripts) pass through unchanged.

    Args:
        text: Serbian Latin text
        legacy_dj: Treat "Dj"/"dj" as "Đ"/"đ"

    Returns:
        Cyrillic text

    Example:
        >>> transliterate("Ljubav je čudo")
        'Љубав је чудо'
    """
    return transliterate_detailed(text, legacy_dj=legacy_dj).cyrillic
