"""
Grapheme cluster sources.

The transcoder consumes user-perceived characters, not codepoints: a base
letter followed by a combining caron (``c`` + U+030C) must arrive as one
unit so that it can be normalized to ``č`` before lookup. Segmentation
follows Unicode extended grapheme clusters (UAX #29) via the ``regex``
module's ``\\X``.

Example:
    >>> split_graphemes("c\\u030cudo")
    ['č', 'u', 'd', 'o']
"""

from __future__ import annotations

import codecs
from typing import IO, AnyStr, Iterator

import regex

__all__ = ["split_graphemes", "iter_graphemes", "DEFAULT_CHUNK_SIZE"]

DEFAULT_CHUNK_SIZE = 8192

_GRAPHEME = regex.compile(r"\X")


def split_graphemes(text: str) -> list[str]:
    """
    Split text into extended grapheme clusters.

    Args:
        text: Any Unicode string

    Returns:
        List of clusters whose concatenation equals ``text``
    """
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    return _GRAPHEME.findall(text)


def iter_graphemes(
    stream: IO[AnyStr],
    encoding: str = "utf-8",
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> Iterator[str]:
    """
    Lazily yield grapheme clusters read from a file object.

    Binary streams are decoded incrementally with ``encoding``; text streams
    are used as-is. The last cluster of every chunk is held back until the
    next chunk arrives, since more combining marks may follow it.

    Read errors (``OSError``) and decode errors (``UnicodeDecodeError``)
    propagate from the point where they occur: every cluster decoded before
    the failure, including the held-back one, is yielded first.

    Args:
        stream: Readable text or binary file object
        encoding: Encoding for binary streams
        chunk_size: Number of bytes/characters per read

    Yields:
        Grapheme clusters in input order
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    decoder = None
    pending = ""

    while True:
        try:
            chunk = stream.read(chunk_size)
            if isinstance(chunk, (bytes, bytearray)):
                if decoder is None:
                    decoder = codecs.getincrementaldecoder(encoding)()
                text = decoder.decode(chunk, final=not chunk)
            else:
                text = chunk
        except UnicodeDecodeError as err:
            # Everything before the bad byte was valid and is still delivered.
            valid = ""
            if decoder is not None:
                valid = err.object[: err.start].decode(encoding)
            yield from _GRAPHEME.findall(pending + valid)
            raise
        except OSError:
            yield from _GRAPHEME.findall(pending)
            raise

        if not chunk:
            pending += text
            break

        clusters = _GRAPHEME.findall(pending + text)
        pending = clusters.pop() if clusters else ""
        yield from clusters

    yield from _GRAPHEME.findall(pending)
