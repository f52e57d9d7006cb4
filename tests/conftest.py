"""Shared fixtures for srbtr tests."""

from typing import Callable, Iterable, Iterator

import pytest


def _failing_source(graphemes: Iterable[str], error: BaseException) -> Iterator[str]:
    yield from graphemes
    raise error


class CountingSource:
    """Grapheme iterator that records how many items were pulled."""

    def __init__(self, graphemes: Iterable[str]) -> None:
        self._it = iter(graphemes)
        self.pulled = 0

    def __iter__(self):
        return self

    def __next__(self) -> str:
        item = next(self._it)
        self.pulled += 1
        return item


@pytest.fixture
def failing_source() -> Callable[..., Iterator[str]]:
    """Return a factory for sources that raise after yielding some graphemes."""
    return _failing_source


@pytest.fixture
def counting_source() -> Callable[[Iterable[str]], CountingSource]:
    """Return a factory for sources that count pulls."""
    return CountingSource


class FailingStream:
    """Binary stream that returns the given chunks, then raises on read."""

    def __init__(self, chunks: Iterable[bytes], error: BaseException) -> None:
        self._chunks = list(chunks)
        self._error = error

    def read(self, size: int = -1) -> bytes:
        if self._chunks:
            return self._chunks.pop(0)
        raise self._error


@pytest.fixture
def failing_stream() -> Callable[..., FailingStream]:
    """Return a factory for binary streams whose reads eventually fail."""
    return FailingStream
