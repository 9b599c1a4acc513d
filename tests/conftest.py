"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from ansimark.lexer import tokenize
from ansimark.palette import ColorMode
from ansimark.parser import Parser
from ansimark.sink import Call, RecordingSink
from ansimark.tokens import Chunk, ChunkType


@pytest.fixture
def chunks():
    """Return a helper that lexes source and returns (type, text) pairs."""

    def _chunks(source: str) -> list[tuple[ChunkType, str]]:
        return [(c.type, c.text) for c in tokenize(source)]

    return _chunks


@pytest.fixture
def content():
    """Return a helper that lexes source and returns non-empty content chunks."""

    def _content(source: str) -> list[Chunk]:
        return [c for c in tokenize(source) if c.type is ChunkType.CONTENT and c.text]

    return _content


@pytest.fixture
def dispatch():
    """Return a helper that parses source into a RecordingSink and returns its calls."""

    def _dispatch(source: str, mode: ColorMode = ColorMode.DIRECT) -> list[Call]:
        sink = RecordingSink()
        Parser(sink, mode).parse(source)
        return sink.calls

    return _dispatch
