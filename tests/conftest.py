"""Shared fixtures for writer tests."""

from typing import List, Tuple

import pytest

from tapwriter.reporters.line_writer import LineWriter
from tapwriter.utils.styling import PlainStyler


class RecordingSink:
    """Output sink that records (channel, text) pairs instead of printing."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, str]] = []

    def info(self, line: str) -> None:
        self.calls.append(("info", line))

    def log(self, line: str) -> None:
        self.calls.append(("log", line))

    def error(self, text: str) -> None:
        self.calls.append(("error", text))

    def lines(self, channel: str) -> List[str]:
        return [text for name, text in self.calls if name == channel]


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def writer(sink: RecordingSink) -> LineWriter:
    return LineWriter(sink, "/repo", styler=PlainStyler())


class TagStyler:
    """Styler that marks styles as <tag>text</tag> so tests can see them."""

    def style(self, tag: str, text: str) -> str:
        return f"<{tag}>{text}</{tag}>"


@pytest.fixture
def tag_styler() -> TagStyler:
    return TagStyler()
