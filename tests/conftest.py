from __future__ import annotations

from collections.abc import Iterable

import pytest

from linepipe.context import ExecutionContext
from linepipe.streams import Input, Output


class RecordingInput(Input):
    """Input over a fixed list that records how far it has been read."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = list(lines)
        self.reads = 0

    @property
    def exhausted(self) -> bool:
        return self.reads >= len(self._lines)

    def has_more_lines(self) -> bool:
        return not self.exhausted

    def read_line(self) -> str:
        if self.exhausted:
            raise EOFError("No more lines to read")
        line = self._lines[self.reads]
        self.reads += 1
        return line


class FailingInput(Input):
    """Input that yields some lines and then raises an OSError."""

    def __init__(self, lines: Iterable[str], error: Exception) -> None:
        self._lines = list(lines)
        self._error = error

    def has_more_lines(self) -> bool:
        return True

    def read_line(self) -> str:
        if self._lines:
            return self._lines.pop(0)
        raise self._error


class WatchingOutput(Output):
    """Output that records, per written line, whether a source was exhausted."""

    def __init__(self, source: RecordingInput) -> None:
        self._source = source
        self.lines: list[str] = []
        self.source_exhausted_at_write: list[bool] = []

    def write_line(self, line: str) -> None:
        self.source_exhausted_at_write.append(self._source.exhausted)
        self.lines.append(line)


@pytest.fixture
def context(tmp_path) -> ExecutionContext:
    return ExecutionContext(current_directory=tmp_path)


@pytest.fixture
def fruit() -> list[str]:
    return ["banana", "apple", "cherry"]
