"""In-memory line streams."""

from typing import Iterable, Iterator, Optional

from linepipe.streams.base import Input, Output

_EXHAUSTED = object()


class IteratorInput(Input):
    """
    Input backed by any iterable of lines.

    The iterable is consumed lazily with a one-line lookahead, so an
    unbounded generator is a valid source. Pipelines use this class as the
    channel between adjacent stages.
    """

    def __init__(self, lines: Iterable[str]):
        self._iterator: Iterator[str] = iter(lines)
        self._next: object = None
        self._has_next: Optional[bool] = None

    def has_more_lines(self) -> bool:
        if self._has_next is None:
            self._next = next(self._iterator, _EXHAUSTED)
            self._has_next = self._next is not _EXHAUSTED
        return self._has_next

    def read_line(self) -> str:
        if not self.has_more_lines():
            raise EOFError("No more lines to read")
        line = self._next
        self._next = None
        self._has_next = None
        return line  # type: ignore[return-value]


class ListOutput(Output):
    """Output collecting every written line into a list."""

    def __init__(self):
        self.lines: list[str] = []

    def write_line(self, line: str) -> None:
        self.lines.append(line)

    def __str__(self) -> str:
        return "".join(line + "\n" for line in self.lines)

    def __repr__(self) -> str:
        return f"ListOutput({self.lines!r})"
