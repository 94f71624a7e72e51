"""Abstract base classes for line streams."""

from abc import ABC, abstractmethod
from typing import Iterable, Iterator


class Input(ABC):
    """
    Pull-based, forward-only source of text lines.

    Callers check has_more_lines() before every read_line(). Lines carry no
    line terminator. An Input cannot be restarted once consumed.
    """

    @abstractmethod
    def has_more_lines(self) -> bool:
        """
        Return True if another line can be read.

        Returns:
            True if read_line() will return a line, False once exhausted.
        """
        pass

    @abstractmethod
    def read_line(self) -> str:
        """
        Read the next line.

        Returns:
            The next line without its terminator.

        Raises:
            EOFError: If the input is already exhausted.
        """
        pass

    def __iter__(self) -> Iterator[str]:
        while self.has_more_lines():
            yield self.read_line()


class Output(ABC):
    """Append-only, order-preserving sink of text lines."""

    @abstractmethod
    def write_line(self, line: str) -> None:
        """
        Append a line.

        Args:
            line: Line content without a terminator.
        """
        pass

    def write_lines(self, lines: Iterable[str]) -> None:
        """Append every line of an iterable in order."""
        for line in lines:
            self.write_line(line)
