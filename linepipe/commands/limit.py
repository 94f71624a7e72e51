"""Head and tail commands."""

import shlex
from collections import deque
from itertools import islice
from typing import Iterable, Iterator

from linepipe.arguments import Arguments, Option
from linepipe.command import Command, CompleteInputCommand, LineByLineCommand
from linepipe.context import ExecutionContext
from linepipe.errors import InvalidConfigurationError

DEFAULT_COUNT = 10


class LimitOption(Option):
    """Head and tail take no option flags, only a count operand."""

    pass


class LimitArguments(Arguments):
    """Arguments for head and tail. The first operand is the line count."""

    option_type = LimitOption


class _LimitCommand(Command):
    """Shared count handling for head and tail."""

    arguments_type = LimitArguments

    def validate(self) -> None:
        super().validate()
        count = self.arguments.operand(0, DEFAULT_COUNT)
        if isinstance(count, str):
            try:
                count = int(count)
            except ValueError:
                raise InvalidConfigurationError(
                    f"{self.name} count must be an integer, got {count!r}"
                ) from None
        elif isinstance(count, bool) or not isinstance(count, int):
            raise InvalidConfigurationError(
                f"{self.name} count must be an integer, got {count!r}"
            )
        if count < 0:
            raise InvalidConfigurationError(f"{self.name} count must be >= 0, got {count}")

    @property
    def count(self) -> int:
        """Return the number of lines to keep."""
        return int(self.arguments.operand(0, DEFAULT_COUNT))

    def to_shell(self) -> str:
        count = self.arguments.operand(0, DEFAULT_COUNT)
        return f"{self.name} -n {shlex.quote(str(count))}"


class HeadCommand(_LimitCommand, LineByLineCommand):
    """
    Keep the first count lines.

    Stops reading input once count lines were written, so it terminates
    even on unbounded input.
    """

    name = "head"

    def process(self, lines: Iterator[str], context: ExecutionContext) -> Iterator[str]:
        yield from islice(lines, self.count)


class TailCommand(_LimitCommand, CompleteInputCommand):
    """Keep the last count lines."""

    name = "tail"

    def process_all(self, lines: list[str], context: ExecutionContext) -> Iterable[str]:
        return deque(lines, maxlen=self.count)
