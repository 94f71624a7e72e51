"""Command base classes and execution-mode runners."""

import logging
from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import Any, Callable, ClassVar, Iterable, Iterator, Optional

from linepipe.arguments import Arguments
from linepipe.context import ExecutionContext
from linepipe.errors import InvalidConfigurationError
from linepipe.streams.base import Input, Output

logger = logging.getLogger(__name__)


class ExecutionMode(Enum):
    """How a command consumes its input.

    Attributes:
        LINE_BY_LINE: Output is produced incrementally while input is read.
            Works on unbounded input.
        COMPLETE_INPUT: The whole input is read before any output is
            produced. Acts as a barrier in a pipeline.
    """

    LINE_BY_LINE = auto()
    COMPLETE_INPUT = auto()


class Command(ABC):
    """
    Base class for all commands.

    A command kind fixes its name, execution mode and argument type as class
    attributes. Concrete commands derive from one of the two mode bases:

    - LineByLineCommand implements process(lines, context), a generator
      over a lazy iterator of input lines.
    - CompleteInputCommand implements process_all(lines, context), which
      receives the fully materialized input as a list.

    Commands are immutable. with_args() returns a new command of the same
    kind bound to other arguments.
    """

    name: ClassVar[str] = ""
    mode: ClassVar[ExecutionMode]
    arguments_type: ClassVar[type[Arguments]] = Arguments

    def __init__(self, arguments: Optional[Arguments] = None):
        """
        Create a command.

        Args:
            arguments: Bound arguments. Default is an empty argument set
                of this command's argument type.
        """
        self._arguments = arguments if arguments is not None else self.arguments_type()

    @property
    def arguments(self) -> Arguments:
        """Return the bound arguments."""
        return self._arguments

    def with_args(self, arguments: Arguments) -> "Command":
        """Return a new command of the same kind bound to arguments."""
        return type(self)(arguments)

    def validate(self) -> None:
        """
        Check the bound arguments before execution.

        Subclasses extend this to reject contradictory combinations.

        Raises:
            InvalidConfigurationError: If the arguments belong to another
                command kind or cannot be executed.
        """
        if not isinstance(self._arguments, self.arguments_type):
            raise InvalidConfigurationError(
                f"{self.name} expects {self.arguments_type.__name__}, "
                f"got {type(self._arguments).__name__}"
            )
        self._arguments.validate()

    def stream(
        self, input: Input, context: Optional[ExecutionContext] = None
    ) -> Iterator[str]:
        """
        Validate, then return a lazy iterator over the output lines.

        Validation happens immediately. Input is not read until the returned
        iterator is advanced.

        Args:
            input: Source of lines.
            context: Ambient facts. Default is a fresh ExecutionContext.

        Returns:
            Iterator of output lines.

        Raises:
            InvalidConfigurationError: If the arguments are invalid.
        """
        self.validate()
        logger.debug("Validated %s", self)
        runner = _MODE_RUNNERS[self.mode]
        return runner(self, input, context if context is not None else ExecutionContext())

    def execute(
        self,
        input: Input,
        output: Output,
        context: Optional[ExecutionContext] = None,
    ) -> None:
        """
        Run the command from input to output.

        If validation fails nothing is read from input and nothing is
        written to output. Errors raised by input or output propagate
        unchanged.

        Args:
            input: Source of lines.
            output: Sink for produced lines.
            context: Ambient facts. Default is a fresh ExecutionContext.

        Raises:
            InvalidConfigurationError: If the arguments are invalid.
        """
        for line in self.stream(input, context):
            output.write_line(line)

    def to_shell(self) -> str:
        """Render the command as a shell-like string, e.g. "sort --descending"."""
        args = self._arguments.to_shell()
        return f"{self.name} {args}" if args else self.name

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._arguments == other._arguments  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._arguments))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._arguments!r})"

    def __str__(self) -> str:
        return self.to_shell()


class LineByLineCommand(Command):
    """Base class for commands that produce output while reading input."""

    mode = ExecutionMode.LINE_BY_LINE

    @abstractmethod
    def process(self, lines: Iterator[str], context: ExecutionContext) -> Iterator[str]:
        """
        Transform lines incrementally.

        Args:
            lines: Lazy iterator over the input lines.
            context: Ambient facts for this run.

        Yields:
            Output lines, each before the next input line is pulled.
        """
        pass


class CompleteInputCommand(Command):
    """Base class for commands that need the whole input first."""

    mode = ExecutionMode.COMPLETE_INPUT

    @abstractmethod
    def process_all(self, lines: list[str], context: ExecutionContext) -> Iterable[str]:
        """
        Transform the complete input.

        Args:
            lines: Every input line, in order. May be reordered in place.
            context: Ambient facts for this run.

        Returns:
            Output lines in the order they are written.
        """
        pass


def _run_line_by_line(
    command: LineByLineCommand, input: Input, context: ExecutionContext
) -> Iterator[str]:
    yield from command.process(iter(input), context)


def _run_complete_input(
    command: CompleteInputCommand, input: Input, context: ExecutionContext
) -> Iterator[str]:
    lines = []
    while input.has_more_lines():
        lines.append(input.read_line())
    logger.debug("%s read complete input (%d lines)", command.name, len(lines))
    yield from command.process_all(lines, context)


_MODE_RUNNERS: dict[
    ExecutionMode, Callable[[Any, Input, ExecutionContext], Iterator[str]]
] = {
    ExecutionMode.LINE_BY_LINE: _run_line_by_line,
    ExecutionMode.COMPLETE_INPUT: _run_complete_input,
}
