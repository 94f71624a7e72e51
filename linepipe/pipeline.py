"""Pipeline class for chaining commands."""

import logging
from typing import Iterable, Iterator, Optional, Union

from linepipe import factory
from linepipe.command import Command, ExecutionMode
from linepipe.commands.grep import GrepOption
from linepipe.commands.limit import DEFAULT_COUNT
from linepipe.commands.sort import SortOption
from linepipe.commands.uniq import UniqOption
from linepipe.commands.wc import WcOption
from linepipe.context import ExecutionContext
from linepipe.streams import Input, IteratorInput, ListOutput, Output, as_input

logger = logging.getLogger(__name__)

LineSource = Union[Input, str, Iterable[str]]


class Pipeline:
    """
    Builder class for chaining commands into a pipeline.

    Each chaining call appends one stage and returns the same builder.
    Stage i's output is the input of stage i+1. Execution is synchronous,
    single-threaded and pull-driven: a LINE_BY_LINE stage passes lines on
    as it reads them, a COMPLETE_INPUT stage holds everything back until
    its upstream is exhausted.

    Example:
        >>> Pipeline().grep("ERROR").sort(SortOption.DESCENDING).to_shell()
        'grep ERROR | sort --descending'
        >>> Pipeline().sort().run_lines(["banana", "apple", "cherry"])
        ['apple', 'banana', 'cherry']
    """

    def __init__(self, *commands: Command):
        """
        Create a new Pipeline.

        Args:
            *commands: Initial stages, in execution order.
        """
        self._commands: list[Command] = []
        for command in commands:
            self.pipe(command)

    @classmethod
    def start(cls, *commands: Command) -> "Pipeline":
        """Begin a pipeline. Equivalent to Pipeline(*commands)."""
        return cls(*commands)

    def pipe(self, command: Command) -> "Pipeline":
        """
        Append a command as the next stage.

        Args:
            command: The command to append.

        Returns:
            Self for method chaining.

        Raises:
            TypeError: If command is not a Command.
        """
        if not isinstance(command, Command):
            raise TypeError(
                f"Expected a Command, got {type(command).__name__}. "
                "Use the factory functions like sort(), grep() or head()."
            )
        self._commands.append(command)
        return self

    def sort(self, *options: SortOption) -> "Pipeline":
        """
        Sort all lines.

        Args:
            *options: Sort options. Default is ascending.

        Returns:
            Self for method chaining.

        Example:
            >>> Pipeline().sort(SortOption.DESCENDING, SortOption.NUMERIC)
        """
        return self.pipe(factory.sort(*options))

    def grep(self, pattern: str, *options: GrepOption) -> "Pipeline":
        """
        Keep lines matching a pattern.

        Example:
            >>> Pipeline().grep("warn", GrepOption.IGNORE_CASE)
        """
        return self.pipe(factory.grep(pattern, *options))

    def uniq(self, *options: UniqOption) -> "Pipeline":
        """Collapse adjacent duplicate lines."""
        return self.pipe(factory.uniq(*options))

    def head(self, count: int = DEFAULT_COUNT) -> "Pipeline":
        """Keep the first count lines."""
        return self.pipe(factory.head(count))

    def tail(self, count: int = DEFAULT_COUNT) -> "Pipeline":
        """Keep the last count lines."""
        return self.pipe(factory.tail(count))

    def wc(self, *options: WcOption) -> "Pipeline":
        """Replace the input by its line, word and character counts."""
        return self.pipe(factory.wc(*options))

    def envsubst(self, *names: str) -> "Pipeline":
        """Substitute environment variable references."""
        return self.pipe(factory.envsubst(*names))

    @property
    def commands(self) -> tuple[Command, ...]:
        """Return the stages in execution order."""
        return tuple(self._commands)

    def to_shell(self) -> str:
        """
        Render the pipeline as the equivalent shell command line.

        Returns:
            Stages joined by " | ".
        """
        return " | ".join(command.to_shell() for command in self._commands)

    def stream(
        self, source: LineSource, context: Optional[ExecutionContext] = None
    ) -> Iterator[str]:
        """
        Validate every stage and return a lazy iterator over the final output.

        Adjacent stages are connected by an in-memory channel. No input is
        read until the returned iterator is advanced.

        Args:
            source: Input, text block or iterable of lines.
            context: Ambient facts shared by all stages. Default is a new
                ExecutionContext for this run.

        Returns:
            Iterator of output lines of the last stage.

        Raises:
            ValueError: If the pipeline has no stages.
            InvalidConfigurationError: If any stage has invalid arguments.
        """
        if not self._commands:
            raise ValueError("Pipeline requires at least one command")

        if context is None:
            context = ExecutionContext()

        logger.debug("Starting pipeline with %d stage(s): %s", len(self._commands), self)

        upstream: Input = as_input(source)
        lines: Iterator[str] = iter(())
        for index, command in enumerate(self._commands):
            if index > 0:
                upstream = IteratorInput(lines)
            lines = command.stream(upstream, context)
        return lines

    def run(
        self,
        source: LineSource,
        output: Output,
        context: Optional[ExecutionContext] = None,
    ) -> None:
        """
        Execute the pipeline from source into output.

        Errors raised by any stage or by the source or output propagate
        unchanged and abort the run. Lines already written to output stay
        there.

        Args:
            source: Input, text block or iterable of lines.
            output: Sink for the last stage's lines.
            context: Ambient facts shared by all stages.

        Raises:
            ValueError: If the pipeline has no stages.
            InvalidConfigurationError: If any stage has invalid arguments.
        """
        written = 0
        try:
            for line in self.stream(source, context):
                output.write_line(line)
                written += 1
        except Exception as e:
            logger.debug("%r aborted after %d line(s): %s", self, written, e)
            raise
        logger.debug("%r wrote %d line(s)", self, written)

    def run_lines(
        self, source: LineSource, context: Optional[ExecutionContext] = None
    ) -> list[str]:
        """
        Execute the pipeline and return the output lines.

        Args:
            source: Input, text block or iterable of lines.
            context: Ambient facts shared by all stages.

        Returns:
            List of output lines.
        """
        output = ListOutput()
        self.run(source, output, context)
        return output.lines

    def is_streaming(self) -> bool:
        """Return True if no stage needs the complete input."""
        return all(c.mode is ExecutionMode.LINE_BY_LINE for c in self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    def __repr__(self) -> str:
        return f"Pipeline({self.to_shell()!r})"

    def __str__(self) -> str:
        return self.to_shell()
