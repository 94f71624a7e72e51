"""Uniq command for collapsing adjacent duplicate lines."""

from itertools import groupby
from typing import Iterator

from linepipe.arguments import Arguments, Option
from linepipe.command import LineByLineCommand
from linepipe.context import ExecutionContext
from linepipe.errors import InvalidConfigurationError


class UniqOption(Option):
    """Option flags for the uniq command.

    Attributes:
        COUNT: Prefix each line with the number of occurrences (-c).
        DUPLICATES_ONLY: Only print lines that are repeated (-d).
        UNIQUE_ONLY: Only print lines that are not repeated (-u).
    """

    COUNT = "count"
    DUPLICATES_ONLY = "repeated"
    UNIQUE_ONLY = "unique"


class UniqArguments(Arguments):
    """Arguments for the uniq command."""

    option_type = UniqOption


class UniqCommand(LineByLineCommand):
    """
    Collapse runs of adjacent equal lines into one.

    A run is written as soon as the first line after it is read, so the
    command streams. Non-adjacent duplicates are kept; sort first to remove
    them all.
    """

    name = "uniq"
    arguments_type = UniqArguments

    def validate(self) -> None:
        super().validate()
        args = self.arguments
        if args.has_opt(UniqOption.DUPLICATES_ONLY) and args.has_opt(UniqOption.UNIQUE_ONLY):
            raise InvalidConfigurationError(
                f"Options {UniqOption.DUPLICATES_ONLY.value} and "
                f"{UniqOption.UNIQUE_ONLY.value} cannot be specified at the same time"
            )

    def process(self, lines: Iterator[str], context: ExecutionContext) -> Iterator[str]:
        args = self.arguments
        count = args.has_opt(UniqOption.COUNT)
        duplicates_only = args.has_opt(UniqOption.DUPLICATES_ONLY)
        unique_only = args.has_opt(UniqOption.UNIQUE_ONLY)

        for line, run in groupby(lines):
            occurrences = sum(1 for _ in run)
            if duplicates_only and occurrences < 2:
                continue
            if unique_only and occurrences > 1:
                continue
            yield f"{occurrences:7d} {line}" if count else line
