"""Sort command."""

import re
from typing import Callable, Iterable, Optional

from linepipe.arguments import Arguments, Option
from linepipe.command import CompleteInputCommand
from linepipe.context import ExecutionContext
from linepipe.errors import InvalidConfigurationError

_NUMERIC_PREFIX = re.compile(r"\s*([-+]?(?:\d+(?:\.\d*)?|\.\d+))")


class SortOption(Option):
    """Option flags for the sort command.

    Attributes:
        ASCENDING: Sort in ascending order (the default).
        DESCENDING: Sort in descending order, the mirror image of ascending.
        NUMERIC: Compare by the leading number of each line.
        IGNORE_CASE: Compare case-insensitively.
        UNIQUE: Keep only the first of each run of equal lines.
    """

    ASCENDING = "ascending"
    DESCENDING = "descending"
    NUMERIC = "numeric"
    IGNORE_CASE = "ignore-case"
    UNIQUE = "unique"


class SortArguments(Arguments):
    """Arguments for the sort command."""

    option_type = SortOption


class SortCommand(CompleteInputCommand):
    """
    Sort all input lines.

    Sorting needs the complete input, so this command is a barrier in a
    pipeline. The sort is stable and lines are only reordered, never
    changed. Descending output is the exact reverse of ascending output.
    """

    name = "sort"
    arguments_type = SortArguments

    def validate(self) -> None:
        super().validate()
        args = self.arguments
        if args.has_opt(SortOption.ASCENDING) and args.has_opt(SortOption.DESCENDING):
            raise InvalidConfigurationError(
                f"Options {SortOption.ASCENDING.value} and "
                f"{SortOption.DESCENDING.value} cannot be specified at the same time"
            )

    def process_all(self, lines: list[str], context: ExecutionContext) -> Iterable[str]:
        key = self._sort_key()
        lines.sort(key=key)

        if self.arguments.has_opt(SortOption.UNIQUE):
            lines = _first_of_runs(lines, key)

        if self.arguments.has_opt(SortOption.DESCENDING):
            return reversed(lines)
        return lines

    def _sort_key(self) -> Optional[Callable[[str], object]]:
        if self.arguments.has_opt(SortOption.NUMERIC):
            return numeric_key
        if self.arguments.has_opt(SortOption.IGNORE_CASE):
            return str.casefold
        return None


def numeric_key(line: str) -> float:
    """
    Return the number a line starts with, or 0 if it has none.

    Leading whitespace is skipped, matching sort -n.

    Example:
        >>> numeric_key("  42 apples")
        42.0
        >>> numeric_key("apples")
        0.0
    """
    match = _NUMERIC_PREFIX.match(line)
    if match is None:
        return 0.0
    return float(match.group(1))


def _first_of_runs(
    lines: list[str], key: Optional[Callable[[str], object]]
) -> list[str]:
    """Drop lines whose key equals the key of the line before them."""
    result: list[str] = []
    previous: object = None
    for line in lines:
        current = key(line) if key else line
        if result and current == previous:
            continue
        result.append(line)
        previous = current
    return result
