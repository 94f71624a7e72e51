"""Grep command for line filtering."""

import re
from functools import lru_cache
from typing import Callable, Iterator

from linepipe.arguments import Arguments, Option
from linepipe.command import LineByLineCommand
from linepipe.context import ExecutionContext
from linepipe.errors import InvalidConfigurationError


class GrepOption(Option):
    """Option flags for the grep command.

    Attributes:
        IGNORE_CASE: Match case-insensitively (-i).
        INVERT_MATCH: Keep lines that do not match (-v).
        FIXED_STRINGS: Treat the pattern as a literal string (-F).
        LINE_REGEXP: Only match whole lines (-x).
    """

    IGNORE_CASE = "ignore-case"
    INVERT_MATCH = "invert-match"
    FIXED_STRINGS = "fixed-strings"
    LINE_REGEXP = "line-regexp"


class GrepArguments(Arguments):
    """Arguments for the grep command. The first operand is the pattern."""

    option_type = GrepOption


class GrepCommand(LineByLineCommand):
    """
    Keep the lines matching a pattern.

    Each line is tested on its own, so output is produced while input is
    still being read.
    """

    name = "grep"
    arguments_type = GrepArguments

    def validate(self) -> None:
        super().validate()
        if self.arguments.operand(0) is None:
            raise InvalidConfigurationError("grep requires a pattern operand")
        try:
            self._matcher()
        except re.error as e:
            raise InvalidConfigurationError(
                f"Invalid grep pattern {self.arguments.operand(0)!r}: {e}"
            ) from e

    def process(self, lines: Iterator[str], context: ExecutionContext) -> Iterator[str]:
        matches = self._matcher()
        invert = self.arguments.has_opt(GrepOption.INVERT_MATCH)
        for line in lines:
            if matches(line) != invert:
                yield line

    def _matcher(self) -> Callable[[str], bool]:
        """Return a line predicate for the pattern operand."""
        args = self.arguments
        regex = _compile(
            str(args.operand(0)),
            args.has_opt(GrepOption.FIXED_STRINGS),
            args.has_opt(GrepOption.IGNORE_CASE),
        )
        if args.has_opt(GrepOption.LINE_REGEXP):
            return lambda line: regex.fullmatch(line) is not None
        return lambda line: regex.search(line) is not None


@lru_cache(maxsize=128)
def _compile(pattern: str, fixed_strings: bool, ignore_case: bool) -> "re.Pattern[str]":
    if fixed_strings:
        pattern = re.escape(pattern)
    return re.compile(pattern, re.IGNORECASE if ignore_case else 0)
