"""Word count command."""

from typing import Iterable

from linepipe.arguments import Arguments, Option
from linepipe.command import CompleteInputCommand
from linepipe.context import ExecutionContext


class WcOption(Option):
    """Option flags for the wc command.

    With no option selected all three counts are written.

    Attributes:
        LINES: Count lines (-l).
        WORDS: Count whitespace separated words (-w).
        CHARS: Count characters, one terminator per line included (-m).
    """

    LINES = "lines"
    WORDS = "words"
    CHARS = "chars"


class WcArguments(Arguments):
    """Arguments for the wc command."""

    option_type = WcOption


class WcCommand(CompleteInputCommand):
    """Count lines, words and characters of the complete input."""

    name = "wc"
    arguments_type = WcArguments

    def process_all(self, lines: list[str], context: ExecutionContext) -> Iterable[str]:
        selected = [opt for opt in WcOption if self.arguments.has_opt(opt)] or list(WcOption)

        counts = {
            WcOption.LINES: len(lines),
            WcOption.WORDS: sum(len(line.split()) for line in lines),
            WcOption.CHARS: sum(len(line) + 1 for line in lines),
        }
        return [" ".join(str(counts[opt]) for opt in selected)]
