"""Environment variable substitution command."""

import re
from typing import Iterator

from linepipe.arguments import Arguments, Option
from linepipe.command import LineByLineCommand
from linepipe.context import ExecutionContext

_VARIABLE = re.compile(r"\$(?:\{([A-Za-z_][A-Za-z0-9_]*)\}|([A-Za-z_][A-Za-z0-9_]*))")


class EnvsubstOption(Option):
    """The envsubst command takes no option flags."""

    pass


class EnvsubstArguments(Arguments):
    """
    Arguments for the envsubst command.

    Operands name the variables to substitute. With no operands every
    variable reference is substituted.
    """

    option_type = EnvsubstOption


class EnvsubstCommand(LineByLineCommand):
    """
    Replace $NAME and ${NAME} references with environment values.

    Values come from the execution context's environment snapshot, taken
    once per run. Unknown variables are replaced by the empty string.
    """

    name = "envsubst"
    arguments_type = EnvsubstArguments

    def process(self, lines: Iterator[str], context: ExecutionContext) -> Iterator[str]:
        env = context.env()
        names = {str(name).lstrip("$") for name in self.arguments.operands}

        def substitute(match: re.Match) -> str:
            name = match.group(1) or match.group(2)
            if names and name not in names:
                return match.group(0)
            return env.get(name, "")

        for line in lines:
            yield _VARIABLE.sub(substitute, line)
