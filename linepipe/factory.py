"""Factory functions returning new commands.

Each function builds an immutable command from options and operands.
Calling one without options gives the command's default behaviour.

Example:
    Pipeline().pipe(grep("ERROR")).pipe(sort(SortOption.DESCENDING))
"""

from typing import Union

from linepipe.commands.envsubst import EnvsubstArguments, EnvsubstCommand
from linepipe.commands.grep import GrepArguments, GrepCommand, GrepOption
from linepipe.commands.limit import DEFAULT_COUNT, HeadCommand, LimitArguments, TailCommand
from linepipe.commands.sort import SortArguments, SortCommand, SortOption
from linepipe.commands.uniq import UniqArguments, UniqCommand, UniqOption
from linepipe.commands.wc import WcArguments, WcCommand, WcOption


def sort(*options: SortOption) -> SortCommand:
    """
    Create a sort command.

    Args:
        *options: Sort options. Default is ascending lexicographic order.

    Returns:
        SortCommand bound to the options.

    Example:
        >>> sort()
        SortCommand(SortArguments(options=frozenset(), operands=()))

        >>> sort(SortOption.DESCENDING).to_shell()
        'sort --descending'
    """
    return SortCommand(SortArguments.of(*options))


def grep(pattern: str, *options: GrepOption) -> GrepCommand:
    """
    Create a grep command.

    Args:
        pattern: Regular expression (or literal with FIXED_STRINGS).
        *options: Grep options.

    Returns:
        GrepCommand bound to the pattern and options.

    Example:
        >>> grep("error", GrepOption.IGNORE_CASE).to_shell()
        'grep --ignore-case error'
    """
    return GrepCommand(GrepArguments.of(*options, operands=(pattern,)))


def uniq(*options: UniqOption) -> UniqCommand:
    """
    Create a uniq command.

    Example:
        >>> uniq(UniqOption.COUNT).to_shell()
        'uniq --count'
    """
    return UniqCommand(UniqArguments.of(*options))


def head(count: Union[int, str] = DEFAULT_COUNT) -> HeadCommand:
    """
    Create a head command keeping the first count lines.

    Example:
        >>> head(5).to_shell()
        'head -n 5'
    """
    return HeadCommand(LimitArguments.of(operands=(count,)))


def tail(count: Union[int, str] = DEFAULT_COUNT) -> TailCommand:
    """
    Create a tail command keeping the last count lines.

    Example:
        >>> tail(5).to_shell()
        'tail -n 5'
    """
    return TailCommand(LimitArguments.of(operands=(count,)))


def wc(*options: WcOption) -> WcCommand:
    """
    Create a wc command.

    Example:
        >>> wc(WcOption.LINES).to_shell()
        'wc --lines'
    """
    return WcCommand(WcArguments.of(*options))


def envsubst(*names: str) -> EnvsubstCommand:
    """
    Create an envsubst command.

    Args:
        *names: Variables to substitute. Default is every variable.

    Example:
        >>> envsubst("HOME").to_shell()
        'envsubst HOME'
    """
    return EnvsubstCommand(EnvsubstArguments.of(operands=names))
