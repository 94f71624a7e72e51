"""Command catalog."""

from linepipe.commands.envsubst import EnvsubstArguments, EnvsubstCommand, EnvsubstOption
from linepipe.commands.grep import GrepArguments, GrepCommand, GrepOption
from linepipe.commands.limit import HeadCommand, LimitArguments, TailCommand
from linepipe.commands.sort import SortArguments, SortCommand, SortOption
from linepipe.commands.uniq import UniqArguments, UniqCommand, UniqOption
from linepipe.commands.wc import WcArguments, WcCommand, WcOption

__all__ = [
    "SortCommand",
    "SortOption",
    "SortArguments",
    "GrepCommand",
    "GrepOption",
    "GrepArguments",
    "UniqCommand",
    "UniqOption",
    "UniqArguments",
    "HeadCommand",
    "TailCommand",
    "LimitArguments",
    "WcCommand",
    "WcOption",
    "WcArguments",
    "EnvsubstCommand",
    "EnvsubstOption",
    "EnvsubstArguments",
]
