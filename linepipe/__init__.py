"""linepipe - Chain Unix-style text commands into in-process pipelines."""

from linepipe.pipeline import Pipeline
from linepipe.command import Command, CompleteInputCommand, ExecutionMode, LineByLineCommand
from linepipe.arguments import Arguments, Option
from linepipe.context import ExecutionContext
from linepipe.errors import InvalidConfigurationError, LinePipeError
from linepipe.streams import (
    Input,
    Output,
    IteratorInput,
    StringInput,
    ListOutput,
    TextInput,
    TextOutput,
)
from linepipe.commands import (
    SortOption,
    GrepOption,
    UniqOption,
    WcOption,
)
from linepipe.factory import (
    sort,
    grep,
    uniq,
    head,
    tail,
    wc,
    envsubst,
)

__version__ = "0.1.0"
__all__ = [
    "Pipeline",
    "Command",
    "LineByLineCommand",
    "CompleteInputCommand",
    "ExecutionMode",
    "Arguments",
    "Option",
    "ExecutionContext",
    # Errors
    "LinePipeError",
    "InvalidConfigurationError",
    # Streams
    "Input",
    "Output",
    "IteratorInput",
    "StringInput",
    "ListOutput",
    "TextInput",
    "TextOutput",
    # Options
    "SortOption",
    "GrepOption",
    "UniqOption",
    "WcOption",
    # Command factories
    "sort",
    "grep",
    "uniq",
    "head",
    "tail",
    "wc",
    "envsubst",
]
