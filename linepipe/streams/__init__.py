"""Line stream contracts and adapters."""

from typing import Iterable, Union

from linepipe.streams.base import Input, Output
from linepipe.streams.memory import IteratorInput, ListOutput
from linepipe.streams.text import StringInput, TextInput, TextOutput

__all__ = [
    "Input",
    "Output",
    "IteratorInput",
    "StringInput",
    "ListOutput",
    "TextInput",
    "TextOutput",
    "as_input",
]


def as_input(source: Union[Input, str, Iterable[str]]) -> Input:
    """
    Coerce a line source into an Input.

    Args:
        source: An Input (returned as is), a block of text (split into
            lines), or any iterable of lines (read lazily).

    Returns:
        Input over the source.

    Raises:
        TypeError: If source is not one of the supported types.
    """
    if isinstance(source, Input):
        return source
    elif isinstance(source, str):
        return StringInput(source)
    elif isinstance(source, Iterable):
        return IteratorInput(source)
    else:
        raise TypeError(
            f"Cannot read lines from {type(source).__name__}. "
            "Expected Input, str or an iterable of str."
        )
