"""Line streams over text file objects."""

import io
from typing import TextIO

from linepipe.streams.memory import IteratorInput
from linepipe.streams.base import Output


class TextInput(IteratorInput):
    """
    Input reading from a text file object such as sys.stdin.

    The file is read lazily one line at a time and exactly one line
    terminator ("\\n", "\\r\\n" or "\\r") is stripped from each line. The
    caller owns the file object and closes it.
    """

    def __init__(self, stream: TextIO):
        super().__init__(strip_terminator(line) for line in stream)
        self._stream = stream


class StringInput(TextInput):
    """
    Input over a block of text.

    Lines are split on "\\n", "\\r\\n" and "\\r" only; other characters
    such as form feeds stay inside the line. A trailing line terminator
    does not produce an extra empty line.

    Example:
        >>> list(StringInput("b\\na\\n"))
        ['b', 'a']
    """

    def __init__(self, text: str):
        super().__init__(io.StringIO(text, newline=""))
        self._text = text

    def __repr__(self) -> str:
        return f"StringInput({self._text!r})"


class TextOutput(Output):
    """
    Output writing to a text file object such as sys.stdout.

    Each line is written followed by the given terminator.
    """

    def __init__(self, stream: TextIO, line_separator: str = "\n"):
        """
        Create a text output.

        Args:
            stream: Writable text file object. Not closed by this class.
            line_separator: Terminator appended to every line. Default "\\n".
        """
        self._stream = stream
        self._line_separator = line_separator

    def write_line(self, line: str) -> None:
        self._stream.write(line)
        self._stream.write(self._line_separator)

    def flush(self) -> None:
        self._stream.flush()


def strip_terminator(line: str) -> str:
    """
    Remove one trailing line terminator.

    Example:
        >>> strip_terminator("a\\r\\r\\n")
        'a\\r'
    """
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith(("\n", "\r")):
        return line[:-1]
    return line
