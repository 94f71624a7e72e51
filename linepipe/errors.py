"""Exception types raised by linepipe commands and pipelines."""


class LinePipeError(Exception):
    """Base class for all linepipe errors."""

    pass


class InvalidConfigurationError(LinePipeError, ValueError):
    """
    Raised when a command's arguments cannot be executed.

    Arguments are never checked when they are built. The owning command
    checks them at the start of execution, before any input line is read
    or any output line is written.
    """

    pass
