"""Ambient execution facts available to commands."""

import getpass
import os
import platform
import tempfile
from pathlib import Path
from typing import Optional, Union


class ExecutionContext:
    """
    Lazily resolved snapshot of the host environment.

    The current directory, user name, home and temp directories are looked
    up on first access and cached for the lifetime of the context. Only the
    current directory can be overridden. Environment variables and system
    properties are snapshotted on every call.

    Example:
        >>> ctx = ExecutionContext()
        >>> ctx.current_directory is ctx.current_directory
        True
    """

    def __init__(self, current_directory: Optional[Union[str, Path]] = None):
        """
        Create a new context.

        Args:
            current_directory: Directory to report instead of the process
                working directory. Default is None (resolve lazily).
        """
        self._current_directory: Optional[Path] = (
            Path(current_directory) if current_directory is not None else None
        )
        self._user: Optional[str] = None
        self._user_home: Optional[Path] = None
        self._temp_directory: Optional[Path] = None

    @property
    def current_directory(self) -> Path:
        """Return the current directory, defaulting to the process cwd."""
        if self._current_directory is None:
            self._current_directory = _resolve_cwd()
        return self._current_directory

    @current_directory.setter
    def current_directory(self, directory: Union[str, Path]) -> None:
        self._current_directory = Path(directory)

    @property
    def user(self) -> str:
        """Return the login name, or an empty string if it cannot be found."""
        if self._user is None:
            self._user = _resolve_user()
        return self._user

    @property
    def user_home(self) -> Path:
        """Return the user's home directory."""
        if self._user_home is None:
            self._user_home = _resolve_home()
        return self._user_home

    @property
    def temp_directory(self) -> Path:
        """Return the directory for temporary files (honours TMPDIR)."""
        if self._temp_directory is None:
            self._temp_directory = Path(tempfile.gettempdir())
        return self._temp_directory

    def env(self) -> dict[str, str]:
        """Return a snapshot of the process environment variables."""
        return dict(os.environ)

    def sys_properties(self) -> dict[str, str]:
        """
        Return a snapshot of interpreter and platform facts.

        Keys follow a dotted naming scheme, e.g. "os.name",
        "python.version", "line.separator", "user.dir".
        """
        return {
            "os.name": platform.system(),
            "os.version": platform.release(),
            "os.arch": platform.machine(),
            "python.version": platform.python_version(),
            "python.implementation": platform.python_implementation(),
            "file.separator": os.sep,
            "path.separator": os.pathsep,
            "line.separator": os.linesep,
            "user.name": self.user,
            "user.home": str(self.user_home),
            "user.dir": str(self.current_directory),
            "tmp.dir": str(self.temp_directory),
        }

    def __repr__(self) -> str:
        return f"ExecutionContext(current_directory={self._current_directory!r})"


def _resolve_cwd() -> Path:
    try:
        return Path(os.getcwd())
    except OSError:
        # cwd was removed underneath the process
        return Path(os.curdir)


def _resolve_user() -> str:
    try:
        return getpass.getuser()
    except (KeyError, OSError, ImportError):
        return ""


def _resolve_home() -> Path:
    try:
        return Path.home()
    except (KeyError, RuntimeError):
        return _resolve_cwd()
