"""Option flags and argument sets for commands."""

import shlex
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Iterable, Optional

from linepipe.errors import InvalidConfigurationError


class Option(Enum):
    """
    Base class for per-command option enumerations.

    Each command kind declares a closed subclass, e.g.:

        class SortOption(Option):
            ASCENDING = "ascending"
            DESCENDING = "descending"

    Member values are the long flag names used when rendering commands.
    """

    @property
    def flag(self) -> str:
        """Return the long flag form, e.g. "--descending"."""
        return f"--{self.value}"


@dataclass(frozen=True)
class Arguments:
    """
    Immutable set of selected options plus ordered operand values.

    Building an Arguments never fails. Contradictory or malformed
    combinations are reported by the owning command when it executes.

    Attributes:
        options: Selected options (unique, order irrelevant).
        operands: Positional values such as patterns or counts.
    """

    option_type: ClassVar[type[Option]] = Option

    options: frozenset[Option] = field(default_factory=frozenset)
    operands: tuple[Any, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "options", frozenset(self.options))
        object.__setattr__(self, "operands", tuple(self.operands))

    @classmethod
    def of(cls, *options: Option, operands: Iterable[Any] = ()) -> "Arguments":
        """
        Build arguments from options and operands.

        Example:
            >>> SortArguments.of(SortOption.DESCENDING)
        """
        return cls(options=frozenset(options), operands=tuple(operands))

    def has_opt(self, option: Option) -> bool:
        """Return True if the option is selected."""
        return option in self.options

    def operand(self, index: int, default: Optional[Any] = None) -> Any:
        """Return the operand at index, or default if there is none."""
        if 0 <= index < len(self.operands):
            return self.operands[index]
        return default

    def with_options(self, *options: Option) -> "Arguments":
        """Return a copy with the given options added."""
        return type(self)(options=self.options | frozenset(options), operands=self.operands)

    def with_operands(self, *operands: Any) -> "Arguments":
        """Return a copy with the operands replaced."""
        return type(self)(options=self.options, operands=operands)

    def validate(self) -> None:
        """
        Check that every option belongs to this argument set's enumeration.

        Raises:
            InvalidConfigurationError: If a foreign option was selected.
        """
        foreign = [opt for opt in self.options if not isinstance(opt, self.option_type)]
        if foreign:
            names = ", ".join(sorted(repr(opt) for opt in foreign))
            raise InvalidConfigurationError(
                f"Options {names} are not {self.option_type.__name__} members"
            )

    def to_shell(self) -> str:
        """Render flags (sorted by name) followed by quoted operands."""
        flags = sorted(
            (opt.flag if isinstance(opt, Option) else str(opt)) for opt in self.options
        )
        parts = flags + [shlex.quote(str(value)) for value in self.operands]
        return " ".join(parts)
