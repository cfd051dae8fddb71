"""
Report Models

Severity levels and check descriptors shared by the report engine.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Protocol, Tuple


class Severity(IntEnum):
    """Severity of a check outcome, ordered from harmless to worst."""

    # Value within expected parameters
    OK = 0
    # Not a problem in itself, but useful when troubleshooting
    INFO = 1
    # Something that might be a problem
    WARNING = 2
    # Definitely a problem
    ERROR = 3
    # The check itself could not complete
    FATAL = 4

    @property
    def label(self) -> str:
        """Display label ("Ok", "Info", ...)."""
        return self.name.capitalize()

    def __str__(self) -> str:
        return self.label

    @classmethod
    def parse(cls, value: str) -> "Severity":
        """
        Parse a severity from its label or member name.

        Args:
            value: Text such as "warning", "Warning" or "WARNING"

        Returns:
            The matching Severity

        Raises:
            ValueError: If the text names no severity
        """
        key = str(value).strip().upper()
        if key not in cls.__members__:
            valid = ", ".join(member.label for member in cls)
            raise ValueError(f"Unknown severity '{value}'. Valid: {valid}")
        return cls[key]


# A check returns (severity, message) or raises to signal it could not run.
# Messages may span several lines, the report aligns continuation lines.
CheckFn = Callable[[], Tuple[Severity, str]]


class Checkable(Protocol):
    """Anything the report engine can run: a name and a zero-argument run()."""

    name: str

    def run(self) -> Tuple[Severity, str]:
        """Run the probe and return its severity and message."""


@dataclass(frozen=True)
class Check:
    """A named diagnostic check."""

    name: str
    func: CheckFn

    def run(self) -> Tuple[Severity, str]:
        return self.func()

    @classmethod
    def new(cls, name: str) -> Callable[[CheckFn], "Check"]:
        """
        Decorator turning a function into a Check.

        Example:
            @Check.new("has-git")
            def has_git():
                return Severity.OK, "git found"
        """

        def decorator(func: CheckFn) -> "Check":
            return cls(name=name, func=func)

        return decorator


@dataclass(frozen=True)
class CheckOutcome:
    """Result of running a single check, buffered until the table is written."""

    severity: Severity
    name: str
    message: str
