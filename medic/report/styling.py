"""
Terminal Styling

Maps severities to rich styles. Styling only ever wraps already padded or
measured text, so escape sequences never count toward column widths.
"""

from typing import Dict, Optional, Protocol, TextIO

from rich.color import ColorSystem
from rich.console import Console
from rich.style import Style

from .models import Severity


NOMINAL = Style(color="green")
CAUTION = Style(color="yellow")
SEVERE = Style(color="red")
HEADER = Style(bold=True)

SEVERITY_STYLES: Dict[Severity, Style] = {
    Severity.OK: NOMINAL,
    Severity.INFO: NOMINAL,
    Severity.WARNING: CAUTION,
    Severity.ERROR: SEVERE,
    Severity.FATAL: SEVERE,
}


class Styler(Protocol):
    """Strategy applied to report text before it is written."""

    def paint(self, text: str, severity: Severity) -> str:
        """Style text with the colour of a severity."""

    def bold(self, text: str) -> str:
        """Style text as a header."""


class PlainStyler:
    """Leaves text untouched, for sinks that are not colour terminals."""

    def paint(self, text: str, severity: Severity) -> str:
        return text

    def bold(self, text: str) -> str:
        return text


class AnsiStyler:
    """Wraps text in ANSI escape sequences rendered by rich."""

    def __init__(self, color_system: ColorSystem = ColorSystem.STANDARD):
        self.color_system = color_system

    def paint(self, text: str, severity: Severity) -> str:
        return SEVERITY_STYLES[severity].render(text, color_system=self.color_system)

    def bold(self, text: str) -> str:
        return HEADER.render(text, color_system=self.color_system)


def select_styler(output: TextIO, color: Optional[bool] = None) -> Styler:
    """
    Choose the styling strategy for an output sink.

    Args:
        output: Sink the report will be written to
        color: True to force colour, False to disable it, None to detect

    Returns:
        AnsiStyler for colour-capable terminals, PlainStyler otherwise
    """
    if color is False:
        return PlainStyler()
    if color is True:
        return AnsiStyler()

    # rich applies the isatty, NO_COLOR, FORCE_COLOR and TERM=dumb rules
    console = Console(file=output)
    if console.color_system is None or console.no_color:
        return PlainStyler()
    return AnsiStyler(ColorSystem.STANDARD)
