"""
Report Summary

Closing verdict line written after the report table.
"""

from typing import Optional, TextIO

from .engine import write_line
from .models import Severity
from .styling import Styler, select_styler


ERROR_ADVICE = "Error(s) found, you should rectify these for proper operation"
WARNING_ADVICE = "Warning(s) found, consider investigating (especially if you have issues)"


def write_summary(
    output: TextIO,
    worst: Severity,
    *,
    styler: Optional[Styler] = None,
) -> None:
    """
    Write the advisory line for the worst severity of a run.

    Nothing is written below Warning. Fatal shares the Error wording.

    Raises:
        ReportError: If writing to the sink fails
    """
    if worst >= Severity.ERROR:
        tier, advice = Severity.ERROR, ERROR_ADVICE
    elif worst >= Severity.WARNING:
        tier, advice = Severity.WARNING, WARNING_ADVICE
    else:
        return

    if styler is None:
        styler = select_styler(output)
    write_line(output, f"\n{styler.paint(tier.label, tier)}: {advice}")
