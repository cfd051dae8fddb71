"""
Report Engine

Runs checks and writes their outcomes as an aligned table.

The table is produced in two passes: every check runs (and is measured)
before the first line is written, since column widths depend on the
longest name and severity label of the whole run.
"""

import logging
from typing import Iterable, List, Optional, TextIO, Tuple

from ..errors import ReportError
from .models import Checkable, CheckOutcome, Severity
from .styling import Styler, select_styler


logger = logging.getLogger(__name__)

STATUS_HEADER = "RESULT"
NAME_HEADER = "CHECK"
MESSAGE_HEADER = "MESSAGE"
COLUMN_GAP = "  "


def generate_report(
    output: TextIO,
    checks: Iterable[Checkable],
    *,
    styler: Optional[Styler] = None,
) -> Severity:
    """
    Run checks and write the report table.

    Args:
        output: Writable text sink
        checks: Checks to run, in display order
        styler: Styling strategy (selected from the sink when omitted)

    Returns:
        The worst severity found, to be passed to write_summary()

    Raises:
        ReportError: If writing to the sink fails
    """
    outcomes, worst = run_checks(checks)
    if styler is None:
        styler = select_styler(output)
    write_table(output, outcomes, styler)
    return worst


def run_checks(checks: Iterable[Checkable]) -> Tuple[List[CheckOutcome], Severity]:
    """Run every check once, in order, and return the outcomes and worst severity."""
    outcomes: List[CheckOutcome] = []
    worst = Severity.OK

    for check in checks:
        logger.debug("Running check %s", check.name)
        try:
            severity, message = _unpack(check.run())
        except Exception as e:
            logger.info("Check %s failed: %s", check.name, e)
            logger.debug("Check %s traceback", check.name, exc_info=True)
            outcomes.append(CheckOutcome(Severity.FATAL, check.name, str(e)))
            # A check that could not run always dominates the run
            worst = Severity.FATAL
            continue

        outcomes.append(CheckOutcome(severity, check.name, message))
        worst = max(worst, severity)

    return outcomes, worst


def column_widths(outcomes: Iterable[CheckOutcome]) -> Tuple[int, int]:
    """Return (status_width, name_width) measured on unstyled text."""
    status_width = len(STATUS_HEADER)
    name_width = len(NAME_HEADER)
    for outcome in outcomes:
        status_width = max(status_width, len(outcome.severity.label))
        name_width = max(name_width, len(outcome.name))
    return status_width, name_width


def write_table(output: TextIO, outcomes: List[CheckOutcome], styler: Styler) -> None:
    """Write the header and one row per outcome."""
    status_width, name_width = column_widths(outcomes)
    continuation = "\n" + " " * (status_width + name_width + 2 * len(COLUMN_GAP))

    header = (
        f"{STATUS_HEADER:<{status_width}}{COLUMN_GAP}"
        f"{NAME_HEADER:<{name_width}}{COLUMN_GAP}{MESSAGE_HEADER}"
    )
    write_line(output, styler.bold(header))

    for outcome in outcomes:
        label = outcome.severity.label
        status = styler.paint(label, outcome.severity) + " " * (status_width - len(label))
        message = outcome.message.replace("\n", continuation)
        write_line(
            output,
            f"{status}{COLUMN_GAP}{outcome.name:<{name_width}}{COLUMN_GAP}{message}",
        )


def write_line(output: TextIO, text: str) -> None:
    """Write one line to the sink, converting sink failures to ReportError."""
    try:
        output.write(text + "\n")
    except (OSError, ValueError) as e:
        # ValueError covers writes to a closed stream
        raise ReportError(f"Failed to write report: {e}") from e


def _unpack(result: object) -> Tuple[Severity, str]:
    """Validate what a check returned."""
    if not isinstance(result, tuple) or len(result) != 2:
        raise TypeError(f"Check returned {result!r}, expected (Severity, message)")

    severity, message = result
    if not isinstance(severity, Severity):
        raise TypeError(f"Check returned severity {severity!r}, expected a Severity")
    if not isinstance(message, str):
        raise TypeError(f"Check returned message {message!r}, expected a string")
    return severity, message
