"""
Click Integration

Runs a report from a command-line program, either through the reusable
``--doctor`` option or the ``medic doctor`` command.
"""

import sys
from typing import Callable, Iterable, Optional, TextIO

import click

from .errors import ReportError
from .report import Checkable, Severity, generate_report, select_styler, write_summary


EXIT_OK = 0
EXIT_PROBLEMS = 1
EXIT_CONFIG_ERROR = 2
EXIT_REPORT_FAILED = 3


def exit_code_for(worst: Severity) -> int:
    """Map the worst severity of a run to a process exit code (warnings exit 0)."""
    if worst >= Severity.ERROR:
        return EXIT_PROBLEMS
    return EXIT_OK


def run_doctor(
    checks: Iterable[Checkable],
    output: Optional[TextIO] = None,
    color: Optional[bool] = None,
) -> Severity:
    """
    Write the report table and summary for a set of checks.

    Args:
        checks: Checks to run, in display order
        output: Sink to write to (stdout by default)
        color: True/False to force styling on or off, None to detect

    Returns:
        The worst severity found

    Raises:
        ReportError: If writing to the sink fails
    """
    if output is None:
        output = sys.stdout
    styler = select_styler(output, color)
    worst = generate_report(output, checks, styler=styler)
    write_summary(output, worst, styler=styler)
    try:
        output.flush()
    except (OSError, ValueError) as e:
        raise ReportError(f"Failed to write report: {e}") from e
    return worst


def doctor_option(
    checks_factory: Callable[[], Iterable[Checkable]],
    *param_decls: str,
    color: Optional[bool] = None,
    **kwargs,
) -> Callable:
    """
    Add an eager ``--doctor`` flag to a click command.

    When the flag is given the report is written to stdout and the program
    exits with the code for the worst severity, like ``click.version_option``
    does for ``--version``.

    Args:
        checks_factory: Called once to build the checks to run
        param_decls: Option names (defaults to "--doctor")
        color: True/False to force styling on or off, None to detect
    """
    if not param_decls:
        param_decls = ("--doctor",)

    def callback(ctx: click.Context, param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        try:
            worst = run_doctor(checks_factory(), color=color)
        except ReportError as e:
            click.echo(str(e), err=True)
            ctx.exit(EXIT_REPORT_FAILED)
        ctx.exit(exit_code_for(worst))

    kwargs.setdefault("is_flag", True)
    kwargs.setdefault("expose_value", False)
    kwargs.setdefault("is_eager", True)
    kwargs.setdefault("help", "Check the environment for common problems and exit.")
    kwargs["callback"] = callback
    return click.option(*param_decls, **kwargs)
