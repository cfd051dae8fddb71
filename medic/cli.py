"""
Command-line interface for medic.

Provides commands for running environment reports and creating check
set configurations.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
import yaml
from rich.console import Console
from rich.markup import escape

from . import __version__
from .checks import standard_checks
from .config import ConfigLoader, get_default_config
from .errors import ConfigError, ReportError
from .logging_config import configure_logging
from .options import EXIT_CONFIG_ERROR, EXIT_REPORT_FAILED, exit_code_for, run_doctor

console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger(__name__)

COLOR_MODES = {"auto": None, "always": True, "never": False}


# ============================================================
# Main CLI Group
# ============================================================

@click.group()
@click.version_option(version=__version__, prog_name="medic")
def cli():
    """
    medic - environment sanity reports for command-line tools

    Runs a set of checks and prints them as a table with an overall
    verdict. Attach the output to bug reports.
    """


# ============================================================
# DOCTOR Command
# ============================================================

@cli.command()
@click.option(
    "--config",
    "-c",
    type=click.Path(dir_okay=False),
    envvar="MEDIC_CONFIG",
    help="YAML check set to run in addition to the standard checks (or set MEDIC_CONFIG)",
)
@click.option(
    "--color",
    type=click.Choice(list(COLOR_MODES)),
    default="auto",
    envvar="MEDIC_COLOR",
    show_default=True,
    help="Colour the report (or set MEDIC_COLOR)",
)
@click.option("--debug", is_flag=True, help="Log each check to stderr")
def doctor(config: Optional[str], color: str, debug: bool):
    """
    Run the environment report.

    Exits with 1 when errors were found, 0 otherwise.
    """
    configure_logging(debug=debug, console=err_console)
    color_mode = COLOR_MODES[color]
    out_console = Console(
        force_terminal=color_mode or None,
        color_system=None if color_mode is False else "auto",
    )

    checks = standard_checks()
    if config:
        try:
            loaded = ConfigLoader(config).load()
        except ConfigError as e:
            err_console.print(f"[red]✗ {escape(str(e))}[/red]")
            sys.exit(EXIT_CONFIG_ERROR)
        checks = loaded.build_checks()
        if loaded.program:
            out_console.print(f"[bold blue]Environment report for {escape(loaded.program)}[/bold blue]\n")

    logger.debug("Running %d checks", len(checks))
    try:
        worst = run_doctor(checks, output=sys.stdout, color=color_mode)
    except ReportError as e:
        err_console.print(f"[red]✗ {escape(str(e))}[/red]")
        sys.exit(EXIT_REPORT_FAILED)

    sys.exit(exit_code_for(worst))


# ============================================================
# INIT Command
# ============================================================

@cli.command()
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    default="./medic.yaml",
    show_default=True,
    help="Where to write the check set",
)
@click.option("--program", "-p", type=str, default=None, help="Program the check set is for")
@click.option("--force", "-f", is_flag=True, help="Overwrite an existing file")
def init(output: str, program: Optional[str], force: bool):
    """Write a starter check set configuration."""
    output_path = Path(output)

    if output_path.exists() and not force:
        err_console.print(f"[red]✗ {escape(output)} already exists (use --force to overwrite)[/red]")
        sys.exit(EXIT_CONFIG_ERROR)

    data = get_default_config(program)
    # Round-trip through the loader so a broken default never gets written
    ConfigLoader.parse(data)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)

    console.print(f"[green]✓ Wrote check set to {escape(output)}[/green]")
    console.print(f"  [dim]medic doctor -c {escape(output)}[/dim]")


# ============================================================
# Entry Point
# ============================================================

if __name__ == "__main__":
    cli()
