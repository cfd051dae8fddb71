"""
medic - Environment Sanity Reports

Runs named diagnostic checks and renders them as an aligned table with a
closing verdict, for command-line tools answering ``--doctor``.
"""

__version__ = "0.3.0"

from .errors import CheckError, ConfigError, MedicError, ReportError
from .report import (
    Check,
    CheckFn,
    Checkable,
    Severity,
    generate_report,
    select_styler,
    write_summary,
)
from .options import doctor_option, exit_code_for, run_doctor

__all__ = [
    "Check",
    "CheckError",
    "CheckFn",
    "Checkable",
    "ConfigError",
    "MedicError",
    "ReportError",
    "Severity",
    "doctor_option",
    "exit_code_for",
    "generate_report",
    "run_doctor",
    "select_styler",
    "write_summary",
]
