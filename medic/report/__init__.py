"""
Report Module

Runs diagnostic checks and renders them as an aligned table.
"""

from .models import Check, CheckFn, Checkable, CheckOutcome, Severity
from .engine import generate_report
from .styling import AnsiStyler, PlainStyler, Styler, select_styler
from .summary import write_summary

__all__ = [
    "AnsiStyler",
    "Check",
    "CheckFn",
    "CheckOutcome",
    "Checkable",
    "PlainStyler",
    "Severity",
    "Styler",
    "generate_report",
    "select_styler",
    "write_summary",
]
