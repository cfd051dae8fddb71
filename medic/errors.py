"""
Error Taxonomy

Exceptions raised across medic module boundaries.
"""


class MedicError(Exception):
    """Base exception for medic."""


class ReportError(MedicError):
    """Raised when the report cannot be written to its output sink."""


class CheckError(MedicError):
    """Raised by a check when its probe cannot complete."""


class ConfigError(MedicError):
    """Configuration loading or validation error."""
