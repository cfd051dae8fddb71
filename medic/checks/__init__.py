"""
Check Implementations

Ready-made checks and check factories for common environment probes.
"""

from .standard import CHECK_HOST, CHECK_PYTHON_VERSION, standard_checks, version_check
from .environment import binary_check, env_var_check, python_version_check

__all__ = [
    "CHECK_HOST",
    "CHECK_PYTHON_VERSION",
    "binary_check",
    "env_var_check",
    "python_version_check",
    "standard_checks",
    "version_check",
]
