"""
Environment Checks

Factories for checks on the interpreter, PATH and environment variables.
"""

import os
import shutil
import sys
from typing import Optional, Sequence, Tuple

from ..report.models import Check, Severity


def python_version_check(minimum: Sequence[int], name: str = "python-minimum") -> Check:
    """
    Create a check that the interpreter is at least a given version.

    Args:
        minimum: Version tuple such as (3, 9)
        name: Display name of the check
    """
    required = tuple(minimum)
    wanted = ".".join(str(part) for part in required)

    def _python_minimum() -> Tuple[Severity, str]:
        current = ".".join(str(part) for part in sys.version_info[:3])
        if sys.version_info[: len(required)] >= required:
            return Severity.OK, f"Python {current} (>= {wanted} required)"
        return Severity.ERROR, f"Python {current} is too old, {wanted} or newer is required"

    return Check(name=name, func=_python_minimum)


def binary_check(binary: str, name: Optional[str] = None, required: bool = True) -> Check:
    """
    Create a check that an executable is available on PATH.

    Args:
        binary: Executable name
        name: Display name (defaults to "has-<binary>")
        required: Missing binary is an Error when True, a Warning otherwise
    """

    def _binary() -> Tuple[Severity, str]:
        path = shutil.which(binary)
        if path:
            return Severity.OK, f"{binary} found at {path}"
        severity = Severity.ERROR if required else Severity.WARNING
        return severity, f"{binary} not found in PATH"

    return Check(name=name or f"has-{binary}", func=_binary)


def env_var_check(
    variable: str,
    name: Optional[str] = None,
    expected_unset: bool = False,
) -> Check:
    """
    Create a check describing an environment variable.

    A variable in the expected state reports Ok (or Info when it is set and
    that was expected, so its value shows up for troubleshooting). Any other
    state is a Warning.

    Args:
        variable: Environment variable name
        name: Display name (defaults to the lowercased variable name)
        expected_unset: Whether the variable should normally be absent
    """

    def _env_var() -> Tuple[Severity, str]:
        value = os.environ.get(variable)
        if value is None:
            if expected_unset:
                return Severity.OK, f"{variable} is not set"
            return Severity.WARNING, f"{variable} is not set"
        if expected_unset:
            return Severity.WARNING, f"{variable} is set to '{value}'\nUnset it unless you know you need it"
        return Severity.INFO, f"{variable} is set to '{value}'"

    return Check(name=name or variable.lower().replace("_", "-"), func=_env_var)
