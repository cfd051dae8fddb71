"""
Standard Checks

Checks worth including in the report of most programs.
"""

import platform
import sys
from importlib import metadata
from typing import Tuple

from ..errors import CheckError
from ..report.models import Check, Severity


def _python_version() -> Tuple[Severity, str]:
    """Report the running interpreter."""
    version = sys.version_info
    return (
        Severity.OK,
        f"{platform.python_implementation()} {version.major}.{version.minor}.{version.micro}",
    )


def _host() -> Tuple[Severity, str]:
    """Report the host system and architecture."""
    return (
        Severity.OK,
        f"os={sys.platform}, arch={platform.machine()}, info={platform.platform()}",
    )


CHECK_PYTHON_VERSION = Check(name="python-version", func=_python_version)
CHECK_HOST = Check(name="host", func=_host)


def version_check(distribution: str, name: str = "version") -> Check:
    """
    Create an informational check reporting the installed version of a distribution.

    Args:
        distribution: Distribution name as installed (e.g. "medic-doctor")
        name: Display name of the check

    Returns:
        Check that reports Info with the version, or fails when the
        distribution is not installed
    """

    def _version() -> Tuple[Severity, str]:
        try:
            return Severity.INFO, metadata.version(distribution)
        except metadata.PackageNotFoundError as e:
            raise CheckError(f"Distribution '{distribution}' is not installed") from e

    return Check(name=name, func=_version)


def standard_checks() -> Tuple[Check, ...]:
    """Checks included in every report."""
    return (CHECK_PYTHON_VERSION, CHECK_HOST)
