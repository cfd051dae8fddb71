"""
Pydantic models for declarative check configuration.

A configuration file lists the requirements of a program; each entry
becomes one check in the report.
"""

from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..checks import binary_check, env_var_check, python_version_check, standard_checks, version_check
from ..report.models import Check


class BinaryRequirement(BaseModel):
    """An executable expected on PATH."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1, description="Executable name")
    check: Optional[str] = Field(None, description="Display name of the check")
    required: bool = Field(default=True, description="Missing binary is an error rather than a warning")


class EnvRequirement(BaseModel):
    """An environment variable to report on."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1, description="Variable name")
    check: Optional[str] = Field(None, description="Display name of the check")
    expected_unset: bool = Field(default=False, description="Variable should normally be absent")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if "=" in v or any(c.isspace() for c in v):
            raise ValueError(f"Invalid environment variable name: {v!r}")
        return v


class DoctorConfig(BaseModel):
    """Check set of a program."""

    model_config = ConfigDict(extra="forbid")

    program: Optional[str] = Field(None, description="Program name shown above the report")
    distribution: Optional[str] = Field(None, description="Distribution whose version is reported")
    python: Optional[str] = Field(None, description="Minimum Python version, e.g. '3.9'")
    binaries: List[BinaryRequirement] = Field(default_factory=list)
    env: List[EnvRequirement] = Field(default_factory=list)

    @field_validator("python", mode="before")
    @classmethod
    def validate_python(cls, v):
        if v is None:
            return v
        # YAML reads 3.10 as the float 3.1
        if not isinstance(v, str):
            raise ValueError("Minimum Python version must be quoted, e.g. \"3.10\"")
        parts = v.strip().split(".")
        if not 1 <= len(parts) <= 3 or not all(part.isdigit() for part in parts):
            raise ValueError(f"Invalid Python version: {v!r}")
        return v.strip()

    @property
    def python_minimum(self) -> Optional[Tuple[int, ...]]:
        if self.python is None:
            return None
        return tuple(int(part) for part in self.python.split("."))

    def build_checks(self) -> Tuple[Check, ...]:
        """
        Build the ordered check set.

        Returns:
            Standard checks, then version, Python, binary and environment checks
        """
        checks: List[Check] = list(standard_checks())

        if self.distribution:
            checks.append(version_check(self.distribution))
        if self.python_minimum:
            checks.append(python_version_check(self.python_minimum))
        for binary in self.binaries:
            checks.append(binary_check(binary.name, name=binary.check, required=binary.required))
        for variable in self.env:
            checks.append(env_var_check(variable.name, name=variable.check, expected_unset=variable.expected_unset))

        return tuple(checks)
