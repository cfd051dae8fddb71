"""Declarative check configuration."""

from .models import BinaryRequirement, DoctorConfig, EnvRequirement
from .defaults import get_default_config
from .loader import ConfigLoader, load_config

__all__ = [
    "BinaryRequirement",
    "ConfigLoader",
    "DoctorConfig",
    "EnvRequirement",
    "get_default_config",
    "load_config",
]
