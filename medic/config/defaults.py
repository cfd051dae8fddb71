"""
Default configuration used by ``medic init``.
"""

from typing import Any, Dict, Optional


def get_default_config(program: Optional[str] = None) -> Dict[str, Any]:
    """Get a starter check set for a program."""
    name = program or "myprog"
    env_prefix = name.upper().replace("-", "_")
    return {
        "program": name,
        "distribution": name,
        "python": "3.9",
        "binaries": [
            {"name": "git", "required": True},
        ],
        "env": [
            {"name": f"{env_prefix}_DEBUG", "expected_unset": True},
        ],
    }
