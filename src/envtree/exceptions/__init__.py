"""Common exceptions for envtree.

All exceptions include structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context for debugging/recovery

Usage:
    from envtree.exceptions import (
        EnvtreeError,
        ConfigurationError,
        DocumentNotFoundError,
        EnvFileError,
        DecodeError,
    )
"""

from envtree.exceptions.base import (
    ConfigurationError,
    DecodeError,
    DocumentNotFoundError,
    EnvFileError,
    EnvtreeError,
)

__all__ = [
    "EnvtreeError",
    "ConfigurationError",
    "DocumentNotFoundError",
    "EnvFileError",
    "DecodeError",
]
