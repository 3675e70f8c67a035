"""Base exception classes for envtree.

All envtree exceptions include structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context for debugging/recovery

Only document loading, env-file application and decoding raise. Lookups
never do: a missing or unconvertible value resolves to a zero value.
"""

from typing import Any, Dict, Optional


class EnvtreeError(Exception):
    """Base exception for all envtree errors.

    Attributes:
        code: Machine-readable error code (e.g., "DOCUMENT_PARSE_FAILED")
        message: Human-readable error message
        details: Optional additional context for debugging/recovery
    """

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize error with structured information.

        Args:
            code: Machine-readable error code
            message: Human-readable error message
            details: Optional additional context
        """
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return formatted error string."""
        if self.details:
            return f"{self.code}: {self.message} (details: {self.details})"
        return f"{self.code}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON serialization.

        Returns:
            Dictionary with code, message, and details keys.
        """
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(EnvtreeError):
    """Configuration document could not be loaded.

    Fatal at startup: callers are expected to let it propagate.
    """

    pass


class DocumentNotFoundError(ConfigurationError):
    """The configuration document does not exist."""

    def __init__(self, path: Any, details: Optional[Dict[str, Any]] = None):
        merged = {"path": str(path)}
        merged.update(details or {})
        super().__init__(
            code="DOCUMENT_NOT_FOUND",
            message=f"Configuration document not found: {path}",
            details=merged,
        )


class EnvFileError(EnvtreeError):
    """An env file could not be read.

    Soft error: reported to the caller, never fatal to initialization.
    """

    def __init__(
        self, message: str, code: str = "ENV_FILE_ERROR", details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(code=code, message=message, details=details)


class DecodeError(EnvtreeError):
    """Configuration could not be decoded into the requested structure."""

    def __init__(
        self, message: str, code: str = "DECODE_FAILED", details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(code=code, message=message, details=details)
