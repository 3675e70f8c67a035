"""Env-file loader built on python-dotenv.

Reads ``KEY=VALUE`` lines (blank lines and ``#`` comments skipped, one
layer of matching quotes stripped, lines without ``=`` ignored) and
exports them into the process environment. Values from the file replace
variables that are already set.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, MutableMapping, Optional

from dotenv import dotenv_values

from envtree.exceptions import EnvFileError


class EnvLoader:
    """Load an env file into an environment mapping."""

    def __init__(self, env_file: Path | str) -> None:
        self.env_file = Path(env_file)

    def read(self) -> Dict[str, str]:
        """Parse the file without touching any environment.

        Raises:
            EnvFileError: The file is missing or unreadable
        """
        if not self.env_file.is_file():
            raise EnvFileError(
                f"Env file not found: {self.env_file}",
                code="ENV_FILE_NOT_FOUND",
                details={"path": str(self.env_file)},
            )
        try:
            file_values = dotenv_values(self.env_file, interpolate=False)
        except (OSError, UnicodeDecodeError) as exc:
            raise EnvFileError(
                f"Failed to read env file {self.env_file}",
                details={"path": str(self.env_file), "error": str(exc)},
            ) from exc
        # Keys without "=" come back as None
        return {k: v for k, v in file_values.items() if v is not None}

    def apply(self, environ: Optional[MutableMapping[str, str]] = None) -> Dict[str, str]:
        """Export the file's values into ``environ`` (default: ``os.environ``).

        Returns:
            The key/value pairs that were set.
        """
        values = self.read()
        target = os.environ if environ is None else environ
        target.update(values)
        return values


def apply_env_file(
    env_file: Path | str, environ: Optional[MutableMapping[str, str]] = None
) -> Dict[str, str]:
    """Shortcut for ``EnvLoader(env_file).apply(environ)``."""
    return EnvLoader(env_file).apply(environ)


__all__ = ["EnvLoader", "apply_env_file"]
