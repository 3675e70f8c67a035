"""envtree - process-wide configuration with environment overrides.

Loads a YAML configuration document (plus an optional .env file) once at
startup and serves typed, dotted-path lookups where an environment
variable always takes precedence over the document:

    from envtree import config

    config.init()
    port = config.get_int("http.port")       # HTTP_PORT overrides http.port

Subpackages:
- config: Store, typed accessors, coercion, document and env-file loading
- logger: Structured logging with text or JSON output
- exceptions: Exception classes with structured error info
- testing: pytest fixtures for isolated configuration
"""

__version__ = "1.0.0"

from envtree import config

from envtree.config import (
    Config,
    ConfigStore,
    Duration,
    get_config,
)

from envtree.logger import (
    Logger,
    StructuredLogger,
    create_logger,
    get_logger,
)

from envtree.exceptions import (
    EnvtreeError,
    ConfigurationError,
    DocumentNotFoundError,
    EnvFileError,
    DecodeError,
)

__all__ = [
    "__version__",
    "config",
    # Config
    "Config",
    "ConfigStore",
    "Duration",
    "get_config",
    # Logger
    "Logger",
    "StructuredLogger",
    "create_logger",
    "get_logger",
    # Exceptions
    "EnvtreeError",
    "ConfigurationError",
    "DocumentNotFoundError",
    "EnvFileError",
    "DecodeError",
]
