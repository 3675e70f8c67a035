"""Configuration document discovery, parsing and dumping.

Documents are YAML. Parsing uses a SafeLoader that resolves plain scalars
by the YAML 1.2 core schema, so every parsed value stays within the types
the coercion layer understands: ``yes/no/on/off`` and ``1:30`` remain
strings and timestamps are not converted to ``datetime`` objects. Mapping
keys are always strings.
"""

from __future__ import annotations

import re
from datetime import timedelta
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from envtree.config.coercion import format_duration, to_string
from envtree.exceptions import ConfigurationError, DocumentNotFoundError

CONFIG_FILENAME = "config.yaml"
ENV_FILENAME = ".env"

_BOOL_TAG = "tag:yaml.org,2002:bool"
_INT_TAG = "tag:yaml.org,2002:int"
_FLOAT_TAG = "tag:yaml.org,2002:float"
_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"

# YAML 1.2 core schema scalars
_CORE_BOOL = re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$")
_CORE_INT = re.compile(r"^(?:[-+]?[0-9]+|0o[0-7]+|0x[0-9a-fA-F]+)$")
_CORE_FLOAT = re.compile(
    r"""^(?:[-+]?(?:\.[0-9]+|[0-9]+(?:\.[0-9]*)?)(?:[eE][-+]?[0-9]+)?
        |[-+]?\.(?:inf|Inf|INF)
        |\.(?:nan|NaN|NAN))$""",
    re.X,
)


class DocumentLoader(yaml.SafeLoader):
    """SafeLoader resolving plain scalars by the YAML 1.2 core schema.

    PyYAML follows YAML 1.1, where ``yes``/``off`` are booleans, ``1:30`` is
    a base-60 integer, ``010`` is octal and ``1e5`` is a string. Here only
    ``true``/``false`` are booleans, integers are decimal unless prefixed
    with ``0o``/``0x``, exponent floats need no dot, and timestamps stay
    strings.
    """


def _construct_core_int(loader: yaml.SafeLoader, node: yaml.ScalarNode) -> int:
    value = loader.construct_scalar(node)
    if value.startswith("0o"):
        return int(value[2:], 8)
    if value.startswith("0x"):
        return int(value[2:], 16)
    return int(value)


DocumentLoader.yaml_implicit_resolvers = {
    first: [
        (tag, regexp)
        for tag, regexp in resolvers
        if tag not in (_BOOL_TAG, _INT_TAG, _FLOAT_TAG, _TIMESTAMP_TAG)
    ]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
DocumentLoader.add_implicit_resolver(_BOOL_TAG, _CORE_BOOL, list("tTfF"))
# Int before float: "10" matches both and the first resolver wins
DocumentLoader.add_implicit_resolver(_INT_TAG, _CORE_INT, list("-+0123456789"))
DocumentLoader.add_implicit_resolver(_FLOAT_TAG, _CORE_FLOAT, list("-+.0123456789"))
DocumentLoader.add_constructor(_INT_TAG, _construct_core_int)


class DocumentDumper(yaml.SafeDumper):
    """SafeDumper that writes timedelta values as duration literals.

    Shares the loader's resolvers, so a string such as ``"1e5"`` is quoted
    and reads back as a string.
    """


def _represent_timedelta(dumper: yaml.SafeDumper, value: timedelta) -> yaml.Node:
    return dumper.represent_str(format_duration(value))


DocumentDumper.yaml_implicit_resolvers = DocumentLoader.yaml_implicit_resolvers
DocumentDumper.add_representer(timedelta, _represent_timedelta)


def find_config_dir(start: Optional[Path] = None, filename: str = CONFIG_FILENAME) -> Optional[Path]:
    """Find the nearest directory holding ``filename``.

    Walks from ``start`` (default: the current directory) up to the
    filesystem root.

    Returns:
        The directory containing the file, or None if no ancestor has it.
    """
    current = (start or Path.cwd()).resolve()
    for candidate in (current, *current.parents):
        if (candidate / filename).is_file():
            return candidate
    return None


def _normalize(value: Any) -> Any:
    if isinstance(value, dict):
        return {
            key if isinstance(key, str) else to_string(key): _normalize(item)
            for key, item in value.items()
        }
    if isinstance(value, list):
        return [_normalize(item) for item in value]
    return value


def parse_document(text: str, source: str = "<string>") -> Dict[str, Any]:
    """Parse YAML text into a configuration tree.

    Raises:
        ConfigurationError: The text is not valid YAML, holds a recursive
            alias, or its root is not a mapping
    """
    try:
        data = yaml.load(text, Loader=DocumentLoader)
    except yaml.YAMLError as exc:
        raise ConfigurationError(
            code="DOCUMENT_PARSE_FAILED",
            message=f"Failed to parse configuration document {source}",
            details={"path": source, "error": str(exc)},
        ) from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            code="DOCUMENT_NOT_MAPPING",
            message=f"Configuration root must be a mapping, got {type(data).__name__}",
            details={"path": source},
        )
    try:
        return _normalize(data)
    except RecursionError as exc:
        # Self-referencing aliases such as `a: &x [*x]`
        raise ConfigurationError(
            code="DOCUMENT_PARSE_FAILED",
            message=f"Configuration document {source} contains a recursive alias",
            details={"path": source, "error": str(exc)},
        ) from exc


def load_document(path: Path | str) -> Dict[str, Any]:
    """Read and parse a configuration document.

    An empty document yields an empty tree.

    Raises:
        DocumentNotFoundError: ``path`` does not exist
        ConfigurationError: ``path`` cannot be read or parsed
    """
    path = Path(path)
    if not path.exists():
        raise DocumentNotFoundError(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(
            code="DOCUMENT_UNREADABLE",
            message=f"Failed to read configuration document {path}",
            details={"path": str(path), "error": str(exc)},
        ) from exc
    return parse_document(text, source=str(path))


def dump_document(data: Any) -> str:
    """Serialize a tree (or any ConfigValue) back to YAML text."""
    return yaml.dump(data, Dumper=DocumentDumper, sort_keys=False, allow_unicode=True)


__all__ = [
    "CONFIG_FILENAME",
    "ENV_FILENAME",
    "DocumentLoader",
    "DocumentDumper",
    "find_config_dir",
    "parse_document",
    "load_document",
    "dump_document",
]
