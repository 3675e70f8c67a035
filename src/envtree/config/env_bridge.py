"""Environment-variable overrides for dotted configuration keys.

A key maps to a variable name by upper-casing it and replacing ``.`` with
``_``::

    "http.port"           -> HTTP_PORT
    "database.max_conns"  -> DATABASE_MAX_CONNS

No escaping is applied, so ``"a.b_c"`` and ``"a.b.c"`` share ``A_B_C``.

The environment is read on every lookup and never cached; a variable set
after startup is visible on the next read.
"""

from __future__ import annotations

import os
from datetime import timedelta
from typing import Any, Dict, Mapping, Optional, Tuple

from envtree.config.coercion import (
    split_and_trim,
    split_and_trim_ints,
    to_bool,
    to_duration,
    to_float64,
    to_int,
)
from envtree.config.keypath import KEY_SEPARATOR


def env_name(key: str) -> str:
    """Environment variable name that overrides ``key``."""
    return key.replace(KEY_SEPARATOR, "_").upper()


def lookup_env(key: str, environ: Optional[Mapping[str, str]] = None) -> Tuple[Optional[str], bool]:
    """Look up the override for ``key``.

    Args:
        key: Dotted configuration key
        environ: Mapping to read instead of ``os.environ``

    Returns:
        ``(value, True)`` if the variable is defined (even when empty),
        else ``(None, False)``.
    """
    env = os.environ if environ is None else environ
    value = env.get(env_name(key))
    if value is None:
        return None, False
    return value, True


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def convert_env_to_type(raw: str, original: Any) -> Any:
    """Convert an override string to the runtime type of the value it replaces.

    Lists become comma-separated lists: integer lists when the original's
    first element is a number, string lists otherwise (including when the
    original list is empty). Strings, None and unknown types take the raw
    string.
    """
    if isinstance(original, bool):
        return to_bool(raw)
    if isinstance(original, int):
        return to_int(raw)
    if isinstance(original, float):
        return to_float64(raw)
    if isinstance(original, timedelta):
        return to_duration(raw)
    if isinstance(original, (list, tuple)):
        if original and _is_number(original[0]):
            return split_and_trim_ints(raw)
        return split_and_trim(raw)
    return raw


def apply_env_overrides(
    tree: Mapping[str, Any],
    prefix: str = "",
    environ: Optional[Mapping[str, str]] = None,
) -> Dict[str, Any]:
    """Return a new tree with environment overrides applied to every leaf.

    Mappings are rebuilt recursively, so the result never shares a mapping
    with ``tree``. Leaves without an override are copied through.

    Args:
        tree: Configuration (sub)tree
        prefix: Dotted key of ``tree`` itself ("" for the root)
        environ: Mapping to read instead of ``os.environ``
    """
    result: Dict[str, Any] = {}
    for name, value in tree.items():
        key = f"{prefix}{KEY_SEPARATOR}{name}" if prefix else name
        if isinstance(value, Mapping):
            result[name] = apply_env_overrides(value, key, environ)
            continue
        raw, found = lookup_env(key, environ)
        result[name] = convert_env_to_type(raw, value) if found else value
    return result


__all__ = ["env_name", "lookup_env", "convert_env_to_type", "apply_env_overrides"]
