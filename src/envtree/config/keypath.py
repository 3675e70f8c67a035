"""Dotted-key addressing into a nested configuration tree.

``"database.primary.host"`` addresses ``tree["database"]["primary"]["host"]``.
These helpers do no locking; ConfigStore wraps them.
"""

from typing import Any, Dict, List, Tuple

KEY_SEPARATOR = "."


def split_key(key: str) -> List[str]:
    """Split a dotted key into its segments.

    An empty key yields a single empty segment, which never matches.
    """
    return key.split(KEY_SEPARATOR)


def lookup(tree: Dict[str, Any], key: str) -> Tuple[Any, bool]:
    """Walk ``tree`` along ``key``.

    Returns:
        ``(value, True)`` when every segment resolves, otherwise
        ``(None, False)``. A non-mapping node met before the last segment
        ends the walk as not found, and an empty segment never matches.
    """
    current: Any = tree
    for part in split_key(key):
        if not part or not isinstance(current, dict) or part not in current:
            return None, False
        current = current[part]
    return current, True


def assign(tree: Dict[str, Any], key: str, value: Any) -> None:
    """Store ``value`` at ``key``, creating intermediate mappings.

    An existing non-mapping value on the path is replaced by a new empty
    mapping, so ``assign(t, "a.b", 1)`` discards a scalar at ``"a"``.
    """
    parts = split_key(key)
    current = tree
    for part in parts[:-1]:
        child = current.get(part)
        if not isinstance(child, dict):
            child = current[part] = {}
        current = child
    current[parts[-1]] = value


__all__ = ["KEY_SEPARATOR", "split_key", "lookup", "assign"]
