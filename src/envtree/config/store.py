"""Thread-safe configuration tree.

ConfigStore owns the nested mapping loaded from the configuration document
and guards it with a single reader/writer lock: any number of concurrent
readers, exclusive writers. Values are deep-copied on the way in and on
the way out so no caller holds a reference into the tree outside the lock.

Example:
    store = ConfigStore()
    store.load({"http": {"port": 8080}})
    store.set("http.host", "0.0.0.0")

    value, found = store.get("http.port")   # (8080, True)
    store.export()                          # overrides applied, deep copy
"""

import copy
import threading
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple

from envtree.config.env_bridge import apply_env_overrides, lookup_env
from envtree.config.keypath import assign, lookup


class ReadWriteLock:
    """Reader/writer lock built on ``threading.Condition``.

    Writers take priority: once a writer is waiting, new readers block
    until it has finished, so a steady stream of reads cannot starve
    ``set``/``load``/``reset``. The lock is not reentrant.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if not self._readers:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class ConfigStore:
    """Mutable configuration tree guarded by a ReadWriteLock.

    Attributes:
        environ: Mapping consulted for overrides by ``is_set`` and
            ``export``; None means the live ``os.environ``.
    """

    def __init__(
        self,
        tree: Optional[Mapping[str, Any]] = None,
        environ: Optional[Mapping[str, str]] = None,
    ):
        self._lock = ReadWriteLock()
        self._tree: Dict[str, Any] = copy.deepcopy(dict(tree)) if tree else {}
        self.environ = environ

    def load(self, tree: Optional[Mapping[str, Any]]) -> None:
        """Replace the whole tree (no merge). None installs an empty tree."""
        fresh = copy.deepcopy(dict(tree)) if tree else {}
        with self._lock.write():
            self._tree = fresh

    def reset(self) -> None:
        """Discard every value. The process environment is left alone."""
        with self._lock.write():
            self._tree = {}

    def set(self, key: str, value: Any) -> None:
        """Assign ``value`` at dotted ``key``, creating parents as needed."""
        value = copy.deepcopy(value)
        with self._lock.write():
            assign(self._tree, key, value)

    def get(self, key: str) -> Tuple[Any, bool]:
        """Tree value at ``key`` (environment overrides are not consulted)."""
        with self._lock.read():
            value, found = lookup(self._tree, key)
            if found:
                value = copy.deepcopy(value)
        return value, found

    def contains(self, key: str) -> bool:
        """True if ``key`` resolves in the tree."""
        with self._lock.read():
            return lookup(self._tree, key)[1]

    def is_set(self, key: str) -> bool:
        """True if an override exists for ``key`` or the key resolves in the tree."""
        if lookup_env(key, self.environ)[1]:
            return True
        return self.contains(key)

    def export(self, key: Optional[str] = None) -> Tuple[Any, bool]:
        """Deep copy of the tree (or the subtree at ``key``) with overrides applied.

        Returns:
            ``(value, found)``; for the root (``key`` None), found is always
            True. ``""`` is an ordinary key and never found. A non-mapping
            leaf is returned with its own override applied as the raw
            override string.
        """
        with self._lock.read():
            if key is None:
                return copy.deepcopy(apply_env_overrides(self._tree, "", self.environ)), True
            value, found = lookup(self._tree, key)
            if not found:
                return None, False
            if isinstance(value, Mapping):
                return copy.deepcopy(apply_env_overrides(value, key, self.environ)), True
            value = copy.deepcopy(value)

        raw, overridden = lookup_env(key, self.environ)
        return (raw if overridden else value), True


__all__ = ["ReadWriteLock", "ConfigStore"]
