"""Typed accessors over a ConfigStore.

Every getter resolves a dotted key in the same order:

1. Environment variable (key upper-cased, ``.`` -> ``_``; ``http.port`` -> ``HTTP_PORT``)
2. Value in the configuration tree
3. The type's zero value

and never raises. The ``*_or`` variants return the caller's default
instead of the zero value when the key is neither overridden nor present.

Example:
    config = Config()
    config.load({"http": {"port": 8080, "read_timeout": "30s"}})

    config.get_int("http.port")                 # 8080, or $HTTP_PORT
    config.get_duration("http.read_timeout")    # timedelta(seconds=30)
    config.get_string_or("http.host", "0.0.0.0")
"""

from __future__ import annotations

from datetime import timedelta
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Type, TypeVar

from envtree.config.coercion import (
    split_and_trim,
    split_and_trim_ints,
    to_bool,
    to_duration,
    to_float64,
    to_int,
    to_int8,
    to_int16,
    to_int32,
    to_int64,
    to_string,
    to_string_list,
    to_int_list,
    to_string_map,
    to_uint,
    to_uint8,
    to_uint16,
    to_uint32,
    to_uint64,
)
from envtree.config.decoding import decode_value
from envtree.config.document import CONFIG_FILENAME, ENV_FILENAME, find_config_dir, load_document
from envtree.config.env_bridge import lookup_env
from envtree.config.env_loader import apply_env_file
from envtree.config.store import ConfigStore
from envtree.exceptions import ConfigurationError, DocumentNotFoundError, EnvFileError
from envtree.logger import Logger, get_logger

T = TypeVar("T")


class Config:
    """Typed, override-aware view of a ConfigStore.

    Args:
        store: Backing store (a fresh, empty one by default)
        logger: Logger for initialization messages (default: ``get_logger()``)
    """

    def __init__(self, store: Optional[ConfigStore] = None, logger: Optional[Logger] = None):
        self.store = store if store is not None else ConfigStore()
        self._logger = logger

    @property
    def logger(self) -> Logger:
        return self._logger if self._logger is not None else get_logger()

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def initialize(
        self,
        config_path: Optional[Path | str] = None,
        env_file: Optional[Path | str] = None,
    ) -> Dict[str, Any]:
        """Load the env file and configuration document into the store.

        Without ``config_path`` the nearest ``config.yaml`` in the current
        directory or one of its parents is used. The env file defaults to
        ``.env`` next to the document and is skipped if absent; env-file
        problems are logged and never abort initialization.

        Returns:
            The loaded tree (without overrides).

        Raises:
            ConfigurationError: The document is missing, unreadable or invalid
        """
        log = self.logger
        if config_path is None:
            config_dir = find_config_dir()
            if config_dir is None:
                missing = Path.cwd() / CONFIG_FILENAME
                log.error("Configuration document not found", searched_from=str(Path.cwd()))
                raise DocumentNotFoundError(missing, details={"searched_parents": True})
            config_path = config_dir / CONFIG_FILENAME
        config_path = Path(config_path)

        env_path = Path(env_file) if env_file is not None else config_path.parent / ENV_FILENAME
        if env_file is not None or env_path.is_file():
            try:
                applied = apply_env_file(env_path)
                log.debug("Env file applied", path=str(env_path), variables=len(applied))
            except EnvFileError as exc:
                log.warning("Env file not applied", path=str(env_path), code=exc.code, error=exc.message)

        try:
            tree = load_document(config_path)
        except ConfigurationError as exc:
            log.error("Failed to load configuration document", path=str(config_path), code=exc.code)
            raise

        self.store.load(tree)
        log.info("Configuration loaded", path=str(config_path), keys=len(tree))
        return tree

    def load(self, tree: Optional[Mapping[str, Any]]) -> None:
        """Replace the stored tree."""
        self.store.load(tree)

    def set(self, key: str, value: Any) -> None:
        """Set ``key`` in the tree. An environment override still wins on reads."""
        self.store.set(key, value)

    def reset(self) -> None:
        """Clear the tree. Environment variables are untouched."""
        self.store.reset()

    # =========================================================================
    # Resolution
    # =========================================================================

    def is_set(self, key: str) -> bool:
        """True if ``key`` has an environment override or exists in the tree."""
        return self.store.is_set(key)

    def _resolve(
        self,
        key: str,
        coerce: Callable[[Any], T],
        parse_env: Optional[Callable[[str], T]] = None,
    ) -> T:
        raw, overridden = lookup_env(key, self.store.environ)
        if overridden:
            return (parse_env or coerce)(raw)
        value, _ = self.store.get(key)
        # A missing key coerces from None to the zero value
        return coerce(value)

    def _resolve_or(self, key: str, default: T, getter: Callable[[str], T]) -> T:
        if self.is_set(key):
            return getter(key)
        return default

    # =========================================================================
    # Scalars
    # =========================================================================

    def get_string(self, key: str) -> str:
        """String value; an override is returned verbatim."""
        return self._resolve(key, to_string)

    def get_optional_string(self, key: str) -> Optional[str]:
        """String value, or None when the key is not set at all.

        Tells a missing key apart from one set to ``""``.
        """
        if not self.is_set(key):
            return None
        return self.get_string(key)

    def get_bool(self, key: str) -> bool:
        """Boolean value. Strings accept 1/t/true and 0/f/false in any case."""
        return self._resolve(key, to_bool)

    def get_int(self, key: str) -> int:
        return self._resolve(key, to_int)

    def get_int8(self, key: str) -> int:
        return self._resolve(key, to_int8)

    def get_int16(self, key: str) -> int:
        return self._resolve(key, to_int16)

    def get_int32(self, key: str) -> int:
        return self._resolve(key, to_int32)

    def get_int64(self, key: str) -> int:
        return self._resolve(key, to_int64)

    def get_uint(self, key: str) -> int:
        return self._resolve(key, to_uint)

    def get_uint8(self, key: str) -> int:
        return self._resolve(key, to_uint8)

    def get_uint16(self, key: str) -> int:
        return self._resolve(key, to_uint16)

    def get_uint32(self, key: str) -> int:
        return self._resolve(key, to_uint32)

    def get_uint64(self, key: str) -> int:
        return self._resolve(key, to_uint64)

    def get_float64(self, key: str) -> float:
        return self._resolve(key, to_float64)

    def get_duration(self, key: str) -> timedelta:
        """Duration value.

        Accepts literals ("300ms", "1.5s", "1h30m") or integers, which are
        nanosecond counts.
        """
        return self._resolve(key, to_duration)

    # =========================================================================
    # Collections
    # =========================================================================

    def get_string_list(self, key: str) -> Optional[List[str]]:
        """List of strings; an override is parsed as a comma-separated list.

        Returns None when the key is missing or not a list.
        """
        return self._resolve(key, to_string_list, split_and_trim)

    def get_int_list(self, key: str) -> Optional[List[int]]:
        """List of integers; override pieces that are not integers are dropped."""
        return self._resolve(key, to_int_list, split_and_trim_ints)

    def get_string_map(self, key: str) -> Dict[str, Any]:
        """Mapping at ``key`` with overrides applied to its leaves; ``{}`` if absent."""
        value, _ = self.store.export(key)
        return to_string_map(value)

    # =========================================================================
    # Defaults
    # =========================================================================

    def get_string_or(self, key: str, default: str) -> str:
        return self._resolve_or(key, default, self.get_string)

    def get_bool_or(self, key: str, default: bool) -> bool:
        return self._resolve_or(key, default, self.get_bool)

    def get_int_or(self, key: str, default: int) -> int:
        return self._resolve_or(key, default, self.get_int)

    def get_int8_or(self, key: str, default: int) -> int:
        return self._resolve_or(key, default, self.get_int8)

    def get_int16_or(self, key: str, default: int) -> int:
        return self._resolve_or(key, default, self.get_int16)

    def get_int32_or(self, key: str, default: int) -> int:
        return self._resolve_or(key, default, self.get_int32)

    def get_int64_or(self, key: str, default: int) -> int:
        return self._resolve_or(key, default, self.get_int64)

    def get_uint_or(self, key: str, default: int) -> int:
        return self._resolve_or(key, default, self.get_uint)

    def get_uint8_or(self, key: str, default: int) -> int:
        return self._resolve_or(key, default, self.get_uint8)

    def get_uint16_or(self, key: str, default: int) -> int:
        return self._resolve_or(key, default, self.get_uint16)

    def get_uint32_or(self, key: str, default: int) -> int:
        return self._resolve_or(key, default, self.get_uint32)

    def get_uint64_or(self, key: str, default: int) -> int:
        return self._resolve_or(key, default, self.get_uint64)

    def get_float64_or(self, key: str, default: float) -> float:
        return self._resolve_or(key, default, self.get_float64)

    def get_duration_or(self, key: str, default: timedelta) -> timedelta:
        return self._resolve_or(key, default, self.get_duration)

    def get_string_list_or(self, key: str, default: Optional[List[str]]) -> Optional[List[str]]:
        return self._resolve_or(key, default, self.get_string_list)

    def get_int_list_or(self, key: str, default: Optional[List[int]]) -> Optional[List[int]]:
        return self._resolve_or(key, default, self.get_int_list)

    def get_string_map_or(self, key: str, default: Dict[str, Any]) -> Dict[str, Any]:
        return self._resolve_or(key, default, self.get_string_map)

    # =========================================================================
    # Export
    # =========================================================================

    def all_settings(self) -> Dict[str, Any]:
        """Deep copy of the whole tree with overrides applied."""
        tree, _ = self.store.export()
        return tree

    def decode(self, target: Type[T]) -> T:
        """Decode the whole override-applied tree into ``target``.

        Raises:
            DecodeError: The configuration does not fit ``target``
        """
        return decode_value(self.all_settings(), target)

    def decode_key(self, key: str, target: Type[T]) -> Optional[T]:
        """Decode the value at ``key`` into ``target``.

        Returns None, without validating, when ``key`` is not in the tree.

        Raises:
            DecodeError: The value does not fit ``target``
        """
        value, found = self.store.export(key)
        if not found:
            return None
        return decode_value(value, target)


__all__ = ["Config"]
