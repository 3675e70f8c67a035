"""Configuration Module for envtree

Typed, dotted-path access to a YAML configuration tree with environment
variable overrides.

Example:
    from envtree import config

    config.init()
    host = config.get_string_or("database.host", "localhost")
    timeout = config.get_duration("http.read_timeout")

    # Isolated instance (tests, libraries)
    from envtree.config import Config, ConfigStore

    cfg = Config(ConfigStore({"http": {"port": 8080}}, environ={}))
    cfg.get_int("http.port")
"""

from envtree.config.accessors import Config
from envtree.config.coercion import (
    format_duration,
    parse_duration,
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
    to_int_list,
    to_string,
    to_string_list,
    to_string_map,
    to_uint,
    to_uint8,
    to_uint16,
    to_uint32,
    to_uint64,
)
from envtree.config.decoding import Duration, decode_value
from envtree.config.document import (
    CONFIG_FILENAME,
    ENV_FILENAME,
    dump_document,
    find_config_dir,
    load_document,
    parse_document,
)
from envtree.config.env_bridge import apply_env_overrides, convert_env_to_type, env_name, lookup_env
from envtree.config.env_loader import EnvLoader, apply_env_file
from envtree.config.global_config import (
    all_settings,
    decode,
    decode_key,
    get_bool,
    get_bool_or,
    get_config,
    get_duration,
    get_duration_or,
    get_float64,
    get_float64_or,
    get_int,
    get_int8,
    get_int8_or,
    get_int16,
    get_int16_or,
    get_int32,
    get_int32_or,
    get_int64,
    get_int64_or,
    get_int_list,
    get_int_list_or,
    get_int_or,
    get_optional_string,
    get_string,
    get_string_list,
    get_string_list_or,
    get_string_map,
    get_string_map_or,
    get_string_or,
    get_uint,
    get_uint8,
    get_uint8_or,
    get_uint16,
    get_uint16_or,
    get_uint32,
    get_uint32_or,
    get_uint64,
    get_uint64_or,
    get_uint_or,
    init,
    is_set,
    load,
    reset,
    set,
)
from envtree.config.keypath import assign, lookup, split_key
from envtree.config.store import ConfigStore, ReadWriteLock

__all__ = [
    # Core types
    "Config",
    "ConfigStore",
    "ReadWriteLock",
    "Duration",
    # Process-wide default
    "get_config",
    "init",
    "load",
    "set",
    "reset",
    "is_set",
    "get_string",
    "get_optional_string",
    "get_bool",
    "get_int",
    "get_int8",
    "get_int16",
    "get_int32",
    "get_int64",
    "get_uint",
    "get_uint8",
    "get_uint16",
    "get_uint32",
    "get_uint64",
    "get_float64",
    "get_duration",
    "get_string_list",
    "get_int_list",
    "get_string_map",
    "get_string_or",
    "get_bool_or",
    "get_int_or",
    "get_int8_or",
    "get_int16_or",
    "get_int32_or",
    "get_int64_or",
    "get_uint_or",
    "get_uint8_or",
    "get_uint16_or",
    "get_uint32_or",
    "get_uint64_or",
    "get_float64_or",
    "get_duration_or",
    "get_string_list_or",
    "get_int_list_or",
    "get_string_map_or",
    "all_settings",
    "decode",
    "decode_key",
    # Coercion
    "to_string",
    "to_bool",
    "to_int",
    "to_int8",
    "to_int16",
    "to_int32",
    "to_int64",
    "to_uint",
    "to_uint8",
    "to_uint16",
    "to_uint32",
    "to_uint64",
    "to_float64",
    "to_duration",
    "to_string_list",
    "to_int_list",
    "to_string_map",
    "split_and_trim",
    "split_and_trim_ints",
    "parse_duration",
    "format_duration",
    # Key paths and environment
    "split_key",
    "lookup",
    "assign",
    "env_name",
    "lookup_env",
    "convert_env_to_type",
    "apply_env_overrides",
    # Documents and env files
    "CONFIG_FILENAME",
    "ENV_FILENAME",
    "find_config_dir",
    "parse_document",
    "load_document",
    "dump_document",
    "decode_value",
    "EnvLoader",
    "apply_env_file",
]
