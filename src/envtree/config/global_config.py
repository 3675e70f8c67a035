"""Process-wide default configuration.

Application code calls these functions instead of passing a Config around::

    from envtree import config

    config.init()                          # nearest config.yaml (+ .env)
    port = config.get_int("http.port")     # $HTTP_PORT wins if set
    debug = config.get_bool_or("app.debug", False)

They all delegate to one Config instance returned by ``get_config()``.
Tests that need isolation should build their own ``Config(ConfigStore())``
or use the ``global_config`` pytest fixture from ``envtree.testing``.
"""

from envtree.config.accessors import Config

_default_config = Config()


def get_config() -> Config:
    """Return the process-wide Config instance."""
    return _default_config


init = _default_config.initialize
load = _default_config.load
set = _default_config.set  # noqa: A001
reset = _default_config.reset
is_set = _default_config.is_set

get_string = _default_config.get_string
get_optional_string = _default_config.get_optional_string
get_bool = _default_config.get_bool
get_int = _default_config.get_int
get_int8 = _default_config.get_int8
get_int16 = _default_config.get_int16
get_int32 = _default_config.get_int32
get_int64 = _default_config.get_int64
get_uint = _default_config.get_uint
get_uint8 = _default_config.get_uint8
get_uint16 = _default_config.get_uint16
get_uint32 = _default_config.get_uint32
get_uint64 = _default_config.get_uint64
get_float64 = _default_config.get_float64
get_duration = _default_config.get_duration
get_string_list = _default_config.get_string_list
get_int_list = _default_config.get_int_list
get_string_map = _default_config.get_string_map

get_string_or = _default_config.get_string_or
get_bool_or = _default_config.get_bool_or
get_int_or = _default_config.get_int_or
get_int8_or = _default_config.get_int8_or
get_int16_or = _default_config.get_int16_or
get_int32_or = _default_config.get_int32_or
get_int64_or = _default_config.get_int64_or
get_uint_or = _default_config.get_uint_or
get_uint8_or = _default_config.get_uint8_or
get_uint16_or = _default_config.get_uint16_or
get_uint32_or = _default_config.get_uint32_or
get_uint64_or = _default_config.get_uint64_or
get_float64_or = _default_config.get_float64_or
get_duration_or = _default_config.get_duration_or
get_string_list_or = _default_config.get_string_list_or
get_int_list_or = _default_config.get_int_list_or
get_string_map_or = _default_config.get_string_map_or

all_settings = _default_config.all_settings
decode = _default_config.decode
decode_key = _default_config.decode_key

__all__ = [
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
]
