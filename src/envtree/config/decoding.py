"""Decode configuration trees into typed structures.

Decoding is a format round trip: the (override-applied) tree is dumped to
YAML, parsed back, then validated by pydantic into the requested target.
Any shape pydantic can validate works: dataclasses, ``BaseModel``
subclasses, ``TypedDict``, ``dict[str, int]`` and so on.

Example:
    @dataclass
    class HttpConfig:
        host: str
        port: int
        read_timeout: Duration = timedelta(seconds=30)

    http = decode_value({"host": "0.0.0.0", "port": "8080", "read_timeout": "1m"}, HttpConfig)
"""

from datetime import timedelta
from typing import Annotated, Any, Type, TypeVar

import yaml
from pydantic import BeforeValidator, TypeAdapter, ValidationError

from envtree.config.coercion import parse_duration
from envtree.config.document import DocumentLoader, dump_document
from envtree.exceptions import DecodeError

T = TypeVar("T")


def _duration_literal(value: Any) -> Any:
    if isinstance(value, str):
        parsed = parse_duration(value)
        if parsed is not None:
            return parsed
    return value


# timedelta that also accepts duration literals such as "30s" or "1h30m"
Duration = Annotated[timedelta, BeforeValidator(_duration_literal)]


def decode_value(data: Any, target: Type[T]) -> T:
    """Round-trip ``data`` through YAML and validate it as ``target``.

    Raises:
        DecodeError: ``data`` cannot be serialized or does not fit ``target``
    """
    target_name = getattr(target, "__name__", repr(target))
    try:
        reparsed = yaml.load(dump_document(data), Loader=DocumentLoader)
    except yaml.YAMLError as exc:
        raise DecodeError(
            f"Failed to serialize configuration for {target_name}",
            code="DECODE_SERIALIZE_FAILED",
            details={"target": target_name, "error": str(exc)},
        ) from exc

    try:
        return TypeAdapter(target).validate_python(reparsed)
    except ValidationError as exc:
        raise DecodeError(
            f"Configuration does not match {target_name}",
            details={
                "target": target_name,
                "error_count": exc.error_count(),
                "errors": [
                    {"loc": ".".join(str(part) for part in err["loc"]), "msg": err["msg"]}
                    for err in exc.errors()
                ],
            },
        ) from exc


__all__ = ["Duration", "decode_value"]
