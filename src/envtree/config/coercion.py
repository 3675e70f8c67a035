"""Best-effort coercion of configuration values.

Every ``to_*`` function is total: it accepts any value found in a parsed
configuration tree (or a raw environment string) and returns a value of the
target type. Input that cannot be converted yields the type's zero value
(``""``, ``False``, ``0``, ``0.0``, ``timedelta(0)``, ``None`` for lists,
``{}`` for maps) instead of raising.

``bool`` is checked before ``int`` throughout: booleans are not numbers
for integer, float or duration targets.

Examples:
    >>> to_int("8080")
    8080
    >>> to_int("8080abc")
    0
    >>> to_uint8(300)
    44
    >>> to_duration("1h30m")
    datetime.timedelta(seconds=5400)
    >>> split_and_trim("a, ,b,,c")
    ['a', 'b', 'c']
"""

import math
import re
from datetime import timedelta
from decimal import Decimal
from fractions import Fraction
from typing import Any, Dict, List, Optional, Tuple

_INT_LITERAL = re.compile(r"[+-]?[0-9]+")
_UINT_LITERAL = re.compile(r"[0-9]+")

_TRUE_STRINGS = frozenset({"1", "t", "true"})
_FALSE_STRINGS = frozenset({"0", "f", "false"})

_NANOSECOND = 1
_MICROSECOND = 1000 * _NANOSECOND
_MILLISECOND = 1000 * _MICROSECOND
_SECOND = 1000 * _MILLISECOND
_MINUTE = 60 * _SECOND
_HOUR = 60 * _MINUTE

_DURATION_UNITS = {
    "ns": _NANOSECOND,
    "us": _MICROSECOND,
    "µs": _MICROSECOND,  # U+00B5 micro sign
    "μs": _MICROSECOND,  # U+03BC greek small letter mu
    "ms": _MILLISECOND,
    "s": _SECOND,
    "m": _MINUTE,
    "h": _HOUR,
}
_DURATION_COMPONENT = re.compile(r"([0-9]*)(?:\.([0-9]*))?([^0-9.]+)")
_MAX_DURATION_NS = (1 << 63) - 1


# =============================================================================
# Integer helpers
# =============================================================================


def _bounds(bits: int, signed: bool) -> Tuple[int, int]:
    if signed:
        return -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    return 0, (1 << bits) - 1


def _wrap(value: int, bits: int, signed: bool) -> int:
    """Narrow ``value`` to ``bits`` with two's-complement truncation."""
    value &= (1 << bits) - 1
    if signed and value >> (bits - 1):
        value -= 1 << bits
    return value


def _parse_int_literal(text: str, signed: bool) -> Optional[int]:
    pattern = _INT_LITERAL if signed else _UINT_LITERAL
    if not pattern.fullmatch(text):
        return None
    return int(text)


def parse_int(text: str, bits: int = 64, signed: bool = True) -> Optional[int]:
    """Parse a strict base-10 integer that fits in the given width.

    Returns None on a syntax error or when the value is out of range.
    Surrounding whitespace, underscores and trailing garbage are syntax
    errors: ``"42abc"`` never parses as 42.
    """
    value = _parse_int_literal(text, signed)
    if value is None:
        return None
    low, high = _bounds(bits, signed)
    if not low <= value <= high:
        return None
    return value


def _to_integer(value: Any, bits: int, signed: bool) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return _wrap(value, bits, signed)
    if isinstance(value, float):
        if not math.isfinite(value):
            return 0
        return _wrap(int(value), bits, signed)
    if isinstance(value, str):
        parsed = _parse_int_literal(value, signed)
        if parsed is None:
            return 0
        # Out-of-range literals saturate at the width's bounds
        low, high = _bounds(bits, signed)
        return min(max(parsed, low), high)
    return 0


def to_int(value: Any) -> int:
    """Coerce to a signed 64-bit integer."""
    return _to_integer(value, 64, True)


def to_int8(value: Any) -> int:
    return _to_integer(value, 8, True)


def to_int16(value: Any) -> int:
    return _to_integer(value, 16, True)


def to_int32(value: Any) -> int:
    return _to_integer(value, 32, True)


def to_int64(value: Any) -> int:
    return _to_integer(value, 64, True)


def to_uint(value: Any) -> int:
    """Coerce to an unsigned 64-bit integer."""
    return _to_integer(value, 64, False)


def to_uint8(value: Any) -> int:
    return _to_integer(value, 8, False)


def to_uint16(value: Any) -> int:
    return _to_integer(value, 16, False)


def to_uint32(value: Any) -> int:
    return _to_integer(value, 32, False)


def to_uint64(value: Any) -> int:
    return _to_integer(value, 64, False)


# =============================================================================
# Scalars
# =============================================================================


def parse_bool(text: str) -> Optional[bool]:
    """Parse ``1/t/true`` and ``0/f/false`` (any case); None otherwise."""
    normalized = text.lower()
    if normalized in _TRUE_STRINGS:
        return True
    if normalized in _FALSE_STRINGS:
        return False
    return None


def to_bool(value: Any) -> bool:
    """Coerce to bool. Numbers are true when nonzero."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return bool(parse_bool(value))
    if isinstance(value, (int, float)):
        return value != 0
    return False


def parse_float(text: str) -> Optional[float]:
    if not text or text != text.strip() or "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def to_float64(value: Any) -> float:
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, float):
        return value
    if isinstance(value, int):
        try:
            return float(value)
        except OverflowError:
            return 0.0
    if isinstance(value, str):
        parsed = parse_float(value)
        return 0.0 if parsed is None else parsed
    return 0.0


def format_float(value: float) -> str:
    """Shortest round-trippable digits, plain notation, no trailing ``.0``."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def to_string(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return format_float(value)
    if isinstance(value, timedelta):
        return format_duration(value)
    return ""


# =============================================================================
# Durations
# =============================================================================


def _nanoseconds_to_timedelta(nanoseconds: int) -> timedelta:
    # timedelta stops at microseconds; truncate toward zero
    micros = abs(nanoseconds) // _MICROSECOND
    return timedelta(microseconds=micros if nanoseconds >= 0 else -micros)


def _timedelta_to_nanoseconds(value: timedelta) -> int:
    return ((value.days * 86400 + value.seconds) * 1_000_000 + value.microseconds) * _MICROSECOND


def parse_duration(text: str) -> Optional[timedelta]:
    """Parse a duration literal such as ``"300ms"``, ``"1.5s"`` or ``"1h30m"``.

    A literal is an optional sign followed by one or more
    ``<decimal><unit>`` components, units being ns, us (or µs), ms, s, m
    and h. The bare literal ``"0"`` is also accepted. Returns None when
    ``text`` is not a valid literal or exceeds the int64 nanosecond range.
    """
    s = text
    negative = False
    if s[:1] in ("+", "-"):
        negative = s[0] == "-"
        s = s[1:]
    if s == "0":
        return timedelta(0)
    if not s:
        return None

    total = Fraction(0)
    pos = 0
    while pos < len(s):
        match = _DURATION_COMPONENT.match(s, pos)
        if match is None:
            return None
        whole, frac, unit = match.groups()
        if not whole and not frac:
            return None
        scale = _DURATION_UNITS.get(unit)
        if scale is None:
            return None
        number = Fraction(int(whole or "0"))
        if frac:
            number += Fraction(int(frac), 10 ** len(frac))
        total += number * scale
        pos = match.end()

    nanoseconds = int(total)
    if nanoseconds > _MAX_DURATION_NS + (1 if negative else 0):
        return None
    return _nanoseconds_to_timedelta(-nanoseconds if negative else nanoseconds)


def _format_fraction(value: int, unit: int) -> str:
    whole, part = divmod(value, unit)
    if not part:
        return str(whole)
    width = len(str(unit)) - 1
    return f"{whole}.{str(part).rjust(width, '0').rstrip('0')}"


def format_duration(value: timedelta) -> str:
    """Render a timedelta as a duration literal, e.g. ``"1h30m0s"``."""
    nanoseconds = _timedelta_to_nanoseconds(value)
    if nanoseconds == 0:
        return "0s"

    sign = "-" if nanoseconds < 0 else ""
    u = abs(nanoseconds)

    if u < _MICROSECOND:
        return f"{sign}{u}ns"
    if u < _MILLISECOND:
        return f"{sign}{_format_fraction(u, _MICROSECOND)}µs"
    if u < _SECOND:
        return f"{sign}{_format_fraction(u, _MILLISECOND)}ms"

    hours, rem = divmod(u, _HOUR)
    minutes, rem = divmod(rem, _MINUTE)
    seconds = f"{_format_fraction(rem, _SECOND)}s"
    if hours:
        return f"{sign}{hours}h{minutes}m{seconds}"
    if minutes:
        return f"{sign}{minutes}m{seconds}"
    return f"{sign}{seconds}"


def to_duration(value: Any) -> timedelta:
    """Coerce to a timedelta.

    Numbers are nanosecond counts. Strings are tried as duration literals
    first, then as integer nanosecond counts.
    """
    if isinstance(value, timedelta):
        return value
    if isinstance(value, bool):
        return timedelta(0)
    if isinstance(value, int):
        return _nanoseconds_to_timedelta(_wrap(value, 64, True))
    if isinstance(value, float):
        if not math.isfinite(value):
            return timedelta(0)
        return _nanoseconds_to_timedelta(_wrap(int(value), 64, True))
    if isinstance(value, str):
        parsed = parse_duration(value)
        if parsed is not None:
            return parsed
        nanoseconds = parse_int(value)
        if nanoseconds is not None:
            return _nanoseconds_to_timedelta(nanoseconds)
    return timedelta(0)


# =============================================================================
# Collections
# =============================================================================


def to_string_list(value: Any) -> Optional[List[str]]:
    """Coerce a sequence to a list of strings.

    A list that already holds only strings is returned as is. Non-sequence
    input returns None, which callers can tell apart from an empty list.
    """
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return value
    if isinstance(value, (list, tuple)):
        return [to_string(item) for item in value]
    return None


def to_int_list(value: Any) -> Optional[List[int]]:
    if isinstance(value, list) and all(
        isinstance(item, int) and not isinstance(item, bool) for item in value
    ):
        return value
    if isinstance(value, (list, tuple)):
        return [to_int(item) for item in value]
    return None


def to_string_map(value: Any) -> Dict[str, Any]:
    """Only a real mapping passes through; anything else is ``{}``."""
    if isinstance(value, dict):
        return value
    return {}


def split_and_trim(text: str) -> List[str]:
    """Split a comma-separated string, trimming pieces and dropping empties.

    >>> split_and_trim(" a, b ,,c ")
    ['a', 'b', 'c']
    >>> split_and_trim("   ")
    []
    """
    if not text.strip():
        return []
    return [piece.strip() for piece in text.split(",") if piece.strip()]


def split_and_trim_ints(text: str) -> List[int]:
    """Like :func:`split_and_trim`, also dropping pieces that are not integers.

    >>> split_and_trim_ints("1,x,2,,3")
    [1, 2, 3]
    """
    result: List[int] = []
    for piece in split_and_trim(text):
        parsed = parse_int(piece)
        if parsed is not None:
            result.append(parsed)
    return result


__all__ = [
    "parse_bool",
    "parse_int",
    "parse_float",
    "parse_duration",
    "format_float",
    "format_duration",
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
]
