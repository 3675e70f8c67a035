"""Tests for value coercion.

These tests verify:
1. Every coercion is total: unsupported input gives the zero value
2. Matching types pass through unchanged
3. Integer widths wrap native values and clamp out-of-range strings
4. Duration literals and float formatting
5. Comma-separated list parsing
"""

import math
from datetime import timedelta

import pytest

from envtree.config.coercion import (
    format_duration,
    format_float,
    parse_bool,
    parse_duration,
    parse_int,
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


class TestTotality:
    """Coercions never raise."""

    @pytest.mark.parametrize(
        "coerce,zero",
        [
            (to_string, ""),
            (to_bool, False),
            (to_int, 0),
            (to_int8, 0),
            (to_int64, 0),
            (to_uint, 0),
            (to_uint32, 0),
            (to_float64, 0.0),
            (to_duration, timedelta(0)),
            (to_string_list, None),
            (to_int_list, None),
            (to_string_map, {}),
        ],
    )
    def test_unsupported_input_gives_zero(self, coerce, zero):
        assert coerce(object()) == zero
        assert coerce(None) == zero

    def test_matching_types_pass_through(self):
        names = ["a", "b"]
        ports = [80, 443]
        mapping = {"k": 1}

        assert to_string("abc") == "abc"
        assert to_bool(True) is True
        assert to_int(5) == 5
        assert to_float64(2.5) == 2.5
        assert to_duration(timedelta(seconds=3)) == timedelta(seconds=3)
        assert to_string_list(names) is names
        assert to_int_list(ports) is ports
        assert to_string_map(mapping) is mapping


class TestToString:
    """Tests for to_string and format_float."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("abc", "abc"),
            (42, "42"),
            (-7, "-7"),
            (True, "true"),
            (False, "false"),
            (1.5, "1.5"),
            (1.0, "1"),
            (0.1, "0.1"),
            (100.0, "100"),
            (1e21, "1000000000000000000000"),
            (timedelta(minutes=90), "1h30m0s"),
            ([1], ""),
            ({}, ""),
        ],
    )
    def test_to_string(self, value, expected):
        assert to_string(value) == expected

    def test_special_floats(self):
        assert format_float(float("nan")) == "NaN"
        assert format_float(float("inf")) == "+Inf"
        assert format_float(float("-inf")) == "-Inf"

    def test_small_float_is_not_exponential(self):
        assert format_float(1.5e-07) == "0.00000015"


class TestToBool:
    """Tests for to_bool and parse_bool."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (True, True),
            ("true", True),
            ("TRUE", True),
            ("t", True),
            ("1", True),
            ("false", False),
            ("F", False),
            ("0", False),
            ("yes", False),
            ("", False),
            (1, True),
            (0, False),
            (2.5, True),
            (0.0, False),
            ([1], False),
        ],
    )
    def test_to_bool(self, value, expected):
        assert to_bool(value) is expected

    def test_parse_bool_rejects_unknown(self):
        assert parse_bool("on") is None
        assert parse_bool("True") is True


class TestToInt:
    """Tests for the integer coercions."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (42, 42),
            (-42, -42),
            (3.9, 3),
            (-3.9, -3),
            ("42", 42),
            ("-42", -42),
            ("+7", 7),
            ("42abc", 0),
            (" 42", 0),
            ("4_2", 0),
            ("3.5", 0),
            ("", 0),
            (True, 0),
            (float("nan"), 0),
            (2**64 + 5, 5),
            ("9223372036854775808", 9223372036854775807),
            ("-9223372036854775809", -9223372036854775808),
        ],
    )
    def test_to_int(self, value, expected):
        assert to_int(value) == expected

    @pytest.mark.parametrize(
        "coerce,value,expected",
        [
            (to_int8, 127, 127),
            (to_int8, 128, -128),
            (to_int8, 300, 44),
            (to_int8, -129, 127),
            (to_int8, "200", 127),
            (to_int8, "-200", -128),
            (to_int16, 40000, -25536),
            (to_int16, "40000", 32767),
            (to_int32, 2**31, -(2**31)),
            (to_int32, "2147483648", 2147483647),
            (to_uint8, -1, 255),
            (to_uint8, 256, 0),
            (to_uint8, "300", 255),
            (to_uint8, "-1", 0),
            (to_uint16, 70000, 4464),
            (to_uint16, "70000", 65535),
            (to_uint32, -1, 4294967295),
            (to_uint64, -1, 2**64 - 1),
            (to_uint64, "18446744073709551616", 2**64 - 1),
            (to_uint, "+5", 0),
            (to_uint, "5", 5),
        ],
    )
    def test_widths(self, coerce, value, expected):
        assert coerce(value) == expected

    def test_parse_int_reports_failure(self):
        assert parse_int("12") == 12
        assert parse_int("12x") is None
        assert parse_int("128", bits=8) is None
        assert parse_int("-1", signed=False) is None


class TestToFloat:
    """Tests for to_float64."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (1.5, 1.5),
            (2, 2.0),
            ("2.5", 2.5),
            ("1e3", 1000.0),
            ("abc", 0.0),
            (" 1.5", 0.0),
            (True, 0.0),
        ],
    )
    def test_to_float64(self, value, expected):
        result = to_float64(value)
        assert isinstance(result, float)
        assert result == expected

    def test_infinity_string(self):
        assert math.isinf(to_float64("inf"))


class TestDurations:
    """Tests for duration parsing, formatting and coercion."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("30s", timedelta(seconds=30)),
            ("1h30m", timedelta(minutes=90)),
            ("1.5s", timedelta(seconds=1.5)),
            ("300ms", timedelta(milliseconds=300)),
            ("250us", timedelta(microseconds=250)),
            ("250µs", timedelta(microseconds=250)),
            ("-2m", timedelta(minutes=-2)),
            ("2h45m30.5s", timedelta(hours=2, minutes=45, seconds=30.5)),
            ("0", timedelta(0)),
            ("1500ns", timedelta(microseconds=1)),
        ],
    )
    def test_parse_duration(self, text, expected):
        assert parse_duration(text) == expected

    @pytest.mark.parametrize("text", ["", "abc", "1d", "10", "1.s5", "s", "-"])
    def test_parse_duration_rejects(self, text):
        assert parse_duration(text) is None

    def test_parse_duration_overflow(self):
        assert parse_duration("3000000h") is None

    @pytest.mark.parametrize(
        "value,expected",
        [
            (timedelta(0), "0s"),
            (timedelta(minutes=90), "1h30m0s"),
            (timedelta(hours=1), "1h0m0s"),
            (timedelta(seconds=1.5), "1.5s"),
            (timedelta(milliseconds=300), "300ms"),
            (timedelta(microseconds=1500), "1.5ms"),
            (timedelta(microseconds=250), "250µs"),
            (timedelta(minutes=-2), "-2m0s"),
        ],
    )
    def test_format_duration(self, value, expected):
        assert format_duration(value) == expected

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("30s", timedelta(seconds=30)),
            (1_000_000_000, timedelta(seconds=1)),
            ("1000000000", timedelta(seconds=1)),
            (1.5e9, timedelta(seconds=1.5)),
            ("abc", timedelta(0)),
            ("", timedelta(0)),
            (True, timedelta(0)),
            ("500ns", timedelta(0)),
        ],
    )
    def test_to_duration(self, value, expected):
        assert to_duration(value) == expected


class TestCollections:
    """Tests for list and map coercion."""

    def test_string_list_coerces_elements(self):
        assert to_string_list([1, "a", True]) == ["1", "a", "true"]
        assert to_string_list(("x", 1)) == ["x", "1"]
        assert to_string_list([]) == []

    def test_string_list_rejects_scalars(self):
        assert to_string_list("a,b") is None

    def test_int_list_coerces_elements(self):
        assert to_int_list(["1", "x", 2.7]) == [1, 0, 2]
        assert to_int_list([True]) == [0]
        assert to_int_list("1,2") is None

    def test_string_map_requires_mapping(self):
        assert to_string_map("x") == {}
        assert to_string_map([]) == {}


class TestSplitAndTrim:
    """Tests for comma-separated override parsing."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("a, ,b,,c", ["a", "b", "c"]),
            (" x ", ["x"]),
            ("", []),
            ("   ", []),
            (",,,", []),
        ],
    )
    def test_split_and_trim(self, text, expected):
        assert split_and_trim(text) == expected

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("1,x,2,,3", [1, 2, 3]),
            (" 8080, 8081 ", [8080, 8081]),
            ("-5,+6", [-5, 6]),
            ("9223372036854775808,1", [1]),
            ("", []),
        ],
    )
    def test_split_and_trim_ints(self, text, expected):
        assert split_and_trim_ints(text) == expected
