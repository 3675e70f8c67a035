"""Tests for configuration document loading.

These tests verify:
1. YAML parsing keeps values inside the supported value types
2. Error codes for missing, malformed and non-mapping documents
3. Upward discovery of config.yaml
4. Dumping durations as literals
"""

from datetime import timedelta

import pytest

from envtree.config.document import (
    CONFIG_FILENAME,
    dump_document,
    find_config_dir,
    load_document,
    parse_document,
)
from envtree.exceptions import ConfigurationError, DocumentNotFoundError


class TestParseDocument:
    """Tests for parse_document."""

    def test_nested_mapping(self):
        tree = parse_document("http:\n  port: 8080\n  host: localhost\nratio: 0.5\n")

        assert tree == {"http": {"port": 8080, "host": "localhost"}, "ratio": 0.5}

    def test_only_true_false_are_booleans(self):
        tree = parse_document("a: yes\nb: off\nc: true\nd: False\n")

        assert tree == {"a": "yes", "b": "off", "c": True, "d": False}

    def test_timestamps_stay_strings(self):
        tree = parse_document("released: 2024-01-31\n")

        assert tree == {"released": "2024-01-31"}

    def test_non_string_keys_are_stringified(self):
        tree = parse_document("1: one\n1.5: half\ntrue: yes\n")

        assert tree == {"1": "one", "1.5": "half", "true": "yes"}

    def test_empty_document(self):
        assert parse_document("") == {}
        assert parse_document("# only a comment\n") == {}

    def test_null_values(self):
        assert parse_document("a: ~\nb:\n") == {"a": None, "b": None}

    def test_malformed_yaml(self):
        with pytest.raises(ConfigurationError) as exc_info:
            parse_document("a: [1, 2\n", source="broken.yaml")

        assert exc_info.value.code == "DOCUMENT_PARSE_FAILED"
        assert exc_info.value.details["path"] == "broken.yaml"

    def test_root_must_be_mapping(self):
        with pytest.raises(ConfigurationError) as exc_info:
            parse_document("- a\n- b\n")

        assert exc_info.value.code == "DOCUMENT_NOT_MAPPING"


class TestLoadDocument:
    """Tests for load_document."""

    def test_reads_file(self, write_config):
        path = write_config("db:\n  hosts: [a, b]\n")

        assert load_document(path) == {"db": {"hosts": ["a", "b"]}}

    def test_missing_file(self, tmp_path):
        missing = tmp_path / CONFIG_FILENAME

        with pytest.raises(DocumentNotFoundError) as exc_info:
            load_document(missing)

        assert exc_info.value.code == "DOCUMENT_NOT_FOUND"
        assert exc_info.value.details["path"] == str(missing)

    def test_missing_is_configuration_error(self, tmp_path):
        with pytest.raises(ConfigurationError):
            load_document(tmp_path / "nope.yaml")


class TestFindConfigDir:
    """Tests for find_config_dir."""

    def test_finds_in_start_dir(self, write_config, tmp_path):
        write_config("a: 1\n")

        assert find_config_dir(tmp_path) == tmp_path.resolve()

    def test_walks_up(self, write_config, tmp_path):
        write_config("a: 1\n")
        nested = tmp_path / "service" / "cmd"
        nested.mkdir(parents=True)

        assert find_config_dir(nested) == tmp_path.resolve()

    def test_nearest_wins(self, write_config, tmp_path):
        write_config("a: 1\n")
        inner = tmp_path / "inner"
        write_config("a: 2\n", directory=inner)

        assert find_config_dir(inner / ".") == inner.resolve()

    def test_defaults_to_cwd(self, write_config, tmp_path, monkeypatch):
        write_config("a: 1\n")
        monkeypatch.chdir(tmp_path)

        assert find_config_dir() == tmp_path.resolve()

    def test_not_found(self, tmp_path):
        assert find_config_dir(tmp_path, filename="envtree-absent-config.yaml") is None


class TestDumpDocument:
    """Tests for dump_document."""

    def test_duration_dumped_as_literal(self):
        text = dump_document({"timeout": timedelta(minutes=90)})

        assert parse_document(text) == {"timeout": "1h30m0s"}

    def test_preserves_key_order(self):
        text = dump_document({"b": 1, "a": 2})

        assert text.index("b:") < text.index("a:")


class TestCoreSchemaScalars:
    """Plain scalars resolve by the YAML 1.2 core schema."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("1:30", "1:30"),
            ("1e5", 100000.0),
            ("-2.5E-3", -0.0025),
            (".5", 0.5),
            ("1.", 1.0),
            ("010", 10),
            ("0o17", 15),
            ("0x1F", 31),
            ("+7", 7),
            ("1_000", "1_000"),
            ("0b101", "0b101"),
            ("on", "on"),
        ],
    )
    def test_scalar(self, text, expected):
        assert parse_document(f"value: {text}\n") == {"value": expected}

    def test_special_floats(self):
        tree = parse_document("a: .inf\nb: -.Inf\nc: .NaN\n")

        assert tree["a"] == float("inf")
        assert tree["b"] == float("-inf")
        assert tree["c"] != tree["c"]

    def test_quoted_values_stay_strings(self):
        assert parse_document("a: '1e5'\nb: \"10\"\n") == {"a": "1e5", "b": "10"}

    def test_dumped_strings_read_back_as_strings(self):
        text = dump_document({"a": "1e5", "b": "010", "c": "yes"})

        assert parse_document(text) == {"a": "1e5", "b": "010", "c": "yes"}


class TestRecursiveAlias:
    """Self-referencing aliases are reported as parse failures."""

    def test_recursive_alias(self):
        with pytest.raises(ConfigurationError) as exc_info:
            parse_document("a: &x [*x]\n", source="loop.yaml")

        assert exc_info.value.code == "DOCUMENT_PARSE_FAILED"
        assert exc_info.value.details["path"] == "loop.yaml"

    def test_shared_alias_is_fine(self):
        tree = parse_document("base: &b {port: 1}\ncopy: *b\n")

        assert tree == {"base": {"port": 1}, "copy": {"port": 1}}
