import os
from pathlib import Path

import pytest

from envtree.config import EnvLoader, apply_env_file
from envtree.exceptions import EnvFileError


def test_env_loader_reads_pairs(tmp_path: Path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text(
        "# database\n"
        "\n"
        "DB_HOST=db1\n"
        "DB_NAME='orders'\n"
        'DB_USER="svc"\n'
        "PADDED =  value  \n"
        "MALFORMED\n"
    )

    data = EnvLoader(env_file).read()

    assert data == {"DB_HOST": "db1", "DB_NAME": "orders", "DB_USER": "svc", "PADDED": "value"}


def test_env_loader_does_not_interpolate(tmp_path: Path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("URL=${HOST}/path\n")

    assert EnvLoader(env_file).read() == {"URL": "${HOST}/path"}


def test_env_loader_apply_overwrites(tmp_path: Path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("FOO=file\nBAR=file\n")
    environ = {"BAR": "env", "BAZ": "env"}

    applied = EnvLoader(env_file).apply(environ)

    assert applied == {"FOO": "file", "BAR": "file"}
    assert environ == {"FOO": "file", "BAR": "file", "BAZ": "env"}


def test_apply_env_file_updates_os_environ(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("ENVTREE_LOADER_TEST=from-file\n")
    # Registers the variable with monkeypatch so teardown removes it
    monkeypatch.setenv("ENVTREE_LOADER_TEST", "before")

    apply_env_file(env_file)

    assert os.environ["ENVTREE_LOADER_TEST"] == "from-file"


def test_env_loader_missing_file(tmp_path: Path) -> None:
    with pytest.raises(EnvFileError) as exc_info:
        EnvLoader(tmp_path / ".env").read()

    assert exc_info.value.code == "ENV_FILE_NOT_FOUND"
    assert exc_info.value.details["path"] == str(tmp_path / ".env")
