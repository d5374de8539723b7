"""Core test fixtures for the fastpaste project."""

import os
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
import yaml
from typer.testing import CliRunner

from fastpaste.config.user_config import UserConfig


# ---- Base Fixtures ----


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Typer CLI test runner."""
    return CliRunner()


# ---- Test Isolation Fixtures ----


@pytest.fixture(autouse=True)
def isolated_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[dict[str, Path], None, None]:
    """Isolate every test from the user's configuration and clipboard.

    - XDG data and config homes point into the test's temporary directory
    - FASTPASTE_ environment variables are removed
    - The working directory is a fresh empty directory, so no
      ./fastpaste.yaml or .env is picked up
    """
    for key in list(os.environ):
        if key.upper().startswith("FASTPASTE_"):
            monkeypatch.delenv(key)

    xdg_root = tmp_path / "xdg"
    data_home = xdg_root / "data"
    config_home = xdg_root / "config"
    workdir = xdg_root / "cwd"
    for directory in (data_home, config_home, workdir):
        directory.mkdir(parents=True)

    monkeypatch.setenv("XDG_DATA_HOME", str(data_home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.chdir(workdir)

    yield {"data_home": data_home, "config_home": config_home, "cwd": workdir}


@pytest.fixture
def isolated_config(tmp_path: Path) -> UserConfig:
    """UserConfig loaded from a minimal config file in a temporary directory."""
    config_file = tmp_path / "fastpaste.yaml"
    config_file.write_text(
        yaml.dump({"log_level": "INFO", "max_jobs": 4, "buffer_size": 4096})
    )
    return UserConfig(cli_config_path=config_file)


# ---- Tree Fixtures ----


def build_tree(root: Path, layout: dict[str, Any]) -> Path:
    """Create files (bytes/str values) and directories (dict values) under root."""
    root.mkdir(parents=True, exist_ok=True)
    for name, content in layout.items():
        path = root / name
        if isinstance(content, dict):
            build_tree(path, content)
        elif isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content)
    return root


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Source tree with nested directories, an empty file and an empty directory."""
    return build_tree(
        tmp_path / "src",
        {
            "a.txt": b"hello",
            "sub": {
                "b.txt": b"",
                "deeper": {"c.bin": bytes(range(256)) * 1000},
            },
            "empty": {},
        },
    )


def snapshot(root: Path) -> dict[str, bytes | None]:
    """Relative path -> file bytes (None for directories) of everything under root."""
    result: dict[str, bytes | None] = {}
    for path in sorted(root.rglob("*")):
        rel = path.relative_to(root).as_posix()
        result[rel] = None if path.is_dir() else path.read_bytes()
    return result


@pytest.fixture
def tree_builder() -> Any:
    """Return the ``build_tree`` helper."""
    return build_tree


@pytest.fixture
def tree_snapshot() -> Any:
    """Return the ``snapshot`` helper."""
    return snapshot
