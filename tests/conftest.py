"""Shared fixtures for the passcraft test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from passcraft.core.types import EffectiveConfig


@pytest.fixture()
def valid_config() -> EffectiveConfig:
    """Minimal valid configuration with all identity fields set."""
    return EffectiveConfig(
        method="SHA256",
        cut_length=8,
        end_char="!",
        upper_start=3,
        name="test",
        email="test@example.com",
        site="example.com",
    )


@pytest.fixture()
def config_file(tmp_path: Path) -> Path:
    """Config file with comments, blank lines and one meaningful line."""
    path = tmp_path / "config.txt"
    path.write_text(
        "# personal sites\n"
        "\n"
        "name:x;method:sha1,cut:5\n",
        "utf-8",
    )
    return path
