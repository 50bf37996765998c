"""Shared pytest fixtures for sexpcalc tests."""

from pathlib import Path

import pytest

from sexpcalc.core.settings import EvalSettings


@pytest.fixture
def settings_64() -> EvalSettings:
    """Settings computing in 64-bit integers."""
    return EvalSettings(int_bits=64)


@pytest.fixture
def write_settings(tmp_path: Path):
    """Return a helper that writes a sexpcalc.toml into tmp_path."""

    def _write(body: str, name: str = "sexpcalc.toml") -> Path:
        path = tmp_path / name
        path.write_text(body, encoding="utf-8")
        return path

    return _write
