# tests/conftest.py
import importlib
from pathlib import Path

import pytest

from hangeul.services.settings_store import SettingsStore


@pytest.fixture(scope="module")
def main_module():
    return importlib.import_module("main")


@pytest.fixture
def settings_path(tmp_path: Path, monkeypatch) -> Path:
    """Point the settings store at a temp file so tests never touch the real settings.yaml."""
    path = tmp_path / "settings.yaml"
    monkeypatch.setenv("HANGEUL_SETTINGS", str(path))
    monkeypatch.delenv("HANGEUL_DEBUG", raising=False)
    return path


@pytest.fixture
def store(settings_path: Path) -> SettingsStore:
    return SettingsStore(str(settings_path))
