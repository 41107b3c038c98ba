import logging
from pathlib import Path

import pytest
import yaml

from hangeul.services.logger import setup_logger
from hangeul.services.settings_store import SettingsStore


def test_defaults_when_file_missing(store):
    assert store.load() == {}
    assert store.get_jamo_form() == "compat"
    assert store.get_log_level() == "WARNING"
    assert store.get_log_file() is None


def test_save_and_load_roundtrip(store, settings_path: Path):
    store.save({"jamo_form": "conjoined", "log_level": "info", "note": "한글"})
    assert settings_path.exists()
    raw = yaml.safe_load(settings_path.read_text(encoding="utf-8"))
    assert raw["note"] == "한글"

    assert store.get_jamo_form() == "conjoined"
    assert store.get_log_level() == "INFO"


def test_set_jamo_form_validates(store):
    store.set_jamo_form("Conjoined")
    assert store.get_jamo_form() == "conjoined"
    with pytest.raises(ValueError):
        store.set_jamo_form("nfd")


def test_invalid_values_fall_back_to_defaults(store, settings_path: Path):
    settings_path.write_text("jamo_form: sideways\nlog_level: LOUD\n", encoding="utf-8")
    assert store.get_jamo_form() == "compat"
    assert store.get_log_level() == "WARNING"


def test_malformed_yaml_is_ignored(store, settings_path: Path):
    settings_path.write_text("jamo_form: [unclosed\n", encoding="utf-8")
    assert store.load() == {}
    settings_path.write_text("- just\n- a list\n", encoding="utf-8")
    assert store.load() == {}


def test_env_overrides(settings_path: Path, monkeypatch):
    assert SettingsStore().path == settings_path
    monkeypatch.setenv("HANGEUL_DEBUG", "1")
    assert SettingsStore().get_log_level() == "DEBUG"


def test_setup_logger_replaces_handlers(tmp_path: Path):
    log_file = tmp_path / "logs" / "hangeul.log"
    logger = setup_logger("debug", str(log_file))
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2

    logger = setup_logger(logging.INFO)
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1
    assert log_file.exists()


def test_failed_save_leaves_no_temp_file(store, settings_path: Path, monkeypatch):
    store.save({"jamo_form": "compat"})

    def _fail(*args, **kwargs):
        raise yaml.YAMLError("cannot dump")

    monkeypatch.setattr(yaml, "safe_dump", _fail)
    with pytest.raises(yaml.YAMLError):
        store.save({"jamo_form": "conjoined"})

    assert not settings_path.with_suffix(".yaml.tmp").exists()
    assert store.get_jamo_form() == "compat"
