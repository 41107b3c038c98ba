from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Final

import yaml

logger = logging.getLogger(__name__)

JAMO_FORMS: Final[tuple[str, ...]] = ("compat", "conjoined")
DEFAULT_JAMO_FORM: Final[str] = "compat"
DEFAULT_LOG_LEVEL: Final[str] = "WARNING"
_LOG_LEVELS: Final[tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class SettingsStore:
    """YAML-backed settings store.

    Responsibilities:
      - Load/save settings.yaml atomically
      - Provide typed helpers for the jamo output form and logging options

    Notes:
      - Path resolution: explicit argument, then HANGEUL_SETTINGS, then
        <project_root>/settings.yaml.
      - A missing or malformed file means "all defaults".
    """

    def __init__(self, settings_path: str | None = None) -> None:
        if settings_path is None:
            env_path = (os.environ.get("HANGEUL_SETTINGS") or "").strip()
            if env_path:
                self._path = Path(env_path)
            else:
                # <project_root>/settings.yaml, next to main.py
                project_root = Path(__file__).resolve().parents[2]
                self._path = project_root / "settings.yaml"
        else:
            self._path = Path(settings_path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, Any]:
        p = self._path
        if not p.exists():
            return {}
        try:
            with p.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Failed to read settings %s: %s", p, e)
            return {}
        return data if isinstance(data, dict) else {}

    def save(self, data: dict[str, Any]) -> None:
        p = self._path
        p.parent.mkdir(parents=True, exist_ok=True)
        tmp = p.with_suffix(p.suffix + ".tmp")
        try:
            with tmp.open("w", encoding="utf-8") as f:
                yaml.safe_dump(data or {}, f, allow_unicode=True, sort_keys=True)
            os.replace(str(tmp), str(p))
        except Exception:
            tmp.unlink(missing_ok=True)
            raise

    def get_jamo_form(self) -> str:
        v = str(self.load().get("jamo_form", DEFAULT_JAMO_FORM)).strip().lower()
        if v not in JAMO_FORMS:
            logger.debug("Invalid jamo_form %r in settings; using default", v)
            return DEFAULT_JAMO_FORM
        return v

    def set_jamo_form(self, value: str) -> None:
        v = str(value).strip().lower()
        if v not in JAMO_FORMS:
            raise ValueError("jamo_form must be one of %s, got %r" % (", ".join(JAMO_FORMS), value))
        s = self.load()
        s["jamo_form"] = v
        self.save(s)

    def get_log_level(self) -> str:
        if str(os.environ.get("HANGEUL_DEBUG", "")).strip().lower() in ("1", "true", "yes", "on"):
            return "DEBUG"
        v = str(self.load().get("log_level", DEFAULT_LOG_LEVEL)).strip().upper()
        return v if v in _LOG_LEVELS else DEFAULT_LOG_LEVEL

    def get_log_file(self) -> str | None:
        v = self.load().get("log_file")
        if isinstance(v, str) and v.strip():
            return v.strip()
        return None
