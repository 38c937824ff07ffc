from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

_KEYBOARD_SECTION = "keyboard"


@dataclass(frozen=True)
class KeyboardSettings:
    shift_once: bool = False
    max_length: int = 0
    enter_inserts_newline: bool = True


class SettingsStore:
    """YAML-backed settings store.

    Responsibilities:
      - Load/save settings.yaml atomically
      - Provide typed helpers for the keyboard section and log level

    Notes:
      - `max_length` 0 means unlimited.
    """

    def __init__(self, settings_path: str | None = None) -> None:
        if settings_path is None:
            # <project_root>/settings.yaml, next to main.py
            project_root = Path(__file__).resolve().parents[2]
            self._path = project_root / "settings.yaml"
        else:
            self._path = Path(settings_path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, Any]:
        try:
            p = self._path
            if not p.exists():
                return {}
            with p.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
                return data if isinstance(data, dict) else {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Failed to read settings from %s: %s", self._path, e)
            return {}

    def save(self, data: dict[str, Any]) -> None:
        try:
            p = self._path
            p.parent.mkdir(parents=True, exist_ok=True)
            tmp = p.with_suffix(p.suffix + ".tmp")
            with tmp.open("w", encoding="utf-8") as f:
                yaml.safe_dump(data or {}, f, allow_unicode=True, sort_keys=True)
            os.replace(str(tmp), str(p))
        except (OSError, yaml.YAMLError) as e:
            # Best-effort persistence; callers should not crash on save failures.
            logger.warning("Failed to save settings to %s: %s", self._path, e)

    def _keyboard_section(self) -> dict[str, Any]:
        k = self.load().get(_KEYBOARD_SECTION) or {}
        return k if isinstance(k, dict) else {}

    def get_keyboard_settings(self) -> KeyboardSettings:
        k = self._keyboard_section()

        def _bval(key: str, default: bool) -> bool:
            v = k.get(key, default)
            return v if isinstance(v, bool) else default

        max_length = k.get("max_length", 0)
        if isinstance(max_length, bool) or not isinstance(max_length, (int, float)):
            max_length = 0

        return KeyboardSettings(
            shift_once=_bval("shift_once", False),
            max_length=max(0, int(max_length)),
            enter_inserts_newline=_bval("enter_inserts_newline", True),
        )

    def set_keyboard_option(self, key: str, value: Any) -> None:
        if key not in {f.name for f in fields(KeyboardSettings)}:
            raise KeyError("Unknown keyboard setting: %r" % key)
        s = self.load()
        k = s.get(_KEYBOARD_SECTION) or {}
        if not isinstance(k, dict):
            k = {}
        k[key] = value
        s[_KEYBOARD_SECTION] = k
        self.save(s)

    def get_log_level(self) -> str:
        v = self.load().get("log_level", "INFO")
        return v.upper() if isinstance(v, str) and v.strip() else "INFO"
