from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from hangul_tools.domain.options import DEFAULT_OPTIONS, DisassembleOptions

logger = logging.getLogger(__name__)

SETTINGS_ENV_VAR = "HANGUL_TOOLS_SETTINGS"


class SettingsStore:
    """YAML-backed settings store.

    Responsibilities:
      - Load/save settings.yaml atomically
      - Provide typed helpers for the disassembly options

    Expected YAML shape:

        disassemble:
          split_compound_final: true
          split_compound_vowel: false

    Options are not applied implicitly; pass them in:

        Hangul(text, SettingsStore().get_options()).disassemble()
    """

    def __init__(self, settings_path: str | None = None) -> None:
        if settings_path is None:
            settings_path = os.environ.get(SETTINGS_ENV_VAR) or None
        if settings_path is None:
            # <project_root>/settings.yaml
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
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            logger.warning("Failed to read settings from %s: %s", p, e)
            return {}
        return data if isinstance(data, dict) else {}

    def save(self, data: dict[str, Any]) -> None:
        p = self._path
        tmp = p.with_suffix(p.suffix + ".tmp")
        try:
            p.parent.mkdir(parents=True, exist_ok=True)
            with tmp.open("w", encoding="utf-8") as f:
                yaml.safe_dump(data or {}, f, allow_unicode=True, sort_keys=True)
            os.replace(str(tmp), str(p))
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Failed to persist settings to %s: %s", p, e)
            tmp.unlink(missing_ok=True)

    def get_options(self) -> DisassembleOptions:
        s = self.load()
        d = s.get("disassemble") or {}
        if not isinstance(d, dict):
            d = {}

        def _bval(key: str, default: bool) -> bool:
            v = d.get(key, default)
            if isinstance(v, bool):
                return v
            logger.warning("Ignoring non-boolean setting disassemble.%s=%r", key, v)
            return default

        return DisassembleOptions(
            split_compound_final=_bval("split_compound_final", DEFAULT_OPTIONS.split_compound_final),
            split_compound_vowel=_bval("split_compound_vowel", DEFAULT_OPTIONS.split_compound_vowel),
        )

    def set_options(self, options: DisassembleOptions) -> None:
        s = self.load()
        s["disassemble"] = {
            "split_compound_final": bool(options.split_compound_final),
            "split_compound_vowel": bool(options.split_compound_vowel),
        }
        self.save(s)
