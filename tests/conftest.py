# tests/conftest.py
from pathlib import Path

import pytest

from hangul_tools.services.settings_store import SETTINGS_ENV_VAR


@pytest.fixture
def settings_path(monkeypatch, tmp_path: Path) -> Path:
    """A settings.yaml location under tmp_path; tests never touch the real one."""
    monkeypatch.delenv(SETTINGS_ENV_VAR, raising=False)
    return tmp_path / "settings.yaml"
