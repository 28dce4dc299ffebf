from __future__ import annotations

from pathlib import Path

from delve.presentation.cli import config


def test_debug_enabled_requires_explicit_one(monkeypatch) -> None:
    monkeypatch.delenv("DELVE_DEBUG", raising=False)
    assert not config.debug_enabled()
    monkeypatch.setenv("DELVE_DEBUG", "true")
    assert not config.debug_enabled()
    monkeypatch.setenv("DELVE_DEBUG", "1")
    assert config.debug_enabled()


def test_save_path_honours_override(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("DELVE_SAVE_DIR", str(tmp_path))

    assert config.get_save_path() == tmp_path / "save.json"


def test_save_path_defaults_to_user_data_dir(monkeypatch) -> None:
    monkeypatch.delenv("DELVE_SAVE_DIR", raising=False)

    assert config.get_save_path() == config.get_user_data_dir() / "save.json"
