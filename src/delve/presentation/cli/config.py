"""CLI configuration helpers for save locations and debug output."""
from __future__ import annotations

import os
from pathlib import Path

SAVE_FILE_NAME = "save.json"


def debug_enabled() -> bool:
    """Return True only when DELVE_DEBUG is explicitly set to '1'."""
    return os.getenv("DELVE_DEBUG") == "1"


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "Delve"
        return Path.home() / "Delve"
    return Path.home() / ".config" / "delve"


def get_save_path() -> Path:
    """Return the save file path, honouring DELVE_SAVE_DIR when set."""
    override = os.environ.get("DELVE_SAVE_DIR")
    base = Path(override) if override else get_user_data_dir()
    return base / SAVE_FILE_NAME
