# Rev 0.1.0

"""Paths and XDG helpers (Rev 0.1.0)
- Uses XDG Base Directory spec
- Logs live under the state dir, settings under the config dir
"""
from __future__ import annotations
import os
from pathlib import Path


APP_NAME = "erabu"


def xdg_state_home() -> Path:
    return Path(os.environ.get("XDG_STATE_HOME", Path.home() / ".local" / "state"))


def xdg_config_home() -> Path:
    return Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))


def logs_dir() -> Path:
    return xdg_state_home() / APP_NAME / "logs"


def config_dir() -> Path:
    return xdg_config_home() / APP_NAME
