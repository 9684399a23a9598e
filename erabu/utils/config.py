# Rev 0.1.0
# erabu/utils/config.py
from __future__ import annotations
import copy
import json
from pathlib import Path
from typing import Any, Dict, Optional

from .logging_setup import get_logger
from .paths import config_dir

_log = get_logger(__name__)

_DEFAULTS: Dict[str, Any] = {
    "main_window": {
        "width": 400,
        "height": 600,
    },
    "ui": {
        "seed_examples": True,
    },
    # None -> seed from OS entropy
    "random_seed": None,
}


def settings_file() -> Path:
    return config_dir() / "settings.json"


def default_settings() -> Dict[str, Any]:
    return copy.deepcopy(_DEFAULTS)


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(out.get(key), dict):
            out[key] = _merge(out[key], value)
        else:
            out[key] = value
    return out


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    path = path or settings_file()
    if not path.exists():
        return default_settings()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        _log.warning("Unreadable settings at %s; using defaults", path, exc_info=True)
        return default_settings()
    if not isinstance(data, dict):
        _log.warning("Settings at %s is not an object; using defaults", path)
        return default_settings()
    return _merge(default_settings(), data)


def save_settings(data: Dict[str, Any], path: Optional[Path] = None) -> Path:
    path = path or settings_file()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    _log.debug("Settings written to %s", path)
    return path
