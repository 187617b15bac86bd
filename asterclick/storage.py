"""JSON persistence for settings and the last run result.

Loads return ``None`` when the file is missing or unreadable; saves print the
failure and carry on. The game never depends on persistence succeeding.
"""

from __future__ import annotations

import json
import os
from typing import Any

from .constants import SETTINGS_PATH, LAST_RESULT_PATH
from .models import RunResult
from .settings import Settings


def load_json(path: str) -> Any | None:
    if not os.path.exists(path):
        return None
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError) as e:
        print(f"Failed to load {path}: {e}")
        return None


def save_json(path: str, data: Any) -> bool:
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
    except (OSError, TypeError) as e:
        print(f"Failed to save {path}: {e}")
        return False
    return True


def load_settings(path: str = SETTINGS_PATH) -> Settings:
    """Saved settings, or the defaults when nothing usable is on disk."""
    return Settings.from_dict(load_json(path))


def save_settings(settings: Settings, path: str = SETTINGS_PATH) -> bool:
    return save_json(path, settings.to_dict())


def load_last_result(path: str = LAST_RESULT_PATH) -> RunResult | None:
    """
    Result of the previous run, if one was saved.

    Returns
    -------
    RunResult | None
        None when the file is missing, corrupt, or lacks a required field
    """
    data = load_json(path)
    if not isinstance(data, dict):
        return None
    try:
        return RunResult(
            destroyed=int(data["destroyed"]),
            misses=int(data["misses"]),
            clicks=int(data.get("clicks", 0)),
            time_sec=float(data["time_sec"]),
        )
    except (KeyError, TypeError, ValueError) as e:
        print(f"Ignoring saved result in {path}: {e}")
        return None


def save_last_result(result: RunResult, path: str = LAST_RESULT_PATH) -> bool:
    return save_json(path, {
        "destroyed": result.destroyed,
        "misses": result.misses,
        "clicks": result.clicks,
        "time_sec": result.time_sec,
    })
