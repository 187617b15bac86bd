"""Player-adjustable settings as an immutable value.

Settings are never edited in place: a ``SettingsPatch`` names the fields to
change and ``Settings.merged`` returns a new, validated ``Settings``.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, fields, replace
from typing import Any

from .constants import (
    SPEED_LEVEL_MULTIPLIERS, MIN_SPEED_LEVEL, MAX_SPEED_LEVEL, MIN_UI_OPACITY, MAX_UI_OPACITY
)


class SettingsError(ValueError):
    """A settings patch carried a value of the wrong type."""


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _check_number(name: str, value: Any) -> float:
    # bool is an int subclass but never a valid number here
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SettingsError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise SettingsError(f"{name} must be finite, got {value!r}")
    return value


@dataclass(frozen=True)
class SettingsPatch:
    """Partial update; ``None`` fields keep their current value."""
    ui_opacity: float | None = None
    speed_level: int | None = None
    difficulty_progression: bool | None = None


@dataclass(frozen=True)
class Settings:
    """
    Validated player settings.

    Attributes
    ----------
    ui_opacity : float
        Alpha applied to the hazard, particles and rings (0.2..1.0).
    speed_level : int
        Base hazard speed level (1..5).
    difficulty_progression : bool
        Whether hazard speed ramps up with elapsed run time.
    """
    ui_opacity: float = 1.0
    speed_level: int = 3
    difficulty_progression: bool = True

    def __post_init__(self) -> None:
        opacity = _check_number("ui_opacity", self.ui_opacity)
        level = _check_number("speed_level", self.speed_level)
        if not isinstance(self.difficulty_progression, bool):
            raise SettingsError(
                f"difficulty_progression must be a bool, got {self.difficulty_progression!r}")
        object.__setattr__(self, "ui_opacity", _clamp(float(opacity), MIN_UI_OPACITY, MAX_UI_OPACITY))
        object.__setattr__(self, "speed_level", int(_clamp(round(level), MIN_SPEED_LEVEL, MAX_SPEED_LEVEL)))

    @property
    def speed_multiplier(self) -> float:
        """Speed factor for the configured level."""
        return SPEED_LEVEL_MULTIPLIERS[self.speed_level - 1]

    def merged(self, patch: SettingsPatch) -> Settings:
        """
        Apply ``patch`` on top of these settings.

        Parameters
        ----------
        patch : SettingsPatch
            Fields to change; each supplied value is validated and clamped

        Returns
        -------
        Settings
            A new value; ``self`` is left untouched

        Raises
        ------
        SettingsError
            If a supplied field has an unusable type
        """
        changes = {f.name: getattr(patch, f.name) for f in fields(patch)
                   if getattr(patch, f.name) is not None}
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> Settings:
        """
        Rebuild settings from persisted data.

        Unknown keys are ignored and values of the wrong type fall back to the
        defaults, so a stale or hand-edited file never blocks startup.
        """
        settings = cls()
        if not isinstance(data, dict):
            return settings

        known = {f.name for f in fields(cls)}
        for key, value in data.items():
            if key not in known:
                continue
            try:
                settings = settings.merged(SettingsPatch(**{key: value}))
            except SettingsError as e:
                print(f"Ignoring saved setting {key}: {e}")
        return settings
