"""
Triangulator settings: process-level configuration.

Stores the vertex merge tolerance and the defaults used when triangles
are baked into mesh buffers. Settings can be saved to / loaded from JSON.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional, Union

from hazetri import log


@dataclass
class TriangulatorSettings:
    """
    Triangulator configuration.

    - vertex_tolerance: relative tolerance for merging mesh vertices
    - depth: default z coordinate of baked vertices
    - clockwise: default front-face winding of baked triangles
    - log_level: level applied to the "hazetri" logger
    """

    vertex_tolerance: float = 1e-6
    depth: float = 0.0
    clockwise: bool = True
    log_level: str = "WARNING"

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return asdict(self)

    @staticmethod
    def from_dict(data: dict) -> "TriangulatorSettings":
        """Deserialize from dictionary."""
        return TriangulatorSettings(
            vertex_tolerance=float(data.get("vertex_tolerance", 1e-6)),
            depth=float(data.get("depth", 0.0)),
            clockwise=bool(data.get("clockwise", True)),
            log_level=str(data.get("log_level", "WARNING")),
        )


class SettingsManager:
    """
    Singleton manager for triangulator settings.

    Handles loading/saving settings from a JSON file.
    """

    _instance: Optional["SettingsManager"] = None
    _settings: TriangulatorSettings

    def __init__(self) -> None:
        self._settings = TriangulatorSettings()

    @classmethod
    def instance(cls) -> "SettingsManager":
        """Get singleton instance."""
        if cls._instance is None:
            cls._instance = SettingsManager()
        return cls._instance

    @property
    def settings(self) -> TriangulatorSettings:
        """Get current settings."""
        return self._settings

    @settings.setter
    def settings(self, value: TriangulatorSettings) -> None:
        self._settings = value
        log.set_level(value.log_level)

    def reset(self) -> None:
        """Restore default settings."""
        self.settings = TriangulatorSettings()

    def load(self, path: Union[str, Path]) -> bool:
        """Load settings from file. Falls back to defaults on failure."""
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
            self.settings = TriangulatorSettings.from_dict(data)
            log.info(f"[TriangulatorSettings] Loaded from {path}")
            return True
        except (OSError, ValueError, TypeError, AttributeError) as e:
            log.error(f"[TriangulatorSettings] Failed to load settings: {e}")
            self.settings = TriangulatorSettings()
            return False

    def save(self, path: Union[str, Path]) -> bool:
        """Save settings to file."""
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)

            with open(path, "w", encoding="utf-8") as f:
                json.dump(self._settings.to_dict(), f, indent=2)
            log.info(f"[TriangulatorSettings] Saved to {path}")
            return True
        except OSError as e:
            log.error(f"[TriangulatorSettings] Failed to save settings: {e}")
            return False


def get_settings() -> TriangulatorSettings:
    """Shortcut for SettingsManager.instance().settings."""
    return SettingsManager.instance().settings
