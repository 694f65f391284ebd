"""
Settings management for Layout Measurement
"""

import json
import math
import os
from dataclasses import dataclass, asdict, fields
from typing import Any, Optional

from .logger import debug, warn

CONFIG_DIR = os.path.expanduser("~/.config/layout-measurement")
CONFIG_FILE = os.path.join(CONFIG_DIR, "settings.json")


@dataclass
class Settings:
    """Application settings"""

    # Size proposed to the traced subject when the window opens
    initial_width: float = 200.0
    initial_height: float = 100.0

    # Range of the width slider
    slider_min: float = 0.0
    slider_max: float = 300.0

    # Spacing between the HStack children
    stack_spacing: float = 0.0

    # Content of the text label between the two boxes
    text: str = "Hello, world"

    def save(self):
        """Save settings to config file"""
        os.makedirs(CONFIG_DIR, exist_ok=True)
        with open(CONFIG_FILE, "w") as f:
            json.dump(asdict(self), f, indent=2)

    @classmethod
    def load(cls) -> "Settings":
        """Load settings from config file, or return defaults"""
        if not os.path.exists(CONFIG_FILE):
            return cls()

        try:
            with open(CONFIG_FILE, "r") as f:
                data = json.load(f)

            # Filter to only known fields (ignore obsolete settings)
            valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
            filtered_data = {k: v for k, v in data.items() if k in valid_fields}

            debug(f"[Settings] Loaded {len(filtered_data)} value(s) from {CONFIG_FILE}")
            return cls._validated(filtered_data)
        except (OSError, ValueError, TypeError, AttributeError) as e:
            warn(f"[Settings] Ignoring unreadable {CONFIG_FILE}: {e}")
            return cls()

    @classmethod
    def _validated(cls, data: dict) -> "Settings":
        defaults = cls()
        values = {
            f.name: _coerce(f.name, data[f.name], getattr(defaults, f.name))
            for f in fields(cls)
            if f.name in data
        }
        settings = cls(**values)
        if settings.slider_min > settings.slider_max:
            warn(
                f"[Settings] Slider range {settings.slider_min}..{settings.slider_max}"
                " is inverted, using the default range"
            )
            settings.slider_min = defaults.slider_min
            settings.slider_max = defaults.slider_max
        return settings


def _coerce(name: str, value: Any, default: Any) -> Any:
    """Return value in the type of default, or default when it does not fit."""
    if isinstance(default, str):
        if isinstance(value, str):
            return value
    elif not isinstance(value, bool):
        try:
            number = float(value)
        except (TypeError, ValueError):
            number = math.nan
        if math.isfinite(number) and number >= 0:
            return number
    warn(f"[Settings] Invalid {name}={value!r}, using {default!r}")
    return default


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance"""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def save_settings():
    """Save the global settings"""
    if _settings is not None:
        _settings.save()
