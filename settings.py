"""JSON-based settings persistence for the calendar grid."""

import json
import logging
import os

from calendar_logic import CellFormat

logger = logging.getLogger(__name__)

_SETTINGS_ENV = "CALENDAR_GRID_SETTINGS"
_SETTINGS_PATH = os.path.join(os.path.expanduser("~"), ".calendar-grid-settings.json")

_DEFAULTS = {
    "cell_format": CellFormat.FULL.value,
    "last_year": None,
    "last_month": None,
}


def settings_path() -> str:
    """Return the settings file location, honouring the env override."""
    return os.environ.get(_SETTINGS_ENV) or _SETTINGS_PATH


def load_settings(path: str | None = None) -> dict:
    """Load settings from disk, returning defaults for missing keys."""
    path = path or settings_path()
    settings = dict(_DEFAULTS)
    try:
        with open(path, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except FileNotFoundError:
        return settings
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Ignoring unreadable settings file %s: %s", path, e)
        return settings

    if not isinstance(stored, dict):
        logger.warning("Ignoring settings file %s: expected a JSON object", path)
        return settings
    fmt = stored.get("cell_format")
    if fmt in {f.value for f in CellFormat}:
        settings["cell_format"] = fmt
    for key in ("last_year", "last_month"):
        value = stored.get(key)
        # bool is an int subclass
        if isinstance(value, int) and not isinstance(value, bool):
            settings[key] = value
    if settings["last_month"] is not None and not 1 <= settings["last_month"] <= 12:
        settings["last_year"] = settings["last_month"] = None
    return settings


def save_settings(settings: dict, path: str | None = None) -> None:
    """Persist settings to disk."""
    path = path or settings_path()
    with open(path, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2)
    logger.debug("Saved settings to %s", path)
