import json
import logging
import os

from color_logic import HarmonyScheme, UnknownScheme

logger = logging.getLogger(__name__)

SETTINGS_FILE = "settings.json"

DEFAULT_SETTINGS = {
    "default_scheme": HarmonyScheme.COMPLEMENTARY.value,
    "always_on_top": False,
    "show_rgb": True,
    "show_hsl": True,
    "wheel_size": 350,
}


def _clean(values):
    settings = dict(DEFAULT_SETTINGS)
    for key, value in values.items():
        if key not in DEFAULT_SETTINGS:
            logger.debug("Ignoring unknown setting %r", key)
            continue
        settings[key] = value

    try:
        settings["default_scheme"] = HarmonyScheme.from_value(settings["default_scheme"]).value
    except UnknownScheme as e:
        logger.warning("%s, using %s", e, DEFAULT_SETTINGS["default_scheme"])
        settings["default_scheme"] = DEFAULT_SETTINGS["default_scheme"]

    try:
        settings["wheel_size"] = max(150, int(settings["wheel_size"]))
    except (TypeError, ValueError):
        settings["wheel_size"] = DEFAULT_SETTINGS["wheel_size"]

    for key in ("always_on_top", "show_rgb", "show_hsl"):
        if not isinstance(settings[key], bool):
            logger.warning("Setting %r must be true or false, using %s", key, DEFAULT_SETTINGS[key])
            settings[key] = DEFAULT_SETTINGS[key]
    return settings


def load_settings(path=SETTINGS_FILE):
    """
    Read settings from `path`, layered over DEFAULT_SETTINGS.
    A missing or unreadable file yields the defaults.
    """
    if not os.path.exists(path):
        return dict(DEFAULT_SETTINGS)

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Could not read settings from %s: %s", path, e)
        return dict(DEFAULT_SETTINGS)

    if not isinstance(data, dict):
        logger.warning("Settings file %s does not hold an object, ignoring it", path)
        return dict(DEFAULT_SETTINGS)
    return _clean(data)


def save_settings(settings, path=SETTINGS_FILE):
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(_clean(settings), f, indent=2)
    except OSError as e:
        logger.warning("Could not save settings to %s: %s", path, e)
        return False
    return True
