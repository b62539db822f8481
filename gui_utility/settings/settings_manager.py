import copy
import json
import logging
import os

from ..assets import ASSETS_DIR
from ..constants import BASE_SCREEN_SIZE_X, BASE_SCREEN_SIZE_Y, FPS_CAP, SNAP_RESOLUTION_STEP

log = logging.getLogger(__name__)

SETTINGS_FILE = os.path.join(os.path.dirname(__file__), "settings.json")

DEFAULT_SETTINGS = {
    "scaling": {
        "base_resolution": [BASE_SCREEN_SIZE_X, BASE_SCREEN_SIZE_Y],
        "snap_step": SNAP_RESOLUTION_STEP
    },
    "assets": {
        "directory": ASSETS_DIR
    },
    "video": {
        "resolution": [BASE_SCREEN_SIZE_X, BASE_SCREEN_SIZE_Y],
        "fps_cap": FPS_CAP
    },
    "logging": {
        "level": "INFO"
    }
}


class SettingsManager:
    def __init__(self, path=SETTINGS_FILE):
        self.path = path
        self.settings = self.load()

    def load(self):
        if os.path.exists(self.path):
            try:
                with open(self.path, "r") as f:
                    loaded = json.load(f)
                    # Merge with defaults to handle new settings
                    return self._merge_defaults(loaded)
            except (json.JSONDecodeError, OSError) as e:
                log.warning("Failed to load settings from %s, using defaults: %s", self.path, e)
                return copy.deepcopy(DEFAULT_SETTINGS)
        return copy.deepcopy(DEFAULT_SETTINGS)

    def _merge_defaults(self, loaded):
        """Merge loaded settings with defaults to fill missing keys"""
        result = copy.deepcopy(DEFAULT_SETTINGS)
        if not isinstance(loaded, dict):
            log.warning("Ignoring settings in %s, expected an object", self.path)
            return result
        for category, values in loaded.items():
            if category in result and isinstance(values, dict):
                result[category].update(values)
            else:
                result[category] = values
        return result

    def save(self):
        try:
            with open(self.path, "w") as f:
                json.dump(self.settings, f, indent=2)
        except OSError as e:
            log.error("Failed to save settings: %s", e)

    def get(self, category, key=None):
        if key is None:
            return self.settings.get(category, {})
        return self.settings.get(category, {}).get(key)

    def set(self, category, key, value):
        if category not in self.settings:
            self.settings[category] = {}
        self.settings[category][key] = value
        self.save()
