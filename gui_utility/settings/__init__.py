from .settings_manager import SettingsManager, DEFAULT_SETTINGS, SETTINGS_FILE
