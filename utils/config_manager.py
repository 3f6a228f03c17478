import logging
import os

from PySide6.QtCore import QSettings


logger = logging.getLogger(__name__)


class ConfigManager:
    DEFAULT_VALUES = {
        "Version/current_version": "1.0.0",
        "Audio/tone_freq": 600,
        "Audio/tone_gain": 0.1,
        "Audio/dot_duration": 0.1,
        "Audio/dot_advance": 0.2,
        "Audio/dash_duration": 0.3,
        "Audio/dash_advance": 0.4,
        "Audio/sample_rate": 48000,
        "Setting/font_size": 14,
    }

    def __init__(self, config_file="config.ini", db_dir="resources/config"):
        self.config_file = os.path.join(db_dir, config_file)
        os.makedirs(db_dir, exist_ok=True)
        self.settings = QSettings(self.config_file, QSettings.IniFormat)
        self.initialize_config()

    def initialize_config(self):
        """Ensure all required keys exist with sensible defaults."""
        for key, value in self.DEFAULT_VALUES.items():
            if not self.settings.contains(key):
                self.set_value(key, value)
        self.settings.sync()

    def get_value(self, key, default=None, value_type=str):
        """Read config value and safely coerce type."""
        if default is None:
            default = self.DEFAULT_VALUES.get(key)
        try:
            self.settings.sync()
            value = self.settings.value(key, default)
            if value is None:
                return default
            if value_type == int:
                return int(float(value))
            if value_type == float:
                return float(value)
            if value_type == str:
                return str(value).strip().strip('"').strip("'")
            return value_type(value)
        except Exception as e:
            logger.warning("Failed to read config key %s: %s", key, e)
            return default

    def set_value(self, key, value):
        if value is None:
            value = ""
        self.settings.setValue(key, value)

    def sync(self):
        self.settings.sync()

    # Version
    def get_current_version(self):
        return self.get_value("Version/current_version", value_type=str)

    def set_current_version(self, value):
        self.set_value("Version/current_version", value)

    # Audio
    def get_tone_freq(self):
        return self.get_value("Audio/tone_freq", value_type=int)

    def set_tone_freq(self, value):
        self.set_value("Audio/tone_freq", int(value))

    def get_tone_gain(self):
        return self.get_value("Audio/tone_gain", value_type=float)

    def set_tone_gain(self, value):
        self.set_value("Audio/tone_gain", float(value))

    def get_dot_duration(self):
        return self.get_value("Audio/dot_duration", value_type=float)

    def set_dot_duration(self, value):
        self.set_value("Audio/dot_duration", float(value))

    def get_dot_advance(self):
        return self.get_value("Audio/dot_advance", value_type=float)

    def set_dot_advance(self, value):
        self.set_value("Audio/dot_advance", float(value))

    def get_dash_duration(self):
        return self.get_value("Audio/dash_duration", value_type=float)

    def set_dash_duration(self, value):
        self.set_value("Audio/dash_duration", float(value))

    def get_dash_advance(self):
        return self.get_value("Audio/dash_advance", value_type=float)

    def set_dash_advance(self, value):
        self.set_value("Audio/dash_advance", float(value))

    def get_sample_rate(self):
        return self.get_value("Audio/sample_rate", value_type=int)

    def set_sample_rate(self, value):
        self.set_value("Audio/sample_rate", int(value))

    # General settings
    def get_font_size(self):
        return self.get_value("Setting/font_size", value_type=int)

    def set_font_size(self, value):
        self.set_value("Setting/font_size", int(value))
