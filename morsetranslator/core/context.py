"""Shared application context and dependency factories."""

from __future__ import annotations

from dataclasses import dataclass, field
from threading import RLock
from typing import Callable

from PySide6.QtGui import QGuiApplication

from morsetranslator.translation.audio import ToneSettings
from utils.config_manager import ConfigManager
from utils.sound import TonePlayer
from .metadata import APP_NAME, APP_VERSION


TonePlayerFactory = Callable[[ToneSettings], TonePlayer]
ClipboardWriter = Callable[[str], None]


def write_clipboard(text: str) -> None:
    QGuiApplication.clipboard().setText(text)


@dataclass
class AppContext:
    """Holds cross-module dependencies for non-breaking DI."""

    app_name: str = APP_NAME
    app_version: str = APP_VERSION
    config_manager: ConfigManager = field(default_factory=ConfigManager)
    tone_player_factory: TonePlayerFactory = field(default=TonePlayer)
    clipboard_writer: ClipboardWriter = field(default=write_clipboard)
    _shared_player: TonePlayer | None = field(default=None, init=False, repr=False)
    _player_lock: RLock = field(default_factory=RLock, init=False, repr=False)

    def tone_settings(self) -> ToneSettings:
        configer = self.config_manager
        return ToneSettings(
            frequency=float(configer.get_tone_freq()),
            gain=float(configer.get_tone_gain()),
            dot_duration=float(configer.get_dot_duration()),
            dot_advance=float(configer.get_dot_advance()),
            dash_duration=float(configer.get_dash_duration()),
            dash_advance=float(configer.get_dash_advance()),
            sample_rate=int(configer.get_sample_rate()),
        )

    def create_tone_player(self) -> TonePlayer:
        with self._player_lock:
            if self._shared_player is None:
                self._shared_player = self.tone_player_factory(self.tone_settings())
            return self._shared_player

    def refresh_tone_settings(self) -> ToneSettings:
        settings = self.tone_settings()
        with self._player_lock:
            if self._shared_player is not None:
                self._shared_player.settings = settings
        return settings

    def copy_to_clipboard(self, text: str) -> None:
        self.clipboard_writer(text)

    def close_tone_player(self) -> None:
        with self._player_lock:
            player = self._shared_player
            self._shared_player = None
        if player:
            player.close()
