import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def config_manager(tmp_path):
    from utils.config_manager import ConfigManager

    return ConfigManager(db_dir=str(tmp_path / "config"))


class FakeTonePlayer:
    def __init__(self, settings=None, error=None):
        self.settings = settings
        self.error = error
        self.played = []
        self.closed = False

    def play(self, morse_code):
        if self.error is not None:
            raise self.error
        self.played.append(morse_code)

    def close(self):
        self.closed = True


@pytest.fixture
def fake_player_factory():
    created = []

    def factory(settings):
        player = FakeTonePlayer(settings)
        created.append(player)
        return player

    factory.created = created
    return factory


@pytest.fixture
def app_context(config_manager, fake_player_factory):
    from morsetranslator.core.context import AppContext

    copied = []
    context = AppContext(
        config_manager=config_manager,
        tone_player_factory=fake_player_factory,
        clipboard_writer=copied.append,
    )
    context.copied = copied
    return context


@pytest.fixture
def failing_player_factory():
    def factory(settings):
        return FakeTonePlayer(settings, error=RuntimeError("sounddevice is not available"))

    return factory
