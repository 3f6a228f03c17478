import logging

from PySide6.QtCore import Qt
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QVBoxLayout,
    QWidget,
)

from ui_widgets import (
    InfoBar,
    InfoBarIcon,
    InfoBarPosition,
    PushButton,
    TextEdit,
    TransparentPushButton,
)
from ui_widgets import FluentIcon as FIF

from morsetranslator.core.context import write_clipboard
from morsetranslator.translation.session import TranslatorSession
from service.signal.qt_signal import MySignal
from utils.config_manager import ConfigManager
from utils.sound import TonePlayer


logger = logging.getLogger(__name__)


class TranslatorPage(QWidget):
    """Input box, direction switch and read-only translation box."""

    def __init__(self, parent=None, context=None):
        super().__init__(parent)
        self.context = context
        self.config_manager = self.context.config_manager if self.context else ConfigManager()
        self.session = TranslatorSession()
        self.signal = MySignal()
        self._updating = False
        self._own_player = None

        self.init_ui()
        self.apply_direction()

    def create_tone_player(self):
        if self.context and hasattr(self.context, "create_tone_player"):
            return self.context.create_tone_player()
        if self._own_player is None:
            self._own_player = TonePlayer()
        return self._own_player

    def close_tone_player(self):
        player = self._own_player
        self._own_player = None
        if player is not None:
            player.close()

    def init_ui(self):
        self.vbox_main = QVBoxLayout(self)
        self.vbox_main.setContentsMargins(24, 20, 24, 20)
        self.vbox_main.setSpacing(12)

        self.label_title = QLabel(self.tr("Morse Code Translator"))
        title_font = QFont()
        title_font.setBold(True)
        title_font.setPointSize(20)
        self.label_title.setFont(title_font)
        self.label_title.setAlignment(Qt.AlignCenter)
        self.vbox_main.addWidget(self.label_title)

        self.label_subtitle = QLabel(
            self.tr(
                "Convert text to Morse code and vice versa. Perfect for learning "
                "Morse code or sending secret messages!"
            )
        )
        self.label_subtitle.setWordWrap(True)
        self.label_subtitle.setAlignment(Qt.AlignCenter)
        self.vbox_main.addWidget(self.label_subtitle)

        text_font = QFont()
        text_font.setPointSize(int(self.config_manager.get_font_size()))

        # Source
        self.edit_source = TextEdit()
        self.edit_source.setAcceptRichText(False)
        self.edit_source.setFont(text_font)
        self.edit_source.textChanged.connect(self.on_source_changed)
        self.vbox_main.addWidget(self.edit_source, 1)

        hbox_source_actions = QHBoxLayout()
        hbox_source_actions.addStretch(1)
        self.btn_copy_source = TransparentPushButton(FIF.COPY, self.tr("Copy"))
        self.btn_copy_source.setToolTip(self.tr("Copy to clipboard"))
        self.btn_copy_source.clicked.connect(self.copy_source)
        hbox_source_actions.addWidget(self.btn_copy_source)
        self.vbox_main.addLayout(hbox_source_actions)

        hbox_toggle = QHBoxLayout()
        hbox_toggle.addStretch(1)
        self.btn_toggle = PushButton(FIF.SYNC, "")
        self.btn_toggle.clicked.connect(self.toggle_direction)
        hbox_toggle.addWidget(self.btn_toggle)
        hbox_toggle.addStretch(1)
        self.vbox_main.addLayout(hbox_toggle)

        # Derived
        self.edit_output = TextEdit()
        self.edit_output.setReadOnly(True)
        self.edit_output.setFont(text_font)
        self.edit_output.setPlaceholderText(self.tr("Translation will appear here..."))
        self.edit_output.setStyleSheet("background-color: #f7f7fb;")
        self.vbox_main.addWidget(self.edit_output, 1)

        hbox_output_actions = QHBoxLayout()
        hbox_output_actions.addStretch(1)
        self.btn_copy_output = TransparentPushButton(FIF.COPY, self.tr("Copy"))
        self.btn_copy_output.setToolTip(self.tr("Copy to clipboard"))
        self.btn_copy_output.clicked.connect(self.copy_output)
        hbox_output_actions.addWidget(self.btn_copy_output)
        self.btn_play = TransparentPushButton(FIF.VOLUME, self.tr("Play"))
        self.btn_play.setToolTip(self.tr("Play Morse code"))
        self.btn_play.clicked.connect(self.play_morse_code)
        hbox_output_actions.addWidget(self.btn_play)
        self.vbox_main.addLayout(hbox_output_actions)

    def apply_direction(self):
        if self.session.is_text_to_morse:
            self.edit_source.setPlaceholderText(self.tr("Enter text to convert..."))
            self.btn_toggle.setText(self.tr("Text → Morse"))
        else:
            self.edit_source.setPlaceholderText(self.tr("Enter Morse code..."))
            self.btn_toggle.setText(self.tr("Morse → Text"))
        self.btn_toggle.setToolTip(self.tr("Switch translation direction"))
        self.btn_play.setVisible(self.session.can_play)

    def on_source_changed(self):
        if self._updating:
            return
        derived = self.session.edit(self.edit_source.toPlainText())
        self.edit_output.setPlainText(derived)

    def toggle_direction(self):
        self.session.toggle()
        self._updating = True
        try:
            self.edit_source.clear()
            self.edit_output.clear()
        finally:
            self._updating = False
        self.apply_direction()
        self.signal.direction_changed_signal.emit(self.session.is_text_to_morse)

    def copy_source(self):
        self._copy(self.session.source)

    def copy_output(self):
        self._copy(self.session.derived)

    def _copy(self, text):
        if self.context and hasattr(self.context, "copy_to_clipboard"):
            self.context.copy_to_clipboard(text)
        else:
            write_clipboard(text)
        self.create_info_bar(self.tr("Copied"), self.tr("Text copied to clipboard"))

    def play_morse_code(self):
        if not self.session.can_play:
            return
        try:
            self.create_tone_player().play(self.session.morse)
        except Exception as e:
            logger.exception("Morse playback failed")
            self.signal.playback_failed_signal.emit(str(e))
            self.create_info_bar(
                self.tr("Audio unavailable"),
                str(e),
                icon=InfoBarIcon.ERROR,
            )

    def create_info_bar(self, title, content, icon=InfoBarIcon.INFORMATION):
        InfoBar(
            icon=icon,
            title=title,
            content=content,
            orient=Qt.Vertical,
            isClosable=True,
            position=InfoBarPosition.BOTTOM,
            duration=2000,
            parent=self.window(),
        ).show()

    def set_font_size(self):
        font = self.edit_source.font()
        font.setPointSize(int(self.config_manager.get_font_size()))
        self.edit_source.setFont(font)
        self.edit_output.setFont(font)
