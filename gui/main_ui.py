from PySide6.QtWidgets import (
    QApplication,
    QMainWindow,
    QDialog,
)
from PySide6.QtCore import Qt
from PySide6.QtGui import QAction
from ui_widgets import InfoBarPosition, InfoBar, InfoBarIcon

from gui.dialog.about_dialog import AboutDialog
from gui.dialog.setting_dialog import SettingDialog
from gui.dialog.help_dialog import HelpDialog
from gui.dialog.reference_table_dialog import ReferenceTableDialog
from gui.windows.translator_page import TranslatorPage
from morsetranslator.core.metadata import APP_NAME
from utils.config_manager import ConfigManager


class MainUI(QMainWindow):
    """Main window hosting the translator page and its menus."""

    DEFAULT_WIDTH = 760
    DEFAULT_HEIGHT = 640

    def __init__(self, context=None):
        super().__init__()
        self.context = context

        self.resize(self.DEFAULT_WIDTH, self.DEFAULT_HEIGHT)
        self.setMinimumSize(520, 480)
        self.center()

        self.config_manager = self.context.config_manager if self.context else ConfigManager()
        app_name = self.context.app_name if self.context else APP_NAME
        self.setWindowTitle(f"{app_name}_{self.config_manager.get_current_version()}")

        self.init_ui()

    def center(self):
        """Move the window to the middle of the primary screen."""
        screen = QApplication.primaryScreen().availableGeometry()
        size = self.geometry()

        self.center_point_x = int((screen.width() - size.width()) / 2)
        self.center_point_y = int((screen.height() - size.height()) / 2)
        self.move(self.center_point_x, self.center_point_y)

    def init_ui(self):
        self.create_menu_bar()

        self.page_translator = TranslatorPage(self, context=self.context)
        self.page_translator.signal.direction_changed_signal.connect(self.on_direction_changed)
        self.setCentralWidget(self.page_translator)

        clipboard_writer = self.context.copy_to_clipboard if self.context else None
        self.table_tool_morse_code = ReferenceTableDialog(clipboard_writer=clipboard_writer)
        self.statusBar()

    def create_menu_bar(self):
        menu_bar = self.menuBar()

        # Settings
        menu_setting = menu_bar.addMenu(self.tr("Settings"))

        preferences_action = QAction(self.tr("Preferences"), self)
        preferences_action.triggered.connect(self.open_settings)
        menu_setting.addAction(preferences_action)

        # Help
        help_menu = menu_bar.addMenu(self.tr("Help"))

        manual_action = QAction(self.tr("How to use"), self)
        manual_action.triggered.connect(self.show_manual_action)
        help_menu.addAction(manual_action)

        reference_table_action = QAction(self.tr("Reference table"), self)
        reference_table_action.triggered.connect(self.show_reference_table_action)
        help_menu.addAction(reference_table_action)

        about_action = QAction(self.tr("About"), self)
        about_action.triggered.connect(self.about)
        menu_bar.addAction(about_action)

    def about(self):
        dialog = AboutDialog(self)
        dialog.move(self.center_point_x, self.center_point_y)
        dialog.exec()

    def open_settings(self):
        dialog = SettingDialog(self)
        dialog.move(self.center_point_x, self.center_point_y)
        if dialog.exec() == QDialog.Accepted:
            self._apply_settings_immediately()

    def _apply_settings_immediately(self):
        # Playback already scheduled keeps its tones; only new playback picks up the change.
        if self.context and hasattr(self.context, "refresh_tone_settings"):
            self.context.refresh_tone_settings()
        self.page_translator.set_font_size()

    def show_manual_action(self):
        dialog = HelpDialog(self)
        dialog.exec()

    def show_reference_table_action(self):
        self.table_tool_morse_code.show()

    def on_direction_changed(self, text_to_morse):
        if text_to_morse:
            self.create_info_bar(self.tr("Direction"), self.tr("Text → Morse"))
        else:
            self.create_info_bar(self.tr("Direction"), self.tr("Morse → Text"))

    def closeEvent(self, event):
        self.table_tool_morse_code.close()
        self.page_translator.close_tone_player()
        if self.context and hasattr(self.context, "close_tone_player"):
            self.context.close_tone_player()
        super().closeEvent(event)

    def create_info_bar(self, title, content, position=InfoBarPosition.BOTTOM):
        InfoBar(
            icon=InfoBarIcon.INFORMATION,
            title=title,
            content=content,
            orient=Qt.Vertical,
            isClosable=True,
            position=position,
            duration=2000,
            parent=self
        ).show()
