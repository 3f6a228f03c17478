from PySide6.QtCore import Qt
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QDialog,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
)

from morsetranslator.core.context import write_clipboard
from morsetranslator.core.metadata import APP_NAME
from utils.config_manager import ConfigManager


class AboutDialog(QDialog):
    """About dialog with version info."""

    def __init__(self, parent=None):
        super().__init__(parent)
        if parent is not None and hasattr(parent, "config_manager"):
            self.configer = parent.config_manager
        else:
            self.configer = ConfigManager()
        self.current_version = str(self.configer.get_current_version() or "0.0.0")

        self.setWindowTitle(self.tr("About {0}").format(APP_NAME))
        self.setMinimumSize(420, 220)
        self._init_ui()

    def _init_ui(self):
        root = QVBoxLayout(self)
        root.setContentsMargins(16, 14, 16, 14)
        root.setSpacing(10)

        title = QLabel(f"{APP_NAME} v{self.current_version}")
        title_font = QFont()
        title_font.setPointSize(18)
        title_font.setBold(True)
        title.setFont(title_font)
        title.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)

        subtitle = QLabel(
            self.tr("Convert text to Morse code and back, and listen to the result.")
        )
        subtitle.setWordWrap(True)

        actions = QHBoxLayout()
        actions.setSpacing(8)

        btn_copy_ver = QPushButton(self.tr("Copy version"))
        btn_copy_ver.clicked.connect(self._copy_version)

        btn_close = QPushButton(self.tr("Close"))
        btn_close.clicked.connect(self.accept)
        btn_close.setDefault(True)

        actions.addWidget(btn_copy_ver)
        actions.addStretch(1)
        actions.addWidget(btn_close)

        root.addWidget(title)
        root.addWidget(subtitle)
        root.addStretch(1)
        root.addLayout(actions)

    def _copy_version(self):
        write_clipboard(self.current_version)
