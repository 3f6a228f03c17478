"""Local, PySide6-only UI components used across the translator windows.

Only the subset of widgets this project needs is exposed, built on native Qt
widgets.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from PySide6.QtCore import Qt
from PySide6.QtGui import QIcon
from PySide6.QtWidgets import (
    QApplication,
    QDoubleSpinBox,
    QMessageBox,
    QPushButton,
    QSpinBox,
    QStyle,
    QTableWidget,
    QTextEdit,
    QToolTip,
)


class _FluentIconValue(str):
    """Token type used to represent pseudo fluent icons."""


class _FluentIcon:
    """Dynamic icon token namespace, e.g. FluentIcon.PLAY."""

    def __getattr__(self, name: str) -> _FluentIconValue:
        return _FluentIconValue(name)


FluentIcon = _FluentIcon()


_ICON_MAP = {
    "VOLUME": QStyle.StandardPixmap.SP_MediaVolume,
    "COPY": QStyle.StandardPixmap.SP_FileDialogDetailedView,
    "SYNC": QStyle.StandardPixmap.SP_BrowserReload,
    "HELP": QStyle.StandardPixmap.SP_DialogHelpButton,
}


def _to_qicon(icon: Any) -> QIcon:
    if isinstance(icon, QIcon):
        return icon
    if isinstance(icon, _FluentIconValue):
        app = QApplication.instance()
        if app is None:
            return QIcon()
        pix = _ICON_MAP.get(str(icon))
        if pix is None:
            return QIcon()
        return app.style().standardIcon(pix)
    return QIcon()


class PushButton(QPushButton):
    """Button accepting ``(icon, text, parent)``, ``(text, parent)`` or ``(parent)``."""

    def __init__(self, *args: Any) -> None:
        icon = None
        text = ""
        parent = None

        if len(args) >= 2 and isinstance(args[0], (_FluentIconValue, QIcon)) and isinstance(args[1], str):
            icon = args[0]
            text = args[1]
            if len(args) >= 3:
                parent = args[2]
        elif len(args) >= 1 and isinstance(args[0], str):
            text = args[0]
            if len(args) >= 2:
                parent = args[1]
        elif len(args) >= 1:
            parent = args[0]

        super().__init__(text, parent)
        if icon is not None:
            self.setIcon(icon)

    def setIcon(self, icon: Any) -> None:  # type: ignore[override]
        super().setIcon(_to_qicon(icon))


class TransparentPushButton(PushButton):
    """Simple flat style button."""

    def __init__(self, *args: Any) -> None:
        super().__init__(*args)
        self.setFlat(True)
        self.setStyleSheet(
            """
            QPushButton {
                background: transparent;
                border: 1px solid rgba(0, 0, 0, 0.15);
                border-radius: 6px;
                padding: 4px 8px;
            }
            QPushButton:hover {
                background: rgba(0, 0, 0, 0.06);
            }
            """
        )


class TextEdit(QTextEdit):
    pass


class TableWidget(QTableWidget):
    pass


class SpinBox(QSpinBox):
    pass


class DoubleSpinBox(QDoubleSpinBox):
    pass


class InfoBarPosition(Enum):
    TOP = "top"
    BOTTOM = "bottom"


class InfoBarIcon(Enum):
    INFORMATION = "information"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


class InfoBar:
    """Lightweight transient prompt shown in the status bar or as a tooltip."""

    def __init__(
        self,
        *,
        icon: InfoBarIcon | None = None,
        title: str = "",
        content: str = "",
        orient: Qt.Orientation = Qt.Vertical,
        isClosable: bool = True,
        position: InfoBarPosition = InfoBarPosition.BOTTOM,
        duration: int = 2000,
        parent=None,
    ) -> None:
        self.icon = icon
        self.title = title
        self.content = content
        self.orient = orient
        self.isClosable = isClosable
        self.position = position
        self.duration = duration
        self.parent = parent

    @property
    def message(self) -> str:
        return f"{self.title}: {self.content}" if self.title else self.content

    def show(self) -> None:
        message = self.message
        if self.parent is not None and hasattr(self.parent, "statusBar"):
            self.parent.statusBar().showMessage(message, self.duration)
            return

        if self.parent is not None:
            rect = self.parent.rect()
            point = rect.topLeft() if self.position == InfoBarPosition.TOP else rect.bottomLeft()
            QToolTip.showText(self.parent.mapToGlobal(point), message, self.parent, rect, self.duration)
            return

        app = QApplication.instance()
        if app and app.activeWindow():
            win = app.activeWindow()
            QToolTip.showText(win.mapToGlobal(win.rect().bottomLeft()), message, win, win.rect(), self.duration)
            return

        QMessageBox.information(None, "Info", message)


__all__ = [
    "DoubleSpinBox",
    "FluentIcon",
    "InfoBar",
    "InfoBarIcon",
    "InfoBarPosition",
    "PushButton",
    "SpinBox",
    "TableWidget",
    "TextEdit",
    "TransparentPushButton",
]
