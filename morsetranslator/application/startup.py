"""Application layer startup assembly."""

from morsetranslator.core.context import AppContext
from morsetranslator.presentation.main_window import MainWindow


def build_main_window(context: AppContext) -> MainWindow:
    return MainWindow(context)
