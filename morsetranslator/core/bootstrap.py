"""Process bootstrap for desktop app startup."""

from __future__ import annotations

import logging
import sys
from typing import Sequence

from PySide6.QtWidgets import QApplication

from morsetranslator.application.startup import build_main_window
from morsetranslator.core.context import AppContext


logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _set_app_version(context: AppContext) -> None:
    context.config_manager.set_current_version(context.app_version)


def run(argv: Sequence[str] | None = None) -> int:
    _configure_logging()
    context = AppContext()
    _set_app_version(context)

    app = QApplication(list(argv) if argv is not None else sys.argv)
    app.setApplicationName(context.app_name)
    app.setApplicationVersion(context.app_version)
    logger.info("Starting %s %s", context.app_name, context.app_version)

    window = build_main_window(context)
    window.show()
    try:
        return app.exec()
    finally:
        context.close_tone_player()


def main() -> None:
    sys.exit(run())
