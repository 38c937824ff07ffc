import logging
import os
import sys
from typing import Optional

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QApplication, QMainWindow

from app.controllers.keyboard_session import KeyboardSession
from app.services.settings_store import SettingsStore
from app.ui.virtual_keyboard import VirtualKeyboardWidget

logger = logging.getLogger(__name__)

# -------------------------------------------------
#          SETTINGS PERSISTENCE (TOP-LEVEL)
# -------------------------------------------------

SETTINGS_PATH = os.path.join(os.path.dirname(__file__), "settings.yaml")


def _store() -> SettingsStore:
    # Resolved on every call so tests can monkeypatch SETTINGS_PATH.
    return SettingsStore(SETTINGS_PATH)


def _load_settings() -> dict:
    """Load app settings from settings.yaml (UTF-8). Returns a dict or {}."""
    return _store().load()


def _save_settings(data: dict) -> None:
    """Persist app settings to settings.yaml (UTF-8, atomic replace)."""
    _store().save(data)


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name, logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# -------------------------------------------------
#          WINDOW FACTORY
# -------------------------------------------------

def create_main_window(session: Optional[KeyboardSession] = None) -> QMainWindow:
    """
    Build and return the main window without starting the Qt event loop.
    Useful for tests that need widget access.
    """
    app = QApplication.instance() or QApplication(sys.argv)

    if session is None:
        session = KeyboardSession(settings=_store().get_keyboard_settings())

    window = QMainWindow()
    window.setObjectName("MainWindow")
    window.setWindowTitle("한글 키보드")
    window.setAttribute(Qt.WidgetAttribute.WA_DeleteOnClose, False)

    keyboard = VirtualKeyboardWidget(session, parent=window)
    window.setCentralWidget(keyboard)
    keyboard.submitted.connect(lambda text: logger.info("Submitted text: %r", text))

    # Keep a strong ref so the window is not collected in tests
    app._main_window = window  # type: ignore[attr-defined]
    return window


def main() -> int:
    _configure_logging(_store().get_log_level())
    app = QApplication.instance() or QApplication(sys.argv)
    window = create_main_window()
    window.resize(1100, 480)
    window.show()
    window.centralWidget().setFocus()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
