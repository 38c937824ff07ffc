# tests/conftest.py
import os

import pytest

# Widget tests run headless.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from app.controllers.keyboard_session import KeyboardSession  # noqa: E402
from app.domain.hangul_compose import HangulComposer  # noqa: E402
from app.services.settings_store import KeyboardSettings  # noqa: E402


@pytest.fixture
def composer():
    return HangulComposer()


@pytest.fixture
def session():
    return KeyboardSession()


@pytest.fixture
def make_session():
    def _make(**overrides):
        return KeyboardSession(settings=KeyboardSettings(**overrides))
    return _make
