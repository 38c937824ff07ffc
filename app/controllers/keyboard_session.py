from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

from app.domain.enums import SpecialKey
from app.domain.hangul_compose import HangulComposer
from app.domain.keyboard_layout import jamo_for_key
from app.services.settings_store import KeyboardSettings

logger = logging.getLogger(__name__)


@dataclass
class KeyboardSession:
    """Text buffer driven by the Hangul composer.

    Owns:
    - the committed text (permanent buffer)
    - one HangulComposer holding the open syllable
    - the shift latch

    Listeners receive `buffer + preview` after every edit. Rendering is left
    to the caller.
    """

    settings: KeyboardSettings = field(default_factory=KeyboardSettings)
    composer: HangulComposer = field(default_factory=HangulComposer)
    committed_text: str = ""
    shifted: bool = False
    _listeners: list[Callable[[str], None]] = field(default_factory=list, repr=False)
    _submit_listeners: list[Callable[[str], None]] = field(default_factory=list, repr=False)

    @property
    def preview(self) -> str:
        return self.composer.preview

    @property
    def text(self) -> str:
        return self.committed_text + self.composer.preview

    def on_change(self, callback: Callable[[str], None]) -> None:
        self._listeners.append(callback)

    def on_submit(self, callback: Callable[[str], None]) -> None:
        self._submit_listeners.append(callback)

    def _notify(self) -> None:
        text = self.text
        for cb in list(self._listeners):
            cb(text)

    def _fits(self, text: str) -> bool:
        limit = self.settings.max_length
        return limit <= 0 or len(text) <= limit

    # -----------------------------------------------------------------
    # Keys
    # -----------------------------------------------------------------

    def press_key(self, label: str) -> bool:
        """Handle an on-screen key; return False if the key was ignored."""
        try:
            special = SpecialKey(label)
        except ValueError:
            special = None
        if special is not None:
            return self._press_special(special)

        jamo = jamo_for_key(label, self.shifted)
        if jamo is None:
            logger.debug("Ignoring non-jamo key %r", label)
            return False

        accepted = self.press_jamo(jamo)
        if accepted and self.shifted and self.settings.shift_once:
            self.shifted = False
        return accepted

    def _press_special(self, key: SpecialKey) -> bool:
        if key is SpecialKey.BACKSPACE:
            self.backspace()
        elif key is SpecialKey.SHIFT:
            self.toggle_shift()
        elif key is SpecialKey.SPACE:
            return self.space()
        elif key is SpecialKey.ENTER:
            return self.enter()
        elif key is SpecialKey.SUBMIT:
            return self.submit() is not None
        return True

    def press_jamo(self, jamo: str) -> bool:
        """Feed one jamo to the composer; return False if max_length blocked it."""
        snapshot = (self.composer.lead, self.composer.vowel, self.composer.tail, self.composer.preview)
        committed, preview = self.composer.add_jamo(jamo)
        candidate = self.committed_text + (committed or "") + preview
        if not self._fits(candidate):
            self.composer.lead, self.composer.vowel, self.composer.tail, self.composer.preview = snapshot
            logger.debug("max_length %d reached; dropping %r", self.settings.max_length, jamo)
            return False

        if committed:
            self.committed_text += committed
        self._notify()
        return True

    def toggle_shift(self) -> None:
        self.shifted = not self.shifted

    def backspace(self) -> None:
        if not self.composer.preview:
            self._pop_committed()
        else:
            _, changed = self.composer.backspace()
            if not changed:
                self._pop_committed()
        self._notify()

    def _pop_committed(self) -> None:
        if self.committed_text:
            self.committed_text = self.committed_text[:-1]

    def space(self) -> bool:
        return self._append_with_commit(" ")

    def enter(self) -> bool:
        if not self.settings.enter_inserts_newline:
            return self.submit() is not None
        return self._append_with_commit("\n")

    def insert_literal(self, text: str) -> bool:
        """Append text that bypasses the composer (digits, punctuation)."""
        return self._append_with_commit(text)

    def _append_with_commit(self, literal: str) -> bool:
        candidate = self.text + literal
        if not self._fits(candidate):
            return False
        self.composer.reset()
        self.committed_text = candidate
        self._notify()
        return True

    def flush(self) -> None:
        """Commit the open syllable into the buffer."""
        committed = self.composer.commit()
        if committed:
            self.committed_text += committed
            self._notify()

    @property
    def can_submit(self) -> bool:
        return bool(self.text.strip())

    def submit(self) -> Optional[str]:
        """Flush and hand the text to submit listeners; blank text is not submitted."""
        self.flush()
        text = self.committed_text
        if not text.strip():
            logger.debug("Ignoring submit of blank text")
            return None
        logger.info("Submitted %d characters", len(text))
        for cb in list(self._submit_listeners):
            cb(text)
        return text

    def clear(self) -> None:
        self.composer.reset()
        self.committed_text = ""
        self.shifted = False
        self._notify()

    def load_text(self, text: Optional[str]) -> None:
        """Replace the buffer with existing text, discarding any open syllable.

        Text longer than max_length is truncated to the limit.
        """
        self.composer.reset()
        text = text or ""
        limit = self.settings.max_length
        if limit > 0 and len(text) > limit:
            logger.debug("Truncating loaded text from %d to %d characters", len(text), limit)
            text = text[:limit]
        self.committed_text = text
        self._notify()
