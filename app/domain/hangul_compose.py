from __future__ import annotations

"""Hangul composition automaton (domain layer).

This module contains *no* Qt/UI dependencies.

`HangulComposer` holds one open syllable (lead, vowel, tail) and turns a
stream of jamo, one per keystroke, into committed syllables plus a live
preview of the syllable still being built.

Primary API:
- add_jamo(jamo) -> (committed, preview)
- backspace() -> (preview, changed)
- reset()
"""

import logging
from typing import Optional

from app.domain import jamo_data
from app.domain.enums import Occupancy
from app.domain.errors import InternalInvariantViolation, UnknownJamo
from app.domain.hangul_unicode import compose_lvt

logger = logging.getLogger(__name__)


class HangulComposer:
    """Single-syllable composition state machine.

    One instance per input field; the jamo tables it reads are shared and
    immutable.
    """

    def __init__(self) -> None:
        self.lead: Optional[str] = None
        self.vowel: Optional[str] = None
        self.tail: Optional[str] = None
        self.preview: str = ""

    def reset(self) -> None:
        self.lead = None
        self.vowel = None
        self.tail = None
        self.preview = ""

    @property
    def occupancy(self) -> Occupancy:
        lead, vowel, tail = bool(self.lead), bool(self.vowel), bool(self.tail)
        if lead and vowel:
            return Occupancy.LEAD_VOWEL_TAIL if tail else Occupancy.LEAD_VOWEL
        if tail:
            raise InternalInvariantViolation(
                "Tail %r set without lead and vowel (lead=%r vowel=%r)" % (self.tail, self.lead, self.vowel)
            )
        if lead:
            return Occupancy.LEAD
        if vowel:
            return Occupancy.VOWEL
        return Occupancy.EMPTY

    def combine(self) -> Optional[str]:
        """Return the glyph for the current slots, or None when all are empty."""
        if self.lead and self.vowel:
            return compose_lvt(self.lead, self.vowel, self.tail)
        if self.lead:
            return self.lead
        if self.vowel:
            return self.vowel
        return None

    def commit(self) -> Optional[str]:
        """Finalize the open syllable and clear all slots."""
        result = self.combine()
        self.reset()
        if result is not None:
            logger.debug("commit %r", result)
        return result

    # -----------------------------------------------------------------
    # Forward composition
    # -----------------------------------------------------------------

    def add_jamo(self, jamo: str) -> tuple[Optional[str], str]:
        """Feed one jamo; return (committed character or None, preview)."""
        if jamo_data.is_lead(jamo):
            committed = self._add_lead(jamo)
        elif jamo_data.is_vowel(jamo):
            committed = self._add_vowel(jamo)
        else:
            raise UnknownJamo(jamo, "lead or vowel")

        self.preview = self.combine() or ""
        return committed, self.preview

    def _add_lead(self, jamo: str) -> Optional[str]:
        state = self.occupancy
        if state is Occupancy.EMPTY:
            self.lead = jamo
            return None

        if state is Occupancy.LEAD_VOWEL and jamo_data.is_tail(jamo):
            self.tail = jamo
            return None

        if state is Occupancy.LEAD_VOWEL_TAIL:
            compound = jamo_data.combine_cluster(self.tail, jamo)
            if compound is not None:
                self.tail = compound
                return None

        # LEAD, VOWEL, or a consonant that cannot extend the open syllable
        committed = self.commit()
        self.lead = jamo
        return committed

    def _add_vowel(self, jamo: str) -> Optional[str]:
        state = self.occupancy
        if state is Occupancy.LEAD_VOWEL:
            compound = jamo_data.combine_diphthong(self.vowel, jamo)
            if compound is not None:
                self.vowel = compound
                return None

        elif state is Occupancy.LEAD_VOWEL_TAIL:
            # The tail (or the second half of a cluster) moves to the next syllable.
            split = jamo_data.split_cluster(self.tail)
            if split is not None:
                self.tail, new_lead = split
            else:
                new_lead, self.tail = self.tail, None
            committed = self.commit()
            self.lead = new_lead
            self.vowel = jamo
            return committed

        elif state is Occupancy.LEAD:
            self.vowel = jamo
            return None

        committed = self.commit()
        self.vowel = jamo
        return committed

    # -----------------------------------------------------------------
    # Backspace
    # -----------------------------------------------------------------

    def backspace(self) -> tuple[str, bool]:
        """Undo one sub-unit of the open syllable; return (preview, changed).

        A compound tail drops its second half, a simple tail is cleared, then
        the vowel (a diphthong is cleared whole). A lone lead or lone vowel
        resets the syllable.
        """
        state = self.occupancy
        if state is Occupancy.LEAD_VOWEL_TAIL:
            split = jamo_data.split_cluster(self.tail)
            self.tail = split[0] if split is not None else None
        elif state is Occupancy.LEAD_VOWEL:
            self.vowel = None
        else:
            self.reset()

        self.preview = self.combine() or ""
        return self.preview, True
