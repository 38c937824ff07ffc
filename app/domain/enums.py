from __future__ import annotations

"""Enumerations shared by the domain, controller and UI layers.

No Qt dependencies.
"""

from enum import Enum, auto


class Occupancy(Enum):
    """Which slots of the open syllable are filled.

    These are the only legal patterns; the composer dispatches on them.
    """

    EMPTY = auto()
    LEAD = auto()
    VOWEL = auto()
    LEAD_VOWEL = auto()
    LEAD_VOWEL_TAIL = auto()


class SpecialKey(str, Enum):
    """Non-jamo keys on the on-screen keyboard."""

    BACKSPACE = "Backspace"
    SHIFT = "Shift"
    SPACE = "Space"
    ENTER = "Enter"
    SUBMIT = "Submit"
