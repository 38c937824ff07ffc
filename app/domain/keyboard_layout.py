from __future__ import annotations

"""On-screen Korean keyboard layout (domain data).

This module is the single source of truth for:
  - the rows of keys shown by the virtual keyboard
  - which keys change under Shift (tense consonants, ㅒ/ㅖ)
  - the 2-beolsik mapping from physical Latin keys to jamo

It contains *no* Qt dependencies.
"""

from types import MappingProxyType
from typing import Final, Mapping, Optional, Union

from app.domain.enums import SpecialKey
from app.domain.jamo_data import is_lead, is_vowel

Key = Union[str, SpecialKey]


KOREAN_ROWS: Final[tuple[tuple[Key, ...], ...]] = (
    ("ㅂ", "ㅈ", "ㄷ", "ㄱ", "ㅅ", "ㅛ", "ㅕ", "ㅑ", "ㅐ", "ㅔ", SpecialKey.BACKSPACE),
    ("ㅁ", "ㄴ", "ㅇ", "ㄹ", "ㅎ", "ㅗ", "ㅓ", "ㅏ", "ㅣ", SpecialKey.ENTER),
    (SpecialKey.SHIFT, "ㅋ", "ㅌ", "ㅊ", "ㅍ", "ㅠ", "ㅜ", "ㅡ"),
    (SpecialKey.SPACE, SpecialKey.SUBMIT),
)

SHIFT_VARIANTS: Final[Mapping[str, str]] = MappingProxyType({
    "ㅂ": "ㅃ",
    "ㅈ": "ㅉ",
    "ㄷ": "ㄸ",
    "ㄱ": "ㄲ",
    "ㅅ": "ㅆ",
    "ㅐ": "ㅒ",
    "ㅔ": "ㅖ",
})

# Standard 2-beolsik assignment; keys missing from the shifted row fall
# back to their lowercase jamo.
_DUBEOLSIK: Final[Mapping[str, str]] = MappingProxyType({
    "q": "ㅂ", "w": "ㅈ", "e": "ㄷ", "r": "ㄱ", "t": "ㅅ",
    "y": "ㅛ", "u": "ㅕ", "i": "ㅑ", "o": "ㅐ", "p": "ㅔ",
    "a": "ㅁ", "s": "ㄴ", "d": "ㅇ", "f": "ㄹ", "g": "ㅎ",
    "h": "ㅗ", "j": "ㅓ", "k": "ㅏ", "l": "ㅣ",
    "z": "ㅋ", "x": "ㅌ", "c": "ㅊ", "v": "ㅍ",
    "b": "ㅠ", "n": "ㅜ", "m": "ㅡ",
})


def is_special(key: object) -> bool:
    return isinstance(key, SpecialKey)


def shifted_label(label: str) -> str:
    """Return what a key shows while Shift is latched."""
    return SHIFT_VARIANTS.get(label, label)


def jamo_for_key(label: str, shifted: bool = False) -> Optional[str]:
    """Resolve an on-screen key label to the jamo it types, or None."""
    if is_special(label):
        return None
    jamo = shifted_label(label) if shifted else label
    if is_lead(jamo) or is_vowel(jamo):
        return jamo
    return None


def jamo_for_keystroke(char: str) -> Optional[str]:
    """Map a physical 2-beolsik keystroke (e.g. "r", "R") to a jamo, or None."""
    if not isinstance(char, str) or len(char) != 1 or not char.isascii():
        return None
    base = _DUBEOLSIK.get(char.lower())
    if base is None:
        return None
    return shifted_label(base) if char.isupper() else base
