from __future__ import annotations

"""Hangul Unicode syllable arithmetic.

This module is *domain* logic (no Qt dependencies).

It provides:
  - `compose_lvt()` for building a precomposed syllable from (lead, vowel, tail)
  - `decompose_syllable()`, the inverse arithmetic

Notes:
  - Uses the Unicode Hangul Syllables algorithm:
    SBase + (LIndex * VCount + VIndex) * TCount + TIndex
"""

from typing import Final, Optional

from app.domain.jamo_data import LEADS, TAILS, VOWELS, lead_index, tail_index, vowel_index


_HANGUL_BASE: Final[int] = 0xAC00
_V_COUNT: Final[int] = len(VOWELS)
_T_COUNT: Final[int] = len(TAILS)
_N_COUNT: Final[int] = _V_COUNT * _T_COUNT  # 588
_S_COUNT: Final[int] = len(LEADS) * _N_COUNT


def compose_lvt(lead: str, vowel: str, tail: Optional[str] = None) -> str:
    """Compose a Hangul syllable from compatibility jamo.

    Args:
        lead: choseong (e.g., "ㄱ")
        vowel: jungseong (e.g., "ㅏ")
        tail: jongseong (e.g., "ㄴ"), or None / "" for no final

    Returns:
        The composed syllable (e.g., "간").

    Raises:
        UnknownJamo: if any jamo is not a member of its alphabet.
    """
    codepoint = _HANGUL_BASE + lead_index(lead) * _N_COUNT + vowel_index(vowel) * _T_COUNT + tail_index(tail)
    return chr(codepoint)


def is_syllable(ch: str) -> bool:
    return len(ch) == 1 and _HANGUL_BASE <= ord(ch) < _HANGUL_BASE + _S_COUNT


def decompose_syllable(ch: str) -> Optional[tuple[str, str, str]]:
    """Return (lead, vowel, tail) for a precomposed syllable, tail "" if none.

    Returns None when `ch` is not a precomposed Hangul syllable.
    """
    if not isinstance(ch, str) or not is_syllable(ch):
        return None
    offset = ord(ch) - _HANGUL_BASE
    li, rest = divmod(offset, _N_COUNT)
    vi, ti = divmod(rest, _T_COUNT)
    return LEADS[li], VOWELS[vi], TAILS[ti]
