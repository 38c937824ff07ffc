from __future__ import annotations

"""Jamo tables for syllable composition (domain layer).

Static, read-only data built once at import time:
  - the ordered lead / vowel / tail alphabets (compatibility jamo)
  - the cluster map for compound trailing consonants and its inverse
  - the diphthong map for compound vowels

All lookups are pure. The index functions raise `UnknownJamo` for
non-members; callers are expected to check membership first.
"""

from types import MappingProxyType
from typing import Final, Mapping, Optional

from app.domain.errors import InternalInvariantViolation, UnknownJamo


# ---------------------------------------------------------------------
# Alphabets (standard Unicode Hangul order)
# ---------------------------------------------------------------------

# Leading consonants (Choseong)
LEADS: Final[tuple[str, ...]] = (
    "ㄱ", "ㄲ", "ㄴ", "ㄷ", "ㄸ", "ㄹ", "ㅁ", "ㅂ", "ㅃ",
    "ㅅ", "ㅆ", "ㅇ", "ㅈ", "ㅉ", "ㅊ", "ㅋ", "ㅌ", "ㅍ", "ㅎ",
)

# Vowels (Jungseong)
VOWELS: Final[tuple[str, ...]] = (
    "ㅏ", "ㅐ", "ㅑ", "ㅒ", "ㅓ", "ㅔ", "ㅕ", "ㅖ",
    "ㅗ", "ㅘ", "ㅙ", "ㅚ", "ㅛ",
    "ㅜ", "ㅝ", "ㅞ", "ㅟ", "ㅠ",
    "ㅡ", "ㅢ", "ㅣ",
)

# Trailing consonants (Jongseong); index 0 is "no final"
TAILS: Final[tuple[str, ...]] = (
    "",
    "ㄱ", "ㄲ", "ㄳ",
    "ㄴ", "ㄵ", "ㄶ",
    "ㄷ",
    "ㄹ", "ㄺ", "ㄻ", "ㄼ", "ㄽ", "ㄾ", "ㄿ", "ㅀ",
    "ㅁ",
    "ㅂ", "ㅄ",
    "ㅅ", "ㅆ",
    "ㅇ",
    "ㅈ", "ㅊ",
    "ㅋ",
    "ㅌ",
    "ㅍ",
    "ㅎ",
)

NO_TAIL: Final[str] = TAILS[0]


# ---------------------------------------------------------------------
# Combination maps
# ---------------------------------------------------------------------

CLUSTERS: Final[Mapping[tuple[str, str], str]] = MappingProxyType({
    ("ㄱ", "ㅅ"): "ㄳ",
    ("ㄴ", "ㅈ"): "ㄵ",
    ("ㄴ", "ㅎ"): "ㄶ",
    ("ㄹ", "ㄱ"): "ㄺ",
    ("ㄹ", "ㅁ"): "ㄻ",
    ("ㄹ", "ㅂ"): "ㄼ",
    ("ㄹ", "ㅅ"): "ㄽ",
    ("ㄹ", "ㅌ"): "ㄾ",
    ("ㄹ", "ㅍ"): "ㄿ",
    ("ㄹ", "ㅎ"): "ㅀ",
    ("ㅂ", "ㅅ"): "ㅄ",
})

DIPHTHONGS: Final[Mapping[tuple[str, str], str]] = MappingProxyType({
    ("ㅗ", "ㅏ"): "ㅘ",
    ("ㅗ", "ㅐ"): "ㅙ",
    ("ㅗ", "ㅣ"): "ㅚ",
    ("ㅜ", "ㅓ"): "ㅝ",
    ("ㅜ", "ㅔ"): "ㅞ",
    ("ㅜ", "ㅣ"): "ㅟ",
    ("ㅡ", "ㅣ"): "ㅢ",
})


def _invert_clusters(clusters: Mapping[tuple[str, str], str]) -> Mapping[str, tuple[str, str]]:
    """Build compound -> (first, second); the cluster map must be injective."""
    inverse: dict[str, tuple[str, str]] = {}
    for pair, compound in clusters.items():
        if compound in inverse:
            raise InternalInvariantViolation(
                "Cluster %r is produced by both %r and %r" % (compound, inverse[compound], pair)
            )
        inverse[compound] = pair
    return MappingProxyType(inverse)


SPLIT_CLUSTERS: Final[Mapping[str, tuple[str, str]]] = _invert_clusters(CLUSTERS)


# ---------------------------------------------------------------------
# Internal lookup maps
# ---------------------------------------------------------------------

_LEAD_MAP: Final[Mapping[str, int]] = MappingProxyType({j: i for i, j in enumerate(LEADS)})
_VOWEL_MAP: Final[Mapping[str, int]] = MappingProxyType({j: i for i, j in enumerate(VOWELS)})
_TAIL_MAP: Final[Mapping[str, int]] = MappingProxyType({j: i for i, j in enumerate(TAILS)})


# ---------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------

def is_lead(jamo: object) -> bool:
    return isinstance(jamo, str) and jamo in _LEAD_MAP


def is_vowel(jamo: object) -> bool:
    return isinstance(jamo, str) and jamo in _VOWEL_MAP


def is_tail(jamo: object) -> bool:
    """True for a real trailing consonant; the "no final" sentinel is not one."""
    return isinstance(jamo, str) and bool(jamo) and jamo in _TAIL_MAP


def lead_index(jamo: str) -> int:
    try:
        return _LEAD_MAP[jamo]
    except (KeyError, TypeError):
        raise UnknownJamo(jamo, "lead") from None


def vowel_index(jamo: str) -> int:
    try:
        return _VOWEL_MAP[jamo]
    except (KeyError, TypeError):
        raise UnknownJamo(jamo, "vowel") from None


def tail_index(jamo: Optional[str]) -> int:
    """Return the tail index; an absent tail (None or "") is index 0."""
    if not jamo:
        return 0
    try:
        return _TAIL_MAP[jamo]
    except (KeyError, TypeError):
        raise UnknownJamo(jamo, "tail") from None


def combine_cluster(first: str, second: str) -> Optional[str]:
    """Return the compound tail for (first, second), e.g. ㄱ+ㅅ -> ㄳ."""
    return CLUSTERS.get((first, second))


def split_cluster(compound: str) -> Optional[tuple[str, str]]:
    """Return the two simple tails of a compound tail, or None for a simple one."""
    return SPLIT_CLUSTERS.get(compound)


def combine_diphthong(first: str, second: str) -> Optional[str]:
    """Return the compound vowel for (first, second), e.g. ㅗ+ㅏ -> ㅘ."""
    return DIPHTHONGS.get((first, second))
