"""
Tests for the Hangul composition automaton.

Covers the worked scenarios (open syllable, implicit commit, clusters,
tail migration on a vowel, backspace order) and the general properties:
at most one commit per jamo and backspace undoing forward steps.
"""

import random

import pytest

from app.domain.enums import Occupancy
from app.domain.errors import InternalInvariantViolation, UnknownJamo
from app.domain.hangul_compose import HangulComposer
from app.domain.jamo_data import LEADS, VOWELS


pytestmark = pytest.mark.composer


def _feed(composer, jamos):
    return [composer.add_jamo(j) for j in jamos]


def _type_text(jamos):
    """Return the full text a host would show after typing `jamos`."""
    c = HangulComposer()
    out = ""
    for committed, _ in _feed(c, jamos):
        out += committed or ""
    return out + c.preview


# ------------------------------
# Worked scenarios
# ------------------------------

def test_open_syllable_builds_without_commit(composer):
    results = _feed(composer, ["ㅎ", "ㅏ", "ㄴ"])
    assert [p for _, p in results] == ["ㅎ", "하", "한"]
    assert all(c is None for c, _ in results)
    assert composer.occupancy is Occupancy.LEAD_VOWEL_TAIL


def test_invalid_cluster_commits_and_opens_new_syllable(composer):
    _feed(composer, ["ㅎ", "ㅏ", "ㄴ"])
    committed, preview = composer.add_jamo("ㅁ")
    assert committed == "한"
    assert preview == "ㅁ"
    assert (composer.lead, composer.vowel, composer.tail) == ("ㅁ", None, None)


def test_cluster_forms_compound_tail(composer):
    _feed(composer, ["ㄱ", "ㅏ", "ㄱ"])
    committed, preview = composer.add_jamo("ㅅ")
    assert committed is None
    assert composer.tail == "ㄳ"
    assert preview == "갃"


def test_simple_tail_migrates_to_next_syllable(composer):
    results = _feed(composer, ["ㅂ", "ㅏ", "ㄴ", "ㅏ"])
    assert results[2] == (None, "반")
    assert results[3] == ("바", "나")
    assert (composer.lead, composer.vowel, composer.tail) == ("ㄴ", "ㅏ", None)


def test_compound_tail_splits_on_vowel(composer):
    results = _feed(composer, ["ㄱ", "ㅏ", "ㄹ", "ㄱ", "ㅏ"])
    assert results[3] == (None, "갉")
    assert results[4] == ("갈", "가")
    assert composer.lead == "ㄱ"


def test_backspace_order_on_compound_tail(composer):
    _feed(composer, ["ㄱ", "ㅏ", "ㄹ", "ㄱ"])
    assert composer.preview == "갉"
    assert composer.backspace() == ("갈", True)
    assert composer.backspace() == ("가", True)
    assert composer.backspace() == ("ㄱ", True)
    assert composer.lead == "ㄱ"
    assert composer.vowel is None and composer.tail is None


# ------------------------------
# Edge sequences
# ------------------------------

def test_double_lead_commits_lone_consonant(composer):
    results = _feed(composer, ["ㄱ", "ㄴ"])
    assert results[1] == ("ㄱ", "ㄴ")


def test_lone_vowel_then_vowel_commits_first(composer):
    results = _feed(composer, ["ㅏ", "ㅓ"])
    assert results == [(None, "ㅏ"), ("ㅏ", "ㅓ")]
    assert composer.occupancy is Occupancy.VOWEL


def test_lead_after_lone_vowel_commits_vowel(composer):
    results = _feed(composer, ["ㅗ", "ㄱ"])
    assert results[1] == ("ㅗ", "ㄱ")


def test_diphthong_stays_open(composer):
    results = _feed(composer, ["ㄱ", "ㅗ", "ㅏ"])
    assert results[2] == (None, "과")
    assert composer.vowel == "ㅘ"


def test_failed_diphthong_commits_and_leaves_lone_vowel(composer):
    results = _feed(composer, ["ㄱ", "ㅏ", "ㅗ"])
    assert results[2] == ("가", "ㅗ")
    assert composer.occupancy is Occupancy.VOWEL


def test_vowel_after_tail_ignores_diphthong(composer):
    # ㅗ+ㅏ would be a diphthong, but the tail moves first
    results = _feed(composer, ["ㄱ", "ㅗ", "ㄴ", "ㅏ"])
    assert results[3] == ("고", "나")


@pytest.mark.parametrize("tense", ["ㄸ", "ㅃ", "ㅉ"])
def test_lead_only_consonant_cannot_be_tail(composer, tense):
    results = _feed(composer, ["ㄱ", "ㅏ", tense])
    assert results[2] == ("가", tense)


def test_tense_consonant_can_be_tail_when_in_tail_set(composer):
    results = _feed(composer, ["ㄱ", "ㅏ", "ㄲ"])
    assert results[2] == (None, "갂")


def test_full_word():
    assert _type_text(list("ㅎㅏㄴㄱㅡㄹ")) == "한글"
    assert _type_text(list("ㄷㅏㄹㄱㅇㅡㄴ")) == "닭은"
    assert _type_text(list("ㅇㅗㅐㄱㅡㄹㅐ")) == "왜그래"
    assert _type_text(list("ㅇㅏㄴㅈㅇㅏ")) == "앉아"


def test_unknown_jamo_rejected(composer):
    with pytest.raises(UnknownJamo):
        composer.add_jamo("a")
    with pytest.raises(UnknownJamo):
        composer.add_jamo("ㄳ")
    assert composer.occupancy is Occupancy.EMPTY


def test_commit_and_reset(composer):
    assert composer.commit() is None
    _feed(composer, ["ㄱ", "ㅏ"])
    assert composer.commit() == "가"
    assert composer.preview == ""
    _feed(composer, ["ㄴ"])
    composer.reset()
    assert composer.combine() is None
    assert composer.occupancy is Occupancy.EMPTY


def test_occupancy_rejects_tail_without_syllable(composer):
    composer.lead = "ㄱ"
    composer.tail = "ㄴ"
    with pytest.raises(InternalInvariantViolation):
        _ = composer.occupancy


# ------------------------------
# Backspace
# ------------------------------

def test_backspace_on_lone_lead_resets(composer):
    composer.add_jamo("ㄱ")
    assert composer.backspace() == ("", True)
    assert composer.occupancy is Occupancy.EMPTY


def test_backspace_on_lone_vowel_resets(composer):
    composer.add_jamo("ㅏ")
    assert composer.backspace() == ("", True)


def test_backspace_clears_whole_diphthong(composer):
    _feed(composer, ["ㄱ", "ㅗ", "ㅏ"])
    assert composer.backspace() == ("ㄱ", True)
    assert composer.vowel is None


def test_backspace_on_empty_reports_changed(composer):
    assert composer.backspace() == ("", True)


@pytest.mark.parametrize("jamos", [
    ["ㄱ"],
    ["ㅏ"],
    ["ㄱ", "ㅏ"],
    ["ㅎ", "ㅏ", "ㄴ"],
    ["ㄱ", "ㅏ", "ㄹ", "ㄱ"],
    ["ㄱ", "ㅗ", "ㅏ"],
    ["ㄱ", "ㅗ", "ㅏ", "ㅂ", "ㅅ"],
])
def test_backspace_undoes_forward_steps(composer, jamos):
    _feed(composer, jamos)
    for _ in jamos:
        composer.backspace()
    assert composer.preview == ""


# ------------------------------
# Properties over random input
# ------------------------------

def _random_jamos(rng, n):
    alphabet = list(LEADS) + list(VOWELS)
    return [rng.choice(alphabet) for _ in range(n)]


def test_at_most_one_commit_per_jamo():
    rng = random.Random(1234)
    c = HangulComposer()
    for j in _random_jamos(rng, 2000):
        committed, preview = c.add_jamo(j)
        assert committed is None or len(committed) == 1
        assert len(preview) <= 1


def test_backspace_inverts_any_uncommitted_sequence():
    rng = random.Random(42)
    checked = 0
    for _ in range(3000):
        c = HangulComposer()
        seq = _random_jamos(rng, rng.randint(1, 5))
        if any(committed for committed, _ in _feed(c, seq)):
            continue
        for _ in seq:
            c.backspace()
        assert c.preview == ""
        checked += 1
    assert checked > 0
