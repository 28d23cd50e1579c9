# tests/test_api.py
from __future__ import annotations

import pytest

import eudex

"""
Tests: api.py (package root surface)

Does: Exercise the word-level functions the way callers use them:
      eudex.hash / distance / compare / similar.
"""


@pytest.mark.parametrize("word", ["java", "Triggered", "möier", "Ölmütz", "comp-uter", ""])
def test_hash_ignores_case(word):
    assert eudex.hash(word) == eudex.hash(word.upper()) == eudex.hash(word.lower())


_MAPPED_LETTERS = [chr(c) for c in range(ord("a"), ord("z") + 1)] + [
    chr(c) for c in range(0xDF, 0x100) if c != 0xF7
]


@pytest.mark.parametrize("letter", _MAPPED_LETTERS)
def test_every_mapped_letter_ignores_case(letter):
    # "ß".upper() is "SS"; its single-letter capital is ẞ
    capital = "ẞ" if letter == "ß" else letter.upper()
    assert len(capital) == 1
    word = letter + "es"
    assert eudex.hash(word) == eudex.hash(capital + "ES") == eudex.hash(word.lower())


def test_sharp_s_and_y_diaeresis_hash_apart():
    assert eudex.hash("straße") != eudex.hash("straÿe")
    assert eudex.hash("ß") != eudex.hash("ÿ")


def test_hash_ignores_punctuation_noise():
    assert eudex.hash("computer") == eudex.hash("comp-uter") == eudex.hash("comp@u#te?r")


def test_duplicate_collapse():
    assert eudex.hash("rrr") == eudex.hash("raaaa")


def test_prepended_letter_changes_hash():
    assert eudex.hash("java") != eudex.hash("ijava")


def test_distance_is_xor_of_hashes():
    assert eudex.distance("youtube", "facebook") == eudex.hash("youtube") ^ eudex.hash("facebook")
    assert eudex.distance("rick", "rolled") == eudex.distance("rolled", "rick")
    assert eudex.distance("", "") == 0


def test_compare_exposes_all_flavours():
    d = eudex.compare("what", "wat")
    assert isinstance(d, eudex.Difference)
    assert d.xor == eudex.distance("what", "wat")
    assert d.hamming() == 1
    assert d.weighted_distance() == 3
    assert d.similar() is True
    assert d == eudex.Hash.from_text("what") - eudex.Hash.from_text("wat")


def test_similar_scenarios():
    assert eudex.similar("what", "wat") is True
    assert eudex.similar("youtube", "reddit") is False
    assert eudex.similar("", "") is True


def test_similar_accepts_tuning():
    loose = eudex.Tuning(eudex.DEFAULT_TUNING.weights, 200)
    assert eudex.similar("youtube", "reddit") is False
    assert eudex.similar("nice", "mice", tuning=loose) is True


def test_version_exposed():
    assert isinstance(eudex.__version__, str)
