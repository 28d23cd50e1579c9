# tests/test_core_phones.py
from __future__ import annotations

import importlib

import pytest

"""
Tests: core/phones.py

Does: Check table geometry, case folding (ASCII + Latin-1), the silent domain,
      and that the injective table keeps vowels apart.
"""

P = importlib.import_module("eudex.core.phones")


# ──────────────────────────────────────────────────────────────────────────────
# Table geometry
# ──────────────────────────────────────────────────────────────────────────────
def test_table_sizes():
    assert len(P.PHONES) == len(P.INJECTIVE_PHONES) == 26
    assert len(P.PHONES_LATIN1) == len(P.INJECTIVE_PHONES_LATIN1) == 33


def test_codes_fit_in_a_byte():
    for table in (P.PHONES, P.INJECTIVE_PHONES, P.PHONES_LATIN1, P.INJECTIVE_PHONES_LATIN1):
        for code in table:
            assert code is None or 0 <= code <= 0xFF


@pytest.mark.parametrize("vowel", list("aeiouy"))
def test_plain_vowels_have_no_feature_bits(vowel):
    assert P.phone_code(vowel) & 0xFE == 0


def test_injective_vowels_are_distinct():
    codes = {P.injective_phone_code(v) for v in "aeiouy"}
    assert len(codes) == 6


# ──────────────────────────────────────────────────────────────────────────────
# Lookups
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "lower, upper",
    [(c, c.upper()) for c in "abcdefghijklmnopqrstuvwxyz"]
    + [("à", "À"), ("ç", "Ç"), ("é", "É"), ("ñ", "Ñ"), ("ö", "Ö"), ("ü", "Ü"), ("þ", "Þ")]
    + [("ß", "ẞ"), ("ÿ", "Ÿ")],
)
def test_case_folding(lower, upper):
    assert P.phone_code(upper) == P.phone_code(lower)
    assert P.injective_phone_code(upper) == P.injective_phone_code(lower)


def test_fold_leaves_lowercase_and_symbols_alone():
    assert P.fold(ord("ß")) == ord("ß")
    assert P.fold(ord("ÿ")) == ord("ÿ")
    assert P.fold(ord("×")) == ord("×")
    assert P.fold(ord("@")) == ord("@")
    assert P.fold(ord("Ÿ")) == ord("ÿ")


def test_sharp_s_is_not_y_diaeresis():
    assert P.phone_code("ß") != P.phone_code("ÿ")
    assert P.injective_phone_code("ß") != P.injective_phone_code("ÿ")


def test_known_codes():
    assert P.phone_code("r") == 0b10100001
    assert P.phone_code("t") == 0b00011101
    assert P.injective_phone_code("j") == 0b00000011
    assert P.phone_code(ord("t")) == 0b00011101


def test_latin1_approximations():
    assert P.phone_code("ç") == P.phone_code("z") ^ 1
    assert P.phone_code("ß") == P.phone_code("s") ^ 1
    assert P.injective_phone_code("ß") == P.injective_phone_code("s") ^ 1
    assert P.injective_phone_code("é") == P.injective_phone_code("e") ^ 1
    assert P.phone_code("ñ") == 0b00010111
    assert P.injective_phone_code("ÿ") == P.injective_phone_code("y") ^ 1


@pytest.mark.parametrize("ch", ["-", "4", "@", " ", "÷", "×", "ə", "Ł", "\u0301"])
def test_silent_characters(ch):
    assert P.is_phonetic(ch) is False
    assert P.phone_code(ch) == 0
    assert P.injective_phone_code(ch) == 0


@pytest.mark.parametrize("ch", ["a", "Z", "ß", "ẞ", "ÿ", "Ÿ", "Ö"])
def test_phonetic_characters(ch):
    assert P.is_phonetic(ch) is True


def test_non_character_input_rejected():
    with pytest.raises(TypeError):
        P.phone_code("ab")
    with pytest.raises(TypeError):
        P.injective_phone_code("")
    with pytest.raises(TypeError):
        P.is_phonetic(b"a")
