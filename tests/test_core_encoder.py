# tests/test_core_encoder.py
from __future__ import annotations

import pytest

from eudex.core import Difference, Hash, encode

"""
Tests: core/encoder.py

Does: Pin the head/tail lane layout, collapsing of runs, noise invariance,
      the seven-lane overflow, input coercion and the Hash value type.
"""


# ──────────────────────────────────────────────────────────────────────────────
# Layout
# ──────────────────────────────────────────────────────────────────────────────
def test_empty_inputs_hash_to_zero():
    assert encode("") == 0
    assert encode(None) == 0
    assert encode(b"") == 0


def test_single_letter_fills_only_the_head_lane():
    assert encode("r") == 0b01010001 << 56
    assert encode("A") == 0b10000100 << 56


def test_exact_values():
    # w has an all-zero injective code, so only the tail remains
    assert encode("what") == 0x04_00_1D
    assert encode("wat") == 0x1D
    assert encode("java") == (0x03 << 56) | 0x45_00


def test_vowel_only_word_keeps_no_tail():
    assert encode("aeiou") == 0b10000100 << 56
    assert encode("eau") == 0b11011000 << 56


def test_overflow_drops_letters_after_seventh_lane():
    full = encode("bdbdbdbd")
    assert full == (0x24 << 56) | 0x18_48_18_48_18_48_18
    assert encode("bdbdbdbdzzz") == full


@pytest.mark.parametrize("word", ["", "a", "computer", "bdbdbdbdbdbdbdbd", "ÿÿÿÿ", "x" * 200])
def test_result_is_unsigned_64_bit(word):
    assert 0 <= encode(word) < 2**64


# ──────────────────────────────────────────────────────────────────────────────
# Equalities
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "a, b",
    [
        ("JAva", "jAva"),
        ("triggered", "TRIGGERED"),
        ("co!mputer", "computer"),
        ("comp-uter", "computer"),
        ("comp@u#te?r", "computer"),
        ("lal", "lel"),
        ("rindom", "ryndom"),
        ("riiiindom", "ryyyyyndom"),
        ("riyiyiiindom", "ryyyyyndom"),
        ("repert", "ropert"),
        ("rrr", "raaaa"),
        ("rrr", "rraaaa"),
        ("ÖLMÜTZ", "ölmütz"),
    ],
)
def test_same_hash(a, b):
    assert encode(a) == encode(b)


@pytest.mark.parametrize(
    "a, b",
    [
        ("reddit", "eddit"),
        ("lol", "lulz"),
        ("ijava", "java"),
        ("jiva", "java"),
        ("jesus", "iesus"),
        ("aesus", "iesus"),
        ("iesus", "yesus"),
        ("rupirt", "ropert"),
        ("ripert", "ropyrt"),
        ("randomal", "randomai"),
        ("été", "ete"),
    ],
)
def test_different_hash(a, b):
    assert encode(a) != encode(b)


# ──────────────────────────────────────────────────────────────────────────────
# Input coercion
# ──────────────────────────────────────────────────────────────────────────────
def test_bytes_decode_as_utf8_then_latin1():
    word = "möier"
    assert encode(word.encode("utf-8")) == encode(word)
    assert encode(word.encode("latin-1")) == encode(word)
    assert encode(bytearray(b"java")) == encode(memoryview(b"java")) == encode("java")


def test_decomposed_accents_compose():
    assert encode("e\u0301te") == encode("\u00e9te")


def test_non_text_input_is_a_type_error():
    with pytest.raises(TypeError):
        encode(42)  # type: ignore[arg-type]


# ──────────────────────────────────────────────────────────────────────────────
# Hash value type
# ──────────────────────────────────────────────────────────────────────────────
def test_hash_value_type():
    h = Hash.from_text("java")
    assert h == Hash(encode("java"))
    assert int(h) == h.value == encode("java")
    assert h.lanes()[0] == 0x03
    assert len(h.lanes()) == 8
    assert repr(h) == "Hash(0x0300000000004500)"
    assert len({h, Hash.from_text("JAVA")}) == 1


def test_hash_subtraction_gives_difference():
    d = Hash.from_text("jumpo") - Hash.from_text("jumbo")
    assert isinstance(d, Difference)
    assert d.xor == encode("jumpo") ^ encode("jumbo")
    assert d.similar()


def test_hash_rejects_out_of_range_and_foreign_operands():
    with pytest.raises(ValueError):
        Hash(-1)
    with pytest.raises(ValueError):
        Hash(2**64)
    with pytest.raises(TypeError):
        Hash(1) - 1  # type: ignore[operator]
