# src/eudex/core/phones.py
from __future__ import annotations

"""
phones.py

Does: Static phone tables mapping a case-folded letter to an 8-bit phone code,
      plus the injective variant used for the head letter of a word.
Returns: phone_code(), injective_phone_code(), is_phonetic() and the raw tables.
Used by: The encoder (core.encoder) and tests.

Phone code layout (plain table):

    bit  value  property       letters
    0    1      discriminant   (tags adjacent same-class sounds)
    1    2      nasal          m n
    2    4      fricative      f v s j x z h c t
    3    8      plosive        p b t d c g q k
    4    16     dental         t d n z s
    5    32     liquid         l r
    6    64     labial         b f p v
    7    128    confident      l r x z q   (hard to misspell)

Vowels only carry the discriminant bit: 0 for open, 1 for close.

Injective layout (head letter only):

    bit  vowel meaning        consonant meaning
    0    discriminant         plain bit 1 or discriminant
    1    open-mid             plain bit 2
    2    central              plain bit 3
    3    close-mid            plain bit 4
    4    front                plain bit 5
    5    close                plain bit 6
    6    closer than [ɜ]      plain bit 7
    7    vowel                (always 0)
"""

from typing import Optional

from .constants import (
    ASCII_FIRST,
    ASCII_LETTERS,
    ASCII_UPPER,
    CASE_BIT,
    LATIN1_FIRST,
    LATIN1_LETTERS,
    LATIN1_MULTIPLICATION_SIGN,
    LATIN1_UPPER,
    OUTSIDE_UPPER,
)

__all__ = [
    "PHONES",
    "PHONES_LATIN1",
    "INJECTIVE_PHONES",
    "INJECTIVE_PHONES_LATIN1",
    "fold",
    "plain_code_point",
    "injective_code_point",
    "phone_code",
    "injective_phone_code",
    "is_phonetic",
]

__docformat__ = "google"


# ─────────────────────────────────────────────────────────────────────────────
# 1) Plain table
# ─────────────────────────────────────────────────────────────────────────────

#   +--------- confident
#   |+-------- labial
#   ||+------- liquid
#   |||+------ dental
#   ||||+----- plosive
#   |||||+---- fricative
#   ||||||+--- nasal
#   |||||||+-- discriminant
PHONES: tuple[int, ...] = (
    0,            # a
    0b01001000,   # b
    0b00001100,   # c
    0b00011000,   # d
    0,            # e
    0b01000100,   # f
    0b00001000,   # g
    0b00000100,   # h
    1,            # i
    0b00000101,   # j
    0b00001001,   # k
    0b10100000,   # l
    0b00000010,   # m
    0b00010010,   # n
    0,            # o
    0b01001001,   # p
    0b10101000,   # q
    0b10100001,   # r
    0b00010100,   # s
    0b00011101,   # t
    1,            # u
    0b01000101,   # v
    0b00000000,   # w
    0b10000100,   # x
    1,            # y
    0b10010100,   # z
)


def _plain(letter: str) -> int:
    return PHONES[ord(letter) - ASCII_FIRST]


# Accented letters are approximations; their sound varies across languages.
# None marks a code point inside the block that is not a letter.
PHONES_LATIN1: tuple[Optional[int], ...] = (
    _plain("s") ^ 1,   # ß
    0,                 # à
    0,                 # á
    0,                 # â
    0,                 # ã
    0,                 # ä [æ]
    1,                 # å [oː]
    0,                 # æ [æ]
    _plain("z") ^ 1,   # ç [t͡ʃ]
    1,                 # è
    1,                 # é
    1,                 # ê
    1,                 # ë
    1,                 # ì
    1,                 # í
    1,                 # î
    1,                 # ï
    0b00010101,        # ð [ð̠] non-plosive t
    0b00010111,        # ñ [nj] n combined with j
    0,                 # ò
    0,                 # ó
    0,                 # ô
    0,                 # õ
    1,                 # ö [ø]
    None,              # ÷
    1,                 # ø [ø]
    1,                 # ù
    1,                 # ú
    1,                 # û
    1,                 # ü
    1,                 # ý
    0b00010101,        # þ [ð̠] non-plosive t
    1,                 # ÿ
)


# ─────────────────────────────────────────────────────────────────────────────
# 2) Injective table (head letter)
# ─────────────────────────────────────────────────────────────────────────────

#   +--------- vowel
#   |+-------- closer than ɜ
#   ||+------- close
#   |||+------ front
#   ||||+----- close-mid
#   |||||+---- central
#   ||||||+--- open-mid
#   |||||||+-- discriminant
INJECTIVE_PHONES: tuple[int, ...] = (
    0b10000100,   # a*
    0b00100100,   # b
    0b00000110,   # c
    0b00001100,   # d
    0b11011000,   # e*
    0b00100010,   # f
    0b00000100,   # g
    0b00000010,   # h
    0b11111000,   # i*
    0b00000011,   # j
    0b00000101,   # k
    0b01010000,   # l
    0b00000001,   # m
    0b00001001,   # n
    0b10010100,   # o*
    0b00100101,   # p
    0b01010100,   # q
    0b01010001,   # r
    0b00001010,   # s
    0b00001110,   # t
    0b11100000,   # u*
    0b00100011,   # v
    0b00000000,   # w
    0b01000010,   # x
    0b11100100,   # y*
    0b01001010,   # z
)


def _injective(letter: str) -> int:
    return INJECTIVE_PHONES[ord(letter) - ASCII_FIRST]


INJECTIVE_PHONES_LATIN1: tuple[Optional[int], ...] = (
    _injective("s") ^ 1,   # ß
    _injective("a") ^ 1,   # à
    _injective("a") ^ 1,   # á
    0b10000000,            # â
    0b10000110,            # ã
    0b10100110,            # ä [æ]
    0b11000010,            # å [oː]
    0b10100111,            # æ [æ]
    0b01010100,            # ç [t͡ʃ]
    _injective("e") ^ 1,   # è
    _injective("e") ^ 1,   # é
    _injective("e") ^ 1,   # ê
    0b11000110,            # ë [ə] or [œ]
    _injective("i") ^ 1,   # ì
    _injective("i") ^ 1,   # í
    _injective("i") ^ 1,   # î
    _injective("i") ^ 1,   # ï
    0b00001011,            # ð [ð̠] non-plosive t
    0b00001011,            # ñ [nj] n combined with j
    _injective("o") ^ 1,   # ò
    _injective("o") ^ 1,   # ó
    _injective("o") ^ 1,   # ô
    _injective("o") ^ 1,   # õ
    0b11011100,            # ö [œ] or [ø]
    None,                  # ÷
    0b11011101,            # ø [œ] or [ø]
    _injective("u") ^ 1,   # ù
    _injective("u") ^ 1,   # ú
    _injective("u") ^ 1,   # û
    _injective("y") ^ 1,   # ü
    _injective("y") ^ 1,   # ý
    0b00001011,            # þ [ð̠] non-plosive t
    _injective("y") ^ 1,   # ÿ
)


# ─────────────────────────────────────────────────────────────────────────────
# 3) Lookups
# ─────────────────────────────────────────────────────────────────────────────

def fold(code_point: int) -> int:
    """
    Does: Lowercase A..Z and À..Þ (except ×) by forcing the case bit, and map
          the out-of-block capitals ẞ and Ÿ onto ß and ÿ.
    Returns: The folded code point; anything else comes back unchanged.
    """
    if (
        ASCII_UPPER[0] <= code_point <= ASCII_UPPER[1]
        or (
            LATIN1_UPPER[0] <= code_point <= LATIN1_UPPER[1]
            and code_point != LATIN1_MULTIPLICATION_SIGN
        )
    ):
        return code_point | CASE_BIT
    return OUTSIDE_UPPER.get(code_point, code_point)


def _lookup(
    code_point: int,
    ascii_table: tuple[int, ...],
    latin1_table: tuple[Optional[int], ...],
) -> Optional[int]:
    """
    Does: Fold `code_point` and index the matching table with range checks.
    Returns: The phone code, or None when the character is not a mapped letter.
    """
    x = fold(code_point)
    i = x - ASCII_FIRST
    if 0 <= i < ASCII_LETTERS:
        return ascii_table[i]
    i = x - LATIN1_FIRST
    if 0 <= i < LATIN1_LETTERS:
        return latin1_table[i]
    return None


def plain_code_point(code_point: int) -> Optional[int]:
    """Plain phone code of a code point, None for silent characters."""
    return _lookup(code_point, PHONES, PHONES_LATIN1)


def injective_code_point(code_point: int) -> Optional[int]:
    """Injective phone code of a code point, None for silent characters."""
    return _lookup(code_point, INJECTIVE_PHONES, INJECTIVE_PHONES_LATIN1)


def _code_point(char: str | int) -> int:
    if isinstance(char, int):
        return char
    if not isinstance(char, str) or len(char) != 1:
        raise TypeError(f"expected a single character, got {char!r}")
    return ord(char)


def phone_code(char: str | int) -> int:
    """
    Does: Map one character (or code point) through the plain table.
    Returns: 8-bit phone code; 0 for characters outside the mapped domain.
    Raises: TypeError when `char` is neither an int nor a one-character str.
    """
    code = plain_code_point(_code_point(char))
    return 0 if code is None else code


def injective_phone_code(char: str | int) -> int:
    """
    Does: Map one character (or code point) through the injective table.
    Returns: 8-bit phone code; 0 for characters outside the mapped domain.
    Raises: TypeError when `char` is neither an int nor a one-character str.
    """
    code = injective_code_point(_code_point(char))
    return 0 if code is None else code


def is_phonetic(char: str | int) -> bool:
    """True when the character is a mapped letter (ASCII or Latin-1 ß..ÿ); TypeError like phone_code()."""
    return plain_code_point(_code_point(char)) is not None
