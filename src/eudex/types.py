# src/eudex/types.py
from __future__ import annotations

from typing import Protocol, Union

"""
types.py.

Does: Define the input alias accepted by the encoder and a lightweight
structural Protocol for token objects passed to the matching layer.
"""

TextInput = Union[str, bytes, bytearray, memoryview, None]


class TokenLike(Protocol):
    text: str


__all__ = ["TextInput", "TokenLike"]

__docformat__ = "google"
