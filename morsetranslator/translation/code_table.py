"""Fixed character <-> Morse symbol table."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping


CODE_TABLE: Mapping[str, str] = MappingProxyType(
    {
        # Letters (A-Z)
        "A": ".-", "B": "-...", "C": "-.-.", "D": "-..", "E": ".", "F": "..-.",
        "G": "--.", "H": "....", "I": "..", "J": ".---", "K": "-.-", "L": ".-..",
        "M": "--", "N": "-.", "O": "---", "P": ".--.", "Q": "--.-", "R": ".-.",
        "S": "...", "T": "-", "U": "..-", "V": "...-", "W": ".--", "X": "-..-",
        "Y": "-.--", "Z": "--..",

        # Digits (0-9)
        "0": "-----", "1": ".----", "2": "..---", "3": "...--", "4": "....-",
        "5": ".....", "6": "-....", "7": "--...", "8": "---..", "9": "----.",

        # Word gap passes through as itself
        " ": " ",
    }
)

REVERSE_CODE_TABLE: Mapping[str, str] = MappingProxyType(
    {symbol: char for char, symbol in CODE_TABLE.items()}
)

if len(REVERSE_CODE_TABLE) != len(CODE_TABLE):
    raise RuntimeError("Morse code table contains duplicate symbols")


def encode_char(char: str) -> str:
    """Return the Morse symbol for an uppercase letter, digit or space.

    Raises ``KeyError`` for any other character.
    """
    return CODE_TABLE[char]


def decode_symbol(symbol: str) -> str:
    """Return the character for a Morse symbol; ``KeyError`` if unknown."""
    return REVERSE_CODE_TABLE[symbol]


def is_encodable(char: str) -> bool:
    return char in CODE_TABLE


def is_symbol(symbol: str) -> bool:
    return symbol in REVERSE_CODE_TABLE
