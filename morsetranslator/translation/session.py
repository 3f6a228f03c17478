"""Direction and paired text/Morse buffers behind the translator page."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .translator import morse_to_text, text_to_morse


class Direction(Enum):
    TEXT_TO_MORSE = "text_to_morse"
    MORSE_TO_TEXT = "morse_to_text"

    def flipped(self) -> "Direction":
        if self is Direction.TEXT_TO_MORSE:
            return Direction.MORSE_TO_TEXT
        return Direction.TEXT_TO_MORSE


@dataclass
class TranslatorSession:
    """Holds the editable buffer and the one derived from it.

    In text->Morse mode ``text`` is what the user types and ``morse`` follows
    it; in Morse->text mode the roles swap.
    """

    direction: Direction = Direction.TEXT_TO_MORSE
    text: str = ""
    morse: str = ""

    @property
    def is_text_to_morse(self) -> bool:
        return self.direction is Direction.TEXT_TO_MORSE

    @property
    def source(self) -> str:
        return self.text if self.is_text_to_morse else self.morse

    @property
    def derived(self) -> str:
        return self.morse if self.is_text_to_morse else self.text

    @property
    def can_play(self) -> bool:
        return self.is_text_to_morse

    def edit(self, value: str) -> str:
        """Store the new source value and return the recomputed translation."""
        value = value or ""
        if self.is_text_to_morse:
            self.text = value
            self.morse = text_to_morse(value)
        else:
            self.morse = value
            self.text = morse_to_text(value)
        return self.derived

    def toggle(self) -> Direction:
        self.direction = self.direction.flipped()
        self.text = ""
        self.morse = ""
        return self.direction
