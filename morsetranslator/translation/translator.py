"""Text <-> Morse conversion on top of the code table.

Both directions never fail: characters or symbols missing from the table are
copied to the output unchanged.
"""

from __future__ import annotations

from typing import Iterator

from .code_table import CODE_TABLE, REVERSE_CODE_TABLE


SYMBOL_SEPARATOR = " "
WORD_GAP = " "


def text_to_morse(text: str) -> str:
    """Encode ``text`` as Morse, one token per character, space separated.

    A space in the input is its own token, so words end up three spaces apart.
    """
    return SYMBOL_SEPARATOR.join(CODE_TABLE.get(char, char) for char in text.upper())


def _iter_tokens(morse: str) -> Iterator[str]:
    # A word gap token sits between two separators, so ``split`` yields it as
    # a pair of empty strings. An unpaired empty string stays empty.
    pending_blank = False
    for token in morse.split(SYMBOL_SEPARATOR):
        if token:
            if pending_blank:
                yield ""
                pending_blank = False
            yield token
        elif pending_blank:
            pending_blank = False
            yield WORD_GAP
        else:
            pending_blank = True
    if pending_blank:
        yield ""


def morse_to_text(morse: str) -> str:
    """Decode space separated Morse symbols back into uppercase text."""
    return "".join(REVERSE_CODE_TABLE.get(token, token) for token in _iter_tokens(morse))
