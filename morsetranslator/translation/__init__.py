from .audio import (
    DEFAULT_TONE_SETTINGS,
    ToneEvent,
    ToneSettings,
    build_tone_schedule,
    render_tone_schedule,
)
from .code_table import CODE_TABLE, REVERSE_CODE_TABLE, decode_symbol, encode_char
from .session import Direction, TranslatorSession
from .translator import morse_to_text, text_to_morse

__all__ = [
    "CODE_TABLE",
    "DEFAULT_TONE_SETTINGS",
    "Direction",
    "REVERSE_CODE_TABLE",
    "ToneEvent",
    "ToneSettings",
    "TranslatorSession",
    "build_tone_schedule",
    "decode_symbol",
    "encode_char",
    "morse_to_text",
    "render_tone_schedule",
    "text_to_morse",
]
