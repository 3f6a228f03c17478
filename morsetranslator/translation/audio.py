"""Tone scheduling for Morse playback.

``build_tone_schedule`` turns a Morse string into timed tone events against an
audio clock. Only dots and dashes produce tones; separators and any other
characters are skipped, so letter and word gaps are not modelled. Each dot
sounds for ``dot_duration`` and moves the cursor by ``dot_advance``; each dash
sounds for ``dash_duration`` and moves it by ``dash_advance``.

``render_tone_schedule`` synthesises such a schedule into a mono sample buffer
for an output stream.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np


DOT = "."
DASH = "-"


@dataclass(frozen=True)
class ToneSettings:
    frequency: float = 600.0
    gain: float = 0.1
    dot_duration: float = 0.1
    dot_advance: float = 0.2
    dash_duration: float = 0.3
    dash_advance: float = 0.4
    sample_rate: int = 48000
    fade_ms: float = 3.0

    def duration_for(self, symbol: str) -> float:
        return self.dot_duration if symbol == DOT else self.dash_duration

    def advance_for(self, symbol: str) -> float:
        return self.dot_advance if symbol == DOT else self.dash_advance


DEFAULT_TONE_SETTINGS = ToneSettings()


@dataclass(frozen=True)
class ToneEvent:
    symbol: str
    start: float
    stop: float
    frequency: float
    gain: float

    @property
    def duration(self) -> float:
        return self.stop - self.start


def iter_signal_symbols(morse: str) -> Iterable[str]:
    return (char for char in (morse or "") if char in (DOT, DASH))


def build_tone_schedule(
    morse: str,
    start_time: float = 0.0,
    settings: ToneSettings | None = None,
) -> tuple[ToneEvent, ...]:
    settings = settings or DEFAULT_TONE_SETTINGS
    events = []
    cursor = float(start_time)
    for symbol in iter_signal_symbols(morse):
        events.append(
            ToneEvent(
                symbol=symbol,
                start=cursor,
                stop=cursor + settings.duration_for(symbol),
                frequency=settings.frequency,
                gain=settings.gain,
            )
        )
        cursor += settings.advance_for(symbol)
    return tuple(events)


def schedule_end(events: Sequence[ToneEvent], start_time: float = 0.0) -> float:
    if not events:
        return float(start_time)
    return max(event.stop for event in events)


def _seconds_to_samples(seconds: float, sample_rate: int) -> int:
    return max(0, int(round(seconds * sample_rate)))


def render_tone_schedule(
    events: Sequence[ToneEvent],
    settings: ToneSettings | None = None,
    start_time: float = 0.0,
) -> np.ndarray:
    """Render ``events`` into a float32 mono buffer whose sample 0 is ``start_time``."""
    settings = settings or DEFAULT_TONE_SETTINGS
    rate = int(settings.sample_rate)
    total = _seconds_to_samples(schedule_end(events, start_time) - start_time, rate)
    buffer = np.zeros(total, dtype=np.float32)
    fade = _seconds_to_samples(settings.fade_ms / 1000.0, rate)

    for event in events:
        first = _seconds_to_samples(event.start - start_time, rate)
        length = min(_seconds_to_samples(event.duration, rate), total - first)
        if length <= 0:
            continue
        t = np.arange(length, dtype=np.float64) / rate
        tone = np.sin(2.0 * math.pi * event.frequency * t) * event.gain

        ramp = min(fade, length // 2)
        if ramp > 0:
            edge = np.linspace(0.0, 1.0, ramp, endpoint=False)
            tone[:ramp] *= edge
            tone[length - ramp:] *= edge[::-1]

        buffer[first:first + length] += tone.astype(np.float32, copy=False)
    return buffer
