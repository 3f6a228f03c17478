import logging
import threading
from typing import Callable, Optional

import numpy as np

try:
    import sounddevice as sd
except Exception:
    sd = None

from morsetranslator.translation.audio import (
    DEFAULT_TONE_SETTINGS,
    ToneSettings,
    build_tone_schedule,
    render_tone_schedule,
)


logger = logging.getLogger(__name__)


class _ScheduledPlayback:
    """One output stream playing one pre-rendered tone buffer."""

    def __init__(self, on_finished: Callable[["_ScheduledPlayback"], None]):
        self.samples = np.zeros(0, dtype=np.float32)
        self.position = 0
        self.stream = None
        self._on_finished = on_finished

    def audio_callback(self, outdata, frames, time_info, status):
        # Keep callback path free of any logging/IO to avoid underruns.
        _ = time_info, status

        chunk = self.samples[self.position:self.position + frames]
        count = len(chunk)
        outdata[:count, 0] = chunk
        if count < frames:
            outdata[count:, 0] = 0.0
        self.position += count
        if self.position >= len(self.samples):
            raise sd.CallbackStop

    def finished_callback(self):
        self._on_finished(self)


class TonePlayer:
    """Fire-and-forget Morse tone playback backed by sounddevice.

    Every ``play`` call opens its own output stream and uses that stream's
    clock as the schedule origin, so repeated calls overlap instead of
    queueing. Drained streams are closed on the next ``play`` or ``close``.
    """

    def __init__(self, settings: Optional[ToneSettings] = None):
        self.settings = settings or DEFAULT_TONE_SETTINGS
        self.channels = 1
        self._lock = threading.RLock()
        self._active: set[_ScheduledPlayback] = set()
        self._finished: list[_ScheduledPlayback] = []

    @property
    def active_count(self) -> int:
        with self._lock:
            return len(self._active)

    def play(self, morse_code: str) -> None:
        if sd is None:
            raise RuntimeError("sounddevice is not available")

        self._reap_finished()

        settings = self.settings
        if not build_tone_schedule(morse_code, 0.0, settings):
            logger.info("[AUDIO][play] nothing to play for %r", morse_code)
            return

        playback = _ScheduledPlayback(self._mark_finished)
        stream = sd.OutputStream(
            samplerate=settings.sample_rate,
            channels=self.channels,
            dtype="float32",
            callback=playback.audio_callback,
            finished_callback=playback.finished_callback,
        )
        playback.stream = stream
        try:
            start_time = float(stream.time)
            events = build_tone_schedule(morse_code, start_time, settings)
            playback.samples = render_tone_schedule(events, settings, start_time)

            with self._lock:
                self._active.add(playback)
            stream.start()
        except Exception:
            with self._lock:
                self._active.discard(playback)
            self._close_stream(playback)
            raise

        logger.info(
            "[AUDIO][play] code=%s tones=%d freq=%.1f gain=%.3f t0=%.3f length_s=%.3f",
            morse_code,
            len(events),
            settings.frequency,
            settings.gain,
            start_time,
            len(playback.samples) / float(settings.sample_rate),
        )

    def _mark_finished(self, playback: _ScheduledPlayback) -> None:
        # Runs on the audio thread; closing the stream here is not allowed.
        with self._lock:
            if playback in self._active:
                self._active.discard(playback)
                self._finished.append(playback)

    def _reap_finished(self) -> None:
        with self._lock:
            finished = self._finished
            self._finished = []
        for playback in finished:
            self._close_stream(playback)

    @staticmethod
    def _close_stream(playback: _ScheduledPlayback) -> None:
        stream = playback.stream
        if stream is None:
            return
        try:
            stream.close()
        except Exception:
            logger.exception("Failed to close sounddevice stream")

    def close(self):
        with self._lock:
            pending = list(self._active) + self._finished
            self._active.clear()
            self._finished = []
        for playback in pending:
            stream = playback.stream
            if stream is None:
                continue
            try:
                stream.stop()
            except Exception:
                logger.exception("Failed to stop sounddevice stream")
            self._close_stream(playback)
        if pending:
            logger.info("[AUDIO][close] closed %d stream(s)", len(pending))
