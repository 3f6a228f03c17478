import types

import numpy as np
import pytest

from morsetranslator.translation.audio import ToneSettings
from utils import sound


class FakeCallbackStop(Exception):
    pass


class FakeOutputStream:
    instances = []

    def __init__(self, **kwargs):
        self.kwargs = kwargs
        self.time = 42.0
        self.started = False
        self.stopped = False
        self.closed = False
        FakeOutputStream.instances.append(self)

    def start(self):
        self.started = True

    def stop(self):
        self.stopped = True

    def close(self):
        self.closed = True


@pytest.fixture
def fake_sd(monkeypatch):
    FakeOutputStream.instances = []
    module = types.SimpleNamespace(OutputStream=FakeOutputStream, CallbackStop=FakeCallbackStop)
    monkeypatch.setattr(sound, "sd", module)
    return module


def _drain(stream, frames=512):
    chunks = []
    callback = stream.kwargs["callback"]
    while True:
        outdata = np.ones((frames, 1), dtype=np.float32)
        try:
            callback(outdata, frames, None, None)
        except FakeCallbackStop:
            chunks.append(outdata[:, 0].copy())
            break
        chunks.append(outdata[:, 0].copy())
    return np.concatenate(chunks)


def test_play_without_backend_raises(monkeypatch):
    monkeypatch.setattr(sound, "sd", None)
    with pytest.raises(RuntimeError):
        sound.TonePlayer().play("...")


def test_play_opens_and_starts_a_stream(fake_sd):
    player = sound.TonePlayer(ToneSettings(sample_rate=8000))
    assert player.play("... ---") is None

    assert len(FakeOutputStream.instances) == 1
    stream = FakeOutputStream.instances[0]
    assert stream.started
    assert stream.kwargs["samplerate"] == 8000
    assert stream.kwargs["channels"] == 1
    assert player.active_count == 1


def test_each_play_uses_a_fresh_stream(fake_sd):
    player = sound.TonePlayer(ToneSettings(sample_rate=8000))
    player.play(".")
    player.play(".")
    assert len(FakeOutputStream.instances) == 2
    assert all(stream.started and not stream.stopped for stream in FakeOutputStream.instances)
    assert player.active_count == 2


def test_nothing_to_play_opens_no_stream(fake_sd):
    player = sound.TonePlayer()
    player.play("HELLO")
    player.play("")
    assert FakeOutputStream.instances == []


def test_callback_streams_rendered_tones_then_stops(fake_sd):
    player = sound.TonePlayer(ToneSettings(sample_rate=8000))
    player.play(".")
    output = _drain(FakeOutputStream.instances[0])

    assert np.abs(output[:800]).max() > 0.05
    assert np.abs(output[800:]).max() == 0.0


def test_finished_streams_are_closed_on_next_play(fake_sd):
    player = sound.TonePlayer(ToneSettings(sample_rate=8000))
    player.play(".")
    first = FakeOutputStream.instances[0]
    _drain(first)
    first.kwargs["finished_callback"]()

    assert player.active_count == 0
    assert not first.closed

    player.play("-")
    assert first.closed
    assert player.active_count == 1


def test_start_failure_propagates_and_releases_stream(fake_sd, monkeypatch):
    def broken_start(self):
        raise OSError("no device")

    monkeypatch.setattr(FakeOutputStream, "start", broken_start)
    player = sound.TonePlayer()
    with pytest.raises(OSError):
        player.play(".-")
    assert player.active_count == 0
    assert FakeOutputStream.instances[0].closed


def test_close_stops_pending_streams(fake_sd):
    player = sound.TonePlayer(ToneSettings(sample_rate=8000))
    player.play("...")
    player.play("---")
    player.close()
    assert all(stream.stopped and stream.closed for stream in FakeOutputStream.instances)
    assert player.active_count == 0


def test_render_failure_releases_stream(fake_sd, monkeypatch):
    def broken_render(events, settings, start_time):
        raise MemoryError("tone buffer too large")

    monkeypatch.setattr(sound, "render_tone_schedule", broken_render)
    player = sound.TonePlayer()
    with pytest.raises(MemoryError):
        player.play("-.-")
    assert player.active_count == 0
    assert FakeOutputStream.instances[0].closed
    assert not FakeOutputStream.instances[0].started


def test_close_releases_drained_streams_not_yet_reaped(fake_sd):
    player = sound.TonePlayer(ToneSettings(sample_rate=8000))
    player.play(".")
    stream = FakeOutputStream.instances[0]
    _drain(stream)
    stream.kwargs["finished_callback"]()
    assert not stream.closed

    player.close()
    assert stream.closed
