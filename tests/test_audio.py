import numpy as np
import pytest

from morsetranslator.translation.audio import (
    DEFAULT_TONE_SETTINGS,
    ToneSettings,
    build_tone_schedule,
    render_tone_schedule,
    schedule_end,
)


def test_default_settings():
    settings = DEFAULT_TONE_SETTINGS
    assert settings.frequency == 600
    assert settings.gain == pytest.approx(0.1)
    assert settings.dot_duration == pytest.approx(0.1)
    assert settings.dot_advance == pytest.approx(0.2)
    assert settings.dash_duration == pytest.approx(0.3)
    assert settings.dash_advance == pytest.approx(0.4)


def test_one_tone_per_dot_or_dash_ignoring_separators():
    events = build_tone_schedule("... ---")
    assert [event.symbol for event in events] == [".", ".", ".", "-", "-", "-"]
    assert all(event.frequency == 600 for event in events)
    assert all(event.gain == pytest.approx(0.1) for event in events)


def test_tones_are_scheduled_back_to_back():
    events = build_tone_schedule("... ---")
    starts = [0.0, 0.2, 0.4, 0.6, 1.0, 1.4]
    durations = [0.1, 0.1, 0.1, 0.3, 0.3, 0.3]
    assert [event.start for event in events] == pytest.approx(starts)
    assert [event.duration for event in events] == pytest.approx(durations)


def test_schedule_starts_at_clock_time():
    events = build_tone_schedule(".-", start_time=5.0)
    assert events[0].start == pytest.approx(5.0)
    assert events[0].stop == pytest.approx(5.1)
    assert events[1].start == pytest.approx(5.2)
    assert events[1].stop == pytest.approx(5.5)


def test_non_signal_characters_are_skipped():
    assert build_tone_schedule("") == ()
    assert build_tone_schedule("HELLO !") == ()
    assert len(build_tone_schedule(".x-/.")) == 3


def test_settings_override():
    settings = ToneSettings(frequency=800, gain=0.5, dot_duration=0.05, dot_advance=0.1)
    events = build_tone_schedule("..", settings=settings)
    assert events[1].start == pytest.approx(0.1)
    assert events[1].duration == pytest.approx(0.05)
    assert events[0].frequency == 800
    assert events[0].gain == 0.5


def test_schedule_end():
    assert schedule_end((), 2.0) == 2.0
    assert schedule_end(build_tone_schedule(".-")) == pytest.approx(0.5)


def test_render_length_and_silence_between_tones():
    settings = ToneSettings(sample_rate=8000)
    events = build_tone_schedule("..", settings=settings)
    samples = render_tone_schedule(events, settings)

    assert samples.dtype == np.float32
    # second dot stops at 0.3 s
    assert len(samples) == 2400
    assert np.abs(samples[:800]).max() > 0.05
    assert np.abs(samples[800:1600]).max() == 0.0
    assert np.abs(samples[1600:2400]).max() > 0.05
    assert np.abs(samples).max() <= settings.gain + 1e-6


def test_render_respects_start_offset():
    settings = ToneSettings(sample_rate=8000)
    events = build_tone_schedule(".", start_time=3.0, settings=settings)
    samples = render_tone_schedule(events, settings, start_time=3.0)
    assert len(samples) == 800


def test_render_empty_schedule():
    assert len(render_tone_schedule(())) == 0
