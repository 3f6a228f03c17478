import pytest


@pytest.fixture
def page(qapp, app_context):
    from gui.windows.translator_page import TranslatorPage

    widget = TranslatorPage(context=app_context)
    yield widget
    widget.deleteLater()


def test_typing_updates_translation(page):
    page.edit_source.setPlainText("sos")
    assert page.edit_output.toPlainText() == "... --- ..."
    assert page.session.text == "sos"


def test_output_is_read_only(page):
    assert page.edit_output.isReadOnly()


def test_toggle_clears_and_switches_direction(page):
    page.edit_source.setPlainText("hello")
    page.toggle_direction()

    assert page.edit_source.toPlainText() == ""
    assert page.edit_output.toPlainText() == ""
    assert not page.session.is_text_to_morse
    assert page.btn_play.isHidden()

    page.edit_source.setPlainText(".... ..")
    assert page.edit_output.toPlainText() == "HI"


def test_double_toggle_restores_text_mode(page):
    page.edit_source.setPlainText("abc")
    page.toggle_direction()
    page.toggle_direction()
    assert page.session.is_text_to_morse
    assert not page.btn_play.isHidden()
    assert (page.session.text, page.session.morse) == ("", "")


def test_direction_signal(page):
    seen = []
    page.signal.direction_changed_signal.connect(seen.append)
    page.toggle_direction()
    page.toggle_direction()
    assert seen == [False, True]


def test_copy_buttons_write_targeted_buffer(page, app_context):
    page.edit_source.setPlainText("sos")
    page.copy_source()
    page.copy_output()
    assert app_context.copied == ["sos", "... --- ..."]


def test_play_sends_morse_buffer_to_player(page, fake_player_factory):
    page.edit_source.setPlainText("et")
    page.play_morse_code()
    page.play_morse_code()
    player = fake_player_factory.created[0]
    assert player.played == [". -", ". -"]


def test_play_is_ignored_in_morse_to_text_mode(page, fake_player_factory):
    page.toggle_direction()
    page.edit_source.setPlainText("...")
    page.play_morse_code()
    assert fake_player_factory.created == []


def test_playback_failure_is_reported(page, app_context, failing_player_factory):
    app_context.tone_player_factory = failing_player_factory
    errors = []
    page.signal.playback_failed_signal.connect(errors.append)
    page.edit_source.setPlainText("e")
    page.play_morse_code()
    assert errors == ["sounddevice is not available"]


def test_page_without_context_reuses_one_player(qapp, tmp_path, monkeypatch, fake_player_factory):
    from gui.windows import translator_page

    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(translator_page, "TonePlayer", lambda: fake_player_factory(None))

    widget = translator_page.TranslatorPage()
    try:
        widget.edit_source.setPlainText("e")
        widget.play_morse_code()
        widget.play_morse_code()

        assert len(fake_player_factory.created) == 1
        player = fake_player_factory.created[0]
        assert player.played == [".", "."]

        widget.close_tone_player()
        assert player.closed
        assert widget.create_tone_player() is not player
    finally:
        widget.deleteLater()
