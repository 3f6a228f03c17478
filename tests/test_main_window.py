def test_main_window_assembles_translator(qapp, app_context):
    from morsetranslator.application.startup import build_main_window

    window = build_main_window(app_context)
    try:
        assert window.windowTitle().startswith(app_context.app_name)
        assert window.centralWidget() is window.page_translator

        window.page_translator.edit_source.setPlainText("sos")
        window.show_reference_table_action()
        assert window.table_tool_morse_code.isVisible()
    finally:
        window.close()


def test_saved_settings_refresh_shared_player(qapp, app_context):
    from morsetranslator.application.startup import build_main_window

    window = build_main_window(app_context)
    try:
        player = app_context.create_tone_player()
        app_context.config_manager.set_tone_freq(720)
        window._apply_settings_immediately()
        assert player.settings.frequency == 720
    finally:
        window.close()


def test_closing_window_closes_tone_player(qapp, app_context):
    from morsetranslator.application.startup import build_main_window

    window = build_main_window(app_context)
    window.show()
    player = app_context.create_tone_player()
    window.close()
    assert player.closed


def test_settings_menu_opens_preferences(qapp, app_context):
    from morsetranslator.application.startup import build_main_window

    window = build_main_window(app_context)
    try:
        menus = {action.text(): action.menu() for action in window.menuBar().actions() if action.menu()}
        entries = [action.text() for action in menus["Settings"].actions()]
        assert entries == ["Preferences"]
    finally:
        window.close()
