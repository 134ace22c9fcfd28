from face_quiz.core.settings import SessionSettings
from face_quiz.styling.color_palette import Theme
from face_quiz.ui.settings_dialog import SettingsDialog


def test_dialog_reports_theme_and_session_settings(qt_app):
    settings = SessionSettings(round_count=8, shuffle_seed=42)
    dialog = SettingsDialog(None, 16, settings, Theme.DARK)

    assert dialog.get_theme() is Theme.DARK
    assert dialog.get_font_size() == 16
    assert dialog.get_session_settings() == settings

    dialog.dark_theme_checkbox.setChecked(False)
    dialog.seed_checkbox.setChecked(False)

    assert dialog.get_theme() is Theme.LIGHT
    assert dialog.get_session_settings().shuffle_seed is None
    dialog.deleteLater()
