"""Centralized styles for the quiz window."""

from face_quiz.core.models import OptionHighlight

from .color_palette import ColorPalette, Theme


class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow, QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
            }}
            QPushButton {{
                background-color: {ColorPalette.SURFACE.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 6px;
                padding: 6px 12px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)};
            }}
            QPushButton:checked {{
                background-color: {ColorPalette.BUTTON_CHECKED_BG.get(theme)};
                color: {ColorPalette.BUTTON_CHECKED_TEXT.get(theme)};
                border: 1px solid {ColorPalette.BUTTON_CHECKED_BG.get(theme)};
            }}
            QGroupBox {{
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 6px;
                margin-top: 6px;
                padding-top: 10px;
            }}
            QGroupBox::title {{
                subcontrol-origin: margin;
                left: 10px;
                padding: 0 3px 0 3px;
            }}
        """

    @staticmethod
    def get_option_style(
        highlight: OptionHighlight, font_size: int, theme: Theme = Theme.LIGHT
    ) -> str:
        base = f"font-size: {font_size}pt; font-weight: 500; padding: 10px 16px; border-radius: 8px;"
        if highlight is OptionHighlight.CORRECT:
            color = ColorPalette.SUCCESS.get(theme)
        elif highlight is OptionHighlight.INCORRECT:
            color = ColorPalette.ERROR.get(theme)
        else:
            return (
                base
                + f" background-color: {ColorPalette.SURFACE.get(theme)};"
                + f" border: 2px solid {ColorPalette.SURFACE.get(theme)};"
            )
        return (
            base
            + f" background-color: {color}; border: 2px solid {color};"
            + f" color: {ColorPalette.FEEDBACK_TEXT.get(theme)};"
        )

    @staticmethod
    def get_hint_card_style(theme: Theme = Theme.LIGHT) -> str:
        return (
            f"background-color: {ColorPalette.PRIMARY_50.get(theme)};"
            f" border: 2px dashed {ColorPalette.PRIMARY_200.get(theme)};"
            f" border-radius: 12px; color: {ColorPalette.PRIMARY_700.get(theme)};"
            " font-style: italic; padding: 16px;"
        )

    @staticmethod
    def get_hint_label_style(theme: Theme = Theme.LIGHT) -> str:
        return f"color: {ColorPalette.PRIMARY_600.get(theme)}; font-weight: 600;"

    @staticmethod
    def get_secondary_text_style(theme: Theme = Theme.LIGHT) -> str:
        return f"color: {ColorPalette.TEXT_SECONDARY.get(theme)};"

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 16pt; font-weight: bold;"
