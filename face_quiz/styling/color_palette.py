"""Color palette for FaceQuiz supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a specific theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        """Get color value for the specified theme."""
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the application."""

    # Text colors
    TEXT_PRIMARY = ThemeColors(light="#1F2937", dark="#F5F5F5")
    TEXT_SECONDARY = ThemeColors(light="#6B7280", dark="#AAAAAA")

    # Background colors
    BACKGROUND_PRIMARY = ThemeColors(light="#FFFFFF", dark="#1E1E1E")
    SURFACE = ThemeColors(light="#F3F4F6", dark="#2D2D2D")

    # Brand colors (hint card)
    PRIMARY_50 = ThemeColors(light="#EEF2FF", dark="#1E1B4B")
    PRIMARY_200 = ThemeColors(light="#C7D2FE", dark="#3730A3")
    PRIMARY_600 = ThemeColors(light="#4F46E5", dark="#A5B4FC")
    PRIMARY_700 = ThemeColors(light="#4338CA", dark="#C7D2FE")

    # Answer feedback
    SUCCESS = ThemeColors(light="#16A34A", dark="#4ADE80")
    ERROR = ThemeColors(light="#DC2626", dark="#F87171")
    FEEDBACK_TEXT = ThemeColors(light="#FFFFFF", dark="#111111")

    # Borders and buttons
    BORDER_PRIMARY = ThemeColors(light="#D1D5DB", dark="#555555")
    BUTTON_CHECKED_BG = ThemeColors(light="#4F46E5", dark="#818CF8")
    BUTTON_CHECKED_TEXT = ThemeColors(light="#FFFFFF", dark="#000000")
    BUTTON_HOVER_BG = ThemeColors(light="#E5E7EB", dark="#505050")
