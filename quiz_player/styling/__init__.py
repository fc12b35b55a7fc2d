"""Styling module for the QuizPlayer application."""

from .color_palette import ColorPalette, Theme

__all__ = ["ColorPalette", "Theme"]
