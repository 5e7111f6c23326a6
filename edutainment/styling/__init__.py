"""Styling module for the Edutainment game."""

from .color_palette import ColorPalette, Theme

__all__ = ["ColorPalette", "Theme"]
