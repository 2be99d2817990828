"""Theme colors for the UI."""

from __future__ import annotations

from typing import Tuple, Type


class ListColors:
    """Light theme palette."""

    BG = "#f4f6f8"
    SURFACE = "#ffffff"
    SURFACE_HOVER = "#eef2fb"
    BORDER = "#dde3ea"

    PRIMARY = "#2f5bd3"
    PRIMARY_HOVER = "#3d68dc"
    ON_PRIMARY = "#ffffff"

    ERROR = "#d14343"
    ERROR_BG = "#fdecec"
    ERROR_BG_HOVER = "#f9dede"

    TEXT_PRIMARY = "#14181f"
    TEXT_SECONDARY = "#4a5563"
    TEXT_MUTED = "#8792a2"


class DarkListColors(ListColors):
    """Dark theme palette."""

    BG = "#111318"
    SURFACE = "#1b1e25"
    SURFACE_HOVER = "#242a36"
    BORDER = "#2c313b"

    PRIMARY = "#7c9cff"
    PRIMARY_HOVER = "#8fabff"
    ON_PRIMARY = "#0d1017"

    ERROR = "#ff7a7a"
    ERROR_BG = "#3a1f22"
    ERROR_BG_HOVER = "#4a272b"

    TEXT_PRIMARY = "#eef1f6"
    TEXT_SECONDARY = "#b4bcc8"
    TEXT_MUTED = "#7d8696"


def palette(dark: bool) -> Type[ListColors]:
    return DarkListColors if dark else ListColors


def row_colors(colors: Type[ListColors], *, error: bool, active: bool) -> Tuple[str, str, str]:
    """(fill, hover fill, text) for a list row; a failed row keeps its error look when active."""
    if error:
        return colors.ERROR_BG, colors.ERROR_BG_HOVER, colors.ERROR
    if active:
        return colors.PRIMARY, colors.PRIMARY_HOVER, colors.ON_PRIMARY
    return colors.SURFACE, colors.SURFACE_HOVER, colors.TEXT_PRIMARY
