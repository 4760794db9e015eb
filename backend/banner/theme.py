# Background luminance -> icon theme
from banner.types import BackgroundPreset, GRADIENT, SOLID, TRANSPARENT

LIGHT = "light"
DARK = "dark"

# 'light' theme = icon for a light background, so it is drawn dark
ICON_COLORS = {
    LIGHT: "000000",
    DARK: "ffffff",
}


def _parse_hex(hex_color: str):
    s = hex_color.strip().lstrip("#")
    if len(s) == 3:
        s = "".join(c * 2 for c in s)
    # alpha channel of 8-digit colors is ignored
    return int(s[0:2], 16), int(s[2:4], 16), int(s[4:6], 16)


def _linearize(c: float) -> float:
    return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(hex_color: str) -> float:
    """WCAG relative luminance, 0.0 for black up to 1.0 for white."""
    r, g, b = (_linearize(v / 255) for v in _parse_hex(hex_color))
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def detect_background_theme(background: BackgroundPreset) -> str:
    """Classify a preset as 'light' or 'dark' (strictly above 0.5 is light)."""
    if background.type == TRANSPARENT:
        # READMEs are usually shown on light pages
        return LIGHT

    if background.type == SOLID and background.color:
        return LIGHT if relative_luminance(background.color) > 0.5 else DARK

    if background.type == GRADIENT and background.stops:
        values = [relative_luminance(stop.color) for stop in background.stops]
        return LIGHT if sum(values) / len(values) > 0.5 else DARK

    return DARK


def icon_color(theme: str, background_theme: str) -> str:
    """Hex color (no '#') for an icon with the given theme; 'auto' defers to the background."""
    resolved = background_theme if theme in (None, "auto") else theme
    return ICON_COLORS.get(resolved, ICON_COLORS[DARK])
