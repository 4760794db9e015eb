# Static registry of background presets
from typing import Dict, List

from banner.types import BackgroundPreset, GradientStop, GRADIENT, SOLID, TRANSPARENT


def _gradient(id: str, name: str, start: str, end: str, text_color: str) -> BackgroundPreset:
    return BackgroundPreset(
        id=id,
        name=name,
        type=GRADIENT,
        stops=(GradientStop("0%", start), GradientStop("100%", end)),
        default_text_color=text_color,
    )


def _solid(id: str, name: str, color: str, text_color: str) -> BackgroundPreset:
    return BackgroundPreset(id=id, name=name, type=SOLID, color=color, default_text_color=text_color)


BACKGROUNDS: Dict[str, BackgroundPreset] = {
    p.id: p
    for p in (
        _gradient("gradient-mono", "Midnight", "#1a1a1a", "#4a4a4a", "#ffffff"),
        _gradient("gradient-modern", "Vibe", "#ec4899", "#3b82f6", "#ffffff"),
        _gradient("gradient-fresh", "Ocean", "#14b8a6", "#06b6d4", "#ffffff"),
        _gradient("gradient-ossph", "OSSPH", "#E7F9FF", "#90C4E8", "#0060A0"),
        _solid("solid-lightblue", "Sky", "#87CEEB", "#1e3a8a"),
        _solid("solid-salmon", "Molty", "#fee2e2", "#BB2C2C"),
        _solid("solid-claude", "Claude", "#fde8e3", "#DE7356"),
        _solid("solid-gpt", "GPT", "#10a37f", "#ffffff"),
        _solid("solid-lightgray", "Minimal", "#f3f4f6", "#1f2937"),
        BackgroundPreset(id="transparent", name="Transparent", type=TRANSPARENT, default_text_color="#ffffff"),
    )
}

DEFAULT_BG = "gradient-mono"


def get_background(key: str) -> BackgroundPreset:
    """Look up a preset by id, falling back to the default for unknown keys."""
    return BACKGROUNDS.get(key or DEFAULT_BG, BACKGROUNDS[DEFAULT_BG])


def list_backgrounds() -> List[BackgroundPreset]:
    return list(BACKGROUNDS.values())
