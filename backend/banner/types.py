# banner/types.py
from dataclasses import dataclass
from typing import Optional, Tuple

GRADIENT = "gradient"
SOLID = "solid"
TRANSPARENT = "transparent"

TEXT = "text"
EMOJI = "emoji"
ICON = "icon"

WATERMARK_POSITIONS = ("bottom-right", "bottom-left", "top-right", "top-left")
DEFAULT_WATERMARK_POSITION = "bottom-right"


@dataclass(frozen=True)
class GradientStop:
    offset: str
    color: str


@dataclass(frozen=True)
class BackgroundPreset:
    id: str
    name: str
    type: str
    default_text_color: str
    stops: Tuple[GradientStop, ...] = ()
    color: Optional[str] = None

    def __post_init__(self):
        if self.type == GRADIENT and len(self.stops) < 2:
            raise ValueError(f"Gradient preset '{self.id}' needs at least two stops")
        if self.type == SOLID and not self.color:
            raise ValueError(f"Solid preset '{self.id}' needs a color")
        if self.type not in (GRADIENT, SOLID, TRANSPARENT):
            raise ValueError(f"Unknown background type '{self.type}'")


@dataclass(frozen=True)
class HeaderSegment:
    """One atomic piece of header content: a text run, an emoji, or an icon."""
    type: str
    value: str
    theme: Optional[str] = None
    # exact source slice, e.g. "![github](dark)" for an icon
    raw: str = ""

    def __post_init__(self):
        if not self.raw:
            object.__setattr__(self, "raw", self.value)


@dataclass(frozen=True)
class BannerOptions:
    header: str
    background: BackgroundPreset
    text_color: str
    font_family: str
    subheader: Optional[str] = None
    subheader_color: Optional[str] = None
    header_font: Optional[str] = None
    subheader_font: Optional[str] = None
    show_watermark: bool = False
    watermark_position: str = DEFAULT_WATERMARK_POSITION


@dataclass(frozen=True)
class VerticalLayout:
    header_size: int
    subheader_size: int = 0
    gap: int = 0


@dataclass(frozen=True)
class RenderedContent:
    """
    Segment markup ready for assembly.

    With `flow` set, each line is inline XHTML for a foreignObject block;
    otherwise each line is a run of absolutely positioned SVG elements.
    """
    flow: bool
    header: str
    subheader: Optional[str] = None
    font_css: str = ""
