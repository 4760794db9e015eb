# Width estimation and font-size fitting for the fixed banner canvas
import math
from typing import List, Optional, Sequence

from banner.types import HeaderSegment, VerticalLayout, TEXT

# === Canvas ===
WIDTH = 1280
HEIGHT = 304
MARGIN = 100
CONTENT_WIDTH = WIDTH - MARGIN * 2
VERTICAL_PAD = 50
AVAILABLE_HEIGHT = HEIGHT - VERTICAL_PAD * 2

# === Font sizing ===
BASE_FONT_SIZE = 192
MIN_FONT_SIZE = 24
SUBHEADER_RATIO = 0.4
LINE_GAP_RATIO = 1.0
SAFETY_MARGIN = 1.1

# Tuned by eye, not real glyph metrics. 0.65 is conservative for wide caps like 'A'.
CHAR_WIDTH_RATIO = 0.65
SPACE_WIDTH_RATIO = 0.25
EMOJI_WIDTH_RATIO = 1.3
IMAGE_MARGIN = 4
SEGMENT_GAP = 4


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def text_width(text: str, font_size: float) -> float:
    return sum(font_size * (SPACE_WIDTH_RATIO if ch == " " else CHAR_WIDTH_RATIO) for ch in text)


def image_slot_width(font_size: float) -> float:
    """Horizontal room reserved for an inline emoji or icon image."""
    return font_size * EMOJI_WIDTH_RATIO + IMAGE_MARGIN


def segment_width(segment: HeaderSegment, font_size: float) -> float:
    if segment.type == TEXT:
        return text_width(segment.value, font_size)
    return image_slot_width(font_size)


def estimate_width(segments: Sequence[HeaderSegment], font_size: float, positioned: bool = False) -> float:
    """
    Estimated rendered width of a line of segments.

    In positioned mode every segment is its own element, so a small gap is
    added between neighbours.
    """
    width = sum(segment_width(s, font_size) for s in segments)
    if positioned and len(segments) > 1:
        width += SEGMENT_GAP * (len(segments) - 1)
    return width


def fit_font_size(
    segments: Sequence[HeaderSegment],
    base_size: int,
    positioned: bool = False,
    content_width: float = CONTENT_WIDTH,
    min_size: int = MIN_FONT_SIZE,
) -> int:
    """
    Largest size not above `base_size` whose estimated width fits `content_width`.

    Sizes are only ever scaled down, and scaling stops at `min_size`; anything
    still overflowing at the minimum is clipped by the container.
    """
    width = estimate_width(segments, base_size, positioned)
    if width <= content_width:
        return base_size
    scaled = base_size * (content_width / (width * SAFETY_MARGIN))
    return min(base_size, max(min_size, round_half_up(scaled)))


def layout_vertical(
    header_size: int,
    subheader_size: Optional[int] = None,
    available_height: float = AVAILABLE_HEIGHT,
) -> VerticalLayout:
    """Scale header, gap and subheader together so the pair fits vertically."""
    if not subheader_size:
        return VerticalLayout(header_size=header_size)

    gap = round_half_up(subheader_size * LINE_GAP_RATIO)
    total = header_size + gap + subheader_size
    if total <= available_height:
        return VerticalLayout(header_size=header_size, subheader_size=subheader_size, gap=gap)

    scale = available_height / total
    return VerticalLayout(
        header_size=round_half_up(header_size * scale),
        subheader_size=round_half_up(subheader_size * scale),
        gap=round_half_up(gap * scale),
    )


def fit_banner(
    header: List[HeaderSegment],
    subheader: Optional[List[HeaderSegment]] = None,
    positioned: bool = False,
    base_size: int = BASE_FONT_SIZE,
) -> VerticalLayout:
    """Fit header (and optional subheader) to the content box and canvas height."""
    header_size = fit_font_size(header, base_size, positioned)
    if not subheader:
        return layout_vertical(header_size)

    sub_base = round_half_up(header_size * SUBHEADER_RATIO)
    sub_size = fit_font_size(subheader, sub_base, positioned)
    return layout_vertical(header_size, sub_size)


def line_centers(layout: VerticalLayout, height: float = HEIGHT):
    """Vertical centers (header_y, subheader_y) of the lines, block centered on the canvas."""
    if not layout.subheader_size:
        return height / 2, None
    total = layout.header_size + layout.gap + layout.subheader_size
    top = (height - total) / 2
    header_y = top + layout.header_size / 2
    sub_y = top + layout.header_size + layout.gap + layout.subheader_size / 2
    return header_y, sub_y
