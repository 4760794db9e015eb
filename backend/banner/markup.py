# Segments -> inline XHTML (flow mode) or positioned SVG elements
import logging
from typing import List, Optional, Sequence

from banner.assets import AssetResolver, to_data_uri
from banner.layout import WIDTH, estimate_width, segment_width, image_slot_width, SEGMENT_GAP
from banner.sanitize import escape_xml
from banner.theme import icon_color
from banner.types import HeaderSegment, TEXT, EMOJI, ICON

logger = logging.getLogger(__name__)

SVG_MIME = "image/svg+xml"


def fmt(value: float) -> str:
    """Compact number for attributes: 12 instead of 12.0, at most two decimals."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}".rstrip("0").rstrip(".")


def _inline_img(svg_data: bytes, font_size: int) -> str:
    return (
        f'<img src="{to_data_uri(svg_data, SVG_MIME)}" '
        f'style="display:inline-block;width:{font_size}px;height:{font_size}px;'
        f'vertical-align:middle;margin:0 0.1em;" alt="" />'
    )


async def _resolve_segment(
    segment: HeaderSegment,
    resolver: AssetResolver,
    background_theme: Optional[str],
) -> Optional[bytes]:
    if segment.type == EMOJI:
        return await resolver.resolve_emoji(segment.value)
    if segment.type == ICON:
        return await resolver.resolve_icon(segment.value, icon_color(segment.theme, background_theme))
    return None


async def render_segments_html(
    segments: Sequence[HeaderSegment],
    font_size: int,
    resolver: AssetResolver,
    background_theme: Optional[str] = None,
) -> str:
    """
    Inline XHTML for one line. Emoji and icons become <img> data URIs.
    A missing emoji falls back to its literal text; a missing icon is dropped.
    """
    parts: List[str] = []
    for segment in segments:
        if segment.type == TEXT:
            parts.append(escape_xml(segment.value))
            continue

        svg_data = await _resolve_segment(segment, resolver, background_theme)
        if svg_data is not None:
            parts.append(_inline_img(svg_data, font_size))
        elif segment.type == EMOJI:
            parts.append(escape_xml(segment.value))
        else:
            logger.debug("Icon '%s' not found, omitting", segment.value)
    return "".join(parts)


def _text_element(text: str, x: float, y: float, font_size: int, font_family: str, font_weight: int, color: str) -> str:
    return (
        f'<text x="{fmt(x)}" y="{fmt(y)}" font-family="{escape_xml(font_family)}" '
        f'font-size="{font_size}" font-weight="{font_weight}" fill="{escape_xml(color)}" '
        f'dominant-baseline="central" xml:space="preserve">{escape_xml(text)}</text>'
    )


def _image_element(svg_data: bytes, x: float, y: float, size: int) -> str:
    return (
        f'<image x="{fmt(x)}" y="{fmt(y)}" width="{size}" height="{size}" '
        f'href="{to_data_uri(svg_data, SVG_MIME)}" />'
    )


async def render_segments_positioned(
    segments: Sequence[HeaderSegment],
    font_size: int,
    center_y: float,
    resolver: AssetResolver,
    font_family: str,
    color: str,
    font_weight: int = 700,
    background_theme: Optional[str] = None,
) -> str:
    """
    One SVG element per segment, laid out left to right and centered as a
    block on the canvas. Positions follow the same width estimate used for
    font fitting.
    """
    total = estimate_width(segments, font_size, positioned=True)
    cursor = (WIDTH - total) / 2
    elements: List[str] = []

    for segment in segments:
        width = segment_width(segment, font_size)
        if segment.type == TEXT:
            elements.append(_text_element(segment.value, cursor, center_y, font_size, font_family, font_weight, color))
        else:
            svg_data = await _resolve_segment(segment, resolver, background_theme)
            if svg_data is not None:
                image_x = cursor + (image_slot_width(font_size) - font_size) / 2
                elements.append(_image_element(svg_data, image_x, center_y - font_size / 2, font_size))
            elif segment.type == EMOJI:
                elements.append(_text_element(segment.value, cursor, center_y, font_size, font_family, font_weight, color))
        cursor += width + SEGMENT_GAP

    return "\n".join(elements)
