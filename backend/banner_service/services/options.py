# Raw query parameters -> validated BannerOptions
from typing import Optional

from banner.backgrounds import get_background
from banner.sanitize import (
    sanitize_header,
    sanitize_font_name,
    is_valid_hex_color,
    SUBHEADER_MAX_LENGTH,
)
from banner.types import BannerOptions, WATERMARK_POSITIONS, DEFAULT_WATERMARK_POSITION
from banner_service.config import Config
from banner_service.models.requests import BannerQuery


def _hex_or(value: Optional[str], fallback: Optional[str]) -> Optional[str]:
    if value and is_valid_hex_color(value):
        return f"#{value}"
    return fallback


def _font_or_none(value: Optional[str]) -> Optional[str]:
    if not value:
        return None
    # Google Fonts URLs use '+' for spaces
    name = " ".join(sanitize_font_name(value).replace("+", " ").split())
    return name or None


def build_banner_options(query: BannerQuery) -> BannerOptions:
    """Sanitize every parameter, substituting defaults for anything invalid."""
    background = get_background(query.bg)
    text_color = _hex_or(query.color, background.default_text_color)
    subheader = sanitize_header(query.subheader, SUBHEADER_MAX_LENGTH) if query.subheader else None

    position = (query.watermark or "").lower()
    if position not in WATERMARK_POSITIONS:
        position = DEFAULT_WATERMARK_POSITION

    return BannerOptions(
        header=sanitize_header(query.header or "Hello World"),
        subheader=subheader or None,
        background=background,
        text_color=text_color,
        subheader_color=_hex_or(query.subheadercolor, None),
        font_family=Config.DEFAULT_FONT_FAMILY,
        header_font=_font_or_none(query.headerfont),
        subheader_font=_font_or_none(query.subheaderfont),
        show_watermark=query.support == "true",
        watermark_position=position,
    )
