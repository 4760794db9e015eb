# banner/svg_template.py
from typing import List, Optional

from banner.layout import WIDTH, HEIGHT, MARGIN, VERTICAL_PAD
from banner.markup import fmt
from banner.sanitize import escape_xml
from banner.types import (
    BackgroundPreset,
    BannerOptions,
    RenderedContent,
    VerticalLayout,
    GRADIENT,
    TRANSPARENT,
    WATERMARK_POSITIONS,
    DEFAULT_WATERMARK_POSITION,
)

GRADIENT_ID = "bg-gradient"
FALLBACK_FILL = "#f3f4f6"

WATERMARK_TEXT = "made with ghrb.waren.build"
WATERMARK_FONT_SIZE = 16
WATERMARK_PAD_X = 8
WATERMARK_PAD_Y = 6


def font_family_for(override: Optional[str], base: str) -> str:
    """CSS font-family list with an optional web font in front of the base stack."""
    return f"'{override}', {base}" if override else base


def build_gradient_def(bg: BackgroundPreset) -> str:
    if bg.type != GRADIENT or not bg.stops:
        return ""
    stops = "".join(
        f'<stop offset="{escape_xml(s.offset)}" stop-color="{escape_xml(s.color)}" />' for s in bg.stops
    )
    return f'<linearGradient id="{GRADIENT_ID}" x1="0" y1="0" x2="1" y2="0">{stops}</linearGradient>'


def build_background(bg: BackgroundPreset) -> str:
    if bg.type == TRANSPARENT:
        return f'<rect width="{WIDTH}" height="{HEIGHT}" fill="none" />'
    fill = f"url(#{GRADIENT_ID})" if bg.type == GRADIENT else (bg.color or FALLBACK_FILL)
    return f'<rect width="{WIDTH}" height="{HEIGHT}" fill="{escape_xml(fill)}" />'


def build_watermark(position: str = DEFAULT_WATERMARK_POSITION) -> str:
    """Small credit badge in one of the four corners."""
    if position not in WATERMARK_POSITIONS:
        position = DEFAULT_WATERMARK_POSITION
    vertical, horizontal = position.split("-")

    text_width = len(WATERMARK_TEXT) * WATERMARK_FONT_SIZE * 0.55
    rect_width = text_width + WATERMARK_PAD_X * 2
    rect_height = WATERMARK_FONT_SIZE + WATERMARK_PAD_Y * 2
    rect_x = WIDTH - rect_width if horizontal == "right" else 0
    rect_y = HEIGHT - rect_height if vertical == "bottom" else 0

    if horizontal == "right":
        text_x, anchor = rect_x + WATERMARK_PAD_X + text_width, "end"
    else:
        text_x, anchor = rect_x + WATERMARK_PAD_X, "start"
    text_y = rect_y + WATERMARK_PAD_Y + WATERMARK_FONT_SIZE * 0.8

    return (
        f'<g class="watermark" opacity="0.6">\n'
        f'  <rect x="{fmt(rect_x)}" y="{fmt(rect_y)}" width="{fmt(rect_width)}" height="{fmt(rect_height)}" '
        f'fill="#000000" fill-opacity="0.3" />\n'
        f'  <text x="{fmt(text_x)}" y="{fmt(text_y)}" text-anchor="{anchor}" font-family="monospace, sans-serif" '
        f'font-size="{WATERMARK_FONT_SIZE}" font-weight="500" fill="#f5f5f5">{WATERMARK_TEXT}</text>\n'
        f'</g>'
    )


def build_flow_content(options: BannerOptions, layout: VerticalLayout, content: RenderedContent) -> str:
    """foreignObject with an XHTML flex column; the browser lays out text and inline images."""
    header_family = escape_xml(font_family_for(options.header_font, options.font_family))
    lines: List[str] = [
        f'<div style="font-family:{header_family};font-size:{layout.header_size}px;font-weight:700;'
        f'color:{escape_xml(options.text_color)};line-height:1;text-align:center;white-space:nowrap;">'
        f'{content.header}</div>'
    ]
    padding = f"0 {MARGIN}px"
    direction = ""
    if content.subheader is not None and layout.subheader_size:
        sub_family = escape_xml(font_family_for(options.subheader_font, options.font_family))
        sub_color = escape_xml(options.subheader_color or options.text_color)
        lines.append(
            f'<div style="font-family:{sub_family};font-size:{layout.subheader_size}px;font-weight:400;'
            f'color:{sub_color};line-height:1;text-align:center;white-space:nowrap;margin-top:{layout.gap}px;">'
            f'{content.subheader}</div>'
        )
        padding = f"{VERTICAL_PAD}px {MARGIN}px"
        direction = "flex-direction:column;"

    body = "\n  ".join(lines)
    return (
        f'<foreignObject x="0" y="0" width="{WIDTH}" height="{HEIGHT}">\n'
        f'<div xmlns="http://www.w3.org/1999/xhtml" style="width:{WIDTH}px;height:{HEIGHT}px;display:flex;'
        f'{direction}align-items:center;justify-content:center;padding:{padding};box-sizing:border-box;">\n'
        f'  {body}\n'
        f'</div>\n'
        f'</foreignObject>'
    )


def assemble_svg(options: BannerOptions, layout: VerticalLayout, content: RenderedContent) -> str:
    """
    Final document: defs, background rect, content, optional watermark.
    Always in that order.
    """
    defs = build_gradient_def(options.background)
    if content.font_css:
        css = content.font_css.replace("]]>", "]]]]><![CDATA[>")
        defs += f"<style><![CDATA[{css}]]></style>"

    if content.flow:
        body = build_flow_content(options, layout, content)
    else:
        body = content.header
        if content.subheader:
            body += "\n" + content.subheader

    parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{WIDTH}" height="{HEIGHT}" viewBox="0 0 {WIDTH} {HEIGHT}">',
        f"<defs>{defs}</defs>",
        build_background(options.background),
        body,
    ]
    if options.show_watermark:
        parts.append(build_watermark(options.watermark_position))
    parts.append("</svg>")
    return "\n".join(parts)
