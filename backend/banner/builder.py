# Banner pipeline: parse -> fit -> render segments -> assemble
import logging
from typing import List, Optional

from banner.assets import AssetResolver
from banner.layout import fit_banner, line_centers
from banner.markup import render_segments_html, render_segments_positioned
from banner.segments import parse_header, has_icons
from banner.svg_template import assemble_svg, font_family_for
from banner.theme import detect_background_theme
from banner.types import BannerOptions, HeaderSegment, RenderedContent, ICON

logger = logging.getLogger(__name__)


def uses_flow_layout(*lines: Optional[List[HeaderSegment]]) -> bool:
    """Icons need the HTML flow renderer; plain text and emoji are positioned directly."""
    return any(has_icons(line) for line in lines if line)


def _needs_background_theme(*lines: Optional[List[HeaderSegment]]) -> bool:
    return any(s.type == ICON and s.theme == "auto" for line in lines if line for s in line)


async def build_banner_svg(options: BannerOptions, resolver: AssetResolver) -> str:
    """Render a complete banner SVG document for already-sanitized options."""
    header_segments = parse_header(options.header)
    sub_segments = parse_header(options.subheader) if options.subheader else None
    flow = uses_flow_layout(header_segments, sub_segments)

    layout = fit_banner(header_segments, sub_segments, positioned=not flow)
    background_theme = (
        detect_background_theme(options.background)
        if _needs_background_theme(header_segments, sub_segments)
        else None
    )
    logger.debug(
        "Banner layout: flow=%s header=%spx subheader=%spx gap=%spx",
        flow, layout.header_size, layout.subheader_size, layout.gap,
    )

    sub_markup = None
    if flow:
        header_markup = await render_segments_html(header_segments, layout.header_size, resolver, background_theme)
        if sub_segments:
            sub_markup = await render_segments_html(sub_segments, layout.subheader_size, resolver, background_theme)
    else:
        header_y, sub_y = line_centers(layout)
        header_markup = await render_segments_positioned(
            header_segments,
            layout.header_size,
            header_y,
            resolver,
            font_family=font_family_for(options.header_font, options.font_family),
            color=options.text_color,
            font_weight=700,
        )
        if sub_segments:
            sub_markup = await render_segments_positioned(
                sub_segments,
                layout.subheader_size,
                sub_y,
                resolver,
                font_family=font_family_for(options.subheader_font, options.font_family),
                color=options.subheader_color or options.text_color,
                font_weight=400,
            )

    fonts = [f for f in (options.header_font, options.subheader_font) if f]
    font_css = await resolver.resolve_font_css(fonts) if fonts else ""

    content = RenderedContent(flow=flow, header=header_markup, subheader=sub_markup, font_css=font_css)
    return assemble_svg(options, layout, content)
