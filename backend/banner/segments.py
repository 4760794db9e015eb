# Header text -> ordered text / emoji / icon segments
import re
from typing import List

import regex

from banner.types import HeaderSegment, TEXT, EMOJI, ICON

ICON_RE = re.compile(r"!\[([a-z0-9-]+)\](?:\((light|dark|auto)\))?")

ZWJ = "\u200d"
VS16 = "\ufe0f"
KEYCAP = "\u20e3"

_EMOJI_PRESENTATION = regex.compile(r"\p{Emoji_Presentation}")
_EMOJI = regex.compile(r"\p{Emoji}")
_EMOJI_MODIFIER = regex.compile(r"\p{Emoji_Modifier}")


def _is(pattern, ch: str) -> bool:
    return pattern.match(ch) is not None


def _is_regional_indicator(ch: str) -> bool:
    return 0x1F1E6 <= ord(ch) <= 0x1F1FF


def _emoji_unit_end(text: str, i: int) -> int:
    """
    Return the end index of a single emoji unit starting at i, or i if none.

    A unit is either an Emoji_Presentation codepoint, or an Emoji codepoint
    followed by VS16. Flags (two regional indicators), keycaps and skin-tone
    modifiers stay attached to their base.
    """
    n = len(text)
    ch = text[i]

    if _is_regional_indicator(ch) and i + 1 < n and _is_regional_indicator(text[i + 1]):
        return i + 2

    if _is(_EMOJI_PRESENTATION, ch):
        end = i + 1
        if end < n and text[end] == VS16:
            end += 1
    elif _is(_EMOJI, ch) and i + 1 < n and text[i + 1] == VS16:
        end = i + 2
        if end < n and text[end] == KEYCAP:
            end += 1
    else:
        return i

    while end < n and _is(_EMOJI_MODIFIER, text[end]) and not _is(_EMOJI_MODIFIER, ch):
        end += 1
    return end


def _emoji_sequence_end(text: str, i: int) -> int:
    """Extend an emoji unit through any `ZWJ + unit` continuations."""
    end = _emoji_unit_end(text, i)
    if end == i:
        return i
    while end + 1 < len(text) and text[end] == ZWJ:
        next_end = _emoji_unit_end(text, end + 1)
        if next_end == end + 1:
            break
        end = next_end
    return end


def parse_emoji_in_text(text: str) -> List[HeaderSegment]:
    """Split a plain string into text and emoji segments, left to right."""
    segments: List[HeaderSegment] = []
    run_start = 0
    i = 0
    while i < len(text):
        end = _emoji_sequence_end(text, i)
        if end == i:
            i += 1
            continue
        if i > run_start:
            segments.append(HeaderSegment(type=TEXT, value=text[run_start:i]))
        segments.append(HeaderSegment(type=EMOJI, value=text[i:end]))
        run_start = i = end

    if run_start < len(text):
        segments.append(HeaderSegment(type=TEXT, value=text[run_start:]))
    return segments


def parse_header(text: str) -> List[HeaderSegment]:
    """
    Parse header text into segments.

    Icon markup (`![slug]` or `![slug](theme)`) is matched first; the gaps
    between icons are then scanned for emoji. Everything else stays as text,
    character for character.
    """
    if not text:
        return []

    segments: List[HeaderSegment] = []
    last = 0
    for match in ICON_RE.finditer(text):
        if match.start() > last:
            segments.extend(parse_emoji_in_text(text[last:match.start()]))
        segments.append(HeaderSegment(
            type=ICON,
            value=match.group(1),
            theme=match.group(2) or "auto",
            raw=match.group(0),
        ))
        last = match.end()

    if last < len(text):
        segments.extend(parse_emoji_in_text(text[last:]))
    return segments


def has_icons(segments: List[HeaderSegment]) -> bool:
    return any(s.type == ICON for s in segments)


def emoji_to_codepoint(emoji: str) -> str:
    """'🚀' -> '1f680', '👨‍💻' -> '1f468-200d-1f4bb' (variation selectors dropped)."""
    return "-".join(format(ord(ch), "x") for ch in emoji if ch != VS16)
