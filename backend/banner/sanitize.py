# banner/sanitize.py
import re

XML_ESCAPE_MAP = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&apos;",
}

_XML_SPECIAL_RE = re.compile(r"[&<>\"']")
# anything outside the XML 1.0 Char production
_XML_INVALID_RE = re.compile(r"[^\x09\x0a\x0d\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")
_HTML_TAG_RE = re.compile(r"<[^>]*>")
_ICON_TOKEN_RE = re.compile(r"!\[[a-z0-9-]+\](?:\((?:light|dark|auto)\))?", re.IGNORECASE)
_FONT_NAME_RE = re.compile(r"[^a-zA-Z0-9\s+]")
_ICON_SLUG_RE = re.compile(r"[^a-z0-9-]")
_HEX_COLOR_RE = re.compile(r"[0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8}")

HEADER_MAX_LENGTH = 50
SUBHEADER_MAX_LENGTH = 100


def strip_invalid_xml_chars(text: str) -> str:
    return _XML_INVALID_RE.sub("", text)


def escape_xml(text: str) -> str:
    return _XML_SPECIAL_RE.sub(lambda m: XML_ESCAPE_MAP[m.group(0)], strip_invalid_xml_chars(text))


def _drop_unterminated_icon(text: str) -> str:
    """Remove a trailing `![...` or `![...](...` token that lost its closing bracket."""
    last_open = text.rfind("![")
    if last_open == -1:
        return text
    tail = text[last_open:]
    if "]" not in tail:
        return text[:last_open]
    theme_start = tail.find("](")
    if theme_start != -1 and ")" not in tail[theme_start + 2:]:
        return text[:last_open]
    return text


def sanitize_header(raw: str, max_length: int = HEADER_MAX_LENGTH) -> str:
    """
    Strip HTML tags and cap the visible length of a header.

    Icon markup renders as an image, so it is not counted toward the limit
    and is never split by truncation.
    """
    stripped = strip_invalid_xml_chars(_HTML_TAG_RE.sub("", raw or ""))
    display_text = _ICON_TOKEN_RE.sub("", stripped)
    if len(display_text) <= max_length:
        return stripped

    out = []
    count = 0
    i = 0
    while i < len(stripped) and count < max_length:
        icon = _ICON_TOKEN_RE.match(stripped, i)
        if icon:
            out.append(icon.group(0))
            i = icon.end()
            continue
        out.append(stripped[i])
        count += 1
        i += 1

    return _drop_unterminated_icon("".join(out)).rstrip()


def sanitize_font_name(raw: str, max_length: int = 50) -> str:
    """Only alphanumerics, spaces and '+' survive (Google Fonts naming)."""
    cleaned = _FONT_NAME_RE.sub("", raw or "").strip()
    return cleaned[:max_length]


def sanitize_icon_slug(raw: str, max_length: int = 50) -> str:
    cleaned = _ICON_SLUG_RE.sub("", (raw or "").lower())
    return cleaned[:max_length]


def is_valid_hex_color(value: str) -> bool:
    return bool(value) and _HEX_COLOR_RE.fullmatch(value) is not None
