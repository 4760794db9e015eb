# Remote SVG / font fetching with process-lifetime caches
import asyncio
import base64
import logging
import re
import threading
from typing import Dict, Iterable, List, Optional, Protocol, Tuple
from urllib.parse import quote

import httpx

from banner.sanitize import sanitize_icon_slug
from banner.segments import emoji_to_codepoint

logger = logging.getLogger(__name__)

# Google Fonts picks the file format from the User-Agent; this one gets woff2
BROWSER_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0 Safari/537.36"
)

FONT_URL_RE = re.compile(r"url\((['\"]?)(https?://[^)'\"]+)\1\)")

FONT_MIME_TYPES = {
    "woff2": "font/woff2",
    "woff": "font/woff",
    "ttf": "font/ttf",
    "otf": "font/otf",
}


class AssetCache:
    """Thread-safe key -> bytes map. No eviction; entries live as long as the cache."""

    def __init__(self, entries: Optional[Dict[str, bytes]] = None):
        self._lock = threading.Lock()
        self._entries: Dict[str, bytes] = dict(entries or {})

    def get(self, key: str) -> Optional[bytes]:
        with self._lock:
            return self._entries.get(key)

    def put(self, key: str, value: bytes) -> None:
        with self._lock:
            self._entries[key] = value

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


class AssetFetcher(Protocol):
    async def fetch(self, url: str, headers: Optional[Dict[str, str]] = None) -> Optional[bytes]:
        ...


class HttpAssetFetcher:
    """Fetches assets over HTTP. Never raises: failures are logged and return None."""

    def __init__(self, timeout: float = 10.0, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.timeout = timeout
        self.transport = transport

    async def fetch(self, url: str, headers: Optional[Dict[str, str]] = None) -> Optional[bytes]:
        try:
            async with httpx.AsyncClient(follow_redirects=True, transport=self.transport) as client:
                resp = await client.get(url, headers=headers, timeout=self.timeout)
        except httpx.HTTPError as e:
            logger.warning("Asset request failed for %s: %s", url, e)
            return None

        if resp.status_code < 200 or resp.status_code >= 300:
            logger.warning("Asset request for %s returned HTTP %s", url, resp.status_code)
            return None
        return resp.content


def to_data_uri(payload: bytes, mime: str) -> str:
    return f"data:{mime};base64,{base64.b64encode(payload).decode('ascii')}"


def _font_mime(url: str) -> str:
    ext = url.split("?", 1)[0].rsplit(".", 1)[-1].lower()
    return FONT_MIME_TYPES.get(ext, "application/octet-stream")


class AssetResolver:
    def __init__(
        self,
        fetcher: AssetFetcher,
        emoji_base_url: str,
        icon_base_url: str,
        fonts_css_url: str,
        emoji_cache: Optional[AssetCache] = None,
        icon_cache: Optional[AssetCache] = None,
        font_cache: Optional[AssetCache] = None,
    ):
        self.fetcher = fetcher
        self.emoji_base_url = emoji_base_url.rstrip("/")
        self.icon_base_url = icon_base_url.rstrip("/")
        self.fonts_css_url = fonts_css_url
        self.emoji_cache = emoji_cache if emoji_cache is not None else AssetCache()
        self.icon_cache = icon_cache if icon_cache is not None else AssetCache()
        self.font_cache = font_cache if font_cache is not None else AssetCache()

    async def _cached_fetch(
        self,
        cache: AssetCache,
        key: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
    ) -> Optional[bytes]:
        cached = cache.get(key)
        if cached is not None:
            logger.debug("Asset cache hit: %s", key)
            return cached
        payload = await self.fetcher.fetch(url, headers=headers)
        if payload is not None:
            cache.put(key, payload)
        return payload

    async def resolve_emoji(self, emoji: str) -> Optional[bytes]:
        """Twemoji SVG for an emoji segment, or None if unavailable."""
        key = emoji_to_codepoint(emoji)
        if not key:
            return None
        return await self._cached_fetch(self.emoji_cache, key, f"{self.emoji_base_url}/{key}.svg")

    async def resolve_icon(self, slug: str, color: str) -> Optional[bytes]:
        """Simple Icons SVG for a slug drawn in `color` (hex without '#')."""
        clean_slug = sanitize_icon_slug(slug)
        if not clean_slug:
            return None
        color = color.lstrip("#")
        return await self._cached_fetch(
            self.icon_cache,
            f"{clean_slug}-{color}",
            f"{self.icon_base_url}/{clean_slug}/{color}",
        )

    def font_stylesheet_url(self, font_names: Iterable[str]) -> Optional[str]:
        families: List[str] = []
        for name in font_names:
            if name and name not in families:
                families.append(name)
        if not families:
            return None
        query = "&".join(f"family={quote(name, safe='')}:wght@400;700" for name in families)
        return f"{self.fonts_css_url}?{query}&display=swap"

    async def _inline_font_files(self, css: str) -> Tuple[str, bool]:
        """Rewrite remote font references to data URIs; the flag is False if any fetch failed."""
        urls: List[str] = []
        for match in FONT_URL_RE.finditer(css):
            if match.group(2) not in urls:
                urls.append(match.group(2))
        if not urls:
            return css, True

        results = await asyncio.gather(
            *(self._cached_fetch(self.font_cache, url, url) for url in urls),
            return_exceptions=True,
        )

        inlined: Dict[str, str] = {}
        for url, result in zip(urls, results):
            if isinstance(result, BaseException) or result is None:
                logger.warning("Could not inline font file %s; keeping remote reference", url)
                continue
            inlined[url] = to_data_uri(result, _font_mime(url))

        def _replace(match: re.Match) -> str:
            data_uri = inlined.get(match.group(2))
            return f"url({data_uri})" if data_uri else match.group(0)

        return FONT_URL_RE.sub(_replace, css), len(inlined) == len(urls)

    async def resolve_font_css(self, font_names: Iterable[str]) -> str:
        """
        Stylesheet for the given Google Fonts families with every font file
        embedded as a data URI. Returns "" if the stylesheet can't be fetched.
        """
        url = self.font_stylesheet_url(font_names)
        if url is None:
            return ""

        cached = self.font_cache.get(url)
        if cached is not None:
            return cached.decode("utf-8")

        logger.info("Fetching font stylesheet: %s", url)
        payload = await self.fetcher.fetch(url, headers={"User-Agent": BROWSER_USER_AGENT})
        if payload is None:
            return ""

        css, complete = await self._inline_font_files(payload.decode("utf-8", errors="replace"))
        if complete:
            self.font_cache.put(url, css.encode("utf-8"))
        return css
