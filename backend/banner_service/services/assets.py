# Process-wide asset resolver shared by all requests
from typing import Optional

from banner.assets import AssetResolver, HttpAssetFetcher
from banner_service.config import Config

_resolver: Optional[AssetResolver] = None


def get_resolver() -> AssetResolver:
    """FastAPI dependency; tests override it with a resolver backed by a fake fetcher."""
    global _resolver
    if _resolver is None:
        _resolver = AssetResolver(
            fetcher=HttpAssetFetcher(timeout=Config.FETCH_TIMEOUT),
            emoji_base_url=Config.EMOJI_CDN_URL,
            icon_base_url=Config.ICON_CDN_URL,
            fonts_css_url=Config.FONTS_CSS_URL,
        )
    return _resolver
