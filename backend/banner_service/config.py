# ENV vars for the banner service
import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    ENVIRONMENT = os.getenv("APP_ENV", "development")
    DEBUG = os.getenv("DEBUG", "false").lower() == "true"
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "3000"))

    ENABLE_STATS = os.getenv("ENABLE_STATS", "false").lower() == "true"
    REDIS_URL = os.getenv("REDIS_URL")

    EMOJI_CDN_URL = os.getenv("EMOJI_CDN_URL", "https://cdn.jsdelivr.net/gh/jdecked/twemoji@latest/assets/svg")
    ICON_CDN_URL = os.getenv("ICON_CDN_URL", "https://cdn.simpleicons.org")
    FONTS_CSS_URL = os.getenv("FONTS_CSS_URL", "https://fonts.googleapis.com/css2")
    FETCH_TIMEOUT = float(os.getenv("FETCH_TIMEOUT", "10"))

    DEFAULT_FONT_FAMILY = "Inter, system-ui, -apple-system, sans-serif"

    @classmethod
    def is_dev(cls) -> bool:
        return not cls.ENVIRONMENT or cls.ENVIRONMENT == "development"

    @classmethod
    def log_level(cls) -> str:
        return os.getenv("LOG_LEVEL", "DEBUG" if cls.is_dev() or cls.DEBUG else "INFO").upper()
