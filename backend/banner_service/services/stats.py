# Redis-backed tracking of which GitHub repositories embed banners
import logging
import re
from typing import List, Optional

import redis.asyncio as redis
from redis.exceptions import RedisError

from banner_service.config import Config

logger = logging.getLogger(__name__)

TRACKED_REPOS_KEY = "repos:tracked"

REFERER_RE = re.compile(r"^https?://(?:www\.)?github\.com/([A-Za-z0-9-]+)/([A-Za-z0-9._-]+)")


def repository_from_referer(referer: Optional[str]) -> Optional[str]:
    """'https://github.com/owner/repo/blob/main/README.md' -> 'owner/repo'."""
    if not referer:
        return None
    match = REFERER_RE.match(referer)
    if not match:
        return None
    repo = match.group(2)
    if repo.endswith(".git"):
        repo = repo[:-4]
    return f"{match.group(1)}/{repo}".lower() if repo else None


class StatsTracker:
    def __init__(self, client=None):
        self.client = client
        self.enabled = client is not None

    async def connect(self, url: str) -> bool:
        """Connect and ping; on failure stats stay disabled."""
        try:
            self.client = redis.from_url(url, decode_responses=True)
            await self.client.ping()
        except (RedisError, OSError, ValueError) as e:
            logger.error("Redis connection failed, stats tracking disabled: %s", e)
            await self.close()
            return False
        self.enabled = True
        logger.info("Stats tracking: ENABLED (view at /stats)")
        return True

    async def record_repository(self, repo: Optional[str]) -> None:
        if not self.enabled or not repo:
            return
        try:
            await self.client.sadd(TRACKED_REPOS_KEY, repo)
        except (RedisError, OSError) as e:
            logger.error("Failed to record repository %s: %s", repo, e)

    async def record_referer(self, referer: Optional[str]) -> None:
        await self.record_repository(repository_from_referer(referer))

    async def list_repositories(self) -> List[str]:
        members = await self.client.smembers(TRACKED_REPOS_KEY)
        return sorted(m.decode() if isinstance(m, bytes) else m for m in members)

    async def close(self) -> None:
        if self.client is not None:
            try:
                await self.client.aclose()
            except (RedisError, OSError) as e:
                logger.warning("Error closing Redis connection: %s", e)
        self.client = None
        self.enabled = False


_tracker = StatsTracker()


def get_stats_tracker() -> StatsTracker:
    return _tracker


async def init_stats() -> None:
    if not Config.ENABLE_STATS:
        logger.info("Stats tracking: DISABLED (privacy-first default)")
        return
    if not Config.REDIS_URL:
        logger.warning("Stats tracking enabled but REDIS_URL not configured. Stats will be disabled.")
        return
    await _tracker.connect(Config.REDIS_URL)


async def close_stats() -> None:
    await _tracker.close()
