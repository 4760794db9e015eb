# banner_service/routes/stats.py

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from redis.exceptions import RedisError

from banner_service.models.responses import StatsResponse
from banner_service.services.stats import StatsTracker, get_stats_tracker

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/stats", response_model=StatsResponse, response_model_exclude_none=True)
async def stats(tracker: StatsTracker = Depends(get_stats_tracker)):
    if not tracker.enabled:
        return StatsResponse(enabled=False, message="Stats tracking is disabled")

    try:
        repositories = await tracker.list_repositories()
    except (RedisError, OSError) as e:
        logger.error("Error fetching stats: %s", e)
        return JSONResponse(
            status_code=500,
            content={"enabled": True, "error": "Failed to fetch stats", "message": "Redis connection issue"},
        )

    return StatsResponse(
        enabled=True,
        totalRepositories=len(repositories),
        repositories=repositories,
        note="Only tracking public GitHub repositories using this service",
    )
