# banner_service/routes/banner.py

import logging

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Request, Response

from banner.assets import AssetResolver
from banner.builder import build_banner_svg
from banner_service.config import Config
from banner_service.models.requests import BannerQuery
from banner_service.services.assets import get_resolver
from banner_service.services.options import build_banner_options
from banner_service.services.stats import StatsTracker, get_stats_tracker

logger = logging.getLogger(__name__)

router = APIRouter()

DEV_CACHE_CONTROL = "no-cache, no-store, must-revalidate"
PROD_CACHE_CONTROL = "public, max-age=86400, s-maxage=86400"


@router.get("/banner")
async def banner(
    request: Request,
    background_tasks: BackgroundTasks,
    query: BannerQuery = Depends(),
    resolver: AssetResolver = Depends(get_resolver),
    tracker: StatsTracker = Depends(get_stats_tracker),
):
    try:
        options = build_banner_options(query)
        svg = await build_banner_svg(options, resolver)
    except HTTPException:
        raise
    except Exception:
        logger.exception("Banner rendering failed")
        raise HTTPException(status_code=500, detail="An internal server error occurred")

    # runs after the response is sent
    background_tasks.add_task(tracker.record_referer, request.headers.get("referer"))

    cache_control = DEV_CACHE_CONTROL if Config.is_dev() else PROD_CACHE_CONTROL
    return Response(content=svg, media_type="image/svg+xml", headers={"Cache-Control": cache_control})
