import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from banner_service.config import Config
from banner_service.models.responses import HealthResponse, StatsInfo
from banner_service.routes import banner, stats, ui
from banner_service.services.stats import get_stats_tracker, init_stats, close_stats

logging.basicConfig(
    level=Config.log_level(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_stats()
    logger.info("GitHub Repo Banner Service on http://%s:%s (%s)", Config.HOST, Config.PORT, Config.ENVIRONMENT)
    yield
    await close_stats()


app = FastAPI(title="GitHub Repo Banner Service", lifespan=lifespan)

# Banners are embedded from anywhere
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(ui.router)
app.include_router(banner.router)
app.include_router(stats.router)


@app.get("/health", response_model=HealthResponse, response_model_exclude_none=True)
def health():
    enabled = get_stats_tracker().enabled
    return HealthResponse(
        status="ok",
        timestamp=datetime.now(timezone.utc).isoformat(),
        stats=StatsInfo(enabled=enabled, endpoint="/stats" if enabled else None),
    )


def run():
    uvicorn.run("banner_service.main:app", host=Config.HOST, port=Config.PORT, reload=Config.is_dev())
