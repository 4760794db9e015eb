# banner_service/routes/ui.py
from pathlib import Path
from typing import List, Optional

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from banner.backgrounds import list_backgrounds
from banner_service.config import Config
from banner_service.models.responses import BackgroundInfo

router = APIRouter()

INDEX_HTML = Path(__file__).resolve().parent.parent / "ui" / "index.html"

_cached_html: Optional[str] = None


@router.get("/", response_class=HTMLResponse)
def index():
    global _cached_html
    # re-read on every request while developing the page
    if _cached_html is None or Config.is_dev():
        _cached_html = INDEX_HTML.read_text(encoding="utf-8")
    return HTMLResponse(_cached_html)


@router.get("/backgrounds", response_model=List[BackgroundInfo])
def backgrounds():
    return [BackgroundInfo(id=bg.id, name=bg.name, type=bg.type) for bg in list_backgrounds()]
