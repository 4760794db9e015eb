# banner_service/models/requests.py
from pydantic import BaseModel
from typing import Optional


class BannerQuery(BaseModel):
    """Raw /banner query parameters, before sanitization."""
    header: str = "Hello World"
    subheader: Optional[str] = None
    bg: Optional[str] = None
    color: Optional[str] = None
    subheadercolor: Optional[str] = None
    headerfont: Optional[str] = None
    subheaderfont: Optional[str] = None
    support: Optional[str] = None
    watermark: Optional[str] = None
