from pydantic import BaseModel
from typing import List, Optional


class StatsInfo(BaseModel):
    enabled: bool
    endpoint: Optional[str] = None


class HealthResponse(BaseModel):
    status: str
    timestamp: str
    stats: StatsInfo


class StatsResponse(BaseModel):
    enabled: bool
    totalRepositories: Optional[int] = None
    repositories: Optional[List[str]] = None
    note: Optional[str] = None
    message: Optional[str] = None
    error: Optional[str] = None


class BackgroundInfo(BaseModel):
    id: str
    name: str
    type: str
