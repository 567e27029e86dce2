from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .catalog import CatalogResult

ContentType = Literal["movie", "tv"]


class WatchlistEntry(BaseModel):
    """One stored watchlist row"""
    user_id: str
    content_id: int
    content_type: ContentType
    is_watched: bool = False
    added_at: datetime
    watched_at: Optional[datetime] = None


class WatchlistAddRequest(BaseModel):
    """Body of POST /watchlist"""
    user_id: Optional[str] = None
    content_id: int = Field(..., gt=0)
    content_type: ContentType


class WatchlistUpdateRequest(WatchlistAddRequest):
    """Body of PUT /watchlist"""
    is_watched: bool


class WatchlistItem(BaseModel):
    """Watchlist entry as served to clients, with TMDB details attached"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    content_id: int
    content_type: ContentType
    is_watched: bool
    added_at: datetime
    watched_at: Optional[datetime] = None
    details: Optional[CatalogResult] = None
