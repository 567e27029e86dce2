import asyncio
import logging
from typing import List, Optional, Union

from ..clients.tmdb_client import TMDBClient
from ..exceptions import UpstreamError
from ..repositories.watchlist_repository import WatchlistRepository
from ..schemas.catalog import Movie, TVShow
from ..schemas.watchlist import WatchlistEntry, WatchlistItem
from .detail_service import extract_trailer_key

logger = logging.getLogger(__name__)


class WatchlistService:
    def __init__(self, watchlist_repo: WatchlistRepository, tmdb: TMDBClient, default_user_id: str):
        self.watchlist_repo = watchlist_repo
        self.tmdb = tmdb
        self.default_user_id = default_user_id

    def _user(self, user_id: Optional[str]) -> str:
        return user_id or self.default_user_id

    async def get_watchlist(self, user_id: Optional[str]) -> List[WatchlistItem]:
        """
        Stored entries, newest first, each with its TMDB details.
        An entry whose details cannot be fetched is kept with details=None.
        """
        entries = await self.watchlist_repo.get_watchlist(self._user(user_id))
        details = await asyncio.gather(*(self._details(entry) for entry in entries))

        return [
            WatchlistItem(
                content_id=entry.content_id,
                content_type=entry.content_type,
                is_watched=entry.is_watched,
                added_at=entry.added_at,
                watched_at=entry.watched_at,
                details=detail,
            )
            for entry, detail in zip(entries, details)
        ]

    async def _details(self, entry: WatchlistEntry) -> Optional[Union[Movie, TVShow]]:
        try:
            if entry.content_type == "movie":
                movie = await self.tmdb.get_movie_details(entry.content_id)
                return movie.model_copy(update={"trailer": extract_trailer_key(movie.videos)})
            return await self.tmdb.get_tv_details(entry.content_id)
        except UpstreamError as e:
            logger.warning(
                "Watchlist details fetch failed",
                extra={"content_id": entry.content_id, "content_type": entry.content_type, "error": str(e)},
            )
            return None

    async def add(self, user_id: Optional[str], content_id: int, content_type: str):
        await self.watchlist_repo.add(self._user(user_id), content_id, content_type)

    async def remove(self, user_id: Optional[str], content_id: int, content_type: str):
        await self.watchlist_repo.remove(self._user(user_id), content_id, content_type)

    async def set_watched(self, user_id: Optional[str], content_id: int, content_type: str, watched: bool):
        await self.watchlist_repo.mark_as_watched(self._user(user_id), content_id, content_type, watched)
