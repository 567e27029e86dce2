from typing import List

from sqlalchemy import Boolean, DateTime, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from ..exceptions import StoreError
from ..schemas.watchlist import WatchlistEntry


class WatchlistRepository:
    def __init__(self, db: AsyncEngine):
        self.db = db

    async def get_watchlist(self, user_id: str) -> List[WatchlistEntry]:
        """All entries for a user, most recently added first"""
        query = text("""
            SELECT user_id, content_id, content_type, is_watched, added_at, watched_at
            FROM watchlist
            WHERE user_id = :user_id
            ORDER BY added_at DESC, id DESC
        """).columns(is_watched=Boolean, added_at=DateTime, watched_at=DateTime)
        try:
            async with self.db.connect() as conn:
                result = await conn.execute(query, {"user_id": user_id})
                rows = result.mappings().all()
        except SQLAlchemyError as e:
            raise StoreError("Failed to get watchlist") from e
        return [WatchlistEntry(**row) for row in rows]

    async def add(self, user_id: str, content_id: int, content_type: str):
        """Insert, or replace an existing entry (resets the watched state)"""
        query = text("""
            INSERT OR REPLACE INTO watchlist (user_id, content_id, content_type, is_watched, added_at, watched_at)
            VALUES (:user_id, :content_id, :content_type, FALSE, CURRENT_TIMESTAMP, NULL)
        """)
        await self._execute(query, "add to watchlist", user_id=user_id, content_id=content_id, content_type=content_type)

    async def remove(self, user_id: str, content_id: int, content_type: str):
        query = text("""
            DELETE FROM watchlist
            WHERE user_id = :user_id AND content_id = :content_id AND content_type = :content_type
        """)
        await self._execute(query, "remove from watchlist", user_id=user_id, content_id=content_id, content_type=content_type)

    async def mark_as_watched(self, user_id: str, content_id: int, content_type: str, watched: bool):
        # Zero affected rows when the entry does not exist; not an error
        if watched:
            query = text("""
                UPDATE watchlist
                SET is_watched = TRUE, watched_at = CURRENT_TIMESTAMP
                WHERE user_id = :user_id AND content_id = :content_id AND content_type = :content_type
            """)
        else:
            query = text("""
                UPDATE watchlist
                SET is_watched = FALSE, watched_at = NULL
                WHERE user_id = :user_id AND content_id = :content_id AND content_type = :content_type
            """)
        await self._execute(query, "mark as watched", user_id=user_id, content_id=content_id, content_type=content_type)

    async def _execute(self, query, action: str, **params):
        try:
            async with self.db.begin() as conn:
                await conn.execute(query, params)
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to {action}") from e
