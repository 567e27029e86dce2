from sqlalchemy import Column, Integer, String, Boolean, DateTime, CheckConstraint, UniqueConstraint, func, false

from .base import Base


class WatchlistDB(Base):
    """
    ORM Model - Mapping 1-1 with table 'watchlist'.
    One row per (user_id, content_id, content_type).
    """
    __tablename__ = 'watchlist'
    __table_args__ = (
        UniqueConstraint('user_id', 'content_id', 'content_type'),
        CheckConstraint("content_type IN ('movie', 'tv')", name='ck_watchlist_content_type'),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String, nullable=False)
    content_id = Column(Integer, nullable=False)
    content_type = Column(String, nullable=False)
    is_watched = Column(Boolean, server_default=false())
    added_at = Column(DateTime, server_default=func.current_timestamp())
    watched_at = Column(DateTime)
