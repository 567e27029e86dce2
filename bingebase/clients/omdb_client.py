"""OMDB client, used for secondary ratings (IMDb, Rotten Tomatoes)."""

from typing import Optional

import httpx

from ..config import Settings
from ..exceptions import UpstreamStatusError
from ..schemas.omdb import OMDBRecord
from .base import UpstreamClient

ROTTEN_TOMATOES = "Rotten Tomatoes"


class OMDBClient(UpstreamClient):
    provider = "OMDB"

    def __init__(self, http: httpx.AsyncClient, settings: Settings):
        super().__init__(http, settings.OMDB_BASE_URL, settings.OMDB_API_KEY)

    @property
    def enabled(self) -> bool:
        return bool(self.api_key)

    async def _lookup(self, **params) -> OMDBRecord:
        payload = await self._get("", {"apikey": self.api_key, **params})
        record = self._parse(OMDBRecord, payload, "/")
        # OMDB reports lookup failures in a 200 body
        if record.response == "False":
            raise UpstreamStatusError(self.provider, 200, record.error or "lookup failed")
        return record

    async def get_movie_details(self, title: str, year: Optional[str] = None) -> OMDBRecord:
        params = {"t": title, "plot": "full"}
        if year:
            params["y"] = year
        return await self._lookup(**params)

    async def get_tv_details(self, title: str, year: Optional[str] = None) -> OMDBRecord:
        params = {"t": title, "type": "series", "plot": "full"}
        if year:
            params["y"] = year
        return await self._lookup(**params)

    async def get_ratings_by_imdb_id(self, imdb_id: str) -> OMDBRecord:
        return await self._lookup(i=imdb_id, plot="short")


def extract_rotten_tomatoes_rating(record: OMDBRecord) -> str:
    for rating in record.ratings:
        if rating.source == ROTTEN_TOMATOES:
            return rating.value
    return ""
