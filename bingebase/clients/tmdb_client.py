"""TMDB (The Movie Database) v3 client."""

from typing import Any, Dict, List, Optional

import httpx

from ..config import Settings, TRENDING_WINDOW
from ..schemas.catalog import Genre, GenreList, Movie, MoviePage, ProviderAvailability, TVPage, TVShow
from .base import UpstreamClient

DETAIL_APPENDS = "credits,videos,images"
LANGUAGE = "en-US"


class TMDBClient(UpstreamClient):
    provider = "TMDB"

    def __init__(self, http: httpx.AsyncClient, settings: Settings):
        super().__init__(http, settings.TMDB_BASE_URL, settings.TMDB_API_KEY)

    def _params(self, **extra: Any) -> Dict[str, Any]:
        params: Dict[str, Any] = {"api_key": self.api_key}
        params.update(extra)
        return params

    # -------------------------------------------------------------------------
    # Search
    # -------------------------------------------------------------------------

    async def search_movies(self, query: str, page: int = 1) -> MoviePage:
        endpoint = "/search/movie"
        payload = await self._get(
            endpoint,
            self._params(query=query, page=page, include_adult="false", language=LANGUAGE),
        )
        return self._parse(MoviePage, payload, endpoint)

    async def search_tv(self, query: str, page: int = 1) -> TVPage:
        endpoint = "/search/tv"
        payload = await self._get(
            endpoint,
            self._params(query=query, page=page, include_adult="false", language=LANGUAGE),
        )
        return self._parse(TVPage, payload, endpoint)

    # -------------------------------------------------------------------------
    # Details
    # -------------------------------------------------------------------------

    async def get_movie_details(self, movie_id: int) -> Movie:
        """Movie record with credits, videos and images appended."""
        endpoint = f"/movie/{movie_id}"
        payload = await self._get(endpoint, self._params(language=LANGUAGE, append_to_response=DETAIL_APPENDS))
        return self._parse(Movie, payload, endpoint)

    async def get_movie_providers(self, movie_id: int) -> Optional[ProviderAvailability]:
        """Watch providers by region (the payload's "results" member), verbatim."""
        endpoint = f"/movie/{movie_id}/watch/providers"
        payload = await self._get(endpoint, self._params())
        if payload.get("results") is None:
            return None
        return self._parse(ProviderAvailability, payload["results"], endpoint)

    async def get_tv_details(self, tv_id: int) -> TVShow:
        endpoint = f"/tv/{tv_id}"
        payload = await self._get(endpoint, self._params(language=LANGUAGE, append_to_response=DETAIL_APPENDS))
        return self._parse(TVShow, payload, endpoint)

    # -------------------------------------------------------------------------
    # Trending / genres
    # -------------------------------------------------------------------------

    async def get_trending_movies(self, page: int = 1) -> MoviePage:
        endpoint = f"/trending/movie/{TRENDING_WINDOW}"
        payload = await self._get(endpoint, self._params(page=page, language=LANGUAGE))
        return self._parse(MoviePage, payload, endpoint)

    async def get_trending_tv(self, page: int = 1) -> TVPage:
        endpoint = f"/trending/tv/{TRENDING_WINDOW}"
        payload = await self._get(endpoint, self._params(page=page, language=LANGUAGE))
        return self._parse(TVPage, payload, endpoint)

    async def get_genres(self) -> List[Genre]:
        endpoint = "/genre/movie/list"
        payload = await self._get(endpoint, self._params(language=LANGUAGE))
        return self._parse(GenreList, payload, endpoint).genres
