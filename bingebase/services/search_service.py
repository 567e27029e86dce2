import asyncio
import logging
from dataclasses import dataclass, field
from typing import Awaitable, Callable, List, Union

from ..clients.tmdb_client import TMDBClient
from ..config import SEARCH_MAX_PAGES
from ..exceptions import UpstreamError
from ..schemas.catalog import Movie, MoviePage, SearchPage, TVPage, TVShow

logger = logging.getLogger(__name__)

PageFetcher = Callable[[str, int], Awaitable[Union[MoviePage, TVPage]]]


@dataclass
class KindResults:
    """Pages of one content kind collected over the aggregation window"""
    kind: str
    results: List[Union[Movie, TVShow]] = field(default_factory=list)
    total_pages: int = 0
    total_results: int = 0


class SearchService:
    def __init__(self, tmdb: TMDBClient):
        self.tmdb = tmdb

    async def search(self, query: str) -> SearchPage:
        """
        Search movies and TV over pages 1..SEARCH_MAX_PAGES.
        Movies come first, then TV. Failed pages are skipped.
        """
        movies, tv = await asyncio.gather(
            self._collect(self.tmdb.search_movies, query, "movie"),
            self._collect(self.tmdb.search_tv, query, "tv"),
        )
        return self._merge([movies, tv])

    async def search_movies(self, query: str) -> SearchPage:
        return self._merge([await self._collect(self.tmdb.search_movies, query, "movie")])

    async def search_tv(self, query: str) -> SearchPage:
        return self._merge([await self._collect(self.tmdb.search_tv, query, "tv")])

    async def _collect(self, fetch: PageFetcher, query: str, kind: str) -> KindResults:
        pages = await asyncio.gather(
            *(fetch(query, page) for page in range(1, SEARCH_MAX_PAGES + 1)),
            return_exceptions=True,
        )

        collected = KindResults(kind=kind)
        for page_number, page in enumerate(pages, start=1):
            if isinstance(page, UpstreamError):
                logger.warning(
                    "Skipping search page",
                    extra={"kind": kind, "page": page_number, "error": str(page)},
                )
                continue
            if isinstance(page, BaseException):
                raise page

            collected.results.extend(page.results)
            # Last successful page wins for the result count
            collected.total_results = page.total_results
            collected.total_pages = max(collected.total_pages, page.total_pages)
        return collected

    @staticmethod
    def _merge(kinds: List[KindResults]) -> SearchPage:
        return SearchPage(
            page=1,
            results=[item for kind in kinds for item in kind.results],
            total_pages=max((kind.total_pages for kind in kinds), default=0),
            total_results=sum(kind.total_results for kind in kinds),
        )

    async def trending(self, page: int = 1) -> SearchPage:
        """Single page of trending movies followed by trending TV. Any failure is fatal."""
        movies = await self.tmdb.get_trending_movies(page)
        tv = await self.tmdb.get_trending_tv(page)
        return SearchPage(
            page=page,
            results=[*movies.results, *tv.results],
            total_pages=max(movies.total_pages, tv.total_pages),
            total_results=movies.total_results + tv.total_results,
        )

    async def trending_movies(self, page: int = 1) -> SearchPage:
        movies = await self.tmdb.get_trending_movies(page)
        return SearchPage(
            page=page,
            results=movies.results,
            total_pages=movies.total_pages,
            total_results=movies.total_results,
        )

    async def trending_tv(self, page: int = 1) -> SearchPage:
        tv = await self.tmdb.get_trending_tv(page)
        return SearchPage(
            page=page,
            results=tv.results,
            total_pages=tv.total_pages,
            total_results=tv.total_results,
        )
