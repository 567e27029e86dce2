import logging
from typing import Any, Dict, List, Optional

from ..clients.omdb_client import OMDBClient, extract_rotten_tomatoes_rating
from ..clients.tmdb_client import TMDBClient
from ..exceptions import UpstreamError
from ..schemas.catalog import Genre, Movie, ProviderAvailability, TVShow

logger = logging.getLogger(__name__)


def extract_trailer_key(videos: Any) -> Optional[str]:
    """
    YouTube key of the first video with site "YouTube" and type "Trailer".
    A missing or malformed videos payload means no trailer.
    """
    if not isinstance(videos, dict):
        return None
    results = videos.get("results")
    if not isinstance(results, list):
        return None

    for video in results:
        if isinstance(video, dict) and video.get("site") == "YouTube" and video.get("type") == "Trailer":
            key = video.get("key")
            return key if isinstance(key, str) and key else None
    return None


class DetailService:
    def __init__(self, tmdb: TMDBClient, omdb: Optional[OMDBClient] = None):
        self.tmdb = tmdb
        self.omdb = omdb

    async def get_movie(self, movie_id: int) -> Movie:
        """
        Movie details enriched with watch providers, trailer key and OMDB ratings.
        Only the primary TMDB lookup can fail the call.
        """
        movie = await self.tmdb.get_movie_details(movie_id)

        update: Dict[str, Any] = {
            "providers": await self._providers(movie_id),
            "trailer": extract_trailer_key(movie.videos),
        }
        update.update(await self._ratings(movie))
        return movie.model_copy(update=update)

    async def get_tv(self, tv_id: int) -> TVShow:
        # No secondary lookups for TV
        return await self.tmdb.get_tv_details(tv_id)

    async def get_genres(self) -> List[Genre]:
        return await self.tmdb.get_genres()

    async def _providers(self, movie_id: int) -> Optional[ProviderAvailability]:
        try:
            return await self.tmdb.get_movie_providers(movie_id)
        except UpstreamError as e:
            logger.warning("Providers lookup failed", extra={"movie_id": movie_id, "error": str(e)})
            return None

    async def _ratings(self, movie: Movie) -> Dict[str, Optional[str]]:
        if self.omdb is None or not self.omdb.enabled or not movie.imdb_id:
            return {}
        try:
            record = await self.omdb.get_ratings_by_imdb_id(movie.imdb_id)
        except UpstreamError as e:
            logger.warning("OMDB ratings lookup failed", extra={"imdb_id": movie.imdb_id, "error": str(e)})
            return {}
        return {
            "imdb_rating": record.imdb_rating or None,
            "rotten_tomatoes_rating": extract_rotten_tomatoes_rating(record) or None,
        }
