from typing import Any, Dict, List, Literal, Optional, Union
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, RootModel, model_serializer, model_validator


class CatalogModel(BaseModel):
    """
    Base for records decoded from TMDB.
    Unknown fields are ignored; missing or null fields take the field's zero value.
    """
    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class Genre(CatalogModel):
    id: int = 0
    name: str = ""


class GenreList(CatalogModel):
    genres: List[Genre] = []


class ProviderAvailability(RootModel[Dict[str, Any]]):
    """Watch providers keyed by region, passed through unmodified"""


class CatalogItem(CatalogModel):
    """Fields shared by movies and TV shows"""
    id: int = 0
    overview: str = ""
    poster_path: str = ""
    backdrop_path: str = ""
    vote_average: float = 0.0
    vote_count: int = 0
    popularity: float = 0.0
    genre_ids: List[int] = []
    status: str = ""
    # Filled only by OMDB enrichment
    imdb_rating: Optional[str] = None
    rotten_tomatoes_rating: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _genre_ids_from_genres(cls, data: Any) -> Any:
        # Detail payloads carry "genres": [{id, name}] instead of "genre_ids"
        if isinstance(data, dict) and not data.get("genre_ids") and isinstance(data.get("genres"), list):
            ids = [g["id"] for g in data["genres"] if isinstance(g, dict) and isinstance(g.get("id"), int)]
            data = {**data, "genre_ids": ids}
        return data

    @model_serializer(mode="wrap")
    def _omit_absent(self, handler):
        return {k: v for k, v in handler(self).items() if v is not None}


class Movie(CatalogItem):
    media_type: Literal["movie"] = "movie"
    title: str = ""
    release_date: str = ""
    imdb_id: str = ""
    runtime: int = 0
    budget: int = 0
    revenue: int = 0
    tagline: str = ""
    providers: Optional[ProviderAvailability] = None
    videos: Optional[Any] = None
    trailer: Optional[str] = None


class TVShow(CatalogItem):
    media_type: Literal["tv"] = "tv"
    name: str = ""
    first_air_date: str = ""
    last_air_date: str = ""
    number_of_seasons: int = 0
    number_of_episodes: int = 0
    type: str = ""


CatalogResult = Annotated[Union[Movie, TVShow], Field(discriminator="media_type")]


class MoviePage(CatalogModel):
    """One page of movie results as reported by TMDB"""
    page: int = 0
    results: List[Movie] = []
    total_pages: int = 0
    total_results: int = 0


class TVPage(CatalogModel):
    """One page of TV results as reported by TMDB"""
    page: int = 0
    results: List[TVShow] = []
    total_pages: int = 0
    total_results: int = 0


class SearchPage(CatalogModel):
    """Results of one or more kinds flattened into a single page"""
    page: int = 1
    results: List[CatalogResult] = []
    total_pages: int = 0
    total_results: int = 0
