from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class OMDBRating(BaseModel):
    source: str = Field("", alias="Source")
    value: str = Field("", alias="Value")


class OMDBRecord(BaseModel):
    """Flat OMDB title record. Only the fields we read are declared."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: str = Field("", alias="Title")
    year: str = Field("", alias="Year")
    rated: str = Field("", alias="Rated")
    released: str = Field("", alias="Released")
    runtime: str = Field("", alias="Runtime")
    genre: str = Field("", alias="Genre")
    director: str = Field("", alias="Director")
    plot: str = Field("", alias="Plot")
    poster: str = Field("", alias="Poster")
    ratings: List[OMDBRating] = Field(default_factory=list, alias="Ratings")
    metascore: str = Field("", alias="Metascore")
    imdb_rating: str = Field("", alias="imdbRating")
    imdb_votes: str = Field("", alias="imdbVotes")
    imdb_id: str = Field("", alias="imdbID")
    type: str = Field("", alias="Type")
    response: str = Field("", alias="Response")
    error: Optional[str] = Field(None, alias="Error")
