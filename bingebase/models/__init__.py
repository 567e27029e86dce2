from .base import Base
from .watchlist import WatchlistDB
from .catalog import MovieDB, TVShowDB, GenreDB, movie_genres, tv_genres

__all__ = ["Base", "WatchlistDB", "MovieDB", "TVShowDB", "GenreDB", "movie_genres", "tv_genres"]
