from sqlalchemy import Column, Integer, BigInteger, String, Float, DateTime, ForeignKey, Table, Text, func

from .base import Base

# Local catalog tables. Created with the schema but not populated yet:
# every catalog read goes to TMDB.


class MovieDB(Base):
    __tablename__ = 'movies'

    id = Column(Integer, primary_key=True, autoincrement=True)
    tmdb_id = Column(Integer, unique=True, nullable=False)
    title = Column(Text, nullable=False)
    overview = Column(Text)
    poster_path = Column(Text)
    backdrop_path = Column(Text)
    release_date = Column(Text)
    vote_average = Column(Float)
    vote_count = Column(Integer)
    popularity = Column(Float)
    runtime = Column(Integer)
    status = Column(Text)
    tagline = Column(Text)
    budget = Column(BigInteger)
    revenue = Column(BigInteger)
    imdb_rating = Column(Text)
    rotten_tomatoes_rating = Column(Text)
    created_at = Column(DateTime, server_default=func.current_timestamp())
    updated_at = Column(DateTime, server_default=func.current_timestamp())


class TVShowDB(Base):
    __tablename__ = 'tv_shows'

    id = Column(Integer, primary_key=True, autoincrement=True)
    tmdb_id = Column(Integer, unique=True, nullable=False)
    name = Column(Text, nullable=False)
    overview = Column(Text)
    poster_path = Column(Text)
    backdrop_path = Column(Text)
    first_air_date = Column(Text)
    last_air_date = Column(Text)
    vote_average = Column(Float)
    vote_count = Column(Integer)
    popularity = Column(Float)
    number_of_seasons = Column(Integer)
    number_of_episodes = Column(Integer)
    status = Column(Text)
    type = Column(Text)
    imdb_rating = Column(Text)
    rotten_tomatoes_rating = Column(Text)
    created_at = Column(DateTime, server_default=func.current_timestamp())
    updated_at = Column(DateTime, server_default=func.current_timestamp())


class GenreDB(Base):
    __tablename__ = 'genres'

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False, unique=True)


movie_genres = Table(
    'movie_genres',
    Base.metadata,
    Column('movie_id', Integer, ForeignKey('movies.id'), primary_key=True),
    Column('genre_id', Integer, ForeignKey('genres.id'), primary_key=True),
)

tv_genres = Table(
    'tv_genres',
    Base.metadata,
    Column('tv_id', Integer, ForeignKey('tv_shows.id'), primary_key=True),
    Column('genre_id', Integer, ForeignKey('genres.id'), primary_key=True),
)
