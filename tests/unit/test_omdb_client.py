
import pytest

from bingebase.clients.omdb_client import OMDBClient, extract_rotten_tomatoes_rating
from bingebase.exceptions import UpstreamStatusError
from bingebase.schemas.omdb import OMDBRecord

FIGHT_CLUB = {
    "Title": "Fight Club",
    "Year": "1999",
    "imdbRating": "8.8",
    "imdbID": "tt0137523",
    "Type": "movie",
    "Ratings": [
        {"Source": "Internet Movie Database", "Value": "8.8/10"},
        {"Source": "Rotten Tomatoes", "Value": "79%"},
    ],
    "Response": "True",
}


@pytest.fixture
def omdb(http_client, test_settings):
    settings = test_settings.model_copy(update={"OMDB_API_KEY": "omdb-test-key"})
    return OMDBClient(http_client, settings)


@pytest.mark.asyncio
async def test_disabled_without_api_key(http_client, test_settings):
    assert OMDBClient(http_client, test_settings).enabled is False


@pytest.mark.asyncio
async def test_ratings_by_imdb_id(omdb, fake_upstream):
    fake_upstream.add("/", FIGHT_CLUB)

    record = await omdb.get_ratings_by_imdb_id("tt0137523")

    assert record.imdb_rating == "8.8"
    assert extract_rotten_tomatoes_rating(record) == "79%"
    params = fake_upstream.calls[0].url.params
    assert params["apikey"] == "omdb-test-key"
    assert params["i"] == "tt0137523"


@pytest.mark.asyncio
async def test_tv_lookup_by_title_and_year(omdb, fake_upstream):
    fake_upstream.add("/", {"Title": "Dark", "Type": "series", "Response": "True"})

    record = await omdb.get_tv_details("Dark", "2017")

    assert record.type == "series"
    params = fake_upstream.calls[0].url.params
    assert params["t"] == "Dark"
    assert params["y"] == "2017"
    assert params["type"] == "series"


@pytest.mark.asyncio
async def test_movie_lookup_without_year(omdb, fake_upstream):
    fake_upstream.add("/", FIGHT_CLUB)

    await omdb.get_movie_details("Fight Club")

    assert "y" not in fake_upstream.calls[0].url.params


@pytest.mark.asyncio
async def test_failed_lookup_in_success_body(omdb, fake_upstream):
    fake_upstream.add("/", {"Response": "False", "Error": "Movie not found!"})

    with pytest.raises(UpstreamStatusError) as exc:
        await omdb.get_ratings_by_imdb_id("tt0000000")
    assert "Movie not found!" in str(exc.value)


def test_rotten_tomatoes_missing():
    record = OMDBRecord.model_validate({"Ratings": [{"Source": "Metacritic", "Value": "66/100"}]})
    assert extract_rotten_tomatoes_rating(record) == ""
