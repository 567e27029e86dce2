
import httpx
import pytest
from httpx import AsyncClient

from tests.payloads import movie, tv_show, videos

FIGHT_CLUB = movie(
    550,
    "Fight Club",
    genre_ids=None,
    genres=[{"id": 18, "name": "Drama"}],
    imdb_id="tt0137523",
    runtime=139,
    videos=videos(("teaser", "YouTube", "Teaser"), ("SUXWAEX2jlg", "YouTube", "Trailer")),
)


@pytest.mark.asyncio
async def test_movie_details(client: AsyncClient, fake_upstream):
    fake_upstream.add("/movie/550", FIGHT_CLUB)
    fake_upstream.add("/movie/550/watch/providers", {"id": 550, "results": {"US": {"flatrate": [{"provider_id": 8}]}}})

    response = await client.get("/api/v1/movie/550")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    data = body["data"]
    assert data["title"] == "Fight Club"
    assert data["media_type"] == "movie"
    assert data["genre_ids"] == [18]
    assert data["trailer"] == "SUXWAEX2jlg"
    assert data["providers"] == {"US": {"flatrate": [{"provider_id": 8}]}}
    # OMDB is not configured in tests
    assert "imdb_rating" not in data
    assert fake_upstream.calls_to("/") == []


@pytest.mark.asyncio
async def test_movie_details_without_providers(client: AsyncClient, fake_upstream):
    fake_upstream.add("/movie/550", FIGHT_CLUB)
    fake_upstream.add("/movie/550/watch/providers", error=httpx.ReadTimeout("timed out"))

    response = await client.get("/api/v1/movie/550")

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["id"] == 550
    assert "providers" not in data


@pytest.mark.asyncio
async def test_movie_not_found(client: AsyncClient, fake_upstream):
    response = await client.get("/api/v1/movie/999999")

    assert response.status_code == 404
    body = response.json()
    assert body["success"] is False
    assert "TMDB" in body["error"]
    assert body["request_id"] == response.headers["X-Request-ID"]


@pytest.mark.asyncio
async def test_movie_upstream_error_is_502(client: AsyncClient, fake_upstream):
    fake_upstream.add("/movie/550", {"status_message": "boom"}, status_code=500)

    response = await client.get("/api/v1/movie/550")

    assert response.status_code == 502
    assert response.json()["success"] is False


@pytest.mark.asyncio
async def test_request_id_is_echoed(client: AsyncClient, fake_upstream):
    fake_upstream.add("/tv/1399", tv_show(1399))

    response = await client.get("/api/v1/tv/1399", headers={"X-Request-ID": "abc-123"})

    assert response.headers["X-Request-ID"] == "abc-123"


@pytest.mark.asyncio
async def test_tv_details(client: AsyncClient, fake_upstream):
    fake_upstream.add("/tv/1399", tv_show(1399, "Game of Thrones", number_of_seasons=8, first_air_date="2011-04-17"))

    response = await client.get("/api/v1/tv/1399")

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["name"] == "Game of Thrones"
    assert data["media_type"] == "tv"
    assert data["number_of_seasons"] == 8
    assert fake_upstream.calls_to("/tv/1399/watch/providers") == []


@pytest.mark.asyncio
async def test_genres(client: AsyncClient, fake_upstream):
    fake_upstream.add("/genre/movie/list", {"genres": [{"id": 28, "name": "Action"}]})

    response = await client.get("/api/v1/genres")

    assert response.status_code == 200
    assert response.json() == {"success": True, "data": [{"id": 28, "name": "Action"}]}
