
import httpx
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from bingebase.config import Settings
from bingebase.database import create_engine_for_path, init_tables
from bingebase.dependencies import get_engine, get_http_client, get_settings
from bingebase.limiter import limiter
from bingebase.main import app


class FakeUpstream:
    """
    Stands in for TMDB/OMDB behind httpx.MockTransport.
    Routes are keyed by URL path and, optionally, the "page" query param.
    """
    def __init__(self):
        self.routes = {}
        self.calls = []

    def add(self, path, payload=None, *, page=None, status_code=200, content=None, error=None):
        key = (path, str(page) if page is not None else None)
        self.routes[key] = (status_code, payload, content, error)

    def calls_to(self, path):
        return [c for c in self.calls if c.url.path == path]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        page = request.url.params.get("page")
        route = self.routes.get((request.url.path, page)) or self.routes.get((request.url.path, None))
        if route is None:
            return httpx.Response(404, json={"status_code": 34, "status_message": "not found"})

        status_code, payload, content, error = route
        if error is not None:
            raise error
        if content is not None:
            return httpx.Response(status_code, content=content)
        return httpx.Response(status_code, json=payload)


@pytest.fixture
def test_settings(tmp_path):
    return Settings(
        TMDB_API_KEY="tmdb-test-key",
        OMDB_API_KEY="",
        TMDB_BASE_URL="https://tmdb.test",
        OMDB_BASE_URL="https://omdb.test/",
        DB_PATH=str(tmp_path / "bingebase.db"),
    )


@pytest.fixture
def fake_upstream():
    return FakeUpstream()


@pytest_asyncio.fixture
async def http_client(fake_upstream):
    async with httpx.AsyncClient(transport=httpx.MockTransport(fake_upstream.handler)) as client:
        yield client


@pytest_asyncio.fixture
async def engine(test_settings):
    engine = create_engine_for_path(test_settings.DB_PATH)
    await init_tables(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def client(engine, http_client, test_settings):
    # Override dependencies
    app.dependency_overrides[get_engine] = lambda: engine
    app.dependency_overrides[get_http_client] = lambda: http_client
    app.dependency_overrides[get_settings] = lambda: test_settings

    transport = ASGITransport(app=app)
    limiter.enabled = False
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides = {}
