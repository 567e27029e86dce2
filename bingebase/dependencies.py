import httpx
from sqlalchemy.ext.asyncio import AsyncEngine

from .config import Settings, settings
from .database import create_engine_for_path, init_tables


# Global state for connections
class AppState:
    engine: AsyncEngine = None
    http_client: httpx.AsyncClient = None


state = AppState()


async def init_resources(config: Settings = settings):
    """Initialize all resources"""
    state.engine = create_engine_for_path(config.DB_PATH, echo=config.DEBUG)
    await init_tables(state.engine)

    state.http_client = httpx.AsyncClient(
        timeout=config.HTTP_TIMEOUT_SECONDS,
        headers={"Accept": "application/json"},
    )


async def close_resources():
    """Close all resources"""
    if state.http_client:
        await state.http_client.aclose()
    if state.engine:
        await state.engine.dispose()


# Dependencies
async def get_engine() -> AsyncEngine:
    return state.engine


async def get_http_client() -> httpx.AsyncClient:
    return state.http_client


def get_settings() -> Settings:
    return settings
