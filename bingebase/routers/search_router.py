from fastapi import APIRouter, Depends, Request

from ..clients.tmdb_client import TMDBClient
from ..config import Settings
from ..dependencies import get_http_client, get_settings
from ..exceptions import BadRequestError
from ..limiter import limiter, UPSTREAM_LIMIT
from ..schemas.responses import SearchResponse
from ..services.search_service import SearchService

router = APIRouter()


async def get_search_service(
    http_client = Depends(get_http_client),
    config: Settings = Depends(get_settings)
) -> SearchService:
    return SearchService(TMDBClient(http_client, config))


def _require_query(query: str) -> str:
    if not query:
        raise BadRequestError("Query parameter is required")
    return query


def _page_or_default(page: str) -> int:
    # Anything that is not a positive integer means page 1
    try:
        value = int(page)
    except (TypeError, ValueError):
        return 1
    return value if value > 0 else 1


@router.get("/search", response_model=SearchResponse)
@limiter.limit(UPSTREAM_LIMIT)
async def search(
    request: Request,
    query: str = "",
    service: SearchService = Depends(get_search_service)
):
    """
    Search movies and TV shows over the first three result pages
    """
    result = await service.search(_require_query(query))
    return {"success": True, **result.model_dump()}


@router.get("/search/movies", response_model=SearchResponse)
@limiter.limit(UPSTREAM_LIMIT)
async def search_movies(
    request: Request,
    query: str = "",
    service: SearchService = Depends(get_search_service)
):
    """Search movies only"""
    result = await service.search_movies(_require_query(query))
    return {"success": True, **result.model_dump()}


@router.get("/search/tv", response_model=SearchResponse)
@limiter.limit(UPSTREAM_LIMIT)
async def search_tv(
    request: Request,
    query: str = "",
    service: SearchService = Depends(get_search_service)
):
    """Search TV shows only"""
    result = await service.search_tv(_require_query(query))
    return {"success": True, **result.model_dump()}


@router.get("/trending", response_model=SearchResponse)
async def trending(
    page: str = "1",
    service: SearchService = Depends(get_search_service)
):
    """Trending movies followed by trending TV shows for one page"""
    result = await service.trending(_page_or_default(page))
    return {"success": True, **result.model_dump()}


@router.get("/trending/movies", response_model=SearchResponse)
async def trending_movies(
    page: str = "1",
    service: SearchService = Depends(get_search_service)
):
    result = await service.trending_movies(_page_or_default(page))
    return {"success": True, **result.model_dump()}


@router.get("/trending/tv", response_model=SearchResponse)
async def trending_tv(
    page: str = "1",
    service: SearchService = Depends(get_search_service)
):
    result = await service.trending_tv(_page_or_default(page))
    return {"success": True, **result.model_dump()}
