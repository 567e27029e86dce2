from fastapi import APIRouter, Depends, Path, Request

from ..clients.omdb_client import OMDBClient
from ..clients.tmdb_client import TMDBClient
from ..config import Settings
from ..dependencies import get_http_client, get_settings
from ..limiter import limiter, UPSTREAM_LIMIT
from ..schemas.responses import APIResponse
from ..services.detail_service import DetailService

router = APIRouter()


async def get_detail_service(
    http_client = Depends(get_http_client),
    config: Settings = Depends(get_settings)
) -> DetailService:
    return DetailService(TMDBClient(http_client, config), OMDBClient(http_client, config))


@router.get("/movie/{movie_id}", response_model=APIResponse)
@limiter.limit(UPSTREAM_LIMIT)
async def get_movie(
    request: Request,
    movie_id: int = Path(..., gt=0),
    service: DetailService = Depends(get_detail_service)
):
    """
    Movie details with watch providers, trailer and secondary ratings
    """
    return APIResponse(data=await service.get_movie(movie_id))


@router.get("/tv/{tv_id}", response_model=APIResponse)
@limiter.limit(UPSTREAM_LIMIT)
async def get_tv(
    request: Request,
    tv_id: int = Path(..., gt=0),
    service: DetailService = Depends(get_detail_service)
):
    """TV show details"""
    return APIResponse(data=await service.get_tv(tv_id))


@router.get("/genres", response_model=APIResponse)
async def get_genres(
    service: DetailService = Depends(get_detail_service)
):
    """Movie genre list"""
    return APIResponse(data=await service.get_genres())
