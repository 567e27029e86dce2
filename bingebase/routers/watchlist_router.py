from typing import Optional

from fastapi import APIRouter, Depends

from ..clients.tmdb_client import TMDBClient
from ..config import Settings
from ..dependencies import get_engine, get_http_client, get_settings
from ..exceptions import BadRequestError
from ..repositories.watchlist_repository import WatchlistRepository
from ..schemas.responses import APIResponse
from ..schemas.watchlist import ContentType, WatchlistAddRequest, WatchlistUpdateRequest
from ..services.watchlist_service import WatchlistService

router = APIRouter()


async def get_watchlist_service(
    db = Depends(get_engine),
    http_client = Depends(get_http_client),
    config: Settings = Depends(get_settings)
) -> WatchlistService:
    return WatchlistService(WatchlistRepository(db), TMDBClient(http_client, config), config.DEFAULT_USER_ID)


@router.get("/watchlist", response_model=APIResponse)
async def get_watchlist(
    user_id: Optional[str] = None,
    service: WatchlistService = Depends(get_watchlist_service)
):
    """
    User's watchlist, newest first, with TMDB details for each entry
    """
    return APIResponse(data=await service.get_watchlist(user_id))


@router.post("/watchlist", response_model=APIResponse)
async def add_to_watchlist(
    body: WatchlistAddRequest,
    service: WatchlistService = Depends(get_watchlist_service)
):
    await service.add(body.user_id, body.content_id, body.content_type)
    return APIResponse(message="Added to watchlist")


@router.put("/watchlist", response_model=APIResponse)
async def update_watched(
    body: WatchlistUpdateRequest,
    service: WatchlistService = Depends(get_watchlist_service)
):
    await service.set_watched(body.user_id, body.content_id, body.content_type, body.is_watched)
    return APIResponse(message="Watch status updated")


@router.delete("/watchlist", response_model=APIResponse)
async def remove_from_watchlist(
    content_type: ContentType,
    content_id: str = "",
    user_id: Optional[str] = None,
    service: WatchlistService = Depends(get_watchlist_service)
):
    try:
        parsed_id = int(content_id)
    except ValueError:
        raise BadRequestError("Invalid content ID")
    await service.remove(user_id, parsed_id, content_type)
    return APIResponse(message="Removed from watchlist")
