"""
FastAPI router for the authenticated user's watchlist.

All routes delegate to the watchlist service port. No business logic here.
"""

from typing import Optional

from fastapi import APIRouter, Depends, status

from app.application.accounts.dtos import AddWatchlistItemCommand
from app.application.accounts.ports import WatchlistServicePort
from app.interfaces.accounts.auth import get_current_user_id
from app.interfaces.accounts.dependencies import get_watchlist_service
from app.interfaces.accounts.schemas import (
    AddWatchlistItemRequest,
    ErrorResponse,
    MessageResponse,
    WatchlistResponse,
)

router = APIRouter(prefix="/watchlist", tags=["watchlist"])


@router.get(
    "",
    response_model=Optional[WatchlistResponse],
    responses={401: {"model": ErrorResponse}},
    summary="List tracked cryptos",
)
def get_watchlist(
    user_id: str = Depends(get_current_user_id),
    service: WatchlistServicePort = Depends(get_watchlist_service),
) -> Optional[dict]:
    return service.get_watchlist(user_id)


@router.post(
    "",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
    summary="Track a crypto",
)
def add_item(
    body: AddWatchlistItemRequest,
    user_id: str = Depends(get_current_user_id),
    service: WatchlistServicePort = Depends(get_watchlist_service),
) -> MessageResponse:
    service.add_item(AddWatchlistItemCommand(user_id=user_id, crypto_id=body.crypto_id))
    return MessageResponse(message="Crypto added to watchlist successfully.")


@router.delete(
    "/{item_id}",
    response_model=MessageResponse,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
    summary="Stop tracking a crypto",
    description="Remove a watchlist item by id. Unknown ids succeed as a no-op.",
)
def remove_item(
    item_id: str,
    user_id: str = Depends(get_current_user_id),
    service: WatchlistServicePort = Depends(get_watchlist_service),
) -> MessageResponse:
    service.remove_item(user_id, item_id)
    return MessageResponse(message="Item removed from watchlist successfully.")
