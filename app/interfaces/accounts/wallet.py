"""
FastAPI router for the authenticated user's wallet.

All routes delegate to the wallet service port. No business logic here.
"""

from typing import Optional

from fastapi import APIRouter, Depends, status

from app.application.accounts.dtos import AddTransactionCommand
from app.application.accounts.ports import WalletServicePort
from app.interfaces.accounts.auth import get_current_user_id
from app.interfaces.accounts.dependencies import get_wallet_service
from app.interfaces.accounts.schemas import (
    AddTransactionRequest,
    ErrorResponse,
    MessageResponse,
    WalletResponse,
)

router = APIRouter(prefix="/wallet", tags=["wallet"])


@router.get(
    "",
    response_model=Optional[WalletResponse],
    responses={401: {"model": ErrorResponse}},
    summary="Get the wallet",
    description="Return the wallet and its transactions, or null for unknown users.",
)
def get_wallet(
    user_id: str = Depends(get_current_user_id),
    service: WalletServicePort = Depends(get_wallet_service),
) -> Optional[dict]:
    return service.get_wallet(user_id)


@router.post(
    "/transaction",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
    summary="Add a transaction",
)
def add_transaction(
    body: AddTransactionRequest,
    user_id: str = Depends(get_current_user_id),
    service: WalletServicePort = Depends(get_wallet_service),
) -> MessageResponse:
    """Record a buy or sell in the wallet."""
    service.add_transaction(
        AddTransactionCommand(
            user_id=user_id,
            crypto_id=body.crypto_id,
            quantity=body.quantity,
            type=body.type,
            done_at=body.done_at,
            price_at_purchase=body.price_at_purchase,
            currency=body.currency,
            transaction_id=body.transaction_id,
        )
    )
    return MessageResponse(message="Transaction added successfully.")


@router.delete(
    "/transaction/{transaction_id}",
    response_model=MessageResponse,
    responses={401: {"model": ErrorResponse}},
    summary="Remove a transaction",
    description="Remove a transaction by id. Unknown ids succeed as a no-op.",
)
def remove_transaction(
    transaction_id: str,
    user_id: str = Depends(get_current_user_id),
    service: WalletServicePort = Depends(get_wallet_service),
) -> MessageResponse:
    service.remove_transaction(user_id, transaction_id)
    return MessageResponse(message="Transaction removed successfully.")
