"""
Pydantic schemas for the accounts API request/response contract.

Field names are snake_case in Python and camelCase on the wire.
Request schemas only check JSON types; domain rules (positive amounts,
known transaction types, parseable dates) are enforced by the service so
that violations name the offending field.
No business logic belongs here.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema serialized with camelCase aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, allow_inf_nan=False
    )


class CreateUserRequest(CamelModel):
    """Request schema for signing up a user."""

    user_id: Optional[str] = Field(default=None, description="External user id")
    email: Optional[str] = Field(default=None, description="Contact email")


class UpdateProfileRequest(CamelModel):
    """Request schema for replacing the profile. All fields are required."""

    name: Optional[str] = None
    surname: Optional[str] = None
    date_of_birth: Optional[str] = Field(
        default=None, description="ISO-8601 date, e.g. 1990-04-21"
    )


class AddTransactionRequest(CamelModel):
    """Request schema for adding a wallet transaction.

    Attributes:
        crypto_id: Asset identifier.
        quantity: Amount traded, must be > 0.
        type: BUY or SELL (case-insensitive).
        done_at: ISO-8601 timestamp of the trade.
        price_at_purchase: Unit price, must be > 0.
        currency: Quote currency; USD when omitted.
        transaction_id: Optional client-supplied id.
    """

    crypto_id: Optional[str] = None
    quantity: Optional[float] = None
    type: Optional[str] = None
    done_at: Optional[str] = None
    price_at_purchase: Optional[float] = None
    currency: Optional[str] = None
    transaction_id: Optional[str] = None


class AddWatchlistItemRequest(CamelModel):
    """Request schema for tracking a crypto asset."""

    crypto_id: Optional[str] = None


class MessageResponse(BaseModel):
    """Confirmation returned by mutating endpoints."""

    message: str


class ProfileResponse(CamelModel):
    name: str
    surname: str
    date_of_birth: str


class TransactionItem(CamelModel):
    """A single wallet transaction."""

    transaction_id: str
    crypto_id: str
    quantity: float
    type: str
    done_at: str
    price_at_purchase: float
    currency: str


class WalletResponse(CamelModel):
    id: str
    transactions: list[TransactionItem]


class WatchlistItemSchema(CamelModel):
    """A single tracked asset."""

    item_id: str
    crypto_id: str
    added_at: str


class WatchlistResponse(CamelModel):
    id: str
    items: list[WatchlistItemSchema]


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str


class ErrorResponse(BaseModel):
    """Standard error response returned by all error handlers."""

    error: str
    detail: str | None = None
