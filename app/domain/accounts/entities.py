"""
Domain entities for the accounts bounded context.

A user aggregate is one User plus exactly one Wallet and one Watchlist.
Entities validate their own invariants on construction and expose
``to_dict()`` snapshots with the camelCase keys used on the wire.
They contain no framework imports and no IO operations.
"""

import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from uuid import uuid4

from app.domain.accounts.errors import ValidationError

DEFAULT_CURRENCY = "USD"


def generate_id() -> str:
    """Return a fresh opaque identifier."""
    return str(uuid4())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC; convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def isoformat(value: datetime) -> str:
    """Render a timestamp as ISO-8601 UTC with millisecond precision."""
    return as_utc(value).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class TransactionType(Enum):
    """Direction of a wallet transaction."""

    BUY = "BUY"
    SELL = "SELL"


def parse_transaction_type(value: object) -> TransactionType:
    """Parse a transaction type case-insensitively.

    Raises:
        ValidationError: If the value is not BUY or SELL.
    """
    if isinstance(value, TransactionType):
        return value
    if isinstance(value, str):
        try:
            return TransactionType(value.strip().upper())
        except ValueError:
            pass
    raise ValidationError("type", "type must be one of BUY, SELL.")


def _require_text(name: str, value: object) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(name, f"{name} must be a non-empty string.")


def _require_positive(name: str, value: object) -> None:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(name, f"{name} must be a number.")
    if not math.isfinite(value) or value <= 0:
        raise ValidationError(name, f"{name} must be greater than 0.")


@dataclass(frozen=True)
class Profile:
    """Personal details of a user. Replaced wholesale on update."""

    name: str
    surname: str
    date_of_birth: datetime

    def __post_init__(self) -> None:
        _require_text("name", self.name)
        _require_text("surname", self.surname)
        if not isinstance(self.date_of_birth, datetime):
            raise ValidationError("dateOfBirth", "dateOfBirth must be a valid date.")

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "surname": self.surname,
            "dateOfBirth": isoformat(self.date_of_birth),
        }


@dataclass(frozen=True)
class Transaction:
    """A single buy or sell entry in a wallet. Immutable once created."""

    crypto_id: str
    quantity: float
    type: TransactionType
    done_at: datetime
    price_at_purchase: float
    currency: str = DEFAULT_CURRENCY
    transaction_id: str = field(default_factory=generate_id)

    def __post_init__(self) -> None:
        _require_text("cryptoId", self.crypto_id)
        _require_positive("quantity", self.quantity)
        if not isinstance(self.type, TransactionType):
            raise ValidationError("type", "type must be one of BUY, SELL.")
        if not isinstance(self.done_at, datetime):
            raise ValidationError("doneAt", "doneAt must be a valid date.")
        _require_positive("priceAtPurchase", self.price_at_purchase)
        _require_text("currency", self.currency)
        _require_text("transactionId", self.transaction_id)
        object.__setattr__(self, "currency", self.currency.strip().upper())

    def to_dict(self) -> dict:
        return {
            "transactionId": self.transaction_id,
            "cryptoId": self.crypto_id,
            "quantity": self.quantity,
            "type": self.type.value,
            "doneAt": isoformat(self.done_at),
            "priceAtPurchase": self.price_at_purchase,
            "currency": self.currency,
        }


@dataclass(frozen=True)
class WatchlistItem:
    """A tracked crypto asset. Carries no quantity."""

    crypto_id: str
    added_at: datetime = field(default_factory=utc_now)
    item_id: str = field(default_factory=generate_id)

    def __post_init__(self) -> None:
        _require_text("cryptoId", self.crypto_id)
        _require_text("itemId", self.item_id)

    def to_dict(self) -> dict:
        return {
            "itemId": self.item_id,
            "cryptoId": self.crypto_id,
            "addedAt": isoformat(self.added_at),
        }


@dataclass
class Wallet:
    """Ordered ledger of transactions belonging to one user."""

    id: str
    transactions: list[Transaction] = field(default_factory=list)

    def add_transaction(self, transaction: Transaction) -> None:
        self.transactions.append(transaction)

    def remove_transaction(self, transaction_id: str) -> None:
        """Drop the transaction with this id. Unknown ids are ignored."""
        self.transactions = [
            t for t in self.transactions if t.transaction_id != transaction_id
        ]

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "transactions": [t.to_dict() for t in self.transactions],
        }


@dataclass
class Watchlist:
    """Ordered list of tracked crypto assets belonging to one user."""

    id: str
    items: list[WatchlistItem] = field(default_factory=list)

    def add_item(self, item: WatchlistItem) -> None:
        self.items.append(item)

    def remove_item(self, item_id: str) -> None:
        """Drop the item with this id. Unknown ids are ignored."""
        self.items = [i for i in self.items if i.item_id != item_id]

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "items": [i.to_dict() for i in self.items],
        }


@dataclass
class User:
    """Account owner, linked 1:1 to a wallet and a watchlist."""

    user_id: str
    email: str
    wallet_id: str
    watchlist_id: str
    profile: Optional[Profile] = None

    def __post_init__(self) -> None:
        _require_text("userId", self.user_id)
        _require_text("email", self.email)

    def set_profile(self, profile: Profile) -> None:
        self.profile = profile

    def to_dict(self) -> dict:
        data = {
            "userId": self.user_id,
            "email": self.email,
            "walletId": self.wallet_id,
            "watchlistId": self.watchlist_id,
        }
        if self.profile is not None:
            data["profile"] = self.profile.to_dict()
        return data


@dataclass
class UserAggregate:
    """A user together with the wallet and watchlist it owns."""

    user: User
    wallet: Wallet
    watchlist: Watchlist

    def to_dict(self) -> dict:
        data = self.user.to_dict()
        data["wallet"] = self.wallet.to_dict()
        data["watchlist"] = self.watchlist.to_dict()
        return data
