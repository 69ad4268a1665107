"""
Data Transfer Objects for the accounts application layer.

DTOs carry raw inbound data from the interface layer to the service.
Fields are deliberately loose (``object``/optional): validation happens in
the service so that every violation is reported as a ValidationError
naming the offending field.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CreateUserCommand:
    """Input DTO for signing up a user.

    Attributes:
        user_id: External identity of the user.
        email: Contact address.
    """

    user_id: Optional[str]
    email: Optional[str]


@dataclass(frozen=True)
class UpdateProfileCommand:
    """Input DTO for replacing a user's profile.

    Attributes:
        user_id: Authenticated user.
        name: Given name.
        surname: Family name.
        date_of_birth: ISO-8601 date or datetime string.
    """

    user_id: str
    name: Optional[str]
    surname: Optional[str]
    date_of_birth: object


@dataclass(frozen=True)
class AddTransactionCommand:
    """Input DTO for appending a transaction to a wallet.

    Attributes:
        user_id: Authenticated user.
        crypto_id: Asset identifier, e.g. "bitcoin".
        quantity: Amount bought or sold, must be > 0.
        type: "BUY" or "SELL", any case.
        done_at: When the trade happened, ISO-8601 string or datetime.
        price_at_purchase: Unit price, must be > 0.
        currency: Quote currency; defaults to USD when omitted.
        transaction_id: Optional client-supplied id; generated when absent.
    """

    user_id: str
    crypto_id: object
    quantity: object
    type: object
    done_at: object
    price_at_purchase: object
    currency: object = None
    transaction_id: Optional[str] = None


@dataclass(frozen=True)
class AddWatchlistItemCommand:
    """Input DTO for tracking a crypto asset.

    Attributes:
        user_id: Authenticated user.
        crypto_id: Asset identifier.
        item_id: Optional client-supplied id; generated when absent.
    """

    user_id: str
    crypto_id: object
    item_id: Optional[str] = None
