"""
Use cases for the accounts bounded context.

UserManagementService implements the user, wallet and watchlist service
ports on top of a single UserRepository.

Input: commands from app.application.accounts.dtos, or a user id.
Output: JSON-ready snapshots (dicts) or None when a resource is absent.
Side effects: single-document writes through the repository.
Failure cases: ValidationError (raised before any repository call),
PersistenceError (propagated from the repository, never retried).
"""

import logging
import math
import re
from datetime import datetime
from typing import Optional

from dateutil import parser as dateparser

from app.application.accounts.dtos import (
    AddTransactionCommand,
    AddWatchlistItemCommand,
    CreateUserCommand,
    UpdateProfileCommand,
)
from app.application.accounts.ports import (
    UserServicePort,
    WalletServicePort,
    WatchlistServicePort,
)
from app.domain.accounts.entities import (
    DEFAULT_CURRENCY,
    Profile,
    Transaction,
    WatchlistItem,
    as_utc,
    parse_transaction_type,
)
from app.domain.accounts.errors import ValidationError
from app.domain.accounts.factory import create_user_aggregate
from app.domain.accounts.ports import UserRepository

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def _is_blank(value: object) -> bool:
    return not isinstance(value, str) or not value.strip()


def _parse_timestamp(field_name: str, value: object) -> datetime:
    """Parse an ISO-8601 string (or pass through a datetime) as UTC."""
    if isinstance(value, datetime):
        return as_utc(value)
    if _is_blank(value):
        raise ValidationError(field_name, f"{field_name} must be a valid date.")
    try:
        return as_utc(dateparser.isoparse(value.strip()))
    except (ValueError, OverflowError) as exc:
        raise ValidationError(
            field_name, f"{field_name} must be a valid date."
        ) from exc


def _require_positive_number(field_name: str, value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(field_name, f"{field_name} must be a number.")
    if not math.isfinite(value) or value <= 0:
        raise ValidationError(field_name, f"{field_name} must be greater than 0.")
    return value


class UserManagementService(UserServicePort, WalletServicePort, WatchlistServicePort):
    """Orchestrates all account operations.

    Validates inbound commands, builds domain entities, and delegates
    persistence to the repository port. Holds no mutable state of its own.
    """

    def __init__(self, repository: UserRepository) -> None:
        self._repository = repository

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    def create_user(self, command: CreateUserCommand) -> dict:
        """Create a user together with an empty wallet and watchlist.

        Raises:
            ValidationError: If userId or email is missing, or the email is
                malformed.
            PersistenceError: If the aggregate could not be saved.
        """
        if _is_blank(command.user_id) or _is_blank(command.email):
            raise ValidationError("userId", "userId and email are required.")
        email = command.email.strip()
        if not EMAIL_PATTERN.match(email):
            raise ValidationError("email", "email must be a valid email address.")

        aggregate = create_user_aggregate(command.user_id.strip(), email)
        self._repository.save_user(
            aggregate.user, aggregate.wallet, aggregate.watchlist
        )
        logger.info("Created user=%s", aggregate.user.user_id)
        return aggregate.user.to_dict()

    def get_user(self, user_id: str) -> Optional[dict]:
        """Return the full aggregate snapshot, or None for unknown users."""
        aggregate = self._repository.get_user(user_id)
        if aggregate is None:
            return None
        return aggregate.to_dict()

    def update_profile(self, command: UpdateProfileCommand) -> None:
        """Replace the user's profile. Partial fields are never merged.

        Raises:
            ValidationError: If name or surname is empty or dateOfBirth
                cannot be parsed.
        """
        if _is_blank(command.name):
            raise ValidationError("name", "name must be a non-empty string.")
        if _is_blank(command.surname):
            raise ValidationError("surname", "surname must be a non-empty string.")
        date_of_birth = _parse_timestamp("dateOfBirth", command.date_of_birth)

        profile = Profile(
            name=command.name.strip(),
            surname=command.surname.strip(),
            date_of_birth=date_of_birth,
        )
        self._repository.update_profile(command.user_id, profile)
        logger.info("Updated profile for user=%s", command.user_id)

    def get_profile(self, user_id: str) -> Optional[dict]:
        profile = self._repository.get_profile(user_id)
        if profile is None:
            return None
        return profile.to_dict()

    # ------------------------------------------------------------------
    # Wallet
    # ------------------------------------------------------------------

    def add_transaction(self, command: AddTransactionCommand) -> dict:
        """Validate and append a transaction to the user's wallet.

        Returns:
            The stored transaction snapshot, including its id.

        Raises:
            ValidationError: Naming the first offending field. The
                repository is not called in that case.
        """
        if _is_blank(command.crypto_id):
            raise ValidationError("cryptoId", "cryptoId must be a non-empty string.")
        quantity = _require_positive_number("quantity", command.quantity)
        tx_type = parse_transaction_type(command.type)
        done_at = _parse_timestamp("doneAt", command.done_at)
        price = _require_positive_number("priceAtPurchase", command.price_at_purchase)
        currency = DEFAULT_CURRENCY if command.currency is None else command.currency
        if _is_blank(currency):
            raise ValidationError("currency", "currency must be a non-empty string.")

        kwargs = {}
        if not _is_blank(command.transaction_id):
            kwargs["transaction_id"] = command.transaction_id.strip()

        transaction = Transaction(
            crypto_id=command.crypto_id.strip(),
            quantity=quantity,
            type=tx_type,
            done_at=done_at,
            price_at_purchase=price,
            currency=currency,
            **kwargs,
        )
        self._repository.add_transaction(command.user_id, transaction)
        logger.info(
            "Added transaction=%s to wallet of user=%s",
            transaction.transaction_id,
            command.user_id,
        )
        return transaction.to_dict()

    def remove_transaction(self, user_id: str, transaction_id: str) -> None:
        self._repository.remove_transaction(user_id, transaction_id)
        logger.info(
            "Removed transaction=%s from wallet of user=%s", transaction_id, user_id
        )

    def get_wallet(self, user_id: str) -> Optional[dict]:
        wallet = self._repository.get_wallet(user_id)
        if wallet is None:
            return None
        return wallet.to_dict()

    # ------------------------------------------------------------------
    # Watchlist
    # ------------------------------------------------------------------

    def add_item(self, command: AddWatchlistItemCommand) -> dict:
        """Track a crypto asset in the user's watchlist.

        Raises:
            ValidationError: If cryptoId is missing.
        """
        if _is_blank(command.crypto_id):
            raise ValidationError("cryptoId", "cryptoId is required.")

        kwargs = {}
        if not _is_blank(command.item_id):
            kwargs["item_id"] = command.item_id.strip()

        item = WatchlistItem(crypto_id=command.crypto_id.strip(), **kwargs)
        self._repository.add_to_watchlist(command.user_id, item)
        logger.info(
            "Added item=%s (%s) to watchlist of user=%s",
            item.item_id,
            item.crypto_id,
            command.user_id,
        )
        return item.to_dict()

    def remove_item(self, user_id: str, item_id: str) -> None:
        """Stop tracking an item. Unknown ids are a no-op.

        Raises:
            ValidationError: If item_id is blank.
        """
        if _is_blank(item_id):
            raise ValidationError("itemId", "itemId parameter is required.")
        self._repository.remove_from_watchlist(user_id, item_id)
        logger.info("Removed item=%s from watchlist of user=%s", item_id, user_id)

    def get_watchlist(self, user_id: str) -> Optional[dict]:
        watchlist = self._repository.get_watchlist(user_id)
        if watchlist is None:
            return None
        return watchlist.to_dict()
