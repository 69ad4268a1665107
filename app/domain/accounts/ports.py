"""
Port interfaces (ABCs) for the accounts bounded context.

Ports define the contracts that the domain requires from the outside world
(document storage, token verification).
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.accounts.entities import (
    Profile,
    Transaction,
    User,
    UserAggregate,
    Wallet,
    Watchlist,
    WatchlistItem,
)


class UserRepository(ABC):
    """Port for persisting user aggregates as single documents.

    Every operation is scoped to the aggregate identified by ``user_id``.
    Implementations raise PersistenceError on storage failures.
    """

    @abstractmethod
    def save_user(self, user: User, wallet: Wallet, watchlist: Watchlist) -> None:
        """Insert or replace the aggregate for ``user.user_id``."""
        raise NotImplementedError

    @abstractmethod
    def get_user(self, user_id: str) -> Optional[UserAggregate]:
        """Return the full aggregate, or None if the user does not exist."""
        raise NotImplementedError

    @abstractmethod
    def update_profile(self, user_id: str, profile: Profile) -> None:
        """Replace the user's profile."""
        raise NotImplementedError

    @abstractmethod
    def get_profile(self, user_id: str) -> Optional[Profile]:
        """Return the profile, or None if the user or profile is absent."""
        raise NotImplementedError

    @abstractmethod
    def get_wallet(self, user_id: str) -> Optional[Wallet]:
        """Return the wallet, or None if the user is absent."""
        raise NotImplementedError

    @abstractmethod
    def add_transaction(self, user_id: str, transaction: Transaction) -> None:
        """Append a transaction to the user's wallet."""
        raise NotImplementedError

    @abstractmethod
    def remove_transaction(self, user_id: str, transaction_id: str) -> None:
        """Delete a wallet transaction by id. Unknown ids are a no-op."""
        raise NotImplementedError

    @abstractmethod
    def get_watchlist(self, user_id: str) -> Optional[Watchlist]:
        """Return the watchlist, or None if the user is absent."""
        raise NotImplementedError

    @abstractmethod
    def add_to_watchlist(self, user_id: str, item: WatchlistItem) -> None:
        """Append an item to the user's watchlist."""
        raise NotImplementedError

    @abstractmethod
    def remove_from_watchlist(self, user_id: str, item_id: str) -> None:
        """Delete a watchlist item by id. Unknown ids are a no-op."""
        raise NotImplementedError


class AuthService(ABC):
    """Port for verifying request tokens."""

    @abstractmethod
    def validate_token(self, token: str) -> Optional[str]:
        """Return the user id carried by a valid token, else None.

        Raises:
            AuthProviderError: If verification could not be performed.
        """
        raise NotImplementedError
