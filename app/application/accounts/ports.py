"""
Inbound service ports for the accounts bounded context.

The interface layer depends on these contracts only; the
UserManagementService implements all three.
"""

from abc import ABC, abstractmethod
from typing import Optional

from app.application.accounts.dtos import (
    AddTransactionCommand,
    AddWatchlistItemCommand,
    CreateUserCommand,
    UpdateProfileCommand,
)


class UserServicePort(ABC):
    """User creation and profile management."""

    @abstractmethod
    def create_user(self, command: CreateUserCommand) -> dict:
        """Create a user with an empty wallet and watchlist."""
        raise NotImplementedError

    @abstractmethod
    def update_profile(self, command: UpdateProfileCommand) -> None:
        """Replace the user's profile wholesale."""
        raise NotImplementedError

    @abstractmethod
    def get_profile(self, user_id: str) -> Optional[dict]:
        """Return the profile snapshot, or None when there is none."""
        raise NotImplementedError


class WalletServicePort(ABC):
    """Wallet transaction management."""

    @abstractmethod
    def add_transaction(self, command: AddTransactionCommand) -> dict:
        raise NotImplementedError

    @abstractmethod
    def remove_transaction(self, user_id: str, transaction_id: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def get_wallet(self, user_id: str) -> Optional[dict]:
        raise NotImplementedError


class WatchlistServicePort(ABC):
    """Watchlist management."""

    @abstractmethod
    def add_item(self, command: AddWatchlistItemCommand) -> dict:
        raise NotImplementedError

    @abstractmethod
    def remove_item(self, user_id: str, item_id: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def get_watchlist(self, user_id: str) -> Optional[dict]:
        raise NotImplementedError
