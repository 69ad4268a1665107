"""
Shared pytest fixtures for the accounts test suite.

Provides an in-memory UserRepository, a service wired to it, and a
TestClient whose dependencies are swapped through dependency_overrides.
No database or network access is needed.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional
from unittest.mock import MagicMock

import jwt
import pytest
from fastapi.testclient import TestClient

from app.application.accounts.user_management_service import UserManagementService
from app.domain.accounts.entities import (
    Profile,
    Transaction,
    User,
    UserAggregate,
    Wallet,
    Watchlist,
    WatchlistItem,
)
from app.domain.accounts.ports import UserRepository
from app.infrastructure.accounts.jwt_auth_service import JwtAuthService
from app.interfaces.accounts.dependencies import (
    get_auth_service,
    get_user_management_service,
)
from app.main import app

TEST_SECRET = "test-secret"
AUTH_COOKIE = "authToken"


class InMemoryUserRepository(UserRepository):
    """Dictionary-backed repository mirroring the document store semantics.

    Writes against unknown users are silently ignored, like a MongoDB
    ``update_one`` that matches no document.
    """

    def __init__(self) -> None:
        self.aggregates: dict[str, UserAggregate] = {}

    def save_user(self, user: User, wallet: Wallet, watchlist: Watchlist) -> None:
        self.aggregates[user.user_id] = UserAggregate(user, wallet, watchlist)

    def get_user(self, user_id: str) -> Optional[UserAggregate]:
        return self.aggregates.get(user_id)

    def update_profile(self, user_id: str, profile: Profile) -> None:
        if user_id in self.aggregates:
            self.aggregates[user_id].user.set_profile(profile)

    def get_profile(self, user_id: str) -> Optional[Profile]:
        aggregate = self.aggregates.get(user_id)
        return aggregate.user.profile if aggregate else None

    def get_wallet(self, user_id: str) -> Optional[Wallet]:
        aggregate = self.aggregates.get(user_id)
        return aggregate.wallet if aggregate else None

    def add_transaction(self, user_id: str, transaction: Transaction) -> None:
        if user_id in self.aggregates:
            self.aggregates[user_id].wallet.add_transaction(transaction)

    def remove_transaction(self, user_id: str, transaction_id: str) -> None:
        if user_id in self.aggregates:
            self.aggregates[user_id].wallet.remove_transaction(transaction_id)

    def get_watchlist(self, user_id: str) -> Optional[Watchlist]:
        aggregate = self.aggregates.get(user_id)
        return aggregate.watchlist if aggregate else None

    def add_to_watchlist(self, user_id: str, item: WatchlistItem) -> None:
        if user_id in self.aggregates:
            self.aggregates[user_id].watchlist.add_item(item)

    def remove_from_watchlist(self, user_id: str, item_id: str) -> None:
        if user_id in self.aggregates:
            self.aggregates[user_id].watchlist.remove_item(item_id)


def make_token(
    user_id: str = "u1",
    secret: str = TEST_SECRET,
    expires_in: timedelta = timedelta(hours=1),
    claim: str = "userId",
) -> str:
    """Mint an HS256 token the way the identity provider does."""
    now = datetime.now(timezone.utc)
    payload = {claim: user_id, "iat": now, "exp": now + expires_in}
    return jwt.encode(payload, secret, algorithm="HS256")


@pytest.fixture
def repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def service(repository: InMemoryUserRepository) -> UserManagementService:
    return UserManagementService(repository=repository)


@pytest.fixture
def mock_repository() -> MagicMock:
    """Repository double for asserting which persistence calls happen."""
    repo = MagicMock(spec=UserRepository)
    repo.get_profile.return_value = None
    repo.get_wallet.return_value = None
    repo.get_watchlist.return_value = None
    repo.get_user.return_value = None
    return repo


@pytest.fixture
def client(service: UserManagementService):
    """TestClient backed by the in-memory repository and a test signing key."""
    app.dependency_overrides[get_user_management_service] = lambda: service
    app.dependency_overrides[get_auth_service] = lambda: JwtAuthService(TEST_SECRET)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def login(client: TestClient):
    """Return a callable that stores a valid auth cookie for a user id."""

    def _login(user_id: str = "u1") -> TestClient:
        client.cookies.set(AUTH_COOKIE, make_token(user_id))
        return client

    return _login


@pytest.fixture
def token_factory():
    """Expose make_token to test modules."""
    return make_token
