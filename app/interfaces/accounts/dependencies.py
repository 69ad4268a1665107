"""
Dependency injection for the accounts bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into the application service via constructor injection.
These are the composition root for the accounts context; tests swap
them through ``app.dependency_overrides``.
"""

from fastapi import Depends

from app.application.accounts.ports import (
    UserServicePort,
    WalletServicePort,
    WatchlistServicePort,
)
from app.application.accounts.user_management_service import UserManagementService
from app.core.config import settings
from app.domain.accounts.ports import AuthService, UserRepository
from app.infrastructure.accounts.database import get_users_collection
from app.infrastructure.accounts.jwt_auth_service import JwtAuthService
from app.infrastructure.accounts.mongo_user_repository import MongoUserRepository


def get_user_repository() -> UserRepository:
    """Build the MongoDB repository on the shared client."""
    return MongoUserRepository(get_users_collection())


def get_auth_service() -> AuthService:
    """Build the JWT verifier from settings."""
    return JwtAuthService(
        secret=settings.jwt_symmetric_key,
        algorithm=settings.jwt_algorithm,
    )


def get_user_management_service(
    repository: UserRepository = Depends(get_user_repository),
) -> UserManagementService:
    """Build the application service with its repository."""
    return UserManagementService(repository=repository)


def get_user_service(
    service: UserManagementService = Depends(get_user_management_service),
) -> UserServicePort:
    return service


def get_wallet_service(
    service: UserManagementService = Depends(get_user_management_service),
) -> WalletServicePort:
    return service


def get_watchlist_service(
    service: UserManagementService = Depends(get_user_management_service),
) -> WatchlistServicePort:
    return service
