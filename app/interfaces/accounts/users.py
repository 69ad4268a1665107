"""
FastAPI router for users and profiles.

All routes delegate to the user service port. No business logic here.
Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends, Request, status

from app.application.accounts.dtos import CreateUserCommand, UpdateProfileCommand
from app.application.accounts.ports import UserServicePort
from app.core.config import settings
from app.domain.accounts.errors import NotFoundError
from app.interfaces.accounts.auth import get_current_user_id
from app.interfaces.accounts.dependencies import get_user_service
from app.interfaces.accounts.schemas import (
    CreateUserRequest,
    ErrorResponse,
    MessageResponse,
    ProfileResponse,
    UpdateProfileRequest,
)
from app.shared.security.rate_limiting import limiter

router = APIRouter(tags=["users"])


@router.post(
    "/users",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
    summary="Create a user",
    description="Create a user with an empty wallet and watchlist.",
)
@limiter.limit(settings.rate_limit_signup)
def create_user(
    request: Request,
    body: CreateUserRequest,
    service: UserServicePort = Depends(get_user_service),
) -> MessageResponse:
    """Sign up a new user."""
    service.create_user(CreateUserCommand(user_id=body.user_id, email=body.email))
    return MessageResponse(message="User created successfully.")


@router.get(
    "/users/profile",
    response_model=ProfileResponse,
    responses={401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Get the current user's profile",
)
def get_profile(
    user_id: str = Depends(get_current_user_id),
    service: UserServicePort = Depends(get_user_service),
) -> dict:
    """Return the authenticated user's profile."""
    profile = service.get_profile(user_id)
    if profile is None:
        raise NotFoundError("profile", user_id)
    return profile


@router.put(
    "/users/profile",
    response_model=MessageResponse,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
    summary="Replace the current user's profile",
)
def update_profile(
    body: UpdateProfileRequest,
    user_id: str = Depends(get_current_user_id),
    service: UserServicePort = Depends(get_user_service),
) -> MessageResponse:
    """Replace the authenticated user's profile wholesale."""
    service.update_profile(
        UpdateProfileCommand(
            user_id=user_id,
            name=body.name,
            surname=body.surname,
            date_of_birth=body.date_of_birth,
        )
    )
    return MessageResponse(message="Profile updated successfully.")
