"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here; no scattered magic strings.
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        rate_limit_default: Default rate limit for all endpoints.
        rate_limit_signup: Rate limit for the sign-up endpoint.
        mongo_uri: MongoDB connection string.
        mongo_db: Database holding the user documents.
        mongo_collection: Collection with one document per user.
        mongo_server_selection_timeout_ms: How long the driver waits for a
            reachable server before failing an operation.
        jwt_symmetric_key: Shared secret used to verify auth tokens.
            ``JWT_SIMMETRIC_KEY`` is accepted for older deployments.
        jwt_algorithm: Signing algorithm expected on auth tokens.
        auth_cookie_name: Cookie carrying the auth token.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    project_name: str = "Crypto Accounts"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    rate_limit_default: str = "60/minute"
    rate_limit_signup: str = "20/minute"

    mongo_uri: str = "mongodb://localhost:27017"
    mongo_db: str = "dbsa"
    mongo_collection: str = "users"
    mongo_server_selection_timeout_ms: int = 5000

    jwt_symmetric_key: str = Field(
        default="",
        validation_alias=AliasChoices("JWT_SYMMETRIC_KEY", "JWT_SIMMETRIC_KEY"),
    )
    jwt_algorithm: str = "HS256"
    auth_cookie_name: str = "authToken"


settings = Settings()
