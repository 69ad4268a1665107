"""
Domain-specific errors for the accounts bounded context.

All errors raised from the domain and application layers are defined here.
They are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class AccountsDomainError(Exception):
    """Base error for all accounts domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ValidationError(AccountsDomainError):
    """Raised when inbound data violates an entity invariant."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class AuthenticationError(AccountsDomainError):
    """Raised when a request carries no token or an invalid one."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Unauthorized: {reason}")
        self.reason = reason


class AuthProviderError(AccountsDomainError):
    """Raised when the token verification provider itself fails."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Auth provider failure: {reason}")
        self.reason = reason


class NotFoundError(AccountsDomainError):
    """Raised when a user sub-resource (profile, wallet, watchlist) is absent."""

    def __init__(self, resource: str, user_id: str) -> None:
        super().__init__(f"{resource.capitalize()} not found.")
        self.resource = resource
        self.user_id = user_id


class PersistenceError(AccountsDomainError):
    """Raised when the document store is unavailable or a write fails.

    The underlying driver exception is chained as ``__cause__``.
    """

    def __init__(self, operation: str, cause: Exception | None = None) -> None:
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Failed to {operation}{detail}")
        self.operation = operation
        self.cause = cause
