class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when credentials are rejected or no valid session exists."""


class ActionInProgressError(ValidationError):
    """Raised when the same action is triggered again before it finished."""


class StoreError(DomainError):
    """Raised when the hosted backend rejects a query or write."""
