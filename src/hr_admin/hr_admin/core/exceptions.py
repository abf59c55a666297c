class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is missing, malformed or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class NotFoundError(DomainError):
    """Raised when a referenced user or employee does not exist."""


class ConflictError(DomainError):
    """Raised when a unique value (e.g. email) is already taken."""


class BlockedError(DomainError):
    """Raised when an operation is refused because other rows depend on the target."""
