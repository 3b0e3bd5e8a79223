"""Error hierarchy for the vault.

Error layers:
- VaultError: Base class for all vault errors
- DomainError: Business rule violations, validation failures (4xx responses)
- InfrastructureError: System-level failures like key service outages (503 responses)

These errors are mapped to HTTP responses by the global exception handler in app.py.
"""


class VaultError(Exception):
    """Base class for all vault errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Domain Errors (business logic violations - typically 4xx)
# =============================================================================


class DomainError(VaultError):
    """Base class for domain/business errors."""


class NotFoundError(DomainError):
    """Resource not found."""


class ValidationError(DomainError):
    """Input validation failed."""

    def __init__(self, message: str, field: str | None = None, code: str | None = None) -> None:
        super().__init__(message, code=code or "VALIDATION_ERROR")
        self.field = field


class InvalidUnlockTimeError(ValidationError):
    """Unlock timestamp is not strictly in the future."""

    def __init__(self, message: str = "Unlock timestamp must be in the future") -> None:
        super().__init__(message, field="unlock_time", code="invalid_unlock_time")


class EmptyContentError(ValidationError):
    def __init__(self, message: str = "Content cannot be empty") -> None:
        super().__init__(message, field="content", code="empty_content")


class EmptyTitleError(ValidationError):
    def __init__(self, message: str = "Title cannot be empty") -> None:
        super().__init__(message, field="title", code="empty_title")


class InvalidStateError(DomainError):
    """Operation not allowed in current state."""


class NotYetUnlockableError(InvalidStateError):
    """Timelock has not reached its unlock time."""

    def __init__(self, message: str = "Timelock not yet expired") -> None:
        super().__init__(message, code="not_yet_unlockable")


class ConflictError(DomainError):
    """Resource already exists."""


class AuthorizationError(DomainError):
    """Caller not authorized for this operation."""


class AccessDeniedError(AuthorizationError):
    """Caller is not the creator of the targeted record."""

    def __init__(self, message: str = "Access denied") -> None:
        super().__init__(message, code="access_denied")


# =============================================================================
# Infrastructure Errors (system-level failures - typically 503)
# =============================================================================


class InfrastructureError(VaultError):
    """Base class for infrastructure/system errors."""


class ExternalServiceError(InfrastructureError):
    """External service is unavailable or failed."""


class KeyServiceError(ExternalServiceError):
    """The identity key service rejected or failed a request.

    ``detail`` carries the service's failure message verbatim.
    """

    def __init__(self, detail: str) -> None:
        super().__init__(detail, code="key_service_error")
        self.detail = detail


class ConfigurationError(InfrastructureError):
    """System misconfiguration detected."""
