"""Domain error classes.

Protocol-agnostic errors that represent business failures.
These errors are translated to appropriate formats (HTTP, CLI output) by protocol adapters,
and translated back into the same classes by the remote backend client.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Protocol-agnostic. Contains business error information that
    can be translated to HTTP responses or CLI messages.
    """

    # Default error code (can be used as i18n key)
    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message (default locale)
            **context: Additional context for error (e.g., field names, values)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for protocol translation."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """Business rule validation error.

    Examples:
        - Unknown generation identifier
        - offset < 0 or limit out of bounds

    Protocol mappings:
        - REST: 422 Unprocessable Entity
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Overall validation error message (optional if errors provided)
            errors: List of field-specific errors, each with 'field' and 'message'
                   Example: [{"field": "generation", "message": "Unknown generation"}]
            **context: Additional context
        """
        self.errors: list[dict[str, str]] | None
        if errors:
            self.errors = errors
            msg = message or "Validation failed"
        else:
            self.errors = None
            msg = message or "Validation error"

        super().__init__(msg, **context)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format."""
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class NotFoundError(DomainError):
    """Resource not found.

    Protocol mappings:
        - REST: 404 Not Found
    """

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None, **context: Any) -> None:
        """Create a not found error.

        Args:
            resource: Type of resource (e.g., "RosterEntry", "Species")
            identifier: Resource identifier
            **context: Additional context
        """
        if identifier:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"

        super().__init__(message, resource=resource, identifier=identifier, **context)


class ConflictError(DomainError):
    """Business constraint conflict.

    Protocol mappings:
        - REST: 409 Conflict
    """

    error_code: str = "CONFLICT"


class UnauthorizedError(DomainError):
    """Caller identity missing or unusable.

    Protocol mappings:
        - REST: 401 Unauthorized
    """

    error_code: str = "UNAUTHORIZED"


# ==============================================================================
# Roster errors
# ==============================================================================


class RosterEntryNotFoundError(NotFoundError):
    """Roster entry does not exist or belongs to another user."""

    def __init__(self, entry_id: int, **context: Any) -> None:
        super().__init__("RosterEntry", str(entry_id), **context)


class DuplicateSpeciesError(ConflictError):
    """The user already holds this species, in any team."""

    error_code: str = "DUPLICATE_SPECIES"

    def __init__(self, species_id: int, **context: Any) -> None:
        super().__init__(
            f"Species {species_id} is already in your roster",
            species_id=species_id,
            **context,
        )


class TeamFullError(ConflictError):
    """The destination team already holds the maximum number of entries."""

    error_code: str = "TEAM_FULL"

    def __init__(self, team: str, capacity: int, **context: Any) -> None:
        super().__init__(
            f"Team {team} is full ({capacity}/{capacity})",
            team=team,
            capacity=capacity,
            **context,
        )


# ==============================================================================
# Catalog errors
# ==============================================================================


class SpeciesNotFoundError(NotFoundError):
    """The catalog has nothing for the given id or name."""

    error_code: str = "SPECIES_NOT_FOUND"

    def __init__(self, id_or_name: str, **context: Any) -> None:
        super().__init__("Species", id_or_name, **context)


class SourceUnavailableError(DomainError):
    """Upstream catalog or remote backend failed. Retryable.

    Protocol mappings:
        - REST: 503 Service Unavailable
    """

    error_code: str = "SOURCE_UNAVAILABLE"
