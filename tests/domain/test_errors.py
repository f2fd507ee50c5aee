"""Tests for domain error classes."""

from pokedex_lite.domain.errors import (
    ConflictError,
    DomainError,
    DuplicateSpeciesError,
    NotFoundError,
    RosterEntryNotFoundError,
    SourceUnavailableError,
    SpeciesNotFoundError,
    TeamFullError,
    UnauthorizedError,
    ValidationError,
)


class TestDomainError:
    """Tests for base DomainError class."""

    def test_stores_message_and_context(self) -> None:
        error = DomainError("Something went wrong", resource="RosterEntry")

        assert error.message == "Something went wrong"
        assert error.error_code == "DOMAIN_ERROR"
        assert error.context == {"resource": "RosterEntry"}
        assert str(error) == "Something went wrong"

    def test_to_dict_flattens_context(self) -> None:
        error = DomainError("Test error", species_id=25)

        assert error.to_dict() == {
            "message": "Test error",
            "code": "DOMAIN_ERROR",
            "species_id": 25,
        }


class TestValidationError:
    """Tests for ValidationError class."""

    def test_default_message_without_field_errors(self) -> None:
        error = ValidationError()

        assert error.message == "Validation error"
        assert error.errors is None
        assert error.to_dict() == {"message": "Validation error", "code": "VALIDATION_ERROR"}

    def test_field_errors_change_default_message(self) -> None:
        errors = [{"field": "generation", "message": "Must be one of 1-9"}]

        error = ValidationError(errors=errors)

        assert error.message == "Validation failed"
        assert error.to_dict() == {
            "message": "Validation failed",
            "code": "VALIDATION_ERROR",
            "errors": errors,
        }


class TestNotFoundError:
    """Tests for NotFoundError and its specializations."""

    def test_message_with_identifier(self) -> None:
        error = NotFoundError("RosterEntry", "7")

        assert error.message == "RosterEntry with identifier '7' not found"
        assert error.context == {"resource": "RosterEntry", "identifier": "7"}

    def test_message_without_identifier(self) -> None:
        error = NotFoundError("User")

        assert error.message == "User not found"
        assert error.context["identifier"] is None

    def test_roster_entry_not_found_uses_generic_code(self) -> None:
        error = RosterEntryNotFoundError(42)

        assert isinstance(error, NotFoundError)
        assert error.error_code == "NOT_FOUND"
        assert error.context == {"resource": "RosterEntry", "identifier": "42"}

    def test_species_not_found_has_own_code(self) -> None:
        error = SpeciesNotFoundError("missingno")

        assert isinstance(error, NotFoundError)
        assert error.error_code == "SPECIES_NOT_FOUND"
        assert error.message == "Species with identifier 'missingno' not found"


class TestRosterConflicts:
    """Tests for roster rule violations."""

    def test_duplicate_species(self) -> None:
        error = DuplicateSpeciesError(25)

        assert isinstance(error, ConflictError)
        assert error.error_code == "DUPLICATE_SPECIES"
        assert error.message == "Species 25 is already in your roster"
        assert error.context == {"species_id": 25}

    def test_team_full(self) -> None:
        error = TeamFullError("Alpha", 6)

        assert isinstance(error, ConflictError)
        assert error.error_code == "TEAM_FULL"
        assert error.message == "Team Alpha is full (6/6)"
        assert error.context == {"team": "Alpha", "capacity": 6}


class TestOtherErrors:
    def test_error_codes(self) -> None:
        assert ConflictError("x").error_code == "CONFLICT"
        assert UnauthorizedError("x").error_code == "UNAUTHORIZED"
        assert SourceUnavailableError("x").error_code == "SOURCE_UNAVAILABLE"
