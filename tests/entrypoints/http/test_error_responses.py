"""Tests for REST error response models."""

from pokedex_lite.entrypoints.http.error_responses import ErrorDetail, ErrorResponse


class TestErrorDetail:
    def test_code_is_optional(self) -> None:
        detail = ErrorDetail(field="limit", message="Must be less than 200")

        assert detail.code is None
        assert detail.model_dump() == {
            "field": "limit",
            "message": "Must be less than 200",
            "code": None,
        }


class TestErrorResponse:
    def test_simple_error(self) -> None:
        response = ErrorResponse(detail="Species 25 is already in your roster", code="DUPLICATE_SPECIES")

        assert response.errors is None
        assert response.context is None

    def test_business_error_with_context(self) -> None:
        response = ErrorResponse(
            detail="Team Alpha is full (6/6)",
            code="TEAM_FULL",
            context={"team": "Alpha", "capacity": 6},
        )

        assert response.model_dump(exclude_none=True) == {
            "detail": "Team Alpha is full (6/6)",
            "code": "TEAM_FULL",
            "context": {"team": "Alpha", "capacity": 6},
        }

    def test_validation_error_with_field_errors(self) -> None:
        response = ErrorResponse(
            detail="Validation failed",
            code="VALIDATION_ERROR",
            errors=[ErrorDetail(field="generation", message="Unknown", code="INVALID_VALUE")],
        )

        assert response.errors is not None
        assert response.errors[0].field == "generation"

    def test_schema_has_examples(self) -> None:
        schema = ErrorResponse.model_json_schema()

        assert "examples" in schema
