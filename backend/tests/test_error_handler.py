"""Exception handler tests."""

import json

from sqlalchemy.exc import IntegrityError, OperationalError
from starlette.requests import Request

from roster_api.exceptions import DuplicateEmailError, EmployeeNotFoundError, InternalError
from roster_api.middleware.error_handler import (
    generic_exception_handler,
    roster_api_exception_handler,
    sqlalchemy_exception_handler,
    summarize_validation_errors,
)


def _request(headers: dict[str, str] | None = None) -> Request:
    return Request(
        {
            "type": "http",
            "method": "GET",
            "path": "/employees/getAll",
            "query_string": b"",
            "headers": [(k.lower().encode(), v.encode()) for k, v in (headers or {}).items()],
        }
    )


def _body(response) -> dict:
    return json.loads(response.body)


class TestSummarizeValidationErrors:
    """Tests for validation error summaries."""

    def test_reports_field_names(self) -> None:
        errors = [
            {"loc": ("body", "email"), "msg": "String should match pattern"},
            {"loc": ("body", "age"), "msg": "Input should be a valid integer"},
        ]
        assert summarize_validation_errors(errors) == (
            "email: String should match pattern; age: Input should be a valid integer"
        )

    def test_caps_number_of_errors(self) -> None:
        errors = [{"loc": ("body", f"f{i}"), "msg": "Field required"} for i in range(5)]
        assert summarize_validation_errors(errors).count("Field required") == 3

    def test_falls_back_to_generic_message(self) -> None:
        assert summarize_validation_errors([{"loc": ("body", 0), "msg": "bad"}]) == "Invalid request"
        assert summarize_validation_errors([]) == "Invalid request"


class TestHandlers:
    """Tests for mapping exceptions to responses."""

    async def test_domain_error_uses_own_status(self) -> None:
        response = await roster_api_exception_handler(_request(), EmployeeNotFoundError("x"))
        assert response.status_code == 404
        assert _body(response) == {"message": "Employee not found"}

    async def test_duplicate_email_does_not_echo_address(self) -> None:
        response = await roster_api_exception_handler(_request(), DuplicateEmailError("a@x.com"))
        assert response.status_code == 400
        assert "a@x.com" not in response.body.decode()

    async def test_internal_error(self) -> None:
        response = await roster_api_exception_handler(_request(), InternalError())
        assert response.status_code == 500
        assert _body(response) == {"message": "Internal server error"}

    async def test_unique_violation_maps_to_400(self) -> None:
        exc = IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed: employees.email"))
        response = await sqlalchemy_exception_handler(_request(), exc)
        assert response.status_code == 400
        assert _body(response) == {"message": "Resource already exists"}

    async def test_foreign_key_violation_maps_to_400(self) -> None:
        exc = IntegrityError("INSERT", {}, Exception("FOREIGN KEY constraint failed"))
        response = await sqlalchemy_exception_handler(_request(), exc)
        assert response.status_code == 400
        assert _body(response) == {"message": "Referenced resource not found"}

    async def test_other_database_error_is_opaque(self) -> None:
        exc = OperationalError("SELECT", {}, Exception("connection to db:5432 refused"))
        response = await sqlalchemy_exception_handler(_request(), exc)
        assert response.status_code == 500
        assert _body(response) == {"message": "Database error occurred"}

    async def test_unexpected_error_is_opaque(self) -> None:
        response = await generic_exception_handler(_request(), RuntimeError("secret detail"))
        assert response.status_code == 500
        assert _body(response) == {"message": "Internal server error"}

    async def test_cors_headers_for_allowed_origin(self) -> None:
        request = _request({"Origin": "http://localhost:3000"})
        response = await generic_exception_handler(request, RuntimeError("boom"))
        assert response.headers["access-control-allow-origin"] == "http://localhost:3000"

    async def test_no_cors_headers_for_unknown_origin(self) -> None:
        request = _request({"Origin": "http://evil.test"})
        response = await generic_exception_handler(request, RuntimeError("boom"))
        assert "access-control-allow-origin" not in response.headers
