"""Domain error hierarchy shared by services and the HTTP layer.

Every error carries a stable ``code``, a human readable ``message``, the HTTP
status it maps to and optional ``details``. The API renders them through one
exception handler, so services never build HTTP responses themselves.
"""

from typing import Any


class CrudHubError(Exception):
    """Base exception for all domain failures."""

    code: str = "error"
    http_status: int = 500

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_response(self) -> dict[str, Any]:
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
            }
        }


class ValidationError(CrudHubError):
    """A required field is missing or a value is out of range."""

    code = "validation_error"
    http_status = 422

    @classmethod
    def missing(cls, *fields: str) -> "ValidationError":
        names = ", ".join(fields)
        return cls(f"Missing required field(s): {names}", {"fields": list(fields)})


class NotFound(CrudHubError):
    code = "not_found"
    http_status = 404

    def __init__(self, entity: str, identifier: str):
        super().__init__(
            f"{entity} '{identifier}' not found",
            {"entity": entity, "id": identifier},
        )


class ConflictError(CrudHubError):
    """A uniqueness constraint was violated."""

    code = "conflict"
    http_status = 409


class InvalidCredentials(CrudHubError):
    code = "invalid_credentials"
    http_status = 401

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class UpstreamError(CrudHubError):
    """The payment provider failed or answered with something unusable."""

    code = "upstream_error"
    http_status = 502
