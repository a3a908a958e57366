"""Error types surfaced by the API.

Two kinds only:

* ``ValidationError`` -- bad or missing input, detected before storage is
  touched.  Always 400 with a list of messages.
* ``StorageError`` -- anything the database client reported.  Always 500
  with the client's message.

"Candidate not found" on update/delete is not an error; the handlers answer
it with a regular success payload.
"""

from typing import Any


class ApiError(Exception):
    """Base exception for errors rendered as ``{"error": ...}``."""

    http_status: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict[str, Any]:
        """Convert to the JSON error envelope."""
        return {"error": self.message}


class ValidationError(ApiError):
    """One or more request fields are missing or malformed."""

    http_status = 400

    def __init__(self, errors: list[str]) -> None:
        super().__init__("; ".join(errors))
        self.errors = list(errors)

    def to_response(self) -> dict[str, Any]:
        return {"error": self.errors}


class StorageError(ApiError):
    """The database client failed to execute a statement."""

    http_status = 500

    def __init__(self, message: str, operation: str = "query") -> None:
        super().__init__(message)
        self.operation = operation
