"""Errors raised by the service layer and rendered by the API."""


class ApiError(Exception):
    status_code = 500
    error = "internal_error"

    def __init__(self, message: str, error: str | None = None):
        super().__init__(message)
        self.message = message
        if error is not None:
            self.error = error

    def to_payload(self) -> dict[str, str]:
        return {"error": self.error, "message": self.message}


class ValidationError(ApiError):
    status_code = 400
    error = "invalid_request"


class NotFoundError(ApiError):
    status_code = 404
    error = "not_found"


class ConflictError(ApiError):
    status_code = 400
    error = "conflict"


class StoreError(ApiError):
    status_code = 500
    error = "store_error"
