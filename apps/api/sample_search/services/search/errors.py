"""Error types raised by the sample search pipeline."""

from typing import Any


class SearchParamError(ValueError):
    """A search query parameter could not be interpreted."""
    def __init__(self, param: str, raw_value: Any, message: str):
        self.param = param
        self.raw_value = raw_value
        self.message = message
        super().__init__(message)


class InvalidPageError(SearchParamError):
    """Raised when the `page` query parameter is not a positive integer."""
    def __init__(self, raw_value: Any):
        super().__init__("page", raw_value, f"page must be a positive integer, got {raw_value!r}")


class InvalidDateError(SearchParamError):
    """Raised when a date filter is not an ISO date (YYYY-MM-DD)."""
    def __init__(self, param: str, raw_value: Any):
        super().__init__(param, raw_value, f"{param} must be a date in YYYY-MM-DD format, got {raw_value!r}")


class InvalidPatientIdError(SearchParamError):
    """Raised when `patientId` is not a UUID."""
    def __init__(self, raw_value: Any):
        super().__init__("patientId", raw_value, f"patientId must be a UUID, got {raw_value!r}")
