from typing import Any, Mapping, Optional


class NotFoundError(Exception):
    """Raised when TheMealDB has no record matching a lookup.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (ids, categories)
        code: optional machine-readable error code
        http_status: suggested HTTP status code for handlers (404)
    """

    http_status = 404

    def __init__(self, message: str = "Not found", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"message": self.message}
        if self.code:
            payload["code"] = self.code
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class EmptyResultError(NotFoundError):
    """Raised when a listing came back but contained no entries.

    Attributes are similar to NotFoundError. http_status is 404.
    """

    def __init__(self, message: str = "No results", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message, details, code)


class NetworkError(Exception):
    """Raised when an outbound request fails in transport, returns a
    non-success status, or returns a payload that cannot be decoded.

    Attributes are similar to NotFoundError. http_status is 502.
    """

    http_status = 502

    def __init__(self, message: str = "Upstream request failed", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"message": self.message}
        if self.code:
            payload["code"] = self.code
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class FetchError(Exception):
    """The only error the recipe fetchers let escape.

    Carries a user-facing message; the internal cause is logged by the
    service and not attached. http_status is 502.
    """

    http_status = 502

    def __init__(self, message: str = "Failed to fetch recipe. Please try again.", code: Optional[str] = "FETCH_ERROR"):
        super().__init__(message)
        self.message = message
        self.code = code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"message": self.message}
        if self.code:
            payload["code"] = self.code
        return payload

    def __str__(self) -> str:
        return self.message
