"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class ApiError(AdapterError):
    """Forum API call failed.

    ``message`` is the server's ``detail`` when it sent one, so callers can
    show it to the user unchanged.
    """

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ApiNotFoundError(ApiError):
    """The requested resource does not exist on the server (404)."""

    pass


class ApiServerError(ApiError):
    """The server rejected or failed the request (4xx other than 404, or 5xx)."""

    pass


class ApiConnectionError(ApiError):
    """The request never produced a response (DNS, refused, timeout)."""

    pass
