"""Interface layer errors."""


class InterfaceError(Exception):
    """Base interface error."""

    pass


class AuthenticationRequiredError(InterfaceError):
    """Raised when a mutating endpoint is called without a valid auth token."""

    pass
