"""Client layer errors."""


class ClientError(Exception):
    """Base client error."""

    pass


class FormValidationError(ClientError):
    """A form was rejected before any request was sent."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)
