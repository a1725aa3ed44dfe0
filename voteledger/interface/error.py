"""Interface layer errors."""


class InterfaceError(Exception):
    """Base interface error."""

    pass


class NotAuthenticatedError(InterfaceError):
    """Raised when an endpoint needs a voter and the request has none."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)
