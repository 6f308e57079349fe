"""Exceptions raised when talking to the finance backend."""


class GatewayError(Exception):
    """Base class for backend communication failures."""


class FetchError(GatewayError):
    """The transaction list could not be fetched."""


class MalformedPayloadError(GatewayError):
    """The backend answered with a body of an unexpected shape."""


class UploadError(GatewayError):
    """A single file import request was rejected or did not complete."""

    def __init__(self, name: str, message: str, status_code: int | None = None) -> None:
        """Initialize the error with the file name and optional HTTP status."""
        super().__init__(f"{name}: {message}")
        self.name = name
        self.status_code = status_code
