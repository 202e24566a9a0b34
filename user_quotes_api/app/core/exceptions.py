"""
Error kinds raised by the service core.

Every error derives from ``UserServiceError`` so the API layer can
translate the whole family into HTTP responses in one place.  A
missing record is not an error: repositories and services return
``None`` and the endpoint answers 404.
"""


class UserServiceError(Exception):
    """Base class for all domain errors of the service."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidArgumentError(UserServiceError, ValueError):
    """A caller supplied an argument outside its valid range."""

    status_code = 400


class StorageUnavailableError(UserServiceError):
    """The backing store failed while serving a repository call."""

    status_code = 503


class QuoteProviderError(UserServiceError):
    """The external quote provider could not deliver a quote."""

    status_code = 502
