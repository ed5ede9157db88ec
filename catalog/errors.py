"""Error kinds raised by the storage layer and the services.

The HTTP layer picks a status code per endpoint from the error kind, so no
caller ever has to inspect a database message to decide what happened.
"""


class CatalogError(Exception):
    """Base class for every error this package raises on purpose."""

    def __init__(self, message=''):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message


class StorageError(CatalogError):
    """The database rejected or failed a statement."""


class ConflictError(StorageError):
    """A uniqueness or integrity constraint was violated."""


class ValidationError(CatalogError):
    pass


class AuthenticationError(CatalogError):
    pass


class UploadError(CatalogError):
    """An uploaded file could not be written to the upload folder."""
