from abc import ABC


class UserError(ABC, Exception):
    """Base class for user-related errors.

    All errors that inherit from UserError will have their messages
    displayed to the user. These errors should not contain any
    sensitive information. Subclasses set the HTTP status and the
    machine-readable type reported to the client.
    """

    status_code: int = 400
    error_type: str = "bad_request"


class ConflictError(UserError):
    """Raised when a request cannot complete because of existing state, e.g. no unique code could be found."""

    status_code = 409
    error_type = "conflict"


class StorageError(Exception):
    """Raised when the code store cannot be written or deleted.

    The message is returned to the client with a 500 status.
    """
