"""Storage facade exceptions."""


class StorageFacadeError(Exception):
    """Base exception for storage facade operations."""


class InvalidRequestError(StorageFacadeError, ValueError):
    """Raised when a request is missing a required field.

    This is a caller bug, not a business outcome, so it is raised instead of
    being reported in the result envelope.
    """
