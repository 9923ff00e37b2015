"""Exceptions raised by the package."""


class FirestoreError(Exception):
    """Base class of every error the package raises."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class DataNotFoundError(FirestoreError):
    """A requested document does not exist."""


class DeserializeError(FirestoreError):
    """A value could not be turned into the requested form."""