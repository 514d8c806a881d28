"""
Exceptions raised by the School Service.
"""

from typing import Optional


class StorageError(Exception):
    """The school store could not be read or written."""
    pass


class RemoteCallError(Exception):
    """A call to the Student Service failed.

    ``status_code`` holds the HTTP status returned by the remote side,
    or ``None`` when no response was received or the response body
    could not be decoded.
    """

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)
