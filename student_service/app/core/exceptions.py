"""
Exceptions raised by the Student Service.
"""


class StorageError(Exception):
    """The student store could not be read or written."""
    pass
