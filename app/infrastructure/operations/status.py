"""Operation status enumeration."""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Operation completed successfully
        PERMANENT_ERROR: Error that rebuilding unchanged input will not fix
            (malformed fragment, duplicate key, missing source)
    """

    SUCCESS = "success"
    PERMANENT_ERROR = "permanent_error"
