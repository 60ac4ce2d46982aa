"""
Error taxonomy for the swimlane tools.

All errors are caught at the tool boundary and reported in an error response.
"""

from typing import Optional


class SwimlanesError(Exception):
    """Base class for errors reported back to the caller."""

    error_code = "UNKNOWN_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(SwimlanesError):
    """A tool argument is missing or invalid."""

    error_code = "VALIDATION_ERROR"

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field


class NetworkError(SwimlanesError):
    """The Swimlanes.io API call failed.

    ``status_code`` is set for HTTP-level failures and ``None`` for
    transport-level ones (DNS, connection, timeout).
    """

    error_code = "NETWORK_ERROR"

    def __init__(self, message: str, status_code: Optional[int] = None, timeout: bool = False):
        super().__init__(message)
        self.status_code = status_code
        if timeout:
            self.error_code = "TIMEOUT"


class FileError(SwimlanesError):
    """Creating a directory or writing an artifact failed."""

    error_code = "FILE_ERROR"

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path
