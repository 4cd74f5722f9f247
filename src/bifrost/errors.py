"""Error taxonomy shared by the bridge factory and every provider adapter."""
from enum import Enum
from typing import Union


class ErrorCode(str, Enum):
    """Closed set of error kinds surfaced by bifrost."""
    BAD_REQUEST = "bad_request"
    UNAUTHORIZED = "unauthorized"
    CLIENT_ERROR = "client_error"
    FILE_OPERATION_FAILED = "file_operation_failed"


class BifrostError(Exception):
    """
    The only exception type raised across the bifrost boundary.

    :param err: The underlying cause, or a message describing it.
    :param error_code: One of :class:`ErrorCode`.
    """

    def __init__(self, err: Union[Exception, str], error_code: ErrorCode):
        self.err = err if isinstance(err, Exception) else Exception(err)
        self.error_code = ErrorCode(error_code)
        super().__init__(str(self.err))

    def __str__(self) -> str:
        return f"{self.error_code.value}: {self.err}"

    def __repr__(self) -> str:
        return f"BifrostError(err={self.err!r}, error_code={self.error_code.value!r})"
