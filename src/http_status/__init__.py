"""
HTTP status code reason phrases, reason messages and typed HTTP errors.
"""

from .codes import HttpStatus
from .error_factory import ERROR_CLASSES, get_reason_exception
from .errors import (
    ClientError,
    ErrorFamily,
    HttpError,
    InvalidArgumentError,
    OutOfRangeError,
    ServerError,
    StatusCodeError,
)
from .status_table import (
    MAX_STATUS_CODE,
    MIN_STATUS_CODE,
    REASON_MESSAGES,
    REASON_PHRASES,
    filter_status_code,
    get_reason_message,
    get_reason_phrase,
)
from .version import get_package_version

__version__ = get_package_version()

__all__ = [
    "HttpStatus",
    "REASON_PHRASES",
    "REASON_MESSAGES",
    "MIN_STATUS_CODE",
    "MAX_STATUS_CODE",
    "ERROR_CLASSES",
    "filter_status_code",
    "get_reason_phrase",
    "get_reason_message",
    "get_reason_exception",
    "StatusCodeError",
    "InvalidArgumentError",
    "OutOfRangeError",
    "ErrorFamily",
    "HttpError",
    "ClientError",
    "ServerError",
]
