"""
Reason phrase and reason message lookups for HTTP status codes.
"""
from types import MappingProxyType
from typing import Any, Mapping

from .codes import HttpStatus
from .errors.base import InvalidArgumentError, OutOfRangeError

MIN_STATUS_CODE = 100
MAX_STATUS_CODE = 599

REASON_PHRASES: Mapping[int, str] = MappingProxyType(
    {status.value: status.phrase for status in HttpStatus}
)
REASON_MESSAGES: Mapping[int, str] = MappingProxyType(
    {status.value: status.description for status in HttpStatus}
)


def filter_status_code(code: Any) -> int:
    """
    Check that a value is a usable HTTP status code.

    Args:
        code: The value to check.

    Returns:
        The code, unchanged.

    Raises:
        InvalidArgumentError: If the value is not an integer between
            MIN_STATUS_CODE and MAX_STATUS_CODE (inclusive).
    """
    if (
        isinstance(code, bool)
        or not isinstance(code, int)
        or not MIN_STATUS_CODE <= code <= MAX_STATUS_CODE
    ):
        raise InvalidArgumentError(code, MIN_STATUS_CODE, MAX_STATUS_CODE)
    return code


def _lookup(table: Mapping[int, str], code: Any) -> str:
    code = filter_status_code(code)
    try:
        return table[code]
    except KeyError:
        raise OutOfRangeError(code) from None


def get_reason_phrase(code: int) -> str:
    """
    Get the reason phrase for a status code.

    Args:
        code: The HTTP status code.

    Returns:
        The short canonical phrase (e.g. "Not Found" for 404).

    Raises:
        InvalidArgumentError: If the code is outside 100-599.
        OutOfRangeError: If the code is in range but not assigned.
    """
    return _lookup(REASON_PHRASES, code)


def get_reason_message(code: int) -> str:
    """
    Get the longer descriptive message for a status code.

    Raises the same errors as `get_reason_phrase`.
    """
    return _lookup(REASON_MESSAGES, code)
