"""
Construction of typed HTTP error objects from status codes.
"""
from types import MappingProxyType
from typing import Mapping, Optional, Type

from .errors import ClientError, HttpError, OutOfRangeError, ServerError
from .status_table import filter_status_code

# Only the kinds defined in errors.client and errors.server; aliases map to
# the same class and are not repeated.
ERROR_CLASSES: Mapping[int, Type[HttpError]] = MappingProxyType(
    {
        kind.code: kind
        for family in (ClientError, ServerError)
        for kind in sorted(family.__subclasses__(), key=lambda kind: kind.code)
    }
)


def get_reason_exception(code: int, message: Optional[str] = None) -> HttpError:
    """
    Build the error object bound to a status code.

    The error is returned, not raised. Only client and server error codes
    that have a dedicated kind are accepted; any other assigned code (204,
    for example) is reported as unknown.

    Args:
        code: The HTTP status code.
        message: Optional message replacing the default "<code> <phrase>".

    Returns:
        An instance of the HttpError subclass for the code.

    Raises:
        InvalidArgumentError: If the code is outside 100-599.
        OutOfRangeError: If no error kind is bound to the code.
    """
    code = filter_status_code(code)
    try:
        kind = ERROR_CLASSES[code]
    except KeyError:
        raise OutOfRangeError(code) from None
    return kind(message)
