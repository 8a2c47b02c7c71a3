"""Error types exposed by http_status.errors

Re-exports the validation errors, the two error families and every
concrete HTTP error kind, so users can
`from http_status.errors import ClientError, NotFoundError`.
"""
from .base import (
    ClientError,
    ErrorFamily,
    HttpError,
    InvalidArgumentError,
    OutOfRangeError,
    ServerError,
    StatusCodeError,
)
from .client import (
    BadRequestError,
    ConflictError,
    ContentTooLargeError,
    ExpectationFailedError,
    FailedDependencyError,
    ForbiddenError,
    GoneError,
    ImATeapotError,
    LengthRequiredError,
    LockedError,
    MethodNotAllowedError,
    MisdirectedRequestError,
    NotAcceptableError,
    NotFoundError,
    PayloadTooLargeError,
    PaymentRequiredError,
    PreconditionFailedError,
    PreconditionRequiredError,
    ProxyAuthenticationRequiredError,
    RangeNotSatisfiableError,
    RequestedRangeNotSatisfiableError,
    RequestHeaderFieldsTooLargeError,
    RequestTimeoutError,
    RequestUriTooLongError,
    TooEarlyError,
    TooManyRequestsError,
    UnauthorizedError,
    UnavailableForLegalReasonsError,
    UnprocessableContentError,
    UnprocessableEntityError,
    UnsupportedMediaTypeError,
    UpgradeRequiredError,
    UriTooLongError,
)
from .server import (
    BadGatewayError,
    GatewayTimeoutError,
    HttpVersionNotSupportedError,
    InsufficientStorageError,
    InternalServerError,
    LoopDetectedError,
    NetworkAuthenticationRequiredError,
    NotExtendedError,
    NotImplementedServerError,
    ServiceUnavailableError,
    VariantAlsoNegotiatesError,
)

__all__ = [
    "StatusCodeError",
    "InvalidArgumentError",
    "OutOfRangeError",
    "ErrorFamily",
    "HttpError",
    "ClientError",
    "ServerError",
    # 4xx
    "BadRequestError",
    "UnauthorizedError",
    "PaymentRequiredError",
    "ForbiddenError",
    "NotFoundError",
    "MethodNotAllowedError",
    "NotAcceptableError",
    "ProxyAuthenticationRequiredError",
    "RequestTimeoutError",
    "ConflictError",
    "GoneError",
    "LengthRequiredError",
    "PreconditionFailedError",
    "ContentTooLargeError",
    "PayloadTooLargeError",
    "UriTooLongError",
    "RequestUriTooLongError",
    "UnsupportedMediaTypeError",
    "RangeNotSatisfiableError",
    "RequestedRangeNotSatisfiableError",
    "ExpectationFailedError",
    "ImATeapotError",
    "MisdirectedRequestError",
    "UnprocessableContentError",
    "UnprocessableEntityError",
    "LockedError",
    "FailedDependencyError",
    "TooEarlyError",
    "UpgradeRequiredError",
    "PreconditionRequiredError",
    "TooManyRequestsError",
    "RequestHeaderFieldsTooLargeError",
    "UnavailableForLegalReasonsError",
    # 5xx
    "InternalServerError",
    "NotImplementedServerError",
    "BadGatewayError",
    "ServiceUnavailableError",
    "GatewayTimeoutError",
    "HttpVersionNotSupportedError",
    "VariantAlsoNegotiatesError",
    "InsufficientStorageError",
    "LoopDetectedError",
    "NotExtendedError",
    "NetworkAuthenticationRequiredError",
]
