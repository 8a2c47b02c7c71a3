"""Server error kinds (5xx)."""
from .base import ServerError


class InternalServerError(ServerError):
    code = 500


class NotImplementedServerError(ServerError):
    code = 501


class BadGatewayError(ServerError):
    code = 502


class ServiceUnavailableError(ServerError):
    code = 503


class GatewayTimeoutError(ServerError):
    code = 504


class HttpVersionNotSupportedError(ServerError):
    code = 505


class VariantAlsoNegotiatesError(ServerError):
    code = 506


class InsufficientStorageError(ServerError):
    code = 507


class LoopDetectedError(ServerError):
    code = 508


class NotExtendedError(ServerError):
    code = 510


class NetworkAuthenticationRequiredError(ServerError):
    code = 511
