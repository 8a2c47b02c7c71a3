"""Client error kinds (4xx)."""
from .base import ClientError


class BadRequestError(ClientError):
    code = 400


class UnauthorizedError(ClientError):
    code = 401


class PaymentRequiredError(ClientError):
    code = 402


class ForbiddenError(ClientError):
    code = 403


class NotFoundError(ClientError):
    code = 404


class MethodNotAllowedError(ClientError):
    code = 405


class NotAcceptableError(ClientError):
    code = 406


class ProxyAuthenticationRequiredError(ClientError):
    code = 407


class RequestTimeoutError(ClientError):
    code = 408


class ConflictError(ClientError):
    code = 409


class GoneError(ClientError):
    code = 410


class LengthRequiredError(ClientError):
    code = 411


class PreconditionFailedError(ClientError):
    code = 412


class ContentTooLargeError(ClientError):
    code = 413


class UriTooLongError(ClientError):
    code = 414


class UnsupportedMediaTypeError(ClientError):
    code = 415


class RangeNotSatisfiableError(ClientError):
    code = 416


class ExpectationFailedError(ClientError):
    code = 417


class ImATeapotError(ClientError):
    code = 418


class MisdirectedRequestError(ClientError):
    code = 421


class UnprocessableContentError(ClientError):
    code = 422


class LockedError(ClientError):
    code = 423


class FailedDependencyError(ClientError):
    code = 424


class TooEarlyError(ClientError):
    code = 425


class UpgradeRequiredError(ClientError):
    code = 426


class PreconditionRequiredError(ClientError):
    code = 428


class TooManyRequestsError(ClientError):
    code = 429


class RequestHeaderFieldsTooLargeError(ClientError):
    code = 431


class UnavailableForLegalReasonsError(ClientError):
    code = 451


# Names used before RFC 9110
PayloadTooLargeError = ContentTooLargeError
RequestUriTooLongError = UriTooLongError
RequestedRangeNotSatisfiableError = RangeNotSatisfiableError
UnprocessableEntityError = UnprocessableContentError
