import pytest

from http_status import (
    ERROR_CLASSES,
    ClientError,
    HttpError,
    InvalidArgumentError,
    OutOfRangeError,
    ServerError,
    get_reason_exception,
    get_reason_phrase,
)
from http_status import errors
from http_status.iana import parse_registry

EXPECTED_CLASSES = {
    400: errors.BadRequestError,
    401: errors.UnauthorizedError,
    402: errors.PaymentRequiredError,
    403: errors.ForbiddenError,
    404: errors.NotFoundError,
    405: errors.MethodNotAllowedError,
    406: errors.NotAcceptableError,
    407: errors.ProxyAuthenticationRequiredError,
    408: errors.RequestTimeoutError,
    409: errors.ConflictError,
    410: errors.GoneError,
    411: errors.LengthRequiredError,
    412: errors.PreconditionFailedError,
    413: errors.ContentTooLargeError,
    414: errors.UriTooLongError,
    415: errors.UnsupportedMediaTypeError,
    416: errors.RangeNotSatisfiableError,
    417: errors.ExpectationFailedError,
    418: errors.ImATeapotError,
    421: errors.MisdirectedRequestError,
    422: errors.UnprocessableContentError,
    423: errors.LockedError,
    424: errors.FailedDependencyError,
    425: errors.TooEarlyError,
    426: errors.UpgradeRequiredError,
    428: errors.PreconditionRequiredError,
    429: errors.TooManyRequestsError,
    431: errors.RequestHeaderFieldsTooLargeError,
    451: errors.UnavailableForLegalReasonsError,
    500: errors.InternalServerError,
    501: errors.NotImplementedServerError,
    502: errors.BadGatewayError,
    503: errors.ServiceUnavailableError,
    504: errors.GatewayTimeoutError,
    505: errors.HttpVersionNotSupportedError,
    506: errors.VariantAlsoNegotiatesError,
    507: errors.InsufficientStorageError,
    508: errors.LoopDetectedError,
    510: errors.NotExtendedError,
    511: errors.NetworkAuthenticationRequiredError,
}


def test_error_classes_catalog():
    assert dict(ERROR_CLASSES) == EXPECTED_CLASSES


@pytest.mark.parametrize("code, kind", EXPECTED_CLASSES.items())
def test_get_reason_exception_returns_bound_kind(code, kind):
    error = get_reason_exception(code)

    assert type(error) is kind
    assert error.code == code
    assert error.status_code == code
    assert error.message == f"{code} {get_reason_phrase(code)}"
    assert str(error) == error.message


def test_not_found_default_message():
    assert get_reason_exception(404).message == "404 Not Found"


def test_custom_message():
    error = get_reason_exception(404, "custom")

    assert isinstance(error, errors.NotFoundError)
    assert error.message == "custom"
    assert error.code == 404


def test_error_is_returned_not_raised():
    error = get_reason_exception(503)
    assert isinstance(error, Exception)

    with pytest.raises(ServerError):
        raise error


def test_family_counts_over_registered_codes(registry_snapshot):
    client_count = 0
    server_count = 0

    for record in parse_registry(registry_snapshot):
        try:
            raise get_reason_exception(record.code)
        except ClientError as client:
            assert isinstance(client, EXPECTED_CLASSES[record.code])
            client_count += 1
        except ServerError as server:
            assert isinstance(server, EXPECTED_CLASSES[record.code])
            server_count += 1
        except OutOfRangeError:
            assert record.code < 400

    assert client_count == 28
    assert server_count == 11


def test_default_messages_match_registry(registry_snapshot):
    for record in parse_registry(registry_snapshot):
        if record.code not in ERROR_CLASSES:
            continue
        error = get_reason_exception(record.code)
        assert error.message == f"{record.code} {record.phrase}"


class TestValidation:
    def test_out_of_bounds(self):
        with pytest.raises(InvalidArgumentError, match='"700".*100 and 599'):
            get_reason_exception(700)

    def test_unassigned_code(self):
        with pytest.raises(OutOfRangeError) as exc_info:
            get_reason_exception(509)
        assert str(exc_info.value) == "Unknown http status code: `509`."

    @pytest.mark.parametrize("code", [100, 200, 204, 301, 308])
    def test_assigned_codes_without_error_kind(self, code):
        # These have phrases but no error kind
        assert get_reason_phrase(code)
        with pytest.raises(OutOfRangeError, match=f"`{code}`"):
            get_reason_exception(code)

    @pytest.mark.parametrize("code", [419, 420, 427, 430, 450, 499, 512, 599])
    def test_error_range_codes_without_error_kind(self, code):
        with pytest.raises(OutOfRangeError):
            get_reason_exception(code)

    def test_message_does_not_bypass_validation(self):
        with pytest.raises(InvalidArgumentError):
            get_reason_exception(42, "message")


def test_repeated_calls_return_equal_errors():
    first = get_reason_exception(429)
    second = get_reason_exception(429)

    assert first is not second
    assert first == second
    assert get_reason_exception(429, "x") == get_reason_exception(429, "x")
    assert get_reason_exception(429, "x") != first


def test_catalog_is_read_only():
    with pytest.raises(TypeError):
        ERROR_CLASSES[509] = HttpError  # type: ignore[index]
