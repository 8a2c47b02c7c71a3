from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar, Optional

from ..codes import HttpStatus


class StatusCodeError(Exception):
    """Base class for errors raised while validating a status code."""


class InvalidArgumentError(StatusCodeError, ValueError):
    """Raised when a value is not an integer within the status code bounds."""

    def __init__(self, code: Any, minimum: int, maximum: int):
        super().__init__(
            f'The submitted code "{code}" must be a positive integer '
            f"between {minimum} and {maximum}."
        )
        self.code = code


class OutOfRangeError(StatusCodeError, LookupError):
    """Raised when a status code is within bounds but has no entry in a table."""

    def __init__(self, code: int):
        super().__init__(f"Unknown http status code: `{code}`.")
        self.code = code


class ErrorFamily(Enum):
    CLIENT = "client"
    SERVER = "server"

    @property
    def code_range(self) -> range:
        if self == ErrorFamily.CLIENT:
            return range(400, 500)
        return range(500, 600)

    @staticmethod
    def from_code(code: int) -> Optional[ErrorFamily]:
        for family in ErrorFamily:
            if code in family.code_range:
                return family
        return None


class HttpError(Exception):
    """
    An HTTP-level error bound to one status code.

    Concrete kinds set `code` as a class attribute. Their default message,
    "<code> <reason phrase>", is computed when the class is created; a
    message passed to the constructor replaces it without touching the code.

    Instances compare equal when they have the same type, code and message.
    """

    code: ClassVar[int]
    family: ClassVar[ErrorFamily]
    default_message: ClassVar[str]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "code" not in cls.__dict__:
            return

        family = getattr(cls, "family", None)
        if family is None:
            raise TypeError(
                f"{cls.__name__} must derive from ClientError or ServerError"
            )
        if cls.code not in family.code_range:
            raise TypeError(
                f"{cls.__name__}: code {cls.code} is outside the "
                f"{family.value} error range"
            )
        try:
            status = HttpStatus(cls.code)
        except ValueError:
            raise TypeError(
                f"{cls.__name__}: code {cls.code} is not an assigned status code"
            ) from None
        cls.default_message = f"{status.value} {status.phrase}"

    def __init__(self, message: Optional[str] = None):
        if not hasattr(type(self), "default_message"):
            raise TypeError(f"{type(self).__name__} is abstract")
        if message is None:
            message = self.default_message
        super().__init__(message)
        self.message = message

    @property
    def status_code(self) -> int:
        return self.code

    @property
    def reason_phrase(self) -> str:
        return HttpStatus(self.code).phrase

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HttpError):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.code == other.code
            and self.message == other.message
        )

    def __hash__(self) -> int:
        return hash((type(self), self.code, self.message))


class ClientError(HttpError):
    """Base for 4xx error kinds."""

    family = ErrorFamily.CLIENT


class ServerError(HttpError):
    """Base for 5xx error kinds."""

    family = ErrorFamily.SERVER
