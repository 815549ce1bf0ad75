"""Typed results for client calls."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorKind(StrEnum):
    """Why a call to the profile API failed."""

    UNAUTHORIZED = "unauthorized"
    INVALID_ARGUMENT = "invalid_argument"
    NOT_FOUND = "not_found"
    STORAGE_ERROR = "storage_error"
    # Transport failures and statuses outside the taxonomy (422, 429, ...)
    UNEXPECTED = "unexpected"

    @classmethod
    def from_status(cls, status_code: int) -> "ErrorKind":
        if status_code == 400:
            return cls.INVALID_ARGUMENT
        if status_code == 401:
            return cls.UNAUTHORIZED
        if status_code == 404:
            return cls.NOT_FOUND
        if status_code >= 500:
            return cls.STORAGE_ERROR
        return cls.UNEXPECTED


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Err:
    kind: ErrorKind
    message: str
    status_code: int | None = None

    @property
    def ok(self) -> bool:
        return False


Result = Ok[T] | Err
