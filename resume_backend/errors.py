"""
统一错误类型：服务层不抛异常，而是返回 Result（成功值或 ServiceError）。
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ErrorCode(str, Enum):
    INVALID_PARAM = "INVALID_PARAM"
    DATABASE_ERROR = "DATABASE_ERROR"


# HTTP status used by the routers for each code
HTTP_STATUS: dict[ErrorCode, int] = {
    ErrorCode.INVALID_PARAM: 400,
    ErrorCode.DATABASE_ERROR: 500,
}


@dataclass(frozen=True)
class ServiceError:
    message: str
    code: ErrorCode

    def to_dict(self) -> dict:
        return {"message": self.message, "code": self.code.value}


@dataclass(frozen=True)
class Result(Generic[T]):
    value: Optional[T] = None
    error: Optional[ServiceError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, message: str, code: ErrorCode) -> "Result[T]":
        return cls(error=ServiceError(message, code))

    @classmethod
    def from_error(cls, error: ServiceError) -> "Result[T]":
        return cls(error=error)


def invalid_param(message: str) -> ServiceError:
    return ServiceError(message, ErrorCode.INVALID_PARAM)


def database_error(message: str) -> ServiceError:
    return ServiceError(message, ErrorCode.DATABASE_ERROR)
