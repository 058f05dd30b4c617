"""
Uniform response envelope.

Success:  {"status": "success", "data": <payload>}
Failure:  {"status": "fail",    "message": "..."}   client errors (4xx)
          {"status": "error",   "message": "..."}   server errors (5xx)
"""

from __future__ import annotations
from typing import Generic, Literal, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ApiSuccess(BaseModel, Generic[T]):
    status: Literal["success"] = "success"
    data: T


class ApiFailure(BaseModel):
    status: Literal["fail", "error"]
    message: str

    @classmethod
    def fail(cls, message: str) -> ApiFailure:
        return cls(status="fail", message=message)

    @classmethod
    def error(cls, message: str) -> ApiFailure:
        return cls(status="error", message=message)

    @classmethod
    def for_status_code(cls, status_code: int, message: str) -> ApiFailure:
        return cls.error(message) if status_code >= 500 else cls.fail(message)
