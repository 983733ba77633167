"""API response envelope."""

from enum import Enum
from typing import Any

from pydantic import BaseModel


class ResponseCode(str, Enum):
    OK = "OK"
    ERROR = "ERROR"


class OKResponse(BaseModel):
    code: ResponseCode = ResponseCode.OK
    details: Any = None


class ErrorResponse(BaseModel):
    code: ResponseCode = ResponseCode.ERROR
    message: str
