"""Data models."""

from .common import ErrorResponse, OKResponse, ResponseCode
from .volume import LogicalVolume, Mount

__all__ = [
    "ErrorResponse",
    "OKResponse",
    "ResponseCode",
    "LogicalVolume",
    "Mount",
]
