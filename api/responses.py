"""
Uniform response envelope.

Success: {"success": true, "data": ..., "message": ..., "timestamp": ...}
Failure: {"success": false, "error": ..., "timestamp": ...}
"""
from datetime import datetime, timezone
from typing import Any, Optional

from fastapi import status
from fastapi.responses import JSONResponse
from pydantic import BaseModel


class ApiResponse(BaseModel):
    """Envelope wrapped around every orders endpoint response."""

    success: bool
    data: Optional[Any] = None
    message: Optional[str] = None
    error: Optional[str] = None
    timestamp: datetime

    @classmethod
    def ok(cls, data: Any, message: str) -> "ApiResponse":
        return cls(success=True, data=data, message=message, timestamp=datetime.now(timezone.utc))

    @classmethod
    def fail(cls, error: str) -> "ApiResponse":
        return cls(success=False, error=error, timestamp=datetime.now(timezone.utc))

    def render(self, status_code: int = status.HTTP_200_OK) -> JSONResponse:
        content = self.model_dump(mode="json", by_alias=True)
        if self.success:
            content.pop("error")
        else:
            content.pop("data")
            content.pop("message")
        return JSONResponse(status_code=status_code, content=content)


def success_response(data: Any, message: str, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    return ApiResponse.ok(data, message).render(status_code)


def error_response(error: str, status_code: int) -> JSONResponse:
    return ApiResponse.fail(error).render(status_code)
