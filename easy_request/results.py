"""Normalized result shape shared by every request function."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorType(str, Enum):
    """Failure classes produced by format_request_error()"""

    HTTP_ERROR = "HTTP_ERROR"
    NETWORK_ERROR = "NETWORK_ERROR"
    CONFIG_ERROR = "CONFIG_ERROR"


@dataclass
class RequestResult:
    """
    Uniform outcome of a wrapped request.

    On success only status, data and headers are meaningful. On failure
    status is 0 when no response arrived, and error_type tells which of the
    three failure classes applied. original_error is set for network
    failures only.
    """

    success: bool
    status: int
    data: Any = None
    headers: dict[str, str] = field(default_factory=dict)
    error_message: str | None = None
    error_type: ErrorType | None = None
    original_error: str | None = None

    def __bool__(self) -> bool:
        return self.success

    def to_dict(self) -> dict[str, Any]:
        """
        Render the camelCase mapping (errorMessage, errorType, originalError).

        Returns:
            Dict with success/status/data plus headers (success) or
            errorMessage/errorType/originalError (failure)
        """
        result: dict[str, Any] = {
            "success": self.success,
            "status": self.status,
            "data": self.data,
        }

        if self.success:
            result["headers"] = dict(self.headers)
            return result

        result["errorMessage"] = self.error_message
        result["errorType"] = self.error_type.value if self.error_type else None
        if self.original_error is not None:
            result["originalError"] = self.original_error

        return result
