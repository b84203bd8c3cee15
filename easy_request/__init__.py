"""
easy-request - uniform results for everyday HTTP calls

Wraps requests so every call returns a RequestResult instead of raising.
"""

from .exceptions import (
    ConfigurationError,
    EasyRequestError,
    HTMLResponseError,
    UnsupportedMethodError,
)
from .http_client import HttpClient, default_http_client
from .logging_config import setup_logging
from .request_wrapper import (
    ALLOWED_METHODS,
    delete_data,
    format_request_error,
    get_data,
    send_data,
    send_request,
    update_data,
)
from .results import ErrorType, RequestResult

__version__ = "1.0.0"

__all__ = [
    "ALLOWED_METHODS",
    "ConfigurationError",
    "EasyRequestError",
    "ErrorType",
    "HTMLResponseError",
    "HttpClient",
    "RequestResult",
    "UnsupportedMethodError",
    "default_http_client",
    "delete_data",
    "format_request_error",
    "get_data",
    "send_data",
    "send_request",
    "setup_logging",
    "update_data",
]
