"""
Custom exceptions for easy-request
"""


class EasyRequestError(Exception):
    """Base exception for all easy-request errors"""

    pass


class UnsupportedMethodError(EasyRequestError, ValueError):
    """
    Raised when send_request() is called with an HTTP verb outside the allowed set.

    This is the only error allowed to escape a public request function; it is
    raised before any network call is attempted.
    """

    def __init__(self, method: str, allowed: tuple[str, ...]):
        self.method = method
        self.allowed = allowed
        super().__init__(f"Method {method} is not supported")


class HTMLResponseError(EasyRequestError):
    """
    Raised when an endpoint answers with an HTML page instead of the expected payload.

    This usually means a misrouted URL or a proxy/error page. The exception
    carries no response or request, so it is normalized as a CONFIG_ERROR.
    """

    def __init__(self, url: str | None = None):
        self.url = url
        super().__init__("HTML response received")


class ConfigurationError(EasyRequestError):
    """
    Raised when configuration values are missing or invalid.
    """

    def __init__(self, message: str, config_key: str | None = None):
        self.config_key = config_key
        if config_key:
            super().__init__(f"Configuration error for '{config_key}': {message}")
        else:
            super().__init__(f"Configuration error: {message}")
