"""HTTP client abstraction for dependency injection and testability."""

from typing import Any

import requests


class HttpClient:
    """
    HTTP client wrapper for making requests.

    This abstraction enables:
    - Dependency injection for testing
    - Easy mocking in unit tests
    - Reusing a caller-owned requests.Session
    """

    def __init__(self, session: requests.Session | None = None):
        """
        Initialize the client

        Args:
            session: Optional requests.Session to send through. The client never
                     closes it; its lifecycle belongs to the caller.
        """
        self.session = session

    def request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        """
        Send a request with an arbitrary verb.

        Args:
            method: HTTP verb (e.g. "get", "post")
            url: URL to request
            **kwargs: Transport options passed to requests (params, json, data,
                      headers, timeout, auth, verify, ...)

        Returns:
            requests.Response object
        """
        if self.session is not None:
            return self.session.request(method, url, **kwargs)
        return requests.request(method, url, **kwargs)

    # Verb shortcuts for direct use; the request functions always go through request()

    def get(self, url: str, **kwargs: Any) -> requests.Response:
        """GET url. Query parameters go in params=."""
        return self.request("get", url, **kwargs)

    def post(self, url: str, **kwargs: Any) -> requests.Response:
        """POST url. The body goes in json= or data=."""
        return self.request("post", url, **kwargs)

    def put(self, url: str, **kwargs: Any) -> requests.Response:
        """PUT url. The body goes in json= or data=."""
        return self.request("put", url, **kwargs)

    def delete(self, url: str, **kwargs: Any) -> requests.Response:
        return self.request("delete", url, **kwargs)


# Default instance used when callers don't inject their own client
default_http_client = HttpClient()
