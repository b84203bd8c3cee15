"""
Request wrapper over requests

Five entry points issue a single HTTP call each and report the outcome as a
RequestResult, so callers never handle requests exceptions themselves:

    send_request(url, method, data, params, config)   any allowed verb
    send_data(url, data, config)                       POST
    update_data(url, data, config)                     PUT
    delete_data(url, config)                           DELETE
    get_data(url, config)                              GET

`config` holds transport options handed to requests as keyword arguments
(headers, timeout, auth, verify, ...), plus `params` for the query string
and `base_url` for resolving relative URLs.
"""

from typing import Any
from urllib.parse import urlsplit

import requests

from .config import Config, ConfigurationError
from .config import config as default_config
from .exceptions import HTMLResponseError, UnsupportedMethodError
from .http_client import HttpClient, default_http_client
from .logging_config import get_module_logger
from .results import ErrorType, RequestResult

logger = get_module_logger("request_wrapper")

ALLOWED_METHODS = ("get", "post", "put", "delete")

NETWORK_ERROR_MESSAGE = "Network Error - Unable to reach server"
DEFAULT_HTML_MARKER = "<!doctype html"

# The verb, target and body come from the function call, never from config
_RESERVED_CONFIG_KEYS = ("method", "url", "data")


def send_request(
    url: str,
    method: str = "get",
    data: Any = None,
    params: dict[str, Any] | None = None,
    config: dict[str, Any] | None = None,
    *,
    http_client: HttpClient | None = None,
    config_obj: Config | None = None,
) -> RequestResult:
    """
    Send a request with a caller-chosen verb

    GET requests carry only query parameters; every other verb carries the
    body and the query parameters. A string body containing an HTML doctype
    is reported as a failure.

    Args:
        url: Endpoint URL (absolute, or relative to base_url)
        method: One of get/post/put/delete, any case (default: "get")
        data: Request body for non-GET verbs (default: {})
        params: Query parameters (default: config["params"] or {})
        config: Transport options (headers, timeout, base_url, ...)
        http_client: HTTP client for making requests (optional)
        config_obj: Config object (optional, uses global config if None)

    Returns:
        RequestResult describing the response or the failure

    Raises:
        UnsupportedMethodError: If method is not an allowed verb. Raised before
            any network call.
    """
    lower_method = method.lower()
    if lower_method not in ALLOWED_METHODS:
        logger.error(f"Refusing to send {method} {url}: unsupported method")
        raise UnsupportedMethodError(method, ALLOWED_METHODS)

    config = config or {}
    if data is None:
        data = {}
    if params is None:
        params = config.get("params") or {}

    options = _strip_reserved(config)
    options["params"] = params
    if lower_method != "get":
        _attach_body(options, data)

    return _dispatch(
        lower_method, url, options, http_client, config_obj, check_html=True
    )


def send_data(
    url: str,
    data: Any = None,
    config: dict[str, Any] | None = None,
    *,
    http_client: HttpClient | None = None,
    config_obj: Config | None = None,
) -> RequestResult:
    """
    POST data to an endpoint

    Any "method" or "data" key in config is ignored: the verb is always POST
    and the body is always `data`.

    Args:
        url: Endpoint URL
        data: Request body (default: {})
        config: Transport options, may include "params"
        http_client: HTTP client for making requests (optional)
        config_obj: Config object (optional, uses global config if None)

    Returns:
        RequestResult describing the response or the failure
    """
    options = _verb_options(config)
    _attach_body(options, {} if data is None else data)
    return _dispatch("post", url, options, http_client, config_obj)


def update_data(
    url: str,
    data: Any = None,
    config: dict[str, Any] | None = None,
    *,
    http_client: HttpClient | None = None,
    config_obj: Config | None = None,
) -> RequestResult:
    """PUT data to an endpoint. Same contract as send_data()."""
    options = _verb_options(config)
    _attach_body(options, {} if data is None else data)
    return _dispatch("put", url, options, http_client, config_obj)


def delete_data(
    url: str,
    config: dict[str, Any] | None = None,
    *,
    http_client: HttpClient | None = None,
    config_obj: Config | None = None,
) -> RequestResult:
    """DELETE a resource. No body is sent."""
    return _dispatch("delete", url, _verb_options(config), http_client, config_obj)


def get_data(
    url: str,
    config: dict[str, Any] | None = None,
    *,
    http_client: HttpClient | None = None,
    config_obj: Config | None = None,
) -> RequestResult:
    """
    GET a resource

    Example:
        get_data(
            "https://api.example.com/items",
            {"params": {"page": 2}, "headers": {"Authorization": f"Bearer {token}"}},
        )
    """
    return _dispatch("get", url, _verb_options(config), http_client, config_obj)


def format_request_error(error: BaseException) -> RequestResult:
    """
    Classify a failed call into one of three failure results

    1. The error carries a response: the server answered (HTTP_ERROR)
    2. The error carries only a request: nothing answered (NETWORK_ERROR)
    3. Neither: the call failed before a request existed (CONFIG_ERROR)

    Args:
        error: Any exception raised while building, sending or decoding a request.
            A response without an integer status_code does not count as a response.

    Returns:
        RequestResult with success=False
    """
    response = getattr(error, "response", None)
    if isinstance(getattr(response, "status_code", None), int):
        return RequestResult(
            success=False,
            status=response.status_code,
            data=_decode_body(response),
            error_message=str(error),
            error_type=ErrorType.HTTP_ERROR,
        )

    if getattr(error, "request", None) is not None:
        return RequestResult(
            success=False,
            status=0,
            data=None,
            error_message=NETWORK_ERROR_MESSAGE,
            error_type=ErrorType.NETWORK_ERROR,
            original_error=str(error),
        )

    return RequestResult(
        success=False,
        status=0,
        data=None,
        error_message=str(error),
        error_type=ErrorType.CONFIG_ERROR,
    )


def _dispatch(
    method: str,
    url: str,
    options: dict[str, Any],
    http_client: HttpClient | None,
    config_obj: Config | None,
    check_html: bool = False,
) -> RequestResult:
    """Send one request and normalize whatever comes back."""
    if http_client is None:
        http_client = default_http_client
    if config_obj is None:
        config_obj = default_config

    target = url
    try:
        kwargs, base_url = _transport_options(options, config_obj)
        target = _resolve_url(url, base_url)

        logger.debug(f"{method.upper()} {target}")
        response = http_client.request(method, target, **kwargs)

        _check_status(response)
        body = _decode_body(response)

        if check_html:
            marker = config_obj.get("request.html_marker") or DEFAULT_HTML_MARKER
            if isinstance(body, str) and marker.lower() in body.lower():
                raise HTMLResponseError(target)

        return RequestResult(
            success=True,
            status=response.status_code,
            data=body,
            headers=dict(response.headers),
        )

    except Exception as e:
        result = format_request_error(e)
        logger.warning(
            f"{method.upper()} {target} failed: {result.error_type.value} "
            f"(status {result.status}): {e}"
        )
        return result


def _check_status(response: requests.Response) -> None:
    """Raise HTTPError for anything outside 200-299, redirects and 304 included."""
    status = response.status_code
    if not 200 <= status < 300:
        raise requests.HTTPError(f"Request failed with status code {status}", response=response)


def _transport_options(
    options: dict[str, Any], config_obj: Config
) -> tuple[dict[str, Any], str | None]:
    """
    Merge configured defaults under the call's options

    Returns:
        tuple of (requests keyword arguments, base URL or None)
    """
    defaults = config_obj.get("request.defaults") or {}
    if not isinstance(defaults, dict):
        raise ConfigurationError("must be a mapping", config_key="request.defaults")

    kwargs = {**defaults, **options}

    # Header mappings merge key by key, call headers win
    default_headers = defaults.get("headers")
    call_headers = options.get("headers")
    if isinstance(default_headers, dict) and isinstance(call_headers, dict):
        kwargs["headers"] = {**default_headers, **call_headers}

    base_url = kwargs.pop("base_url", None) or config_obj.get("request.base_url")
    return kwargs, base_url


def _resolve_url(url: str, base_url: str | None) -> str:
    """Join a relative URL onto base_url; absolute URLs are returned unchanged."""
    if not base_url:
        return url
    if urlsplit(url).scheme or url.startswith("//"):
        return url
    if not url:
        return base_url
    return f"{base_url.rstrip('/')}/{url.lstrip('/')}"


def _strip_reserved(config: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in config.items() if key not in _RESERVED_CONFIG_KEYS}


def _verb_options(config: dict[str, Any] | None) -> dict[str, Any]:
    """Options for the fixed-verb functions: reserved keys dropped, params defaulted."""
    config = config or {}
    options = _strip_reserved(config)
    options["params"] = config.get("params") or {}
    return options


def _attach_body(options: dict[str, Any], data: Any) -> None:
    """Structured bodies go out as JSON, anything else (str, bytes, files) raw."""
    if isinstance(data, (dict, list, tuple)):
        options["json"] = data
    else:
        options["data"] = data


def _decode_body(response: requests.Response) -> Any:
    """
    Decode a response body

    Empty bodies become "", JSON bodies are parsed, anything else is text.
    """
    if not response.content:
        return ""
    try:
        return response.json()
    except ValueError:
        return response.text
