"""
Tests for the HttpClient abstraction

These tests verify that the HttpClient wrapper correctly delegates to requests
and supports dependency injection for testing.
"""

from unittest.mock import Mock, patch

from easy_request.http_client import HttpClient, default_http_client


class TestHttpClient:
    """Test HttpClient wrapper functionality"""

    @patch("easy_request.http_client.requests.request")
    def test_request_delegates_to_requests(self, mock_request):
        """Should forward verb, url and kwargs to requests.request"""
        mock_response = Mock()
        mock_response.status_code = 200
        mock_request.return_value = mock_response

        client = HttpClient()
        response = client.request("delete", "https://example.com/items/1", timeout=5)

        mock_request.assert_called_once_with("delete", "https://example.com/items/1", timeout=5)
        assert response == mock_response

    @patch("easy_request.http_client.requests.request")
    def test_get_basic_request(self, mock_request):
        """Should make a basic GET request"""
        mock_request.return_value = Mock()

        client = HttpClient()
        client.get("https://example.com")

        mock_request.assert_called_once_with("get", "https://example.com")

    @patch("easy_request.http_client.requests.request")
    def test_get_with_params_and_headers(self, mock_request):
        """Should pass query parameters and headers"""
        mock_request.return_value = Mock()

        client = HttpClient()
        params = {"page": 1, "size": 100}
        headers = {"Accept": "application/json"}
        client.get("https://api.example.com", params=params, headers=headers)

        call_kwargs = mock_request.call_args[1]
        assert call_kwargs["params"] == params
        assert call_kwargs["headers"] == headers

    @patch("easy_request.http_client.requests.request")
    def test_get_with_additional_kwargs(self, mock_request):
        """Should pass additional kwargs through"""
        mock_request.return_value = Mock()

        client = HttpClient()
        client.get("https://example.com", verify=False, allow_redirects=True)

        call_kwargs = mock_request.call_args[1]
        assert not call_kwargs["verify"]
        assert call_kwargs["allow_redirects"]

    @patch("easy_request.http_client.requests.request")
    def test_post_with_json(self, mock_request):
        """Should send JSON payload with POST"""
        mock_request.return_value = Mock()

        client = HttpClient()
        json_data = {"key": "value", "number": 42}
        client.post("https://api.example.com", json=json_data)

        assert mock_request.call_args[0][0] == "post"
        assert mock_request.call_args[1]["json"] == json_data

    @patch("easy_request.http_client.requests.request")
    def test_put_with_form_data(self, mock_request):
        """Should send raw data with PUT"""
        mock_request.return_value = Mock()

        client = HttpClient()
        client.put("https://api.example.com", data="raw-body", timeout=60)

        assert mock_request.call_args[0][0] == "put"
        assert mock_request.call_args[1]["data"] == "raw-body"
        assert mock_request.call_args[1]["timeout"] == 60

    @patch("easy_request.http_client.requests.request")
    def test_delete_request(self, mock_request):
        """Should send DELETE without a body"""
        mock_request.return_value = Mock()

        client = HttpClient()
        client.delete("https://api.example.com/items/1", params={"force": True})

        assert mock_request.call_args[0][0] == "delete"
        call_kwargs = mock_request.call_args[1]
        assert call_kwargs["params"] == {"force": True}
        assert "json" not in call_kwargs
        assert "data" not in call_kwargs


class TestHttpClientSession:
    """Test sending through a caller-owned session"""

    @patch("easy_request.http_client.requests.request")
    def test_uses_session_when_given(self, mock_request):
        """Should route through session.request instead of module-level requests"""
        session = Mock()
        client = HttpClient(session=session)

        client.get("https://example.com", params={"q": "x"})

        session.request.assert_called_once_with("get", "https://example.com", params={"q": "x"})
        mock_request.assert_not_called()

    def test_session_is_not_closed(self):
        """Should leave the session lifecycle to the caller"""
        session = Mock()
        client = HttpClient(session=session)

        client.post("https://example.com", json={})

        session.close.assert_not_called()

    def test_default_client_has_no_session(self):
        """Default instance should use module-level requests"""
        assert isinstance(default_http_client, HttpClient)
        assert default_http_client.session is None
