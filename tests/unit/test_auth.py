"""Unit tests for ID token helpers."""

from unittest.mock import patch

import google.auth.exceptions
import pytest

from core.auth import AuthenticationError, audience_for, bearer_headers, fetch_id_token
from core.config import ConfigurationError


class TestAudienceFor:
    """Test audience derivation from service URLs."""

    @pytest.mark.parametrize(
        "url",
        [
            "https://zoo-mcp-server-abc-ew.a.run.app/mcp/",
            "https://zoo-mcp-server-abc-ew.a.run.app/mcp",
            "https://zoo-mcp-server-abc-ew.a.run.app/sse",
            "https://zoo-mcp-server-abc-ew.a.run.app",
        ],
    )
    def test_strips_path(self, url):
        assert audience_for(url) == "https://zoo-mcp-server-abc-ew.a.run.app"

    def test_keeps_port(self):
        assert audience_for("http://localhost:8080/mcp") == "http://localhost:8080"

    @pytest.mark.parametrize("url", ["zoo.a.run.app/mcp", "ftp://zoo/mcp", ""])
    def test_rejects_non_http(self, url):
        with pytest.raises(ConfigurationError):
            audience_for(url)


class TestFetchIdToken:
    """Test token fetching with google-auth mocked out."""

    @patch("google.oauth2.id_token.fetch_id_token", return_value="token-123")
    def test_fetches_for_service_audience(self, mock_fetch):
        assert fetch_id_token("https://zoo.a.run.app/mcp/") == "token-123"
        _request, audience = mock_fetch.call_args.args
        assert audience == "https://zoo.a.run.app"

    @patch(
        "google.oauth2.id_token.fetch_id_token",
        side_effect=google.auth.exceptions.DefaultCredentialsError("no creds"),
    )
    def test_missing_credentials(self, _mock_fetch):
        with pytest.raises(AuthenticationError, match="https://zoo.a.run.app"):
            fetch_id_token("https://zoo.a.run.app/mcp/")

    @pytest.mark.parametrize(
        "error",
        [
            google.auth.exceptions.RefreshError("invalid_grant: account deleted"),
            google.auth.exceptions.TransportError("metadata server unreachable"),
        ],
    )
    def test_refresh_and_transport_failures(self, error):
        with patch("google.oauth2.id_token.fetch_id_token", side_effect=error):
            with pytest.raises(AuthenticationError, match=str(error)) as exc_info:
                fetch_id_token("https://zoo.a.run.app/mcp/")
        assert exc_info.value.__cause__ is error

    @patch(
        "google.oauth2.id_token.fetch_id_token",
        side_effect=google.auth.exceptions.RefreshError("invalid_grant"),
    )
    def test_bearer_headers_propagates_auth_error(self, _mock_fetch):
        with pytest.raises(AuthenticationError):
            bearer_headers("https://zoo.a.run.app/mcp/")

    @patch("google.oauth2.id_token.fetch_id_token", return_value="abc")
    def test_bearer_headers(self, _mock_fetch):
        assert bearer_headers("https://zoo.a.run.app/mcp/") == {
            "Authorization": "Bearer abc"
        }
