# =============================================================================
# core/auth.py  —  ID tokens for calling a private Cloud Run service
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   A Cloud Run service deployed with --no-allow-unauthenticated rejects any
#   request that doesn't carry a Google-signed ID token in the
#   Authorization header.  The caller's identity must also hold
#   roles/run.invoker on the service (see core/deploy.py).
#
#   This module gets that token using Application Default Credentials:
#     - on Cloud Run / GCE: the attached service account (metadata server)
#     - locally: a service-account key in GOOGLE_APPLICATION_CREDENTIALS
#
# THE AUDIENCE:
#   The token's audience must be the SERVICE URL, not the endpoint URL.
#   MCP_SERVER_URL is usually "https://zoo-mcp-server-xyz.a.run.app/mcp/",
#   so the path is stripped before asking for a token.
#
# WHAT THIS MODULE DOES NOT DO:
#   Verify tokens.  Cloud Run's front end does that before our container
#   ever sees the request.
# =============================================================================

import logging
from urllib.parse import urlparse

import google.auth.exceptions
import google.auth.transport.requests
import google.oauth2.id_token

from core.config import ConfigurationError

logger = logging.getLogger(__name__)


class AuthenticationError(RuntimeError):
    """An ID token could not be minted for the target service."""


def audience_for(url: str) -> str:
    """Return the token audience (scheme + host) for a service URL.

    >>> audience_for("https://zoo-mcp-server-abc-ew.a.run.app/mcp/")
    'https://zoo-mcp-server-abc-ew.a.run.app'
    """
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigurationError(f"Cannot derive a token audience from {url!r}")
    return f"{parsed.scheme}://{parsed.netloc}"


def fetch_id_token(url: str) -> str:
    """Mint an ID token for the service behind `url`.

    Raises:
        AuthenticationError: no credentials were found, the credentials
            could not be refreshed (revoked or deleted key), or the token
            endpoint / metadata server could not be reached.
    """
    audience = audience_for(url)
    request = google.auth.transport.requests.Request()
    try:
        token = google.oauth2.id_token.fetch_id_token(request, audience)
    except google.auth.exceptions.DefaultCredentialsError as e:
        raise AuthenticationError(
            f"Could not fetch an ID token for {audience}. Run on Google Cloud "
            "or point GOOGLE_APPLICATION_CREDENTIALS at a service account key."
        ) from e
    except (
        google.auth.exceptions.RefreshError,
        google.auth.exceptions.TransportError,
    ) as e:
        raise AuthenticationError(
            f"Could not fetch an ID token for {audience}: {e}"
        ) from e
    logger.info("Fetched ID token for audience %s", audience)
    return token


def bearer_headers(url: str) -> dict[str, str]:
    """HTTP headers that authenticate a request to the service behind `url`."""
    return {"Authorization": f"Bearer {fetch_id_token(url)}"}
