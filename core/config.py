# =============================================================================
# core/config.py  —  Environment-driven settings
# =============================================================================
#
# Everything configurable in this project comes from environment variables,
# because that is how Cloud Run hands configuration to a container:
#
#   Servers (tools/*_server.py):
#     PORT            Port to listen on.  Cloud Run always sets this.  (8080)
#     HOST            Interface to bind.                             (0.0.0.0)
#     MCP_TRANSPORT   "http" (streamable, /mcp), "sse" (/sse) or "stdio".
#
#   Agent (agent/, main.py):
#     MCP_SERVER_URL  Full URL of the deployed MCP endpoint.     (required)
#     MODEL           Model name for the agent.         (gemini-2.5-flash)
#     MCP_AUTH        "auto", "true" or "false".                    (auto)
#
# Local development reads the same variables from a .env file.  Loading
# that file is the job of the entry points (main.py, the server __main__
# blocks): importing core must never have side effects on os.environ.
#
# Every loader takes an optional `environ` mapping so tests can pass a
# plain dict instead of patching os.environ.
# =============================================================================

import os
from collections.abc import Mapping
from dataclasses import dataclass
from urllib.parse import urlparse


class ConfigurationError(ValueError):
    """A required setting is missing or has an unusable value."""


DEFAULT_PORT = 8080
DEFAULT_HOST = "0.0.0.0"
DEFAULT_MODEL = "gemini-2.5-flash"

# Transport name → HTTP path the MCP endpoint is mounted on.
_TRANSPORT_PATHS: dict[str, str | None] = {
    "http": "/mcp",
    "sse": "/sse",
    "stdio": None,
}

_LOCAL_HOSTS = {"localhost", "127.0.0.1", "::1"}


@dataclass(frozen=True)
class ServerSettings:
    """How an MCP server process should listen."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    transport: str = "http"
    path: str | None = "/mcp"


@dataclass(frozen=True)
class AgentSettings:
    """Where the agent finds its MCP server and which model drives it."""

    mcp_server_url: str
    model: str = DEFAULT_MODEL
    use_auth: bool = True


def _env(environ: Mapping[str, str] | None) -> Mapping[str, str]:
    return os.environ if environ is None else environ


def require_env(name: str, environ: Mapping[str, str] | None = None) -> str:
    """Return a non-empty environment variable or raise ConfigurationError."""
    value = _env(environ).get(name, "").strip()
    if not value:
        raise ConfigurationError(f"The environment variable {name} is not set.")
    return value


def parse_port(raw: str) -> int:
    try:
        port = int(raw)
    except ValueError:
        raise ConfigurationError(f"PORT must be an integer, got {raw!r}") from None
    if not 1 <= port <= 65535:
        raise ConfigurationError(f"PORT must be between 1 and 65535, got {port}")
    return port


def load_server_settings(environ: Mapping[str, str] | None = None) -> ServerSettings:
    """Build ServerSettings from PORT, HOST and MCP_TRANSPORT."""
    env = _env(environ)

    raw_port = env.get("PORT", "").strip()
    port = parse_port(raw_port) if raw_port else DEFAULT_PORT

    transport = env.get("MCP_TRANSPORT", "http").strip().lower() or "http"
    if transport not in _TRANSPORT_PATHS:
        allowed = ", ".join(sorted(_TRANSPORT_PATHS))
        raise ConfigurationError(
            f"MCP_TRANSPORT must be one of {allowed}, got {transport!r}"
        )

    return ServerSettings(
        host=env.get("HOST", "").strip() or DEFAULT_HOST,
        port=port,
        transport=transport,
        path=_TRANSPORT_PATHS[transport],
    )


def is_local_url(url: str) -> bool:
    """True when the URL points at this machine (e.g. a gcloud proxy)."""
    return (urlparse(url).hostname or "") in _LOCAL_HOSTS


def _parse_auth_mode(raw: str, url: str) -> bool:
    mode = raw.strip().lower() or "auto"
    if mode == "auto":
        # `gcloud run services proxy` already authenticates on our behalf,
        # and a local server has no IAM in front of it.
        return not is_local_url(url)
    if mode in ("true", "1", "yes"):
        return True
    if mode in ("false", "0", "no"):
        return False
    raise ConfigurationError(f"MCP_AUTH must be auto, true or false, got {raw!r}")


def load_agent_settings(environ: Mapping[str, str] | None = None) -> AgentSettings:
    """Build AgentSettings from MCP_SERVER_URL, MODEL and MCP_AUTH."""
    env = _env(environ)
    url = require_env("MCP_SERVER_URL", env)

    scheme = urlparse(url).scheme
    if scheme not in ("http", "https"):
        raise ConfigurationError(
            f"MCP_SERVER_URL must be an http(s) URL, got {url!r}"
        )

    return AgentSettings(
        mcp_server_url=url,
        model=env.get("MODEL", "").strip() or DEFAULT_MODEL,
        use_auth=_parse_auth_mode(env.get("MCP_AUTH", "auto"), url),
    )
