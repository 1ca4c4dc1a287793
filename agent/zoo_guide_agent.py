# =============================================================================
# agent/zoo_guide_agent.py  —  Google ADK zoo guide agent
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Builds the agent that answers zoo visitors' questions using the zoo MCP
#   server (tools/zoo_server.py) deployed on Cloud Run.
#
# HOW IT'S WIRED:
#
#   greeter (root)
#     │  tool: add_prompt_to_state  → state["PROMPT"]
#     │  transfers to ↓
#     ▼
#   tour_guide_workflow (SequentialAgent)
#     1. comprehensive_researcher   tools: zoo MCP server (remote, over HTTP)
#                                   output → state["research_data"]
#     2. response_formatter         reads state["research_data"], replies
#
# MCP CONNECTION:
#   Unlike a local stdio server, the zoo server is a remote Cloud Run
#   service.  ADK talks to it over streamable HTTP at MCP_SERVER_URL.
#   The service is deployed with --no-allow-unauthenticated, so every
#   request carries an ID token (core/auth.py) in the Authorization header,
#   and the identity running this agent needs roles/run.invoker.
#
#   Against localhost (a local server or `gcloud run services proxy`) no
#   token is attached; see MCP_AUTH in core/config.py.
#
# MODEL:
#   Gemini model names ("gemini-2.5-flash") go to ADK directly.
#   Provider-prefixed names ("openrouter/openai/gpt-4o") go through LiteLlm,
#   which reads the provider's API key from the environment.
# =============================================================================

import logging
from typing import Any

from google.adk.agents import Agent, SequentialAgent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import McpToolset
from google.adk.tools.mcp_tool.mcp_session_manager import StreamableHTTPConnectionParams
from google.adk.tools.tool_context import ToolContext

from agent.prompt import (
    FORMATTER_INSTRUCTION,
    PROMPT_STATE_KEY,
    RESEARCH_STATE_KEY,
    RESEARCHER_INSTRUCTION,
    ROOT_INSTRUCTION,
)
from core.auth import bearer_headers
from core.config import AgentSettings, load_agent_settings

logger = logging.getLogger(__name__)

# First path segment of a model name that LiteLlm should route.
LITELLM_PROVIDERS = frozenset({
    "anthropic",
    "azure",
    "bedrock",
    "groq",
    "mistral",
    "ollama",
    "ollama_chat",
    "openai",
    "openrouter",
})

# Zoo tools the researcher may call.  The server may grow more tools; the
# agent only sees these.
ZOO_TOOLS = ["get_animals_by_species", "get_animal_details", "list_zoo_species"]


def add_prompt_to_state(tool_context: ToolContext, prompt: str) -> dict[str, str]:
    """Saves the visitor's initial prompt to the state."""
    tool_context.state[PROMPT_STATE_KEY] = prompt
    logger.info(f"[State updated] Added to {PROMPT_STATE_KEY}: {prompt}")
    return {"status": "success"}


def resolve_model(name: str) -> Any:
    """Return what Agent(model=...) should get for a model name."""
    provider = name.split("/", 1)[0] if "/" in name else ""
    if provider in LITELLM_PROVIDERS:
        return LiteLlm(model=name)
    return name


def build_mcp_toolset(settings: AgentSettings) -> McpToolset:
    """Connect to the zoo MCP server, authenticating when required.

    The ID token is minted once, here.  Google ID tokens last an hour, so a
    long-lived process should call create_agent() again to refresh it.
    """
    headers = bearer_headers(settings.mcp_server_url) if settings.use_auth else {}
    logger.info(
        f"Connecting to MCP server at {settings.mcp_server_url} "
        f"({'authenticated' if settings.use_auth else 'no auth'})"
    )
    return McpToolset(
        connection_params=StreamableHTTPConnectionParams(
            url=settings.mcp_server_url,
            headers=headers,
        ),
        tool_filter=ZOO_TOOLS,
    )


def create_agent(settings: AgentSettings | None = None) -> Agent:
    """Create the root zoo guide agent.

    Args:
        settings: Connection and model settings.  Read from the environment
            (MCP_SERVER_URL, MODEL, MCP_AUTH) when omitted.

    Returns:
        The greeter agent, with the research workflow as its sub-agent.

    Raises:
        ConfigurationError: MCP_SERVER_URL is not set or not a URL.
        AuthenticationError: authentication is on and no ID token could be minted.
    """
    settings = settings or load_agent_settings()
    model = resolve_model(settings.model)

    comprehensive_researcher = Agent(
        name="comprehensive_researcher",
        model=model,
        description="The primary researcher that can access the zoo's internal animal records.",
        instruction=RESEARCHER_INSTRUCTION,
        tools=[build_mcp_toolset(settings)],
        output_key=RESEARCH_STATE_KEY,
    )

    response_formatter = Agent(
        name="response_formatter",
        model=model,
        description="Synthesizes all information into a friendly, readable response.",
        instruction=FORMATTER_INSTRUCTION,
    )

    tour_guide_workflow = SequentialAgent(
        name="tour_guide_workflow",
        description="The main workflow for handling a visitor's request about an animal.",
        sub_agents=[comprehensive_researcher, response_formatter],
    )

    return Agent(
        name="greeter",
        model=model,
        description="The main entry point for the Zoo Tour Guide.",
        instruction=ROOT_INSTRUCTION,
        tools=[add_prompt_to_state],
        sub_agents=[tour_guide_workflow],
    )
