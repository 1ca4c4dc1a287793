"""Unit tests for the zoo guide agent configuration."""

import inspect
from unittest.mock import Mock, patch

import pytest
from google.adk.agents import SequentialAgent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import McpToolset

from agent.zoo_guide_agent import add_prompt_to_state, create_agent, resolve_model
from core.config import AgentSettings, ConfigurationError


class TestAddPromptToState:
    def test_saves_prompt(self):
        tool_context = Mock()
        tool_context.state = {}
        result = add_prompt_to_state(tool_context, "How old is Leo?")
        assert result == {"status": "success"}
        assert tool_context.state == {"PROMPT": "How old is Leo?"}

    def test_keyword_call_matches_tool_signature(self):
        # ADK passes tool arguments by name, with tool_context injected
        tool_context = Mock()
        tool_context.state = {}
        add_prompt_to_state(prompt="Where are the penguins?", tool_context=tool_context)
        assert tool_context.state["PROMPT"] == "Where are the penguins?"

    def test_first_parameter_is_tool_context(self):
        params = list(inspect.signature(add_prompt_to_state).parameters)
        assert params == ["tool_context", "prompt"]


class TestResolveModel:
    def test_gemini_passes_through(self):
        assert resolve_model("gemini-2.5-flash") == "gemini-2.5-flash"

    def test_provider_prefix_uses_litellm(self):
        model = resolve_model("openrouter/openai/gpt-4o")
        assert isinstance(model, LiteLlm)
        assert model.model == "openrouter/openai/gpt-4o"

    def test_unknown_prefix_passes_through(self):
        name = "projects/p/locations/us-central1/endpoints/123"
        assert resolve_model(name) == name


class TestCreateAgent:
    """Test the agent tree create_agent builds."""

    def test_structure(self):
        settings = AgentSettings(
            mcp_server_url="http://localhost:8080/mcp", use_auth=False
        )
        root = create_agent(settings)

        assert root.name == "greeter"
        assert [sub.name for sub in root.sub_agents] == ["tour_guide_workflow"]

        workflow = root.sub_agents[0]
        assert isinstance(workflow, SequentialAgent)
        researcher, formatter = workflow.sub_agents
        assert researcher.name == "comprehensive_researcher"
        assert researcher.output_key == "research_data"
        assert len(researcher.tools) == 1
        assert isinstance(researcher.tools[0], McpToolset)
        assert formatter.name == "response_formatter"
        assert "{research_data}" in formatter.instruction
        assert "{PROMPT}" in researcher.instruction

    @patch("agent.zoo_guide_agent.bearer_headers")
    def test_no_token_without_auth(self, mock_headers):
        create_agent(AgentSettings(mcp_server_url="http://localhost:8080/mcp", use_auth=False))
        mock_headers.assert_not_called()

    @patch("agent.zoo_guide_agent.bearer_headers", return_value={"Authorization": "Bearer t"})
    def test_token_for_cloud_run(self, mock_headers):
        url = "https://zoo-mcp-server-abc.a.run.app/mcp/"
        create_agent(AgentSettings(mcp_server_url=url, use_auth=True))
        mock_headers.assert_called_once_with(url)

    def test_reads_environment(self, monkeypatch):
        monkeypatch.delenv("MCP_SERVER_URL", raising=False)
        with pytest.raises(ConfigurationError, match="MCP_SERVER_URL"):
            create_agent()
