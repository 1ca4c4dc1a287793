# =============================================================================
# agent/__init__.py
# =============================================================================
# This package contains the Google ADK agent configuration.
#
# ARCHITECTURAL ROLE:
#   The agent/ layer is the coordinator.  It:
#     1. Receives the visitor's question ("How many penguins do you have?")
#     2. Hands it to a research agent that calls the zoo MCP tools
#     3. Hands the research to a formatting agent that writes the reply
#
# WHAT THE AGENT IS NOT:
#   - It is NOT the zoo data (that's in core/)
#   - It is NOT the tool implementations (that's in tools/, deployed
#     separately as a Cloud Run service)
# =============================================================================
