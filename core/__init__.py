# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL the logic behind the MCP tools and the agent
# wiring that does not depend on an agent or MCP framework.
#
# CRITICAL ARCHITECTURAL RULE:
#   Nothing in this package imports Google ADK or FastMCP.  The arithmetic
#   and zoo lookups are plain functions over plain data, and you can call
#   them from a bare Python REPL with zero network access.
#
#   The few modules that touch the outside world (auth.py for ID tokens,
#   deploy.py for gcloud) do so through narrow functions that the tests
#   replace with mocks.
# =============================================================================
