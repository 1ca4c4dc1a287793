# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP servers and the smoke-test client.
#
# ARCHITECTURAL ROLE:
#   tools/ is the "translation layer" between MCP and the logic in core/.
#   Each server:
#     1. Imports pure functions from core/
#     2. Wraps them in FastMCP tool decorators
#     3. Handles serialization (dataclasses → dicts for JSON)
#     4. Reads its port/transport from the environment and starts listening
#
#   math_server.py   add, subtract
#   zoo_server.py    get_animals_by_species, get_animal_details, list_zoo_species
#   client.py        connects to either server and makes a sample call
#   log.py           stderr logging + the shared startup routine
#
# TOOL CONTRACT QUALITY:
#   The docstrings on each tool are what the model reads to decide when to
#   call it, so they say what the tool is FOR, not just what it returns.
# =============================================================================
