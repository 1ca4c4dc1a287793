# =============================================================================
# tools/zoo_server.py  —  FastMCP zoo data server
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes the zoo table (core/zoo.py) as MCP tools for the zoo guide
#   agent:
#
#     get_animals_by_species   "Which penguins live here?"
#     get_animal_details       "Tell me about Leo."
#     list_zoo_species         "What kinds of animals do you have?"
#
# MISSES ARE NOT ERRORS:
#   An unknown species returns [] and an unknown name returns {}.  The
#   agent reads an empty result and tells the visitor; raising would turn
#   an ordinary "we don't have that" into a tool failure the model has to
#   recover from.
#
# RUNNING THIS SERVER:
#   Locally:     python -m tools.zoo_server           (http://0.0.0.0:8080/mcp)
#   Cloud Run:   python deploy.py deploy zoo-mcp-server
# =============================================================================

from dataclasses import asdict
from typing import Any

from dotenv import load_dotenv
from fastmcp import FastMCP

from core import zoo
from core.config import load_server_settings
from tools.log import (
    _log_request,
    _log_response,
    _log_status,
    configure_logging,
    run_server,
)

mcp = FastMCP("Zoo Animal MCP Server")


@mcp.tool()
def get_animals_by_species(species: str) -> list[dict[str, Any]]:
    """Retrieves all animals of a specific species from the zoo.

    Can also be used to collect the base data for aggregate queries
    of animals of a specific species - like counting the number of penguins
    or finding the oldest lion.

    Args:
        species: The species of the animal (e.g., 'penguin', 'lion', 'polar bear').

    Returns:
        A list of animal records, each with species, name, age, enclosure
        and trail.  Empty if the zoo has no animals of that species.
    """
    _log_request("get_animals_by_species", species=species)
    animals = zoo.get_animals_by_species(species)
    if not animals:
        _log_status(f"No '{species}' at the zoo. Species on site: {zoo.list_species()}")
    return _log_response(
        "get_animals_by_species", [asdict(animal) for animal in animals]
    )


@mcp.tool()
def get_animal_details(name: str) -> dict[str, Any]:
    """Retrieves the details of a specific animal by its name.

    Args:
        name: The name of the animal (e.g., 'Leo', 'Waddles').

    Returns:
        The animal's record (species, name, age, enclosure, trail), or an
        empty object if no animal has that name.
    """
    _log_request("get_animal_details", name=name)
    animal = zoo.get_animal_details(name)
    if animal is None:
        _log_status(f"No animal named '{name}'")
        return _log_response("get_animal_details", {})
    return _log_response("get_animal_details", asdict(animal))


@mcp.tool()
def list_zoo_species() -> list[str]:
    """Lists every species that lives at the zoo.

    Call this when the visitor asks what animals there are, or before
    get_animals_by_species if you are unsure how a species is spelled.
    """
    _log_request("list_zoo_species")
    return _log_response("list_zoo_species", zoo.list_species())


def main() -> None:
    load_dotenv()
    configure_logging()
    run_server(mcp, load_server_settings())


if __name__ == "__main__":
    main()
