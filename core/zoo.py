# =============================================================================
# core/zoo.py  —  Zoo animal table & lookups
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Holds the zoo's resident list and answers two questions about it:
#     - "Which animals of species X live here?"
#     - "Tell me about the animal called Y."
#
# WHY A HARD-CODED TABLE?
#   The zoo server exists to show an agent calling a remote MCP tool.  The
#   data is a fixture, so it lives in code.  The INTERFACE is what matters:
#   swapping in a database later changes this module and nothing else.
#
# MATCHING RULES:
#   Both lookups are a linear scan with a case-insensitive EXACT match.
#   "Lion", "lion" and " LION " all find the lions; "lio" finds nothing.
#   A miss is not an error: species lookups return [] and name lookups
#   return None (the tool layer turns that into {}).
# =============================================================================

from core.models import Animal


# -----------------------------------------------------------------------------
# The residents
# -----------------------------------------------------------------------------
# 33 animals across 8 species.  Names are unique across the whole table,
# which is what makes get_animal_details() well defined.
# -----------------------------------------------------------------------------
ZOO_ANIMALS: tuple[Animal, ...] = (
    Animal("lion", "Leo", 7, "The Big Cat Plains", "Savannah Heights"),
    Animal("lion", "Nala", 6, "The Big Cat Plains", "Savannah Heights"),
    Animal("lion", "Simba", 3, "The Big Cat Plains", "Savannah Heights"),
    Animal("lion", "King", 8, "The Big Cat Plains", "Savannah Heights"),
    Animal("penguin", "Waddles", 2, "The Arctic Exhibit", "Polar Path"),
    Animal("penguin", "Pip", 4, "The Arctic Exhibit", "Polar Path"),
    Animal("penguin", "Skipper", 5, "The Arctic Exhibit", "Polar Path"),
    Animal("penguin", "Chilly", 3, "The Arctic Exhibit", "Polar Path"),
    Animal("penguin", "Pingu", 6, "The Arctic Exhibit", "Polar Path"),
    Animal("penguin", "Noot", 1, "The Arctic Exhibit", "Polar Path"),
    Animal("elephant", "Ellie", 15, "The Pachyderm Sanctuary", "Savannah Heights"),
    Animal("elephant", "Peanut", 12, "The Pachyderm Sanctuary", "Savannah Heights"),
    Animal("elephant", "Dumbo", 5, "The Pachyderm Sanctuary", "Savannah Heights"),
    Animal("elephant", "Trunkers", 10, "The Pachyderm Sanctuary", "Savannah Heights"),
    Animal("bear", "Smokey", 10, "The Grizzly Gulch", "Polar Path"),
    Animal("bear", "Grizzly", 8, "The Grizzly Gulch", "Polar Path"),
    Animal("bear", "Barnaby", 6, "The Grizzly Gulch", "Polar Path"),
    Animal("bear", "Bruin", 12, "The Grizzly Gulch", "Polar Path"),
    Animal("giraffe", "Gerald", 4, "The Tall Grass Plains", "Savannah Heights"),
    Animal("giraffe", "Longneck", 5, "The Tall Grass Plains", "Savannah Heights"),
    Animal("giraffe", "Patches", 3, "The Tall Grass Plains", "Savannah Heights"),
    Animal("giraffe", "Stretch", 6, "The Tall Grass Plains", "Savannah Heights"),
    Animal("antelope", "Speedy", 2, "The Tall Grass Plains", "Savannah Heights"),
    Animal("antelope", "Dash", 3, "The Tall Grass Plains", "Savannah Heights"),
    Animal("antelope", "Gazelle", 4, "The Tall Grass Plains", "Savannah Heights"),
    Animal("antelope", "Swift", 5, "The Tall Grass Plains", "Savannah Heights"),
    Animal("polar bear", "Snowflake", 7, "The Arctic Exhibit", "Polar Path"),
    Animal("polar bear", "Blizzard", 5, "The Arctic Exhibit", "Polar Path"),
    Animal("polar bear", "Iceberg", 9, "The Arctic Exhibit", "Polar Path"),
    Animal("walrus", "Wally", 10, "The Walrus Cove", "Polar Path"),
    Animal("walrus", "Tusker", 12, "The Walrus Cove", "Polar Path"),
    Animal("walrus", "Moby", 8, "The Walrus Cove", "Polar Path"),
    Animal("walrus", "Flippers", 9, "The Walrus Cove", "Polar Path"),
)


def _normalize(text: str) -> str:
    return text.strip().casefold()


def get_animals_by_species(species: str) -> list[Animal]:
    """Return every animal of the given species, in table order.

    Args:
        species: Species name, matched case-insensitively (e.g. "Penguin").

    Returns:
        The matching animals, or an empty list when nothing matches.
    """
    wanted = _normalize(species)
    if not wanted:
        return []
    return [animal for animal in ZOO_ANIMALS if animal.species.casefold() == wanted]


def get_animal_details(name: str) -> Animal | None:
    """Return the animal with the given name, or None if there isn't one."""
    wanted = _normalize(name)
    if not wanted:
        return None
    for animal in ZOO_ANIMALS:
        if animal.name.casefold() == wanted:
            return animal
    return None


def list_species() -> list[str]:
    """List the distinct species at the zoo, in the order they appear."""
    # dict preserves insertion order, so this dedupes without reordering
    return list(dict.fromkeys(animal.species for animal in ZOO_ANIMALS))
