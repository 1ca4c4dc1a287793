# =============================================================================
# core/models.py  —  Data Models
# =============================================================================
#
# The zoo server returns animal records.  A record is a flat bag of five
# fields; the tool layer turns it into a dict with asdict() before it goes
# over MCP, so the JSON shape is exactly the field list below.
#
# Records are frozen: the zoo table is a fixture shared by every request,
# and a tool must never be able to edit it in place.
# =============================================================================

from dataclasses import dataclass


@dataclass(frozen=True)
class Animal:
    """One resident of the zoo."""

    species: str                       # "lion", "penguin", "polar bear", ...
    name: str                          # Unique within the table, e.g. "Leo"
    age: int                           # Years
    enclosure: str                     # "The Big Cat Plains"
    trail: str                         # Visitor trail the enclosure sits on
