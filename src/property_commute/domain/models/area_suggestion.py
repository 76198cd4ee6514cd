"""Area suggestion domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AreaSuggestion:
    """A named area (county, municipality, street, ...) known to the listing service."""

    id: str
    display_name: str
    type: str  # e.g. "Län", "Kommun", "Tätort", "Street"
    type_display_name: str
    parent: str
    parent_display_name: str
