"""Domain models for option catalogs."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CatalogEntry:
    """Display label backed by an instruction fragment."""

    label: str
    fragment: str
