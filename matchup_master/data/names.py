"""Unit name normalization shared by the catalog and stat table."""


def normalize_unit_name(name: str) -> str:
    """Normalize a unit name for case-insensitive lookup."""
    return " ".join(name.split()).casefold()
