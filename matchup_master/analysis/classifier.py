"""Ground/air classification and catalog filtering."""

from enum import Enum
from typing import AbstractSet, Tuple

from matchup_master.data.catalog import Catalog
from matchup_master.data.names import normalize_unit_name
from matchup_master.data.roster import AIR_UNITS


class UnitCategory(str, Enum):
    """Category filter for unit listings."""

    ALL = "all"
    GROUND = "ground"
    AIR = "air"


def matches_search(name: str, search: str) -> bool:
    """Case-insensitive substring match. A blank search term matches everything."""
    if not search.strip():
        return True
    return search.casefold() in name.casefold()


def categorize(
    catalog: Catalog, membership: AbstractSet[str] = AIR_UNITS
) -> Tuple[Catalog, Catalog]:
    """Split a catalog into (ground, air) by membership in the given set.

    Every entry lands in exactly one partition; source order is kept.
    """
    members = {normalize_unit_name(m) for m in membership}
    primary = [record for name, record in catalog.all() if normalize_unit_name(name) not in members]
    secondary = [record for name, record in catalog.all() if normalize_unit_name(name) in members]
    return Catalog(primary), Catalog(secondary)


def filter_catalog(
    catalog: Catalog,
    search: str = "",
    category: UnitCategory = UnitCategory.ALL,
    membership: AbstractSet[str] = AIR_UNITS,
) -> Catalog:
    """Filter a catalog by search term AND category, without mutating it."""
    category = UnitCategory(category)
    members = {normalize_unit_name(m) for m in membership}

    def keep(name: str) -> bool:
        if not matches_search(name, search):
            return False
        if category is UnitCategory.GROUND:
            return normalize_unit_name(name) not in members
        if category is UnitCategory.AIR:
            return normalize_unit_name(name) in members
        return True

    return Catalog(record for name, record in catalog.all() if keep(name))
