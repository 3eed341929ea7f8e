"""Unit catalog: qualitative counter relationships between units.

Source format is a JSON object keyed by unit name:

    {"Crawler": {"goodAgainst": ["Rhino"], "counteredBy": ["Arclight"]}}

Missing lists default to empty. References to units that are not in the
catalog are kept as-is and resolve to None.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from matchup_master.errors import DataFormatError, UnitNotFound
from .names import normalize_unit_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UnitRecord:
    """Counter relationships for a single unit."""

    name: str
    good_against: Tuple[str, ...] = ()
    countered_by: Tuple[str, ...] = ()


class Catalog:
    """Immutable, ordered collection of UnitRecords."""

    def __init__(self, records: Iterable[UnitRecord]):
        self._records: Dict[str, UnitRecord] = {}
        self._normalized_lookup: Dict[str, str] = {}
        for record in records:
            self._records[record.name] = record
            self._normalized_lookup[normalize_unit_name(record.name)] = record.name

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and normalize_unit_name(name) in self._normalized_lookup

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Catalog):
            return NotImplemented
        return self.all() == other.all()

    def __repr__(self) -> str:
        return f"Catalog({list(self._records)!r})"

    def resolve(self, name: str) -> Optional[UnitRecord]:
        """Look up a unit, returning None if it isn't in the catalog."""
        original = self._normalized_lookup.get(normalize_unit_name(name))
        if original is None:
            return None
        return self._records[original]

    def get(self, name: str) -> UnitRecord:
        """Get a unit by name (case-insensitive), raising UnitNotFound."""
        record = self.resolve(name)
        if record is None:
            raise UnitNotFound(name)
        return record

    def all(self) -> List[Tuple[str, UnitRecord]]:
        """All (name, record) pairs in source order."""
        return list(self._records.items())

    def subset(self, names: Iterable[str]) -> "Catalog":
        """Build a new catalog holding only the given names, in source order."""
        wanted = {normalize_unit_name(n) for n in names}
        return Catalog(
            record for name, record in self._records.items()
            if normalize_unit_name(name) in wanted
        )

    def dangling_references(self) -> List[Tuple[str, str]]:
        """List (unit, referenced name) pairs that point outside the catalog."""
        dangling = []
        for name, record in self._records.items():
            for ref in record.good_against + record.countered_by:
                if ref not in self:
                    dangling.append((name, ref))
        return dangling


def _parse_name_list(unit: str, field: str, value: Any) -> Tuple[str, ...]:
    """Parse a goodAgainst/counteredBy list, rejecting non-strings and duplicates."""
    if value is None:
        return ()
    if not isinstance(value, list):
        raise DataFormatError(f"{unit!r}: {field} must be a list, got {type(value).__name__}")

    names: List[str] = []
    seen = set()
    for item in value:
        if not isinstance(item, str) or not item.strip():
            raise DataFormatError(f"{unit!r}: {field} entries must be unit names, got {item!r}")
        normalized = normalize_unit_name(item)
        if normalized in seen:
            raise DataFormatError(f"{unit!r}: duplicate entry {item!r} in {field}")
        seen.add(normalized)
        names.append(item)
    return tuple(names)


def parse_catalog(raw_data: Any) -> Catalog:
    """Parse raw JSON data into a Catalog.

    Raises:
        DataFormatError: if the data does not have the UnitRecord shape.
    """
    if not isinstance(raw_data, Mapping):
        raise DataFormatError(
            f"Catalog must be an object keyed by unit name, got {type(raw_data).__name__}"
        )

    records: List[UnitRecord] = []
    seen: Dict[str, str] = {}

    for name, data in raw_data.items():
        if not isinstance(name, str) or not name.strip():
            raise DataFormatError(f"Invalid unit name in catalog: {name!r}")
        if not isinstance(data, Mapping):
            raise DataFormatError(f"Catalog entry for {name!r} must be an object")

        normalized = normalize_unit_name(name)
        if normalized in seen:
            raise DataFormatError(f"Duplicate unit {name!r} in catalog (already have {seen[normalized]!r})")
        seen[normalized] = name

        records.append(
            UnitRecord(
                name=name,
                good_against=_parse_name_list(name, "goodAgainst", data.get("goodAgainst")),
                countered_by=_parse_name_list(name, "counteredBy", data.get("counteredBy")),
            )
        )

    catalog = Catalog(records)

    dangling = catalog.dangling_references()
    if dangling:
        logger.info(f"Catalog has {len(dangling)} references to units outside the catalog")

    return catalog
