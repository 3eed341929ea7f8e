"""Matchup selections: the opponent's units and the player's own units.

A MatchupSet is an immutable value. Every operation returns a new set, so a
session owns its selections explicitly instead of sharing mutable state.
"""

from dataclasses import dataclass
from typing import FrozenSet, Iterable, Iterator, Tuple

from matchup_master.data.names import normalize_unit_name
from matchup_master.errors import IncompleteSelection


@dataclass(frozen=True, eq=False)
class MatchupSet:
    """Unique unit names in insertion order, compared case-insensitively.

    Repeated names are dropped on construction, keeping the first spelling.
    Two sets are equal when they hold the same units in any order.
    """

    names: Tuple[str, ...] = ()

    def __post_init__(self):
        seen = set()
        unique = []
        for name in self.names:
            normalized = normalize_unit_name(name)
            if normalized not in seen:
                seen.add(normalized)
                unique.append(name)
        object.__setattr__(self, "names", tuple(unique))

    @classmethod
    def of(cls, names: Iterable[str]) -> "MatchupSet":
        """Build a set from names, dropping repeats."""
        return cls(tuple(names))

    def _keys(self) -> FrozenSet[str]:
        return frozenset(normalize_unit_name(n) for n in self.names)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MatchupSet):
            return NotImplemented
        return self._keys() == other._keys()

    def __hash__(self) -> int:
        return hash(self._keys())

    def __len__(self) -> int:
        return len(self.names)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.contains(name)

    def contains(self, name: str) -> bool:
        normalized = normalize_unit_name(name)
        return any(normalize_unit_name(n) == normalized for n in self.names)

    def size(self) -> int:
        return len(self.names)

    def add(self, name: str) -> "MatchupSet":
        """Add a unit. Adding a unit already present returns the set unchanged."""
        if self.contains(name):
            return self
        return MatchupSet(self.names + (name,))

    def remove(self, name: str) -> "MatchupSet":
        """Remove a unit. Removing an absent unit returns the set unchanged."""
        normalized = normalize_unit_name(name)
        return MatchupSet(tuple(n for n in self.names if normalize_unit_name(n) != normalized))

    def toggle(self, name: str) -> "MatchupSet":
        """Add the unit if absent, otherwise remove it."""
        if self.contains(name):
            return self.remove(name)
        return self.add(name)

    def clear(self) -> "MatchupSet":
        return MatchupSet()


def validate_ready(opponent: MatchupSet, own: MatchupSet) -> None:
    """Check that both sides have at least one unit selected.

    Raises:
        IncompleteSelection: if either set is empty
    """
    missing = []
    if not opponent.size():
        missing.append("opponent")
    if not own.size():
        missing.append("own")

    if missing:
        raise IncompleteSelection(
            f"Please select at least one unit for both you and your opponent "
            f"(empty: {', '.join(missing)})"
        )
