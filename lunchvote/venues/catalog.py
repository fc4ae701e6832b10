from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass(frozen=True)
class Venue:
    key: str
    name: str


class VenueCatalog:
    """Immutable, ordered mapping of venue keys to display names."""

    def __init__(self, entries: Iterable[tuple[str, str]]) -> None:
        venues: list[Venue] = []
        positions: dict[str, int] = {}
        for key, name in entries:
            if not key:
                raise ValueError("Venue key must not be empty")
            if key in positions:
                raise ValueError(f"Duplicate venue key: {key!r}")
            positions[key] = len(venues)
            venues.append(Venue(key=key, name=name))
        self._venues = tuple(venues)
        self._positions = positions

    def lookup(self, key: str) -> str | None:
        """Return the display name for ``key``, or ``None`` if it is not listed."""
        pos = self._positions.get(key)
        if pos is None:
            return None
        return self._venues[pos].name

    def position(self, key: str) -> int | None:
        return self._positions.get(key)

    def all_entries(self) -> tuple[Venue, ...]:
        return self._venues

    def keys(self) -> list[str]:
        return [v.key for v in self._venues]

    def __contains__(self, key: object) -> bool:
        return key in self._positions

    def __iter__(self) -> Iterator[Venue]:
        return iter(self._venues)

    def __len__(self) -> int:
        return len(self._venues)
