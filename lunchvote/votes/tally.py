from __future__ import annotations

from collections import Counter
from datetime import date
from typing import Iterable

from ..venues.catalog import VenueCatalog
from .models import TallyRow, VoteRecord
from .store import VoteStore


def tally_counts(records: Iterable[VoteRecord]) -> Counter[str]:
    counter: Counter[str] = Counter()
    for r in records:
        counter[r.venue_key] += 1
    return counter


def compute_tally(day: date, catalog: VenueCatalog, store: VoteStore) -> list[TallyRow]:
    """
    Rank the venues voted for on ``day`` by vote count, highest first.

    Only venues with at least one vote appear. Equal counts keep catalog
    order; keys missing from the catalog follow the catalog keys, sorted by
    key, and are shown under the raw key.
    """
    counter = tally_counts(store.records_for_date(day))

    def _sort_key(item: tuple[str, int]) -> tuple[int, int, str]:
        key, count = item
        pos = catalog.position(key)
        return (-count, pos if pos is not None else len(catalog), key)

    return [
        TallyRow(venue_key=key, name=catalog.lookup(key) or key, count=count)
        for key, count in sorted(counter.items(), key=_sort_key)
    ]
