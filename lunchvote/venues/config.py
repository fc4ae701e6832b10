from __future__ import annotations

from typing import List, Tuple

# Definition order is display order and the tally tie-break order.
DEFAULT_VENUES: List[Tuple[str, str]] = [
    ("markthalle", "Markthalle"),
    ("burgerlich", "Burgerlich"),
    ("curry_pit", "Curry Pit"),
    ("pho_saigon", "Pho Saigon"),
    ("pizzeria_da_mario", "Pizzeria da Mario"),
    ("falafel_house", "Falafel House"),
    ("sushi_bar", "Sushi Bar"),
    ("kantine", "Kantine"),
    ("salad_works", "Salad Works"),
    ("taco_loco", "Taco Loco"),
    ("noodle_lab", "Noodle Lab"),
    ("doener_ecke", "Döner Ecke"),
    ("bistro_am_markt", "Bistro am Markt"),
]


def parse_venues(raw: str) -> List[Tuple[str, str]]:
    """
    Parse a ``key=Display Name;key2=Other Name`` catalog definition.

    Blank segments are ignored. A segment without ``=``, or with an empty key
    or name, raises ``ValueError``.
    """
    venues: List[Tuple[str, str]] = []
    for segment in raw.split(";"):
        segment = segment.strip()
        if not segment:
            continue
        key, sep, name = segment.partition("=")
        key, name = key.strip(), name.strip()
        if not sep or not key or not name:
            raise ValueError(f"Invalid venue definition: {segment!r}")
        venues.append((key, name))
    return venues
