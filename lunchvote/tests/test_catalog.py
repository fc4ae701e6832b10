from __future__ import annotations

import pytest

from lunchvote.venues.catalog import VenueCatalog
from lunchvote.venues.config import DEFAULT_VENUES


def test_lookup_known_and_unknown_key():
    catalog = VenueCatalog([("a", "Alpha"), ("b", "Beta")])
    assert catalog.lookup("a") == "Alpha"
    assert catalog.lookup("zzz") is None


def test_all_entries_keep_definition_order():
    catalog = VenueCatalog([("z", "Zulu"), ("a", "Alpha"), ("m", "Mike")])
    assert [v.key for v in catalog.all_entries()] == ["z", "a", "m"]
    assert catalog.keys() == ["z", "a", "m"]
    assert catalog.position("m") == 2


def test_duplicate_key_rejected():
    with pytest.raises(ValueError):
        VenueCatalog([("a", "Alpha"), ("a", "Again")])


def test_empty_key_rejected():
    with pytest.raises(ValueError):
        VenueCatalog([("", "Nameless")])


def test_default_catalog_is_valid():
    catalog = VenueCatalog(DEFAULT_VENUES)
    assert len(catalog) == 13
    assert "markthalle" in catalog
    assert "nowhere" not in catalog
