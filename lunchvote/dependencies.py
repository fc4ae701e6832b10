from __future__ import annotations

from datetime import date

from fastapi import Request

from .clock import today
from .venues.catalog import VenueCatalog
from .votes.store import VoteStore


def get_store(request: Request) -> VoteStore:
    """Return the process-wide vote store."""
    return request.app.state.store


def get_catalog(request: Request) -> VenueCatalog:
    return request.app.state.catalog


def get_today() -> date:
    """Return the server's local day; votes never carry a client date."""
    return today()
