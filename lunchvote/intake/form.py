from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from urllib.parse import parse_qsl

from ..errors import InvalidEncodingError, MalformedFormError, MissingVoterError
from ..venues.catalog import VenueCatalog
from ..votes.store import VoteStore

logger = logging.getLogger(__name__)

VOTER_FIELD = "username"

_TRUE_VALUES = {"on", "true"}
_FALSE_VALUES = {"", "off", "false"}


@dataclass(frozen=True)
class VoteSubmission:
    voter: str
    venue_keys: tuple[str, ...]


def _parse_flag(field: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise MalformedFormError(f"Invalid value for {field!r}: {value!r}")


def parse_vote_form(body: bytes, catalog: VenueCatalog) -> VoteSubmission:
    """
    Parse an urlencoded vote form into a submission.

    Raises ``InvalidEncodingError`` for non UTF-8 input, ``MalformedFormError``
    for unknown fields or unreadable flag values and ``MissingVoterError``
    when no voter name is given.
    """
    try:
        text = body.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidEncodingError("Form input was invalid UTF-8") from exc

    try:
        pairs = parse_qsl(text, keep_blank_values=True, strict_parsing=bool(text), errors="strict")
    except UnicodeDecodeError as exc:
        raise InvalidEncodingError("Form input was invalid UTF-8") from exc
    except ValueError as exc:
        raise MalformedFormError(f"Invalid form input: {exc}") from exc

    voter = ""
    selected: set[str] = set()
    for field, value in pairs:
        if field == VOTER_FIELD:
            voter = value.strip()
        elif field in catalog:
            if _parse_flag(field, value):
                selected.add(field)
            else:
                selected.discard(field)
        else:
            raise MalformedFormError(f"Unknown form field: {field!r}")

    if not voter:
        raise MissingVoterError("A voter name is required")

    # Catalog order, so the store sees the same order for every submission
    return VoteSubmission(
        voter=voter,
        venue_keys=tuple(k for k in catalog.keys() if k in selected),
    )


def submit_votes(submission: VoteSubmission, store: VoteStore, today: date) -> list[str]:
    """Record each selected venue for ``today``; storage errors propagate."""
    recorded: list[str] = []
    for key in submission.venue_keys:
        store.record_vote(key, today, submission.voter)
        recorded.append(key)
    logger.info("Recorded %d vote(s) for %s on %s", len(recorded), submission.voter, today)
    return recorded
