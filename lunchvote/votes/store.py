"""
SQLite-backed vote store.

All access goes through one connection guarded by one lock, so a check for an
existing vote and the insert that follows it are never interleaved with
another caller.
"""
from __future__ import annotations

import logging
import sqlite3
import threading
from contextlib import contextmanager
from datetime import date
from typing import Iterator

from ..errors import StorageError
from .models import VoteRecord

logger = logging.getLogger(__name__)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS vote_results (
    id        INTEGER PRIMARY KEY AUTOINCREMENT,
    place     TEXT NOT NULL,
    date      TEXT NOT NULL,
    username  TEXT NOT NULL
);

CREATE UNIQUE INDEX IF NOT EXISTS u_idx ON vote_results (place, username, date);
"""


class VoteStore:
    def __init__(self, database_path: str = ":memory:") -> None:
        self._lock = threading.Lock()
        try:
            self._conn = sqlite3.connect(database_path, check_same_thread=False)
            self._conn.executescript(_SCHEMA)
        except sqlite3.Error as exc:
            logger.error("Could not open vote database at %s", database_path, exc_info=True)
            raise StorageError(f"Could not open vote database: {exc}") from exc

    @contextmanager
    def _locked(self, action: str) -> Iterator[sqlite3.Connection]:
        with self._lock:
            try:
                yield self._conn
            except sqlite3.Error as exc:
                logger.error("Vote store failed to %s", action, exc_info=True)
                raise StorageError(f"Vote store failed to {action}: {exc}") from exc

    def record_vote(self, venue_key: str, day: date, voter: str) -> None:
        """
        Store the vote unless the same (venue, day, voter) is already present.

        A repeated vote is a successful no-op.
        """
        with self._locked("record vote") as conn:
            with conn:
                existing = conn.execute(
                    "SELECT 1 FROM vote_results WHERE place = ? AND username = ? AND date = ?",
                    (venue_key, voter, day.isoformat()),
                ).fetchone()
                if existing is None:
                    conn.execute(
                        "INSERT INTO vote_results (place, date, username) VALUES (?, ?, ?)",
                        (venue_key, day.isoformat(), voter),
                    )

    def records_for_date(self, day: date) -> list[VoteRecord]:
        with self._locked("read votes") as conn:
            rows = conn.execute(
                "SELECT place, date, username FROM vote_results WHERE date = ?",
                (day.isoformat(),),
            ).fetchall()
        return [_to_record(row) for row in rows]

    def all_records(self) -> list[VoteRecord]:
        with self._locked("read votes") as conn:
            rows = conn.execute(
                "SELECT place, date, username FROM vote_results ORDER BY id"
            ).fetchall()
        return [_to_record(row) for row in rows]

    def clear(self) -> None:
        with self._locked("clear votes") as conn:
            with conn:
                conn.execute("DELETE FROM vote_results")

    def close(self) -> None:
        with self._lock:
            self._conn.close()


def _to_record(row: tuple[str, str, str]) -> VoteRecord:
    place, day, username = row
    return VoteRecord(venue_key=place, date=date.fromisoformat(day), voter=username)
