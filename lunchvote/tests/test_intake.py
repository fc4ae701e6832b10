from __future__ import annotations

from datetime import date
from unittest.mock import MagicMock

import pytest

from lunchvote.errors import (
    InvalidEncodingError,
    MalformedFormError,
    MissingVoterError,
    StorageError,
)
from lunchvote.intake.form import VoteSubmission, parse_vote_form, submit_votes
from lunchvote.venues.catalog import VenueCatalog
from lunchvote.votes.store import VoteStore

DAY = date(2026, 10, 16)

CATALOG = VenueCatalog([("markthalle", "Markthalle"), ("burgerlich", "Burgerlich")])


class TestParseVoteForm:
    def test_selected_flags(self):
        sub = parse_vote_form(b"username=alice&burgerlich=on&markthalle=true", CATALOG)
        assert sub == VoteSubmission(voter="alice", venue_keys=("markthalle", "burgerlich"))

    def test_unchecked_flags_are_ignored(self):
        sub = parse_vote_form(b"username=alice&markthalle=off&burgerlich=false", CATALOG)
        assert sub.venue_keys == ()

    def test_voter_name_is_decoded_and_stripped(self):
        sub = parse_vote_form("username=+J%C3%BCrgen+&markthalle=on".encode(), CATALOG)
        assert sub.voter == "Jürgen"

    def test_missing_voter(self):
        with pytest.raises(MissingVoterError):
            parse_vote_form(b"markthalle=on", CATALOG)

    def test_blank_voter(self):
        with pytest.raises(MissingVoterError) as info:
            parse_vote_form(b"username=+++&markthalle=on", CATALOG)
        assert info.value.reason == "missing_voter"

    def test_empty_body(self):
        with pytest.raises(MissingVoterError):
            parse_vote_form(b"", CATALOG)

    def test_invalid_utf8_body(self):
        with pytest.raises(InvalidEncodingError) as info:
            parse_vote_form(b"username=\xff\xfe&markthalle=on", CATALOG)
        assert info.value.reason == "invalid_encoding"

    def test_invalid_utf8_percent_escape(self):
        with pytest.raises(InvalidEncodingError):
            parse_vote_form(b"username=%FF&markthalle=on", CATALOG)

    def test_unknown_field(self):
        with pytest.raises(MalformedFormError):
            parse_vote_form(b"username=alice&nowhere=on", CATALOG)

    def test_bad_flag_value(self):
        with pytest.raises(MalformedFormError) as info:
            parse_vote_form(b"username=alice&markthalle=maybe", CATALOG)
        assert info.value.reason == "malformed_form"


def test_submit_votes_records_each_selection():
    store = VoteStore()
    sub = VoteSubmission(voter="alice", venue_keys=("markthalle", "burgerlich"))
    assert submit_votes(sub, store, DAY) == ["markthalle", "burgerlich"]
    assert len(store.records_for_date(DAY)) == 2


def test_submit_votes_twice_is_not_an_error():
    store = VoteStore()
    sub = VoteSubmission(voter="alice", venue_keys=("markthalle",))
    submit_votes(sub, store, DAY)
    submit_votes(sub, store, DAY)
    assert len(store.records_for_date(DAY)) == 1


def test_submit_votes_propagates_storage_error():
    store = MagicMock(spec=VoteStore)
    store.record_vote.side_effect = [None, StorageError("disk gone")]
    sub = VoteSubmission(voter="alice", venue_keys=("markthalle", "burgerlich"))
    with pytest.raises(StorageError):
        submit_votes(sub, store, DAY)
    assert store.record_vote.call_count == 2
