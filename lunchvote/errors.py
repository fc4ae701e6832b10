from __future__ import annotations


class LunchVoteError(Exception):
    """Base class for errors raised by the lunch vote core."""


class StorageError(LunchVoteError):
    """The vote store could not read or write its database."""


class SubmissionError(LunchVoteError):
    """A vote submission was rejected before reaching the store."""

    reason = "invalid_submission"


class MissingVoterError(SubmissionError):
    reason = "missing_voter"


class InvalidEncodingError(SubmissionError):
    reason = "invalid_encoding"


class MalformedFormError(SubmissionError):
    reason = "malformed_form"
