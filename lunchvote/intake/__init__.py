"""
Vote intake.

Responsibilities:
- Decode and parse a submitted vote form.
- Reject submissions without a voter, with bad encoding or unknown fields.
- Record one vote per selected venue for today.
"""
