from __future__ import annotations

from datetime import date


def today() -> date:
    """Return the server's local calendar day."""
    return date.today()
