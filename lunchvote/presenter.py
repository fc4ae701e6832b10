from __future__ import annotations

import html
from datetime import date

from .intake.form import VOTER_FIELD
from .venues.catalog import VenueCatalog
from .votes.models import RawResultsResponse, ResultsResponse
from .votes.store import VoteStore
from .votes.tally import compute_tally, tally_counts


def build_results(today: date, catalog: VenueCatalog, store: VoteStore) -> ResultsResponse:
    rows = compute_tally(today, catalog, store)
    return ResultsResponse(
        date=today,
        rows=rows,
        total_votes=sum(r.count for r in rows),
    )


def build_raw_results(store: VoteStore) -> RawResultsResponse:
    """Every stored vote plus the per-venue frequency across all days."""
    records = store.all_records()
    return RawResultsResponse(frequency=dict(tally_counts(records)), votes=records)


def render_vote_form(catalog: VenueCatalog) -> str:
    checkboxes = "\n".join(
        f'      <label><input type="checkbox" name="{html.escape(v.key)}"> '
        f"{html.escape(v.name)}</label><br>"
        for v in catalog
    )
    return f"""<!DOCTYPE html>
<html>
  <head>
    <meta charset="utf-8">
    <title>Lunch Vote</title>
  </head>
  <body>
    <h1>Where do we eat today?</h1>
    <form action="/vote" method="post" accept-charset="utf-8">
      <label>Name <input type="text" name="{VOTER_FIELD}" required></label><br>
{checkboxes}
      <button type="submit">Vote</button>
    </form>
    <p><a href="/results">Today's results</a></p>
  </body>
</html>
"""
