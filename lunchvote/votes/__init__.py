"""
Vote storage and tally engine.

Responsibilities:
- Persist (venue, date, voter) facts with at most one record per triple.
- Read back the records for a calendar day.
- Aggregate a day's records into a ranking by descending vote count.
"""
