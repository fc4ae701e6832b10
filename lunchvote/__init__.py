"""
Lunch Vote service.

Responsibilities:
- Hold the static catalog of lunch venues.
- Record one vote per voter, venue and day.
- Rank today's venues by vote count.
"""
