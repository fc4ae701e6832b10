"""
Venue catalog.

Responsibilities:
- Define the default list of lunch venues.
- Parse a catalog override from configuration.
- Expose an immutable, ordered key -> display name lookup.
"""
