"""Diagnostics package.

- pretty_month: always available, prints a localised month grid
- round_trip: optional (requires the diagnostics extra for numpy)
"""

__all__ = ["pretty_month", "round_trip"]
