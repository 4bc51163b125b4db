"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_HOURLY_WAGE = 1000
MINUTES_PER_HOUR = 60
DAYS_PER_WEEK = 7
