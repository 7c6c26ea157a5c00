"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from calendar import MONDAY

# Percentage points a rate must move before a period is tagged up/down.
TREND_THRESHOLD = 2.0
WEEK_STARTS_ON = MONDAY

# Sentinel meaning "no class filter" / "every term of the year".
ALL_SCOPE = "_all_"

DEFAULT_EXPECTED_POPULATION = 1
YEAR_VIEW_MIN_DAYS = 180

DAILY_LABEL_FORMAT = "%b %d, %Y"
WEEKLY_LABEL_FORMAT = "Week of %b %d"
MONTHLY_LABEL_FORMAT = "%B %Y"
ISO_DATE_FORMAT = "%Y-%m-%d"
