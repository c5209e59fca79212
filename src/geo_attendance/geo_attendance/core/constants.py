"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time

EARTH_RADIUS_KM = 6371.0

# Check-in after this clock time (strictly greater, minute precision) is LATE.
DEFAULT_LATE_THRESHOLD = time(8, 30)
DEFAULT_AREA_RADIUS_KM = 0.5
DEFAULT_TREND_DAYS = 7
MAX_TREND_DAYS = 366

SICK_CERTIFICATE_MIN_DAYS = 3
ANNUAL_MIN_TENURE_DAYS = 365
ANNUAL_MIN_NOTICE_DAYS = 3
# Per request only; consumed balance is not tracked.
ANNUAL_MAX_DAYS = 6
MATERNITY_MAX_DAYS = 98
TRAINING_MIN_NOTICE_DAYS = 0
