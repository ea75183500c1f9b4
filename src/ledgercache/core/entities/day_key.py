"""Day key types.

A local day key is the calendar day of a timestamp in the local
timezone. A reference day key is midnight of that same calendar day
expressed in the fixed reference timezone; it indexes both cache tables.
"""

from datetime import date, datetime

LocalDayKey = date
ReferenceDayKey = datetime

# Anything a caller may hand to the cache. Naive datetimes are local time.
Timestamp = date | datetime
