"""
datekit.business
~~~~~~~~~~~~~~~~

Weekday-skipping (business-day) arithmetic on whole days.  Saturdays and
Sundays are skipped; no holiday calendar is consulted.  Applies the same
rules as ``Instant.add_weekdays`` / ``datekit.instant.weekdays_between``
to NumPy ``datetime64[D]`` values.

Basic usage::

    from datekit.business import add_weekdays, weekdays_between

    add_weekdays("2024-03-08", 1)                    # Friday → 2024-03-11

NumPy arrays are accepted everywhere a scalar is::

    import numpy as np
    days = np.array(["2024-03-04", "2024-03-08"], dtype="datetime64[D]")
    add_weekdays(days, np.array([5, 1]))             # → [2024-03-11, 2024-03-11]
    weekdays_between(days, "2024-03-15")             # → [9, 5]
"""

from datekit.business.business import (
    add_weekdays,
    is_weekend,
    subtract_weekdays,
    weekday,
    weekdays_between,
)

__all__ = [
    "add_weekdays",
    "subtract_weekdays",
    "weekdays_between",
    "weekday",
    "is_weekend",
]
