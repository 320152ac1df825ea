"""
datekit.clock
~~~~~~~~~~~~~

Sources of "now".  Every relative operation in datekit reads the current
time through a Clock, so callers can pin time in tests::

    from datekit.clock import FixedClock
    from datekit.instant import tomorrow

    clock = FixedClock.fixed(year=2024, month=3, day=4)
    tomorrow(clock=clock)                   # → Instant(2024-03-05 ...)
"""

from __future__ import annotations

from datekit.clock.clock import Clock, FixedClock, SystemClock

__all__ = ["Clock", "FixedClock", "SystemClock"]
