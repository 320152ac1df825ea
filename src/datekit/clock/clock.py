from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Protocol


class Clock(Protocol):
    def now(self) -> datetime: ...


class SystemClock:
    """Reads the system time; always timezone-aware (UTC)."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)

    def __repr__(self) -> str:
        return "SystemClock()"


@dataclass
class FixedClock:
    """
    Deterministic clock that only moves when told to.

    Naive datetimes are taken as UTC.
    """

    now_utc: datetime

    def __post_init__(self) -> None:
        self.now_utc = _as_utc(self.now_utc)

    @classmethod
    def fixed(
        cls,
        *,
        year: int = 2024,
        month: int = 1,
        day: int = 1,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
    ) -> "FixedClock":
        return cls(now_utc=datetime(year, month, day, hour, minute, second, tzinfo=timezone.utc))

    def now(self) -> datetime:
        return self.now_utc

    def advance(self, delta: timedelta) -> None:
        self.now_utc = self.now_utc + delta

    def set(self, value: datetime) -> None:
        self.now_utc = _as_utc(value)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
