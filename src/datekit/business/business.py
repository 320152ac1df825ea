from __future__ import annotations

from datetime import date
from typing import Sequence, Tuple, Union

import numpy as np

DayLike = Union[str, date, np.datetime64, Sequence, np.ndarray]
IntLike = Union[int, Sequence[int], np.ndarray]
DayResult = Union[np.datetime64, np.ndarray]
IntResult = Union[np.int64, np.ndarray]
BoolResult = Union[np.bool_, np.ndarray]

_DAY = np.timedelta64(1, "D")

# 1970-01-01 was a Thursday (5 with Sunday=1).
_EPOCH_WEEKDAY_OFFSET = 4


def _as_days(values: DayLike) -> np.ndarray:
    return np.asarray(values, dtype="datetime64[D]")


def _scalar_or_array(result: np.ndarray, scalar: bool) -> Union[np.generic, np.ndarray]:
    return result[0] if scalar else result


def _weekday(days: np.ndarray) -> np.ndarray:
    return (days.astype(np.int64) + _EPOCH_WEEKDAY_OFFSET) % 7 + 1


def _is_weekend(days: np.ndarray) -> np.ndarray:
    w = _weekday(days)
    return (w == 1) | (w == 7)


def _snap(days: np.ndarray, step: np.ndarray) -> np.ndarray:
    """Move weekend days to Monday (step > 0) or Friday (step < 0)."""
    w = _weekday(days)
    forward = step > 0
    offset = np.zeros(days.shape, dtype=np.int64)
    offset = np.where(w == 7, np.where(forward, 2, -1), offset)
    offset = np.where(w == 1, np.where(forward, 1, -2), offset)
    return days + offset * _DAY


def _shift(days: np.ndarray, forward: np.ndarray, count: np.ndarray) -> np.ndarray:
    step = np.where(forward, 1, -1)
    snapped = _snap(days, step)
    moved = snapped + (step * ((count // 5) * 7 + count % 5)) * _DAY
    return np.where(_is_weekend(moved), moved + 2 * step * _DAY, moved)


def _broadcast(days: DayLike, n: IntLike) -> Tuple[np.ndarray, np.ndarray, bool]:
    scalar = np.ndim(days) == 0 and np.ndim(n) == 0
    d = np.atleast_1d(_as_days(days))
    k = np.atleast_1d(np.asarray(n, dtype=np.int64))
    d, k = np.broadcast_arrays(d, k)
    return d, k, scalar


# ── public ───────────────────────────────────────────────────────────────

def weekday(days: DayLike) -> IntResult:
    """Weekday number, 1 (Sunday) through 7 (Saturday)."""
    scalar = np.ndim(days) == 0
    return _scalar_or_array(_weekday(np.atleast_1d(_as_days(days))), scalar)


def is_weekend(days: DayLike) -> BoolResult:
    scalar = np.ndim(days) == 0
    return _scalar_or_array(_is_weekend(np.atleast_1d(_as_days(days))), scalar)


def add_weekdays(days: DayLike, n: IntLike) -> DayResult:
    """
    Add ``n`` business days to each day, broadcasting ``days`` against ``n``.

    Weekend starts are first moved to the next Monday; every five business
    days then consume seven calendar days, and a result landing on a
    weekend is pushed two more days.  Negative ``n`` subtracts.
    """
    d, k, scalar = _broadcast(days, n)
    return _scalar_or_array(_shift(d, k >= 0, np.abs(k)), scalar)


def subtract_weekdays(days: DayLike, n: IntLike) -> DayResult:
    d, k, scalar = _broadcast(days, n)
    return _scalar_or_array(_shift(d, k < 0, np.abs(k)), scalar)


def weekdays_between(start: DayLike, end: DayLike) -> IntResult:
    """
    Approximate business days from ``start`` to ``end`` (same rule as
    ``datekit.instant.weekdays_between``, evaluated on whole days).
    """
    scalar = np.ndim(start) == 0 and np.ndim(end) == 0
    a = np.atleast_1d(_as_days(start))
    b = np.atleast_1d(_as_days(end))
    a, b = np.broadcast_arrays(a, b)

    first = _snap(a, np.ones(a.shape, dtype=np.int64))
    last = _snap(b, -np.ones(b.shape, dtype=np.int64))

    days = (last - first).astype(np.int64)
    rest = np.fmod(days, 7)
    result = (days - rest) // 7 * 5 + rest
    result = np.where(_weekday(last) < _weekday(first), result - 2, result)
    return _scalar_or_array(result, scalar)
