"""Lazy wrappers over date producers.

``Filtered`` and ``Prefix`` only pull from their source inside their own
``produce_next()``; nothing is evaluated ahead of demand, so an unbounded
generator can be filtered and then cut with a prefix. ``LazyDates`` chains
them fluently and materialises the result.
"""

from __future__ import annotations

from typing import Callable, Iterable, Optional, Union

import pandas as pd

from dateseq.base import DateProducer
from dateseq.exceptions import InvalidConfiguration
from dateseq.types import Weekday
from dateseq.utils.time import weekday_of

DatePredicate = Callable[[pd.Timestamp], bool]


class Filtered(DateProducer):
    """Passes through only the dates accepted by ``predicate``.

    If the source is unbounded and the predicate never accepts, this keeps
    pulling forever; put a ``Prefix`` on a source that can satisfy it.
    """

    def __init__(self, source: DateProducer, predicate: DatePredicate):
        self.source = source
        self.predicate = predicate

    @property
    def is_finite(self) -> bool:
        return self.source.is_finite

    def produce_next(self) -> Optional[pd.Timestamp]:
        while True:
            value = self.source.produce_next()
            if value is None:
                return None
            if self.predicate(value):
                return value


class Prefix(DateProducer):
    """Stops after ``n`` dates and never pulls from the source again."""

    def __init__(self, source: DateProducer, n: int):
        if isinstance(n, bool) or not isinstance(n, int):
            raise InvalidConfiguration(f"prefix length must be an integer, got {n!r}")
        if n < 0:
            raise InvalidConfiguration(f"prefix length cannot be negative, got {n}")
        self.source = source
        self.n = n
        self.taken = 0

    @property
    def is_finite(self) -> bool:
        return True

    def produce_next(self) -> Optional[pd.Timestamp]:
        if self.taken >= self.n:
            return None
        value = self.source.produce_next()
        if value is None:
            # Source ran dry first; stay closed.
            self.taken = self.n
            return None
        self.taken += 1
        return value


def not_on(*weekdays: Union[Weekday, int, str]) -> DatePredicate:
    """Predicate rejecting dates that fall on any of ``weekdays``.

    Raises:
        InvalidConfiguration: If every weekday is excluded, since nothing
            could ever pass
    """
    excluded = frozenset(Weekday.parse(w) for w in weekdays)
    if len(excluded) == len(Weekday):
        raise InvalidConfiguration("Cannot exclude every weekday; no date would pass the filter")

    def predicate(date: pd.Timestamp) -> bool:
        return weekday_of(date) not in excluded

    return predicate


class LazyDates(DateProducer):
    """Fluent, lazy view over a producer.

    Example:
        >>> gen = DateGenerator("2016-02-22")  # unbounded
        >>> LazyDates(gen).exclude_weekdays("monday").prefix(10).to_list()
    """

    def __init__(self, source: DateProducer):
        self.source = source

    @property
    def is_finite(self) -> bool:
        return self.source.is_finite

    def produce_next(self) -> Optional[pd.Timestamp]:
        return self.source.produce_next()

    def filter(self, predicate: DatePredicate) -> "LazyDates":
        return LazyDates(Filtered(self.source, predicate))

    def exclude_weekdays(self, *weekdays: Union[Weekday, int, str]) -> "LazyDates":
        return self.filter(not_on(*weekdays))

    def prefix(self, n: int) -> "LazyDates":
        return LazyDates(Prefix(self.source, n))

    def to_list(self) -> list[pd.Timestamp]:
        """Drain the chain into a list.

        Raises:
            InvalidConfiguration: If the chain is unbounded and has no prefix
        """
        if not self.is_finite:
            raise InvalidConfiguration(
                "Cannot materialize an unbounded date sequence; apply prefix() first"
            )
        return list(self)

    def to_index(self) -> pd.DatetimeIndex:
        """Drain the chain into a DatetimeIndex named 'date'."""
        return pd.DatetimeIndex(self.to_list(), name="date")


def collect(dates: Iterable[pd.Timestamp]) -> pd.DatetimeIndex:
    """Materialize any finite iterable of dates as a DatetimeIndex."""
    if isinstance(dates, DateProducer):
        return LazyDates(dates).to_index()
    return pd.DatetimeIndex(list(dates), name="date")
