"""Restartable date sequences.

A ``DateSequence`` is a description (seed + policies); each iteration builds
a fresh ``DateGenerator`` so the same sequence can be walked repeatedly.
"""

from __future__ import annotations

from typing import Iterator, Optional, Union

import pandas as pd

from dateseq.combinators import DatePredicate, LazyDates
from dateseq.generator import DateGenerator
from dateseq.types import Bounded, BoundPolicy, StepPolicy, Weekday, bound_for
from dateseq.utils.time import DateLike, to_day


class DateSequence:
    """Iterable of dates after ``start``.

    Configuration is validated here, so an invalid sequence fails at
    construction rather than on first iteration.
    """

    def __init__(
        self,
        start: DateLike,
        step_days: int = 1,
        skip_weekday: Optional[Union[Weekday, int, str]] = None,
        limit: Optional[int] = None,
    ):
        self.start = to_day(start)
        self.step = StepPolicy(step_days=step_days, skip_weekday=skip_weekday)
        self.bound: BoundPolicy = bound_for(limit)

    @property
    def is_finite(self) -> bool:
        return isinstance(self.bound, Bounded)

    def generator(self) -> DateGenerator:
        """A new generator positioned at the seed."""
        return DateGenerator.from_policies(self.start, self.step, self.bound)

    def __iter__(self) -> Iterator[pd.Timestamp]:
        return self.generator()

    def __len__(self) -> int:
        if not isinstance(self.bound, Bounded):
            raise TypeError("An unbounded DateSequence has no length")
        return self.bound.limit

    def lazy(self) -> LazyDates:
        return LazyDates(self.generator())

    def filter(self, predicate: DatePredicate) -> LazyDates:
        return self.lazy().filter(predicate)

    def prefix(self, n: int) -> LazyDates:
        return self.lazy().prefix(n)

    def to_list(self) -> list[pd.Timestamp]:
        return self.lazy().to_list()

    def to_index(self) -> pd.DatetimeIndex:
        return self.lazy().to_index()

    def __repr__(self) -> str:
        limit = self.bound.limit if isinstance(self.bound, Bounded) else None
        skip = self.step.skip_weekday.label if self.step.skip_weekday is not None else None
        return (
            f"DateSequence(start={self.start.date()}, step_days={self.step.step_days}, "
            f"skip_weekday={skip}, limit={limit})"
        )
