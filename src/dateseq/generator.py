"""Stateful generator of calendar dates.

The stepping rule lives in the pure ``advance`` function; ``DateGenerator``
only holds the current cursor and swaps it for the one ``advance`` returns.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

import pandas as pd

from dateseq.base import DateProducer
from dateseq.types import (
    BoundPolicy,
    Bounded,
    GeneratorState,
    SequenceCursor,
    StepPolicy,
    Weekday,
    bound_for,
)
from dateseq.utils.time import DateLike, add_days, to_day, weekday_of

logger = logging.getLogger(__name__)


def advance(
    cursor: SequenceCursor,
    step: StepPolicy,
    bound: BoundPolicy,
) -> tuple[SequenceCursor, Optional[pd.Timestamp]]:
    """Compute the next date for a cursor without touching it.

    Args:
        cursor: Current position
        step: Step size and optional skip weekday
        bound: Bounded or unbounded policy

    Returns:
        (new_cursor, date). When the bound is reached the input cursor is
        returned unchanged together with None.
    """
    if cursor.is_exhausted(bound):
        return cursor, None

    candidate = add_days(cursor.current_date, step.step_days)
    # A single extra day, the shifted date is not re-checked.
    if step.skip_weekday is not None and weekday_of(candidate) == step.skip_weekday:
        candidate = add_days(candidate, 1)

    return SequenceCursor(current_date=candidate, emitted_count=cursor.emitted_count + 1), candidate


class DateGenerator(DateProducer):
    """Produces dates after ``start``, one step at a time.

    The seed itself is never emitted; the first date is ``start + step_days``
    (shifted past ``skip_weekday`` if needed). A generator cannot be rewound,
    build a new one from the same seed to start over.

    Example:
        >>> gen = DateGenerator("2016-02-22", skip_weekday="sunday", limit=10)
        >>> gen.produce_next()
        Timestamp('2016-02-23 00:00:00')
    """

    def __init__(
        self,
        start: DateLike,
        step_days: int = 1,
        skip_weekday: Optional[Union[Weekday, int, str]] = None,
        limit: Optional[int] = None,
    ):
        """Initialize generator.

        Args:
            start: Seed date (not emitted)
            step_days: Days between consecutive dates
            skip_weekday: Weekday to hop over by one extra day
            limit: Number of dates to produce, or None for no limit

        Raises:
            InvalidConfiguration: If step_days or limit is not positive, or
                the seed or weekday cannot be parsed
        """
        self._step = StepPolicy(step_days=step_days, skip_weekday=skip_weekday)
        self._bound = bound_for(limit)
        self._cursor = SequenceCursor(current_date=to_day(start))

    @classmethod
    def from_policies(
        cls,
        start: DateLike,
        step: StepPolicy,
        bound: BoundPolicy,
    ) -> "DateGenerator":
        """Build a generator from policy objects."""
        limit = bound.limit if isinstance(bound, Bounded) else None
        return cls(start, step_days=step.step_days, skip_weekday=step.skip_weekday, limit=limit)

    @property
    def cursor(self) -> SequenceCursor:
        return self._cursor

    @property
    def step(self) -> StepPolicy:
        return self._step

    @property
    def bound(self) -> BoundPolicy:
        return self._bound

    @property
    def is_finite(self) -> bool:
        return isinstance(self._bound, Bounded)

    @property
    def state(self) -> GeneratorState:
        if self._cursor.is_exhausted(self._bound):
            return GeneratorState.EXHAUSTED
        return GeneratorState.ACTIVE

    def produce_next(self) -> Optional[pd.Timestamp]:
        """Return the next date, or None once the limit has been reached."""
        cursor, date = advance(self._cursor, self._step, self._bound)
        self._cursor = cursor

        if date is not None and cursor.is_exhausted(self._bound):
            logger.debug(
                "Date generator exhausted after %d dates (last %s)",
                cursor.emitted_count,
                date.date(),
            )
        return date

    def __repr__(self) -> str:
        return (
            f"DateGenerator(current={self._cursor.current_date.date()}, "
            f"emitted={self._cursor.emitted_count}, step={self._step.step_days}, "
            f"skip={self._step.skip_weekday.label if self._step.skip_weekday is not None else None}, "
            f"state={self.state.value})"
        )
