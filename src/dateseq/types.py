"""Core value types for date sequences.

All policy objects are immutable and validate themselves on construction,
so an invalid configuration fails before any date is produced.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Optional, Union

import pandas as pd

from dateseq.exceptions import InvalidConfiguration


class Weekday(IntEnum):
    """Day of week, numbered like ``datetime.date.weekday()`` (0=Mon ... 6=Sun)."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @classmethod
    def parse(cls, value: Union["Weekday", int, str]) -> "Weekday":
        """Coerce an enum member, an integer 0-6, or an English day name.

        Names are case-insensitive and may be abbreviated to three letters
        ("sun", "Sunday", "SUNDAY").

        Raises:
            InvalidConfiguration: If the value does not name a weekday
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise InvalidConfiguration(f"Not a weekday: {value!r}")
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError:
                raise InvalidConfiguration(f"Weekday number must be in 0..6, got {value}") from None
        if isinstance(value, str):
            key = value.strip().upper()
            if key.isdigit():
                return cls.parse(int(key))
            for member in cls:
                if key == member.name or (len(key) == 3 and member.name.startswith(key)):
                    return member
        raise InvalidConfiguration(f"Not a weekday: {value!r}")

    @property
    def label(self) -> str:
        """Capitalised English name, e.g. 'Sunday'."""
        return self.name.capitalize()


class GeneratorState(Enum):
    """Lifecycle state of a date generator."""

    ACTIVE = "active"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class StepPolicy:
    """How far the cursor moves on each production.

    Attributes:
        step_days: Calendar days added per step (must be positive)
        skip_weekday: If the stepped date lands on this weekday, one extra day
            is added. The shifted date is not checked again.
    """

    step_days: int = 1
    skip_weekday: Optional[Weekday] = None

    def __post_init__(self) -> None:
        if isinstance(self.step_days, bool) or not isinstance(self.step_days, int):
            raise InvalidConfiguration(f"step_days must be an integer, got {self.step_days!r}")
        if self.step_days <= 0:
            raise InvalidConfiguration(f"step_days must be positive, got {self.step_days}")
        if self.skip_weekday is not None:
            # frozen dataclass: normalise through object.__setattr__
            object.__setattr__(self, "skip_weekday", Weekday.parse(self.skip_weekday))


@dataclass(frozen=True)
class Bounded:
    """Bound policy producing exactly ``limit`` dates."""

    limit: int

    def __post_init__(self) -> None:
        if isinstance(self.limit, bool) or not isinstance(self.limit, int):
            raise InvalidConfiguration(f"limit must be an integer, got {self.limit!r}")
        if self.limit <= 0:
            raise InvalidConfiguration(f"limit must be positive, got {self.limit}")


@dataclass(frozen=True)
class Unbounded:
    """Bound policy producing dates indefinitely."""


UNBOUNDED = Unbounded()

BoundPolicy = Union[Bounded, Unbounded]


def bound_for(limit: Optional[int]) -> BoundPolicy:
    """Map an optional integer limit to a bound policy (None means unbounded)."""
    if limit is None:
        return UNBOUNDED
    return Bounded(limit)


@dataclass(frozen=True)
class SequenceCursor:
    """Position of a generator: the last produced (or seed) date and how many were emitted."""

    current_date: pd.Timestamp
    emitted_count: int = field(default=0)

    def is_exhausted(self, bound: BoundPolicy) -> bool:
        """True once a bounded sequence has emitted its limit."""
        return isinstance(bound, Bounded) and self.emitted_count >= bound.limit
