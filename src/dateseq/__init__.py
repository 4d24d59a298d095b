"""Lazy calendar date sequences.

This package provides:
- a stateful date generator with step size, skip-weekday and bound policies
- lazy filter and prefix combinators over any date producer
- restartable sequences, YAML configuration and a small CLI
"""

from .exceptions import InvalidConfiguration
from .types import (
    Bounded,
    BoundPolicy,
    GeneratorState,
    SequenceCursor,
    StepPolicy,
    UNBOUNDED,
    Unbounded,
    Weekday,
)
from .base import DateProducer
from .generator import DateGenerator, advance
from .combinators import Filtered, LazyDates, Prefix, collect, not_on
from .sequence import DateSequence
