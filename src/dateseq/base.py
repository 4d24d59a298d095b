from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterator, Optional

import pandas as pd


class DateProducer(ABC):
    """Pull-based source of dates.

    Implementations return the next date from ``produce_next()`` or ``None``
    once they have nothing more to give. Any producer can be wrapped by the
    combinators in ``dateseq.combinators`` and iterated with a for loop.
    """

    @abstractmethod
    def produce_next(self) -> Optional[pd.Timestamp]:
        raise NotImplementedError

    @property
    @abstractmethod
    def is_finite(self) -> bool:
        """Whether the producer is guaranteed to stop."""
        raise NotImplementedError

    def __iter__(self) -> Iterator[pd.Timestamp]:
        return self

    def __next__(self) -> pd.Timestamp:
        value = self.produce_next()
        if value is None:
            raise StopIteration
        return value
