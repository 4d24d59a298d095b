"""Configuration loader for date sequence YAML files.

This module loads and parses sequence configuration files and builds the
lazy generator chain they describe.

Example file::

    name: lessons
    sequence:
      start: 2016-02-22
      step_days: 1
      skip_weekday: sunday
      limit: 10
    filters:
      exclude_weekdays: [monday]
      take: 10
"""

from pathlib import Path
from typing import Any, Dict, Optional
import logging

import pandas as pd
import yaml

from dateseq.combinators import LazyDates
from dateseq.exceptions import InvalidConfiguration
from dateseq.sequence import DateSequence
from dateseq.types import Weekday

logger = logging.getLogger(__name__)


class SequenceConfig:
    """Represents a complete date sequence configuration.

    Holds a validated ``DateSequence`` plus the filter/prefix chain to put
    on top of it.
    """

    def __init__(
        self,
        name: str,
        sequence: DateSequence,
        exclude_weekdays: tuple[Weekday, ...] = (),
        take: Optional[int] = None,
        raw_config: Optional[Dict[str, Any]] = None
    ):
        """Initialize sequence config.

        Args:
            name: Config name
            sequence: Validated date sequence
            exclude_weekdays: Weekdays filtered out of the output
            take: Number of dates to keep after filtering (None keeps all)
            raw_config: Raw config dict for reference
        """
        if take is not None and (isinstance(take, bool) or not isinstance(take, int) or take < 0):
            raise InvalidConfiguration(f"'take' must be a non-negative integer, got {take!r}")
        if len(set(exclude_weekdays)) == len(Weekday):
            raise InvalidConfiguration("Cannot exclude every weekday; no date would pass the filter")

        self.name = name
        self.sequence = sequence
        self.exclude_weekdays = exclude_weekdays
        self.take = take
        self.raw_config = raw_config or {}

    @property
    def is_finite(self) -> bool:
        return self.sequence.is_finite or self.take is not None

    @classmethod
    def from_dict(cls, config: Dict[str, Any], name: str = 'sequence') -> 'SequenceConfig':
        """Create a config from a parsed YAML mapping.

        Raises:
            ValueError: If a required field is missing
            InvalidConfiguration: If a field has an invalid value
        """
        if not isinstance(config, dict):
            raise ValueError("Sequence config must be a mapping")

        try:
            seq = config['sequence']
            start = seq['start']
        except (KeyError, TypeError) as e:
            raise ValueError(f"Missing required field in sequence config: {e}")

        sequence = DateSequence(
            start,
            step_days=seq.get('step_days', 1),
            skip_weekday=seq.get('skip_weekday'),
            limit=seq.get('limit'),
        )

        filters = config.get('filters') or {}
        if not isinstance(filters, dict):
            raise ValueError(f"'filters' must be a mapping, got {type(filters).__name__}")

        excluded = filters.get('exclude_weekdays') or []
        if isinstance(excluded, (str, int)):
            excluded = [excluded]
        if not isinstance(excluded, (list, tuple)):
            raise ValueError(f"'exclude_weekdays' must be a list of weekdays, got {type(excluded).__name__}")

        return cls(
            name=config.get('name', name),
            sequence=sequence,
            exclude_weekdays=tuple(Weekday.parse(w) for w in excluded),
            take=filters.get('take'),
            raw_config=config,
        )

    def build(self) -> LazyDates:
        """Build a fresh lazy chain: generator, weekday filter, then prefix."""
        chain = self.sequence.lazy()
        if self.exclude_weekdays:
            chain = chain.exclude_weekdays(*self.exclude_weekdays)
        if self.take is not None:
            chain = chain.prefix(self.take)
        return chain

    def dates(self) -> pd.DatetimeIndex:
        """Materialize the configured dates."""
        return self.build().to_index()

    def __repr__(self) -> str:
        """String representation."""
        excluded = [w.label for w in self.exclude_weekdays]
        return (
            f"SequenceConfig(name='{self.name}', sequence={self.sequence!r}, "
            f"exclude_weekdays={excluded}, take={self.take})"
        )


def load_sequence_config(config_path: Path | str) -> SequenceConfig:
    """Load a date sequence configuration from a YAML file.

    Args:
        config_path: Path to sequence config YAML file

    Returns:
        SequenceConfig with the sequence validated

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config is invalid

    Example:
        >>> config = load_sequence_config('configs/lessons.yaml')
        >>> config.dates()
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Sequence config not found: {config_path}")

    logger.info(f"Loading sequence config: {config_path}")

    with open(config_path) as f:
        config = yaml.safe_load(f)

    sequence_config = SequenceConfig.from_dict(config or {}, name=config_path.stem)

    logger.info(f"Successfully loaded sequence: {sequence_config}")

    return sequence_config

