"""Configuration loading and management."""

from dateseq.config.loader import (
    SequenceConfig,
    load_sequence_config,
)

__all__ = [
    'SequenceConfig',
    'load_sequence_config',
]
