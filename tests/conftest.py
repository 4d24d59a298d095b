"""Shared test fixtures for dateseq tests.

This module provides pytest fixtures that can be used across all test files.
"""

import pandas as pd
import pytest


@pytest.fixture
def monday_seed():
    """Return Monday 2016-02-22, a week before the leap day."""
    return pd.Timestamp("2016-02-22")


@pytest.fixture
def lessons_yaml(tmp_path):
    """Write a bounded skip-Sunday config and return its path."""
    config_file = tmp_path / "lessons.yaml"
    config_file.write_text("""
name: lessons
sequence:
  start: 2016-02-22
  step_days: 1
  skip_weekday: sunday
  limit: 10
    """)
    return config_file


@pytest.fixture
def no_mondays_yaml(tmp_path):
    """Write an unbounded config filtered to ten non-Monday dates."""
    config_file = tmp_path / "no_mondays.yaml"
    config_file.write_text("""
sequence:
  start: 2016-02-22
filters:
  exclude_weekdays: [monday]
  take: 10
    """)
    return config_file


@pytest.fixture
def lesson_dates():
    """Expected output for the skip-Sunday lessons scenario."""
    return [
        pd.Timestamp(d)
        for d in [
            "2016-02-23",
            "2016-02-24",
            "2016-02-25",
            "2016-02-26",
            "2016-02-27",
            "2016-02-29",  # Sunday 28th shifted to Monday
            "2016-03-01",
            "2016-03-02",
            "2016-03-03",
            "2016-03-04",
        ]
    ]
