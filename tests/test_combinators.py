"""Tests for lazy filter/prefix combinators."""

import pandas as pd
import pytest

from dateseq.combinators import Filtered, LazyDates, Prefix, collect, not_on
from dateseq.exceptions import InvalidConfiguration
from dateseq.generator import DateGenerator
from dateseq.types import Weekday
from tests.mocks import CountingProducer, ListProducer


class TestFiltered:
    """Test the lazy filter."""

    def test_pulls_only_until_a_match(self, monday_seed):
        source = CountingProducer(DateGenerator(monday_seed))
        only_mondays = Filtered(source, lambda d: d.weekday() == Weekday.MONDAY)

        assert source.pulls == 0
        assert only_mondays.produce_next() == pd.Timestamp("2016-02-29")
        assert source.pulls == 7

    def test_ends_with_source(self):
        source = ListProducer(["2016-02-22", "2016-02-23", "2016-02-29"])
        filtered = Filtered(source, not_on("monday"))

        assert filtered.produce_next() == pd.Timestamp("2016-02-23")
        assert filtered.produce_next() is None
        assert filtered.produce_next() is None

    def test_finiteness_follows_source(self, monday_seed):
        assert not Filtered(DateGenerator(monday_seed), bool).is_finite
        assert Filtered(DateGenerator(monday_seed, limit=3), bool).is_finite


class TestPrefix:
    """Test the prefix limit."""

    def test_stops_pulling_after_n(self, monday_seed):
        source = CountingProducer(DateGenerator(monday_seed))
        prefix = Prefix(source, 3)

        assert len(list(prefix)) == 3
        assert prefix.produce_next() is None
        assert source.pulls == 3

    def test_zero_never_pulls(self, monday_seed):
        source = CountingProducer(DateGenerator(monday_seed))
        assert list(Prefix(source, 0)) == []
        assert source.pulls == 0

    def test_shorter_source(self):
        source = CountingProducer(ListProducer(["2016-02-22", "2016-02-23"]))
        prefix = Prefix(source, 5)

        assert len(list(prefix)) == 2
        pulls = source.pulls
        assert prefix.produce_next() is None
        assert source.pulls == pulls

    @pytest.mark.parametrize("n", [-1, 2.0, None])
    def test_invalid_length_raises(self, monday_seed, n):
        with pytest.raises(InvalidConfiguration):
            Prefix(DateGenerator(monday_seed), n)

    def test_always_finite(self, monday_seed):
        assert Prefix(DateGenerator(monday_seed), 10).is_finite


class TestLazyDates:
    """Test the fluent chain."""

    def test_filter_then_prefix_over_unbounded_terminates(self, monday_seed):
        source = CountingProducer(DateGenerator(monday_seed))
        dates = LazyDates(source).filter(lambda d: d.weekday() != Weekday.MONDAY).prefix(10).to_list()

        assert len(dates) == 10
        assert all(d.weekday() != Weekday.MONDAY for d in dates)
        assert dates[0] == pd.Timestamp("2016-02-23")
        assert dates[-1] == pd.Timestamp("2016-03-04")
        # 2016-02-29 is the only Monday pulled
        assert source.pulls == 11

    def test_excluding_every_weekday_raises(self, monday_seed):
        with pytest.raises(InvalidConfiguration, match="every weekday"):
            LazyDates(DateGenerator(monday_seed)).exclude_weekdays(*Weekday).prefix(3)

    def test_exclude_weekdays(self, monday_seed):
        dates = LazyDates(DateGenerator(monday_seed)).exclude_weekdays("sat", "sun").prefix(10).to_list()

        assert len(dates) == 10
        assert {d.weekday() for d in dates} <= {0, 1, 2, 3, 4}

    def test_unbounded_materialization_raises(self, monday_seed):
        chain = LazyDates(DateGenerator(monday_seed)).exclude_weekdays("monday")

        with pytest.raises(InvalidConfiguration, match="prefix"):
            chain.to_list()

    def test_bounded_materialization_without_prefix(self, monday_seed, lesson_dates):
        dates = LazyDates(DateGenerator(monday_seed, skip_weekday="sunday", limit=10)).to_list()
        assert dates == lesson_dates

    def test_to_index(self, monday_seed):
        index = LazyDates(DateGenerator(monday_seed)).prefix(5).to_index()

        assert isinstance(index, pd.DatetimeIndex)
        assert index.name == "date"
        assert list(index) == list(pd.date_range("2016-02-23", periods=5, freq="D"))

    def test_empty_index(self, monday_seed):
        index = LazyDates(DateGenerator(monday_seed)).prefix(0).to_index()
        assert len(index) == 0


class TestCollect:
    """Test materialization helper."""

    def test_collect_producer(self, monday_seed):
        assert len(collect(DateGenerator(monday_seed, limit=4))) == 4

    def test_collect_plain_iterable(self):
        index = collect([pd.Timestamp("2016-02-22"), pd.Timestamp("2016-02-23")])
        assert index.name == "date"
        assert len(index) == 2

    def test_collect_unbounded_producer_raises(self, monday_seed):
        with pytest.raises(InvalidConfiguration):
            collect(DateGenerator(monday_seed))
