"""Tests for the PPh 21 progressive rate table provider."""

import pytest

from pph21.sdk import (
    TaxBracket,
    UnsupportedYearError,
    InvalidArgumentError,
    get_rates,
    latest_supported_year,
    supported_years,
)


def as_tuples(brackets):
    return [(b.lower_bound, b.upper_bound, b.rate) for b in brackets]


def all_rate_years():
    for first, last in supported_years("rates"):
        yield from range(first, last + 1)


class TestRateTables:
    """Tests for the bracket tables of each regulation period."""

    def test_2022_hpp_brackets(self):
        """2022 onward: 5 brackets up to 5 billion."""
        assert as_tuples(get_rates(2022)) == [
            (0, 60_000_000, 0.05),
            (60_000_000, 250_000_000, 0.15),
            (250_000_000, 500_000_000, 0.25),
            (500_000_000, 5_000_000_000, 0.30),
            (5_000_000_000, None, 0.35),
        ]

    def test_2009_to_2021_brackets(self):
        """2009-2021: 4 brackets, top rate 30%."""
        expected = [
            (0, 50_000_000, 0.05),
            (50_000_000, 250_000_000, 0.15),
            (250_000_000, 500_000_000, 0.25),
            (500_000_000, None, 0.30),
        ]
        assert as_tuples(get_rates(2009)) == expected
        assert as_tuples(get_rates(2015)) == expected
        assert as_tuples(get_rates(2021)) == expected

    def test_2000_to_2008_brackets(self):
        """2000-2008: 5 brackets, top rate 35% over 200 million."""
        expected = [
            (0, 25_000_000, 0.05),
            (25_000_000, 50_000_000, 0.10),
            (50_000_000, 100_000_000, 0.15),
            (100_000_000, 200_000_000, 0.25),
            (200_000_000, None, 0.35),
        ]
        assert as_tuples(get_rates(2000)) == expected
        assert as_tuples(get_rates(2008)) == expected

    def test_returns_tax_brackets(self):
        brackets = get_rates(2024)
        assert all(isinstance(b, TaxBracket) for b in brackets)
        assert brackets[-1].bounded is False
        assert brackets[0].width == 60_000_000

    def test_year_as_string(self):
        assert get_rates("2022") == get_rates(2022)

    def test_returned_list_is_independent(self):
        """Mutating a returned list does not affect later lookups."""
        brackets = get_rates(2022)
        brackets.pop()
        assert len(get_rates(2022)) == 5


class TestBracketPartition:
    """Every supported year's table partitions [0, inf)."""

    @pytest.mark.parametrize("year", list(all_rate_years()))
    def test_partition(self, year):
        brackets = get_rates(year)

        assert brackets[0].lower_bound == 0
        for lower, upper in zip(brackets, brackets[1:]):
            assert upper.lower_bound == lower.upper_bound

        unbounded = [b for b in brackets if b.upper_bound is None]
        assert unbounded == [brackets[-1]]

        rates = [b.rate for b in brackets]
        assert rates == sorted(set(rates))


class TestUnsupportedYears:
    """Years outside every period raise instead of guessing."""

    @pytest.mark.parametrize("year", [1900, 1983, 1999, 9999])
    def test_unsupported(self, year):
        with pytest.raises(UnsupportedYearError) as exc_info:
            get_rates(year)

        err = exc_info.value
        assert err.year == year
        assert err.latest_year == latest_supported_year()
        assert err.table == "rates"
        assert str(year) in str(err)
        assert str(latest_supported_year()) in str(err)

    def test_year_after_latest(self):
        latest = latest_supported_year()
        assert get_rates(latest)
        with pytest.raises(UnsupportedYearError):
            get_rates(latest + 1)

    @pytest.mark.parametrize("year", [2022.5, "twenty", None, True, "²", "2022²", "-2022"])
    def test_non_integer_year(self, year):
        with pytest.raises(InvalidArgumentError):
            get_rates(year)
