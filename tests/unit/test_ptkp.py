"""Tests for PTKP (non-taxable income) thresholds."""

import pytest

from pph21.sdk import (
    TaxpayerStatus,
    UnsupportedYearError,
    InvalidArgumentError,
    get_threshold,
    get_thresholds,
    ptkp_amount,
    supported_years,
)


def all_ptkp_years():
    for first, last in supported_years("ptkp"):
        yield from range(first, last + 1)


class TestPtkpFormula:
    """Tests for the status formula, independent of year lookup."""

    def test_unmarried(self):
        assert ptkp_amount(54_000_000, 4_500_000, "TK/0") == 54_000_000
        assert ptkp_amount(54_000_000, 4_500_000, "TK/3") == 67_500_000

    def test_married_adds_one_increment(self):
        assert ptkp_amount(54_000_000, 4_500_000, "K/0") == 58_500_000
        assert ptkp_amount(54_000_000, 4_500_000, TaxpayerStatus.K3) == 72_000_000

    def test_invalid_status(self):
        with pytest.raises(InvalidArgumentError):
            ptkp_amount(54_000_000, 4_500_000, "K/4")


class TestThresholdTables:
    """Tests for year lookup of PTKP tables."""

    def test_2016_married_two_dependents(self):
        assert get_thresholds(2016)["K/2"] == 67_500_000

    def test_keys_by_enum_and_string(self):
        thresholds = get_thresholds(2016)
        assert thresholds[TaxpayerStatus.K2] == thresholds["K/2"]
        assert set(thresholds) == set(TaxpayerStatus)

    @pytest.mark.parametrize("year,tk0,k3", [
        (1983, 960_000, 2_880_000),
        (1993, 960_000, 2_880_000),
        (1994, 1_728_000, 5_184_000),
        (2000, 1_728_000, 5_184_000),
        (2001, 2_880_000, 8_640_000),
        (2005, 12_000_000, 16_800_000),
        (2006, 13_200_000, 18_000_000),
        (2009, 15_840_000, 21_120_000),
        (2013, 24_300_000, 32_400_000),
        (2015, 36_000_000, 48_000_000),
        (2016, 54_000_000, 72_000_000),
        (2024, 54_000_000, 72_000_000),
    ])
    def test_period_values(self, year, tk0, k3):
        thresholds = get_thresholds(year)
        assert thresholds["TK/0"] == tk0
        assert thresholds["K/3"] == k3

    def test_get_threshold_parses_status(self):
        assert get_threshold(2015, "k1") == 42_000_000

    @pytest.mark.parametrize("year", list(all_ptkp_years()))
    def test_monotonic(self, year):
        """Married > unmarried, and each dependent raises the threshold."""
        t = get_thresholds(year)
        for d in range(4):
            assert t[f"K/{d}"] > t[f"TK/{d}"]
        for prefix in ("TK", "K"):
            for d in range(3):
                assert t[f"{prefix}/{d + 1}"] > t[f"{prefix}/{d}"]

    @pytest.mark.parametrize("year", [1900, 1982, 9999])
    def test_unsupported(self, year):
        with pytest.raises(UnsupportedYearError) as exc_info:
            get_thresholds(year)
        assert exc_info.value.table == "ptkp"
