"""Exceptions raised by the pph21 SDK."""

from typing import Optional


class Pph21Error(Exception):
    """Base class for all pph21 errors."""
    pass


class UnsupportedYearError(Pph21Error):
    """Raised when a year falls outside every known regulation period.

    Attributes:
        year: The requested year
        latest_year: The latest year the tax rules support
        table: Which table rejected the year ("rates" or "ptkp")
    """

    def __init__(self, year: int, latest_year: int, table: Optional[str] = None):
        self.year = year
        self.latest_year = latest_year
        self.table = table
        what = f"{table} table" if table else "tax rules"
        super().__init__(
            f"Year {year} unknown or unsupported by {what} "
            f"(latest supported year: {latest_year})"
        )


class InvalidArgumentError(Pph21Error, ValueError):
    """Raised for out-of-domain inputs (negative amounts, bad status, etc.)."""
    pass


class TaxRulesError(Pph21Error):
    """Raised when a tax rules file is missing or fails validation."""
    pass
