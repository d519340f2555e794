"""Pydantic schemas for PPh 21 tax rules and calculation results.

Rule schemas validate tax_rules/*.yaml and use extra='forbid' so a typo in a
rules file fails loudly instead of being ignored.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

from .status import TaxpayerStatus

EARLIEST_YEAR = 1983


# =============================================================================
# Rule schemas - shape of the YAML file
# =============================================================================


class BracketRule(BaseModel):
    """Single bracket entry as written in the rules file."""
    model_config = ConfigDict(extra="forbid")

    up_to: Optional[int] = Field(default=None, gt=0, description="Upper bound (None for the 'over' bracket)")
    over: Optional[int] = Field(default=None, ge=0, description="Lower bound of the open-ended top bracket")
    rate: float = Field(..., gt=0, le=1, description="Tax rate as decimal")

    @model_validator(mode="after")
    def check_bound(self) -> "BracketRule":
        if (self.up_to is None) == (self.over is None):
            raise ValueError("bracket needs exactly one of 'up_to' or 'over'")
        return self


class YearPeriod(BaseModel):
    """Inclusive range of years a regulation is in force."""
    model_config = ConfigDict(extra="forbid")

    from_year: int = Field(..., ge=EARLIEST_YEAR)
    to_year: Optional[int] = Field(default=None, description="Last year in force (None = latest)")

    @model_validator(mode="after")
    def check_range(self) -> "YearPeriod":
        if self.to_year is not None and self.to_year < self.from_year:
            raise ValueError(f"to_year {self.to_year} is before from_year {self.from_year}")
        return self

    def last_year(self, latest_year: int) -> int:
        return latest_year if self.to_year is None else self.to_year

    def covers(self, year: int, latest_year: int) -> bool:
        return self.from_year <= year <= self.last_year(latest_year)


class TaxBracket(BaseModel):
    """Progressive bracket over taxable income: [lower_bound, upper_bound)."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    lower_bound: int = Field(default=0, ge=0)
    upper_bound: Optional[int] = Field(default=None, description="None means no upper bound")
    rate: float = Field(..., gt=0, le=1)

    @property
    def bounded(self) -> bool:
        return self.upper_bound is not None

    @property
    def width(self) -> Optional[int]:
        if self.upper_bound is None:
            return None
        return self.upper_bound - self.lower_bound


class RatePeriod(YearPeriod):
    """Progressive rate table for one regulation period."""

    brackets: List[BracketRule] = Field(..., min_length=1)

    @model_validator(mode="after")
    def check_partition(self) -> "RatePeriod":
        """Brackets must partition [0, inf) with strictly increasing rates."""
        *bounded, top = self.brackets
        if top.over is None:
            raise ValueError("last bracket must be an open-ended 'over' bracket")

        previous = 0
        for bracket in bounded:
            if bracket.up_to is None:
                raise ValueError("only the last bracket may be open-ended")
            if bracket.up_to <= previous:
                raise ValueError(f"bracket bounds must increase, got {bracket.up_to} after {previous}")
            previous = bracket.up_to
        if top.over != previous:
            raise ValueError(f"'over' bracket starts at {top.over}, expected {previous}")

        rates = [b.rate for b in self.brackets]
        if any(later <= earlier for earlier, later in zip(rates, rates[1:])):
            raise ValueError(f"rates must be strictly increasing, got {rates}")
        return self

    def to_brackets(self) -> List[TaxBracket]:
        """Convert up_to/over rules into explicit [lower, upper) brackets."""
        result = []
        lower = 0
        for rule in self.brackets:
            result.append(TaxBracket(lower_bound=lower, upper_bound=rule.up_to, rate=rule.rate))
            if rule.up_to is not None:
                lower = rule.up_to
        return result


class PtkpPeriod(YearPeriod):
    """PTKP generation constants for one regulation period."""

    base: int = Field(..., gt=0, description="PTKP for an unmarried taxpayer without dependents")
    increment: int = Field(..., gt=0, description="Added for marriage and for each dependent")


class TaxRules(BaseModel):
    """Complete PPh 21 individual tax rules."""
    model_config = ConfigDict(extra="forbid")

    latest_year: int = Field(..., ge=EARLIEST_YEAR)
    rates: List[RatePeriod] = Field(..., min_length=1)
    ptkp: List[PtkpPeriod] = Field(..., min_length=1)

    @model_validator(mode="after")
    def check_periods(self) -> "TaxRules":
        """Periods of each table must be sorted, disjoint and end by latest_year."""
        for name, periods in (("rates", self.rates), ("ptkp", self.ptkp)):
            previous_last = None
            for i, period in enumerate(periods):
                last = period.last_year(self.latest_year)
                if last > self.latest_year or period.from_year > self.latest_year:
                    raise ValueError(f"{name}[{i}] extends past latest_year {self.latest_year}")
                if period.to_year is None and i != len(periods) - 1:
                    raise ValueError(f"{name}[{i}]: only the last period may omit to_year")
                if previous_last is not None and period.from_year <= previous_last:
                    raise ValueError(
                        f"{name}[{i}] starts in {period.from_year}, "
                        f"overlapping or out of order after {previous_last}"
                    )
                previous_last = last
        return self


# =============================================================================
# Result schemas
# =============================================================================


class BracketSlice(BaseModel):
    """Portion of taxable income that fell into one bracket."""
    model_config = ConfigDict(extra="forbid")

    bracket: TaxBracket
    amount: float = Field(..., ge=0, description="Taxable income inside the bracket")
    tax: float = Field(..., ge=0, description="amount * rate")


class TaxBreakdown(BaseModel):
    """Forward PPh 21 calculation with per-bracket detail."""
    model_config = ConfigDict(extra="forbid")

    year: int
    status: TaxpayerStatus
    net_income: float = Field(..., ge=0, description="Net yearly income (penghasilan neto)")
    ptkp: float = Field(..., ge=0, description="Non-taxable income for the status")
    taxable_income: float = Field(..., ge=0, description="PKP: net income above PTKP")
    slices: List[BracketSlice] = Field(default_factory=list)
    total: float = Field(..., ge=0, description="Yearly tax owed")

    @computed_field
    @property
    def effective_rate(self) -> float:
        """Tax as a fraction of net income (0 when there is no income)."""
        if self.net_income <= 0:
            return 0.0
        return self.total / self.net_income
