"""PPh 21 individual tax calculations.

Forward: net yearly income -> tax owed, walking the progressive brackets
over income above PTKP.

Inverse: tax paid -> net income, walking the same brackets and converting
each bracket's tax back into the income slice that produced it.

Both calculators resolve every table before computing anything, so an
unsupported year never yields a partial figure.
"""

import logging
import math
import numbers
from decimal import Decimal
from typing import List, Union

from .errors import InvalidArgumentError
from .ptkp import get_thresholds
from .rates import get_rates
from .rules import coerce_year
from .schemas import BracketSlice, TaxBracket, TaxBreakdown
from .status import TaxpayerStatus, parse_status

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12

Amount = Union[int, float, Decimal]


def _require_amount(name: str, value: Amount) -> float:
    """Validate a non-negative, finite money amount.

    Accepts int, float, Decimal and other numbers.Real values.
    """
    if isinstance(value, bool) or not isinstance(value, (numbers.Real, Decimal)):
        raise InvalidArgumentError(f"{name} must be a number, got: {value!r}")
    try:
        amount = float(value)
    except (OverflowError, ValueError):
        raise InvalidArgumentError(f"{name} is not representable as an amount, got: {value}") from None
    if not math.isfinite(amount) or amount < 0:
        raise InvalidArgumentError(f"{name} must be a non-negative finite number, got: {value}")
    return amount


def _round_to_rupiah(amount: float) -> int:
    """Round to the nearest whole rupiah (0.50+ rounds up)."""
    return int(amount + 0.5) if amount >= 0 else int(amount - 0.5)


def _walk_brackets(taxable_income: float, brackets: List[TaxBracket]) -> List[BracketSlice]:
    """Split taxable income into per-bracket slices, lowest bracket first."""
    slices = []
    for bracket in brackets:
        if not bracket.bounded:
            amount = taxable_income - bracket.lower_bound
            slices.append(BracketSlice(bracket=bracket, amount=amount, tax=amount * bracket.rate))
            break

        amount = min(taxable_income, bracket.upper_bound) - bracket.lower_bound
        slices.append(BracketSlice(bracket=bracket, amount=amount, tax=amount * bracket.rate))
        if taxable_income <= bracket.upper_bound:
            break
    return slices


def calc_tax_breakdown(
    year: Union[int, str],
    status: Union[str, TaxpayerStatus],
    net_income: Amount,
) -> TaxBreakdown:
    """Calculate yearly PPh 21 with per-bracket detail.

    Args:
        year: Tax year
        status: Taxpayer status, e.g. "K/2"
        net_income: Net yearly income (penghasilan neto), >= 0

    Returns:
        TaxBreakdown; slices is empty when income does not exceed PTKP

    Raises:
        UnsupportedYearError: If the PTKP or rate table does not cover the year
        InvalidArgumentError: On negative income or an unknown status
    """
    year = coerce_year(year)
    status = parse_status(status)
    net_income = _require_amount("net_income", net_income)

    ptkp = get_thresholds(year)[status]
    taxable_income = net_income - ptkp

    if taxable_income <= 0:
        logger.debug(f"{year} {status}: income {net_income:.0f} within PTKP {ptkp}, no tax")
        return TaxBreakdown(
            year=year,
            status=status,
            net_income=net_income,
            ptkp=ptkp,
            taxable_income=0,
            total=0.0,
        )

    slices = _walk_brackets(taxable_income, get_rates(year))
    total = sum(s.tax for s in slices)
    logger.debug(
        f"{year} {status}: taxable {taxable_income:.0f} over {len(slices)} brackets, tax {total:.2f}"
    )

    return TaxBreakdown(
        year=year,
        status=status,
        net_income=net_income,
        ptkp=ptkp,
        taxable_income=taxable_income,
        slices=slices,
        total=total,
    )


def calc_tax(
    year: Union[int, str],
    status: Union[str, TaxpayerStatus],
    net_income: Amount,
) -> float:
    """Calculate yearly PPh 21 owed on net yearly income.

    Example:
        calc_tax(2015, "K/2", 300_000_000)  # 33_750_000.0
    """
    return calc_tax_breakdown(year, status, net_income).total


def calc_income(
    year: Union[int, str],
    status: Union[str, TaxpayerStatus],
    tax_paid: Amount,
    monthly: bool = False,
) -> float:
    """Calculate the net income that produces a given yearly PPh 21.

    Inverse of calc_tax: calc_income(y, s, calc_tax(y, s, x)) == x for any
    x at or above PTKP. Zero tax maps to exactly PTKP.

    Args:
        year: Tax year
        status: Taxpayer status, e.g. "TK/0"
        tax_paid: Yearly tax paid, >= 0
        monthly: Return monthly income (yearly / 12, rounded half-up to a
                 whole rupiah) instead of the unrounded yearly figure

    Raises:
        UnsupportedYearError: If the PTKP or rate table does not cover the year
        InvalidArgumentError: On negative tax or an unknown status
    """
    year = coerce_year(year)
    status = parse_status(status)
    remaining = _require_amount("tax_paid", tax_paid)

    ptkp = get_thresholds(year)[status]
    brackets = get_rates(year)

    income = float(ptkp)
    for bracket in brackets:
        if not bracket.bounded:
            income += remaining / bracket.rate
            break

        capacity = bracket.width * bracket.rate
        if remaining <= capacity:
            income += remaining / bracket.rate
            break
        remaining -= capacity
        income += bracket.width

    logger.debug(f"{year} {status}: tax {tax_paid} <- net income {income:.2f}")

    if monthly:
        return float(_round_to_rupiah(income / MONTHS_PER_YEAR))
    return income
