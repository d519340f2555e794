"""PTKP (penghasilan tidak kena pajak) - non-taxable income thresholds.

Each regulation period defines two constants. Being married adds one
increment on top of the unmarried baseline, and each dependent (up to 3)
adds one more:

    TK/d = base + increment * d
    K/d  = base + increment + increment * d
"""

import logging
from typing import Dict, Union

from .rules import coerce_year, find_period, load_tax_rules
from .status import TaxpayerStatus, parse_status

logger = logging.getLogger(__name__)


def ptkp_amount(base: int, increment: int, status: Union[str, TaxpayerStatus]) -> int:
    """Compute the yearly PTKP for a status from a period's constants."""
    status = parse_status(status)
    amount = base + increment * status.dependents
    if status.married:
        amount += increment
    return amount


def get_thresholds(year: Union[int, str]) -> Dict[TaxpayerStatus, int]:
    """Get the yearly PTKP for every taxpayer status in force for a year.

    Keys are TaxpayerStatus members, which compare equal to their string
    form, so both thresholds[TaxpayerStatus.K2] and thresholds["K/2"] work.

    Raises:
        UnsupportedYearError: If no PTKP period covers the year
    """
    year = coerce_year(year)
    rules = load_tax_rules()
    period = find_period(rules.ptkp, year, rules.latest_year, "ptkp")
    logger.debug(f"PTKP for {year}: base={period.base}, increment={period.increment}")
    return {status: ptkp_amount(period.base, period.increment, status) for status in TaxpayerStatus}


def get_threshold(year: Union[int, str], status: Union[str, TaxpayerStatus]) -> int:
    """Get the yearly PTKP for one status."""
    return get_thresholds(year)[parse_status(status)]
