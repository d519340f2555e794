"""Progressive PPh 21 rate brackets for individuals."""

import logging
from typing import List, Union

from .rules import coerce_year, find_period, load_tax_rules
from .schemas import TaxBracket

logger = logging.getLogger(__name__)


def get_rates(year: Union[int, str]) -> List[TaxBracket]:
    """Get the PPh 21 individual tax brackets in force for a year.

    Args:
        year: Tax year (e.g., 2022)

    Returns:
        Brackets sorted by lower bound; the last one has no upper bound

    Raises:
        UnsupportedYearError: If no rate table covers the year
    """
    year = coerce_year(year)
    rules = load_tax_rules()
    period = find_period(rules.rates, year, rules.latest_year, "rates")
    logger.debug(f"Rates for {year}: period {period.from_year}-{period.last_year(rules.latest_year)}")
    return period.to_brackets()
