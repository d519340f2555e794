"""Tax rules loading and regulation-period lookup.

Rules are read once per file from YAML, validated against TaxRules and
memoized for the life of the process. Call clear_cache() after pointing
PPH21_TAX_RULES_PATH at a different file.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Literal, Optional, Sequence, Tuple, TypeVar, Union

import yaml
from pydantic import ValidationError

from .config import get_tax_rules_path
from .errors import InvalidArgumentError, TaxRulesError, UnsupportedYearError
from .schemas import TaxRules, YearPeriod

logger = logging.getLogger(__name__)

TableName = Literal["rates", "ptkp"]
P = TypeVar("P", bound=YearPeriod)


@lru_cache(maxsize=None)
def _load_rules_file(path: Path) -> TaxRules:
    if not path.exists():
        raise TaxRulesError(f"Tax rules file not found: {path}")

    with open(path, "r") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise TaxRulesError(f"Invalid YAML in tax rules file {path}: {e}") from e

    try:
        rules = TaxRules.model_validate(data or {})
    except ValidationError as e:
        raise TaxRulesError(f"Invalid tax rules in {path}: {e}") from e

    logger.debug(
        f"Loaded tax rules from {path}: {len(rules.rates)} rate periods, "
        f"{len(rules.ptkp)} PTKP periods, latest year {rules.latest_year}"
    )
    return rules


def load_tax_rules(path: Optional[Union[str, Path]] = None) -> TaxRules:
    """Load and validate PPh 21 tax rules.

    Args:
        path: Rules YAML file. Defaults to PPH21_TAX_RULES_PATH, then the
              file bundled with the package.

    Returns:
        Validated TaxRules

    Raises:
        TaxRulesError: If the file is missing, unparsable or invalid
    """
    return _load_rules_file(get_tax_rules_path(path).resolve())


def clear_cache() -> None:
    """Forget memoized rules so the next lookup re-reads the file."""
    _load_rules_file.cache_clear()


def coerce_year(year: Union[int, str]) -> int:
    """Normalize a year given as int or digit string.

    Raises:
        InvalidArgumentError: If year is not an integer
    """
    if isinstance(year, bool):
        raise InvalidArgumentError(f"Year must be an integer, got: {year!r}")
    if isinstance(year, int):
        return year
    if isinstance(year, str) and year.strip().isdecimal():
        return int(year.strip())
    raise InvalidArgumentError(f"Year must be an integer, got: {year!r}")


def find_period(periods: Sequence[P], year: int, latest_year: int, table: TableName) -> P:
    """Find the regulation period covering year.

    Periods are sorted and disjoint, so the first match is the only match.

    Raises:
        UnsupportedYearError: If no period covers the year
    """
    for period in periods:
        if period.covers(year, latest_year):
            return period

    logger.warning(f"No {table} period covers year {year} (latest supported: {latest_year})")
    raise UnsupportedYearError(year, latest_year, table)


def latest_supported_year(rules: Optional[TaxRules] = None) -> int:
    """Get the latest year the tax rules support."""
    rules = rules or load_tax_rules()
    return rules.latest_year


def supported_years(table: TableName = "rates", rules: Optional[TaxRules] = None) -> List[Tuple[int, int]]:
    """List the inclusive (first_year, last_year) ranges a table supports.

    Example:
        supported_years("rates")  # [(2000, 2008), (2009, 2021), (2022, 2026)]
    """
    rules = rules or load_tax_rules()
    periods: Dict[str, Sequence[YearPeriod]] = {"rates": rules.rates, "ptkp": rules.ptkp}
    if table not in periods:
        raise InvalidArgumentError(f"Unknown table: {table!r}. Must be 'rates' or 'ptkp'")
    return [(p.from_year, p.last_year(rules.latest_year)) for p in periods[table]]


def is_year_supported(year: Union[int, str], rules: Optional[TaxRules] = None) -> bool:
    """Check whether both the rate and PTKP tables cover a year."""
    rules = rules or load_tax_rules()
    year = coerce_year(year)
    return all(
        any(first <= year <= last for first, last in supported_years(table, rules))
        for table in ("rates", "ptkp")
    )
