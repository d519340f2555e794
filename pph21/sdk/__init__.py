"""pph21 SDK - Indonesian PPh 21 individual income tax.

Scope:
- Progressive rate brackets by year (rates.py)
- PTKP non-taxable income by year and taxpayer status (ptkp.py)
- Forward tax and inverse income calculations (tax.py)

Constraints:
- Pure calculation - no I/O beyond reading the tax rules file once
- Year-specific rules loaded from tax_rules/individual.yaml
  (override with PPH21_TAX_RULES_PATH)
- Unsupported years raise UnsupportedYearError, never a nearest-year guess

Usage:
    from pph21.sdk import calc_tax, calc_income, get_rates, get_thresholds

    tax = calc_tax(2024, "K/1", 120_000_000)
    income = calc_income(2024, "K/1", tax)
"""

# Errors
from .errors import (
    Pph21Error,
    UnsupportedYearError,
    InvalidArgumentError,
    TaxRulesError,
)

# Taxpayer status
from .status import TaxpayerStatus, parse_status

# Schemas
from .schemas import TaxBracket, TaxRules, TaxBreakdown, BracketSlice

# Tax rules loading
from .rules import (
    load_tax_rules,
    clear_cache,
    latest_supported_year,
    supported_years,
    is_year_supported,
)

# Tables
from .rates import get_rates
from .ptkp import ptkp_amount, get_thresholds, get_threshold

# Calculations
from .tax import calc_tax, calc_tax_breakdown, calc_income

# Config
from .config import configure_logging

__all__ = [
    # Errors
    "Pph21Error",
    "UnsupportedYearError",
    "InvalidArgumentError",
    "TaxRulesError",
    # Status
    "TaxpayerStatus",
    "parse_status",
    # Schemas
    "TaxBracket",
    "TaxRules",
    "TaxBreakdown",
    "BracketSlice",
    # Rules
    "load_tax_rules",
    "clear_cache",
    "latest_supported_year",
    "supported_years",
    "is_year_supported",
    # Tables
    "get_rates",
    "ptkp_amount",
    "get_thresholds",
    "get_threshold",
    # Calculations
    "calc_tax",
    "calc_tax_breakdown",
    "calc_income",
    # Config
    "configure_logging",
]
