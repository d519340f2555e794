"""Taxpayer status (marital status + number of dependents).

PTKP depends on whether the taxpayer is unmarried (TK, "tidak kawin") or
married (K, "kawin") and on the number of dependents, counted up to 3.
"""

import re
from enum import Enum
from typing import Union

from .errors import InvalidArgumentError

MAX_DEPENDENTS = 3

_STATUS_PATTERN = re.compile(r"^\s*(TK|K)\s*[/\-_ ]?\s*([0-9]+)\s*$", re.IGNORECASE)


class TaxpayerStatus(str, Enum):
    """Closed set of PTKP statuses, valued by their conventional notation."""

    TK0 = "TK/0"
    TK1 = "TK/1"
    TK2 = "TK/2"
    TK3 = "TK/3"
    K0 = "K/0"
    K1 = "K/1"
    K2 = "K/2"
    K3 = "K/3"

    @property
    def married(self) -> bool:
        return self.value.startswith("K/")

    @property
    def dependents(self) -> int:
        return int(self.value.split("/")[1])

    def __str__(self) -> str:
        return self.value


def parse_status(status: Union[str, TaxpayerStatus]) -> TaxpayerStatus:
    """Parse a taxpayer status.

    Accepts TaxpayerStatus members and strings such as "K/2", "k/2", "K2",
    "TK-0" or "tk 1".

    Raises:
        InvalidArgumentError: If the status is not one of the 8 known values
    """
    if isinstance(status, TaxpayerStatus):
        return status
    if not isinstance(status, str):
        raise InvalidArgumentError(f"Taxpayer status must be a string, got: {status!r}")

    match = _STATUS_PATTERN.match(status)
    if not match:
        raise InvalidArgumentError(
            f"Invalid taxpayer status: {status!r}. Must be one of "
            f"{[s.value for s in TaxpayerStatus]}"
        )

    prefix, dependents = match.group(1).upper(), int(match.group(2))
    if dependents > MAX_DEPENDENTS:
        raise InvalidArgumentError(
            f"Invalid taxpayer status: {status!r}. "
            f"At most {MAX_DEPENDENTS} dependents are counted"
        )
    return TaxpayerStatus(f"{prefix}/{dependents}")
