"""Indonesian PPh 21 income tax reference data and calculators."""

__version__ = "0.1.0"

from .sdk import *  # noqa: F401,F403
from .sdk import __all__  # noqa: F401
