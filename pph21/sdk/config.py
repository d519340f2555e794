"""Configuration for the pph21 SDK.

Tax rules resolution:
1. Explicit path passed by the caller
2. PPH21_TAX_RULES_PATH environment variable (if set)
3. Bundled pph21/tax_rules/individual.yaml

Logging:
- LOG_LEVEL environment variable (default: INFO), applied by configure_logging()
"""

import logging
import os
from pathlib import Path
from typing import Optional, Union


TAX_RULES_ENV_VAR = "PPH21_TAX_RULES_PATH"
TAX_RULES_FILENAME = "individual.yaml"
LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"


def get_bundled_rules_path() -> Path:
    """Get the path of the tax rules file shipped with the package."""
    package_root = Path(__file__).parent.parent  # sdk -> pph21
    return package_root / "tax_rules" / TAX_RULES_FILENAME


def get_tax_rules_path(path: Optional[Union[str, Path]] = None) -> Path:
    """Resolve the tax rules file to load.

    Args:
        path: Explicit rules file, takes precedence over everything else

    Returns:
        Path to the rules YAML (may not exist; the loader reports that)
    """
    if path:
        return Path(path)

    env_path = os.environ.get(TAX_RULES_ENV_VAR)
    if env_path:
        return Path(env_path)

    return get_bundled_rules_path()


def get_log_level() -> int:
    """Get the logging level named by LOG_LEVEL, falling back to INFO."""
    level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    return level if isinstance(level, int) else logging.INFO


def configure_logging() -> None:
    """Configure root logging from the LOG_LEVEL environment variable."""
    logging.basicConfig(
        level=get_log_level(),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )
