# src/usdnis/shared/validators.py
"""
Input Validation Utilities - Command-line and Configuration Validation

This module provides validation and parsing functions for the conversion
date, the USD amounts and endpoint URLs. Parsing functions raise ValueError
with a user-readable message so argparse can report them as usage errors.

Files that USE this module:
- usdnis.config.settings (uses validate_url in Settings field validators)
- usdnis.app (uses parse_date and parse_amount as argparse types)

Files that this module USES:
- None (pure utility functions)
"""
import math
import re
from datetime import date, datetime

DATE_FORMAT = "%Y-%m-%d"


def validate_url(url: str) -> bool:
    """
    Validate HTTP(S) endpoint URL format.

    Args:
        url: URL to validate

    Returns:
        True if valid, False otherwise
    """
    if not url:
        return False

    # Query strings are built by the providers, so the base URL must not carry one
    return bool(re.match(r'^https?://[^\s/?#]+(/[^\s?#]*)?$', url))


def validate_numeric_input(value: str) -> bool:
    """
    Validate numeric input string as a finite real number.

    Args:
        value: String value to validate

    Returns:
        True if valid, False otherwise
    """
    if not value:
        return False

    try:
        num_val = float(value)
        return math.isfinite(num_val)
    except ValueError:
        return False


def parse_date(value: str) -> date:
    """
    Parse a conversion date in YYYY-MM-DD format.

    Args:
        value: Date string, e.g. "2021-12-20"

    Returns:
        Parsed calendar date

    Raises:
        ValueError: If the string is not a valid YYYY-MM-DD date
    """
    try:
        return datetime.strptime(value.strip(), DATE_FORMAT).date()
    except ValueError:
        raise ValueError(f"invalid date {value!r}, expected YYYY-MM-DD")


def parse_amount(value: str) -> float:
    """
    Parse a USD amount.

    Args:
        value: Amount string, e.g. "100" or "12.5"

    Returns:
        Amount as float

    Raises:
        ValueError: If the string is not a finite real number
    """
    if not validate_numeric_input(value.strip()):
        raise ValueError(f"invalid amount {value!r}")
    return float(value)
