# src/usdnis/adapters/formatting/formatter.py
"""
Output Formatter - Conversion Result Presentation

This module renders a resolved rate and the converted amounts as the single
line printed by the CLI:
  2021-12-20 (3.152): 315.20 31.52

Files that USE this module:
- usdnis.app (prints format_conversion output)
- tests.test_formatter (unit tests)

Files that this module USES:
- usdnis.domain.models (Resolution)
"""
from __future__ import annotations

from typing import Iterable, List

from usdnis.domain.models import Resolution


def format_rate(rate: float) -> str:
    """
    Format a rate the way it was published (shortest round-trip form).

    Args:
        rate: NIS per 1 USD

    Returns:
        e.g. "3.152" for 3.152, "3.2" for 3.2
    """
    return repr(float(rate))


def format_amount(value: float, decimals: int = 2) -> str:
    """Format a converted amount with a fixed number of decimals."""
    return f"{value:.{decimals}f}"


def converted_amounts(rate: float, amounts: Iterable[float], decimals: int = 2) -> List[str]:
    """
    Convert and format amounts, preserving input order.

    Args:
        rate: NIS per 1 USD
        amounts: USD amounts
        decimals: Number of decimal places (default: 2)

    Returns:
        Formatted NIS amounts
    """
    return [format_amount(rate * amount, decimals) for amount in amounts]


def format_conversion(resolution: Resolution, amounts: Iterable[float], decimals: int = 2) -> str:
    """
    Format the conversion result line.

    Args:
        resolution: Resolved rate and effective date
        amounts: USD amounts in input order
        decimals: Number of decimal places (default: 2)

    Returns:
        "<effective-date> (<rate>): <amount1> <amount2> ..."
    """
    head = f"{resolution.effective_date.isoformat()} ({format_rate(resolution.rate)}):"
    return " ".join([head] + converted_amounts(resolution.rate, amounts, decimals))
