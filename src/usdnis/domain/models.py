# src/usdnis/domain/models.py
"""
Domain Models - Pure Business Objects

This module contains domain models representing core business concepts:
- Published exchange rate observations
- Resolution results (rate plus the date it was published for)

Files that USE this module:
- usdnis.adapters.providers.* (providers parse payloads into Observation)
- usdnis.application.rates_service (RateResolver returns Resolution)
- usdnis.adapters.formatting.formatter (renders Resolution)
- tests.* (tests use domain models for test data)

Files that this module USES:
- usdnis.domain.errors (InvalidRateError for rate validation)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import math  # Finite checks for rate values
from dataclasses import dataclass  # Decorator for creating data classes
from datetime import date  # Calendar dates without time component
from typing import Iterator, Union  # Type hints for unpacking support

from usdnis.domain.errors import InvalidRateError


def validate_rate(value: Union[str, float]) -> float:
    """
    Convert a published value into a positive finite rate.

    Args:
        value: Raw value, e.g. "3.152" or 3.152

    Returns:
        Rate as float

    Raises:
        InvalidRateError: If the value is not a number, not finite, or not positive
    """
    try:
        rate = float(str(value).strip())
    except (TypeError, ValueError) as e:
        raise InvalidRateError(f"Rate is not a number: {value!r}") from e
    if not math.isfinite(rate) or rate <= 0:
        raise InvalidRateError(f"Rate must be positive and finite: {value!r}")
    return rate


@dataclass(frozen=True)
class Observation:
    """
    One published (date, rate) record.

    Attributes:
        date: Date the rate was published for
        rate: NIS per 1 USD
    """
    date: date
    rate: float


@dataclass(frozen=True)
class Resolution:
    """
    Result of resolving a rate for a requested date.

    Unpacks as ``rate, effective_date = resolution``.

    Attributes:
        rate: NIS per 1 USD
        effective_date: Date the rate was actually published for
        requested_date: Date originally asked for
    """
    rate: float
    effective_date: date
    requested_date: date

    @property
    def fallback_days(self) -> int:
        """Number of days between the requested and effective dates."""
        return (self.requested_date - self.effective_date).days

    def __iter__(self) -> Iterator:
        yield self.rate
        yield self.effective_date
