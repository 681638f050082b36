# src/usdnis/domain/errors.py
"""
Domain Errors - Business Logic Exceptions

This module defines domain-specific exceptions raised while resolving
an exchange rate. The CLI maps every DomainError to a non-zero exit.
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from datetime import date  # Calendar date carried by RateNotFoundError
from typing import Optional  # Type hints for optional values


class DomainError(Exception):
    """Base exception for domain errors."""
    pass


class InvalidRateError(DomainError):
    """Raised when a rate value is invalid (e.g., negative, zero or not finite)."""
    pass


class RateNotFoundError(DomainError):
    """
    Raised when no rate was published within the lookback window.

    Attributes:
        requested_date: The date originally asked for
        lookback_days: Size of the window that was searched
    """

    def __init__(self, requested_date: date, lookback_days: Optional[int] = None):
        self.requested_date = requested_date
        self.lookback_days = lookback_days
        super().__init__(f"No conversion rate found for date {requested_date.isoformat()}")


class TransportError(DomainError):
    """
    Raised when the remote source stays unreachable after all retry attempts.

    Attributes:
        url: The request that failed (with query string)
        attempts: How many attempts were made
    """

    def __init__(self, url: str, attempts: int, reason: str = ""):
        self.url = url
        self.attempts = attempts
        message = f"Failed to retrieve {url} after {attempts} attempt(s)"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
