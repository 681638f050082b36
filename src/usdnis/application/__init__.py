# src/usdnis/application/__init__.py
"""
Application Layer - Use Cases and Services

This package contains the rate resolution service.
"""

from usdnis.application.rates_service import (
    RateResolver,
    latest_on_or_before,
)

__all__ = [
    "RateResolver",
    "latest_on_or_before",
]
