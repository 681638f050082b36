# src/usdnis/domain/__init__.py
"""
Domain Layer - Pure Business Objects

This package contains domain models and business rules.
No dependencies on infrastructure or external systems.
"""

from usdnis.domain.models import (
    Observation,
    Resolution,
    validate_rate,
)
from usdnis.domain.errors import (
    DomainError,
    InvalidRateError,
    RateNotFoundError,
    TransportError,
)

__all__ = [
    "Observation",
    "Resolution",
    "validate_rate",
    "DomainError",
    "InvalidRateError",
    "RateNotFoundError",
    "TransportError",
]
