# src/usdnis/shared/__init__.py
"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Logging configuration
"""

from usdnis.shared.validators import (
    DATE_FORMAT,
    parse_amount,
    parse_date,
    validate_numeric_input,
    validate_url,
)

__all__ = [
    "DATE_FORMAT",
    "parse_amount",
    "parse_date",
    "validate_numeric_input",
    "validate_url",
]
