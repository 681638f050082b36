# src/usdnis/adapters/formatting/__init__.py
"""
Formatting Adapters - Output Formatting

This package contains the formatter for the CLI result line.
"""

from usdnis.adapters.formatting.formatter import (
    converted_amounts,
    format_conversion,
    format_rate,
)

__all__ = [
    "converted_amounts",
    "format_conversion",
    "format_rate",
]
