# src/usdnis/__init__.py
"""
usdnis - USD to NIS Converter

A command-line tool that converts USD amounts to NIS using the official
representative rate published by the Bank of Israel for a given date,
falling back to the most recent earlier publication on weekends and holidays.
"""

__version__ = "1.0.0"
