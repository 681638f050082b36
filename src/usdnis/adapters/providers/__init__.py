# src/usdnis/adapters/providers/__init__.py
"""
Provider Adapters - Bank of Israel Clients

This package contains adapters for the Bank of Israel rate endpoints.
All providers extend RateProvider.
"""

from usdnis.adapters.providers.base import RateProvider
from usdnis.adapters.providers.boi_daily import BoiDailyProvider
from usdnis.adapters.providers.boi_sdmx import BoiSdmxProvider

__all__ = [
    "RateProvider",
    "BoiDailyProvider",
    "BoiSdmxProvider",
]
